#!/usr/bin/env python3
"""
Farkle - a console dice game for 1 to 4 players
"""

from farkle.cli.__main__ import main


if __name__ == '__main__':
    main()

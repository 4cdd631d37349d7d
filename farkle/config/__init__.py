"""
Farkle configuration.

Environment settings and logging setup.
"""

from .settings import FarkleSettings, get_settings
from .logging import configure_logging

__all__ = ["FarkleSettings", "get_settings", "configure_logging"]

"""Logging helpers for Farkle."""

import logging
from pathlib import Path
from typing import List, Optional, Union


def configure_logging(level: Union[str, int] = "WARNING", log_file: Optional[Union[str, Path]] = None) -> None:
    """Configure root logging once.

    Logs go to stderr so they never interleave with the game on stdout.
    ``log_file`` additionally tees records to a UTF-8 file.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

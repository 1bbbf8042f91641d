"""Logging configuration.

Only a file handler is installed: anything written to the console while
curses owns the screen would corrupt the display.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional


def setup_logging(log_path: Optional[Path], level: int = logging.WARNING) -> None:
    """Configure the root logger once, early, before the screen is set up.

    With no ``log_path`` records are discarded.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    if log_path is None:
        root.addHandler(logging.NullHandler())
        return

    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(str(log_path), encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

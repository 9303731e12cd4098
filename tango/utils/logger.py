"""Logging setup for Tango generation runs.

INFO carries run milestones: the canonical solution count, how many
candidates get minimised and each new best score. DEBUG carries each
committed minimiser step and its summary. The enumerator's inner search loop
logs nothing.
"""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Send every ``tango.*`` record through a single timestamped stream handler.

    Pass ``logging.DEBUG`` to follow the minimiser step by step.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the module logger, falling back to ``"tango"``; sets up INFO output on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "tango")

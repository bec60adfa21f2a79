"""Process-wide logging configuration for the view entry point."""
from __future__ import annotations

import logging
import os

DEBUG_ENV = "ARCFILL_DEBUG"


def debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV, "").lower() in ("1", "true")


def configure_logging(level: int | None = None) -> None:
    if level is None:
        level = logging.DEBUG if debug_enabled() else logging.WARNING
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger = logging.getLogger("arcfill")
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

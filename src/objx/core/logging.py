"""Logging setup shared by the CLI and the pipeline runner."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVEL_ENV_VAR = "OBJX_LOG_LEVEL"


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (or $OBJX_LOG_LEVEL, or INFO) to its logging constant."""
    name = (level or os.environ.get(LEVEL_ENV_VAR) or "INFO").upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {name}")
    return value


def setup_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> None:
    """Send objx logs to stdout, and to ``log_file`` as well when given.

    Only the first call configures the root logger. The level name is
    checked even when the root logger is already configured.
    """
    numeric_level = resolve_level(level)
    if logging.getLogger().handlers:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )

"""Logging setup shared by the CLI and library modules."""
import logging
import sys
from typing import Optional

DEFAULT_LEVEL = "WARNING"


def setup_logging(level: Optional[str] = None) -> None:
    level = level or DEFAULT_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        # stdout is reserved for command output such as --json
        stream=sys.stderr,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

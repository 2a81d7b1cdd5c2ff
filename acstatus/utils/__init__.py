"""Utility functions."""

from .logging import get_logger, setup_logging
from .terminal import (
    create_table,
    format_epoch,
    format_result_color,
    format_status,
    format_status_detail,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "create_table",
    "format_epoch",
    "format_result_color",
    "format_status",
    "format_status_detail",
]

"""Configuration management."""

from .global_config import GlobalConfig
from .local_config import LocalConfig

__all__ = ["GlobalConfig", "LocalConfig"]

"""Configuration domain."""

from .InlineRefConfig import InlineRefConfig
from .LogConfig import LogConfig

__all__ = ["InlineRefConfig", "LogConfig"]

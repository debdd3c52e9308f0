"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class LogConfig(BaseModel):
    """Logging level and optional log file."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field(default="INFO", description="Logging level")
    file: str | None = Field(default=None, description="Optional log file path (stderr only when unset)")

    @property
    def numeric_level(self) -> int:
        return _LEVELS[self.level]

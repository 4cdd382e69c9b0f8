"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from topicbus.services.scroll import DEFAULT_SCROLL_DURATION_MS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    log_level: LogLevel = "INFO"
    scroll_duration_ms: int = Field(default=DEFAULT_SCROLL_DURATION_MS, ge=0)
    viewport_width: float = Field(default=0, ge=0)
    viewport_height: float = Field(default=0, ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls) -> Settings:
        env = {
            "log_level": os.environ.get("TOPICBUS_LOG_LEVEL"),
            "scroll_duration_ms": os.environ.get("TOPICBUS_SCROLL_DURATION_MS"),
            "viewport_width": os.environ.get("TOPICBUS_VIEWPORT_WIDTH"),
            "viewport_height": os.environ.get("TOPICBUS_VIEWPORT_HEIGHT"),
        }
        return cls(**{k: v for k, v in env.items() if v is not None})

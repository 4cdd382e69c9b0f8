"""Topics and payloads for signals coming from the host environment."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class Topic(StrEnum):
    ONLINE = "app:online"
    OFFLINE = "app:offline"
    ROTATED = "app:rotated"


class HostSignalName(StrEnum):
    ONLINE = "online"
    OFFLINE = "offline"
    ORIENTATION_CHANGE = "orientationchange"
    STATUS_TAP = "statusTap"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HostSignal(BaseModel):
    """Raw signal payload, forwarded unchanged to bus subscribers."""

    type: str
    orientation: int | None = None
    detail: dict[str, Any] = Field(default_factory=dict)
    received_at: datetime = Field(default_factory=_utcnow)

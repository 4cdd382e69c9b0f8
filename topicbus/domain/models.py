"""Read models exposed by the HTTP host."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from topicbus.domain.events import HostSignal


class SignalRequest(BaseModel):
    """Body of ``POST /signals/{name}``; every field is optional."""

    orientation: int | None = None
    detail: dict[str, Any] = Field(default_factory=dict)

    def to_signal(self, name: str) -> HostSignal:
        return HostSignal(type=name, orientation=self.orientation, detail=self.detail)


class HostStatus(BaseModel):
    online: bool | None = None
    orientation: int | None = None
    last_signal: HostSignal | None = None
    updated_at: datetime | None = None


class TopicSummary(BaseModel):
    topic: str
    handlers: int = Field(ge=1)


class SignalDispatched(BaseModel):
    signal: str
    listeners: int

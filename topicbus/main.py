"""FastAPI application: HTTP host that feeds host signals into the event bus."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from topicbus.config import Settings
from topicbus.domain.bus import EventBus
from topicbus.domain.handlers import StatusTracker
from topicbus.domain.models import (
    HostStatus,
    SignalDispatched,
    SignalRequest,
    TopicSummary,
)
from topicbus.repos.memory import TopicRegistry
from topicbus.services.host import SignalWindow
from topicbus.services.signals import setup_events

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with its own registry, bus, window and status tracker."""
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    registry = TopicRegistry()
    window = SignalWindow(settings.viewport_width, settings.viewport_height)
    bus = setup_events(
        window,
        bus=EventBus(registry),
        scroll_duration_ms=settings.scroll_duration_ms,
    )
    tracker = StatusTracker(bus)

    app = FastAPI(title="Topic Bus Host")
    app.state.settings = settings
    app.state.registry = registry
    app.state.window = window
    app.state.bus = bus
    app.state.tracker = tracker

    # ------------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------------

    @app.post("/signals/{name}", response_model=SignalDispatched)
    def post_signal(name: str, body: SignalRequest | None = None) -> SignalDispatched:
        """Deliver a host signal to every listener registered for *name*."""
        if not window.listens_to(name):
            raise HTTPException(status_code=404, detail=f"No listener for signal {name!r}")
        signal = (body or SignalRequest()).to_signal(name)
        return SignalDispatched(signal=name, listeners=window.dispatch(name, signal))

    @app.get("/topics", response_model=list[TopicSummary])
    def list_topics() -> list[TopicSummary]:
        """Return every topic that currently has subscribers."""
        summaries = []
        for topic in sorted(registry.topics()):
            count = registry.count(topic)
            # A topic may empty out between listing and counting.
            if count:
                summaries.append(TopicSummary(topic=topic, handlers=count))
        return summaries

    @app.get("/status", response_model=HostStatus)
    def get_status() -> HostStatus:
        return tracker.status

    logger.info("Topic bus host ready (log level %s)", settings.log_level)
    return app


app = create_app()

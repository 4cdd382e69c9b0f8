"""Wires host-environment signals onto bus topics."""

from __future__ import annotations

import logging
from typing import Any

from topicbus.domain.bus import EventBus
from topicbus.domain.events import HostSignalName, Topic
from topicbus.services.host import Document, Listener, Window
from topicbus.services.scroll import DEFAULT_SCROLL_DURATION_MS, scroll_center_to_top

logger = logging.getLogger(__name__)

SIGNAL_TOPICS: dict[str, Topic] = {
    HostSignalName.ONLINE: Topic.ONLINE,
    HostSignalName.OFFLINE: Topic.OFFLINE,
    HostSignalName.ORIENTATION_CHANGE: Topic.ROTATED,
}


def _forward(bus: EventBus, topic: Topic) -> Listener:
    def listener(payload: Any) -> list[Any] | None:
        logger.debug("Forwarding host signal to %s", topic)
        return bus.publish(topic, payload)

    return listener


def setup_events(
    window: Window,
    document: Document | None = None,
    *,
    bus: EventBus | None = None,
    scroll_duration_ms: int = DEFAULT_SCROLL_DURATION_MS,
) -> EventBus:
    """Forward host signals to the bus and return it.

    ``online``, ``offline`` and ``orientationchange`` are published on their
    ``app:*`` topics with the raw payload as the only argument. ``statusTap``
    bypasses the bus and scrolls the centred container to the top; it is only
    wired when a *document* is available.
    """
    if bus is None:
        bus = EventBus()

    for signal, topic in SIGNAL_TOPICS.items():
        window.add_event_listener(signal, _forward(bus, topic))

    if document is not None:
        window.add_event_listener(
            HostSignalName.STATUS_TAP,
            lambda _payload: scroll_center_to_top(window, document, scroll_duration_ms),
        )
    else:
        logger.info("No document available; %s is not wired", HostSignalName.STATUS_TAP)

    logger.info("Host signals wired: %s", ", ".join(SIGNAL_TOPICS))
    return bus

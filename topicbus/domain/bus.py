"""Simple synchronous in-process topic bus."""

from __future__ import annotations

from typing import Any

from topicbus.repos.memory import Handler, TopicRegistry


class EventBus:
    """Publish/subscribe bus keyed by topic name.

    Handlers are called synchronously in registration order. ``publish``
    works on a snapshot taken when it starts, so handlers that subscribe or
    unsubscribe mid-dispatch only affect later publishes. Handler errors are
    not caught: the first one aborts the dispatch and reaches the caller.
    """

    def __init__(self, registry: TopicRegistry | None = None) -> None:
        self._registry = registry if registry is not None else TopicRegistry()

    def subscribe(self, topic: str, *handlers: Handler) -> None:
        self._registry.append(topic, handlers)

    def unsubscribe(self, topic: str, handler: Handler | None = None) -> bool:
        """Remove one registration of *handler*, or the whole topic if omitted.

        Returns False when there was nothing to remove.
        """
        if handler is None:
            return self._registry.delete(topic)
        return self._registry.remove(topic, handler)

    def publish(self, topic: str, *args: Any, **kwargs: Any) -> list[Any] | None:
        """Call every handler of *topic* and collect the return values.

        Returns None when the topic has no subscribers.
        """
        handlers = self._registry.snapshot(topic)
        if handlers is None:
            return None
        return [handler(*args, **kwargs) for handler in handlers]

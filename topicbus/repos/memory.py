"""In-memory topic registry backing the event bus."""

from __future__ import annotations

import threading
import types
from collections.abc import Iterable
from typing import Any, Callable

Handler = Callable[..., Any]

_METHOD_TYPES = (types.MethodType, types.BuiltinMethodType)


def same_handler(registered: Handler, candidate: Handler) -> bool:
    """Return True if *candidate* refers to the same handler as *registered*.

    Bound methods are rebuilt on every attribute access, so two of them
    match when they wrap the same function on the same instance.
    """
    if registered is candidate:
        return True
    # Method equality compares __self__ by identity, never by value.
    if isinstance(registered, _METHOD_TYPES) and isinstance(candidate, _METHOD_TYPES):
        return registered == candidate
    return False


class TopicRegistry:
    """Dict-backed store of handler lists, keyed by topic.

    A topic is present only while it has at least one handler.
    """

    def __init__(self) -> None:
        self._topics: dict[str, list[Handler]] = {}
        self._lock = threading.Lock()

    def append(self, topic: str, handlers: Iterable[Handler]) -> None:
        handlers = list(handlers)
        if not handlers:
            return
        with self._lock:
            self._topics.setdefault(topic, []).extend(handlers)

    def snapshot(self, topic: str) -> tuple[Handler, ...] | None:
        with self._lock:
            handlers = self._topics.get(topic)
            return tuple(handlers) if handlers is not None else None

    def remove(self, topic: str, handler: Handler) -> bool:
        """Remove the first registration of *handler* under *topic*."""
        with self._lock:
            handlers = self._topics.get(topic)
            if handlers is None:
                return False
            for i, registered in enumerate(handlers):
                if same_handler(registered, handler):
                    del handlers[i]
                    break
            else:
                return False
            if not handlers:
                del self._topics[topic]
            return True

    def delete(self, topic: str) -> bool:
        with self._lock:
            return self._topics.pop(topic, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._topics.clear()

    def topics(self) -> list[str]:
        with self._lock:
            return list(self._topics)

    def count(self, topic: str) -> int:
        with self._lock:
            return len(self._topics.get(topic, ()))

    def __contains__(self, topic: object) -> bool:
        with self._lock:
            return topic in self._topics

    def __len__(self) -> int:
        with self._lock:
            return len(self._topics)

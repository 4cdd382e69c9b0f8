"""Host-environment interfaces and an in-process signal source."""

from __future__ import annotations

from typing import Any, Callable, Protocol

Listener = Callable[[Any], Any]


class ScrollContainer(Protocol):
    def component_on_ready(self, callback: Callable[[], Any]) -> None: ...

    def scroll_to_top(self, duration_ms: int) -> None: ...


class Element(Protocol):
    def closest(self, selector: str) -> ScrollContainer | None: ...


class Document(Protocol):
    def element_from_point(self, x: float, y: float) -> Element | None: ...


class Window(Protocol):
    inner_width: float
    inner_height: float

    def add_event_listener(self, name: str, listener: Listener) -> None: ...


class SignalWindow:
    """A Window whose signals are fired explicitly through ``dispatch``."""

    def __init__(self, inner_width: float = 0, inner_height: float = 0) -> None:
        self.inner_width = inner_width
        self.inner_height = inner_height
        self._listeners: dict[str, list[Listener]] = {}

    def add_event_listener(self, name: str, listener: Listener) -> None:
        self._listeners.setdefault(name, []).append(listener)

    def listens_to(self, name: str) -> bool:
        return bool(self._listeners.get(name))

    def dispatch(self, name: str, payload: Any = None) -> int:
        """Call the listeners for *name* in order; return how many ran."""
        listeners = list(self._listeners.get(name, []))
        for listener in listeners:
            listener(payload)
        return len(listeners)

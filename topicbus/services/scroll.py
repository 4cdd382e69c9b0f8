"""Scroll the container under the viewport centre back to its top."""

from __future__ import annotations

from topicbus.services.host import Document, Window

SCROLL_CONTAINER_SELECTOR = "ion-scroll"
DEFAULT_SCROLL_DURATION_MS = 300


def scroll_center_to_top(
    window: Window,
    document: Document,
    duration_ms: int = DEFAULT_SCROLL_DURATION_MS,
) -> bool:
    """Ask the nearest scroll container at the viewport centre to scroll up.

    The scroll itself runs once the container reports it is ready.
    Returns False when there is no element or no container to scroll.
    """
    center = document.element_from_point(window.inner_width / 2, window.inner_height / 2)
    if center is None:
        return False

    container = center.closest(SCROLL_CONTAINER_SELECTOR)
    if container is None:
        return False

    container.component_on_ready(lambda: container.scroll_to_top(duration_ms))
    return True

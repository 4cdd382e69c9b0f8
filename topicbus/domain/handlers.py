"""Bus subscribers that keep track of the host's connectivity and orientation."""

from __future__ import annotations

import threading

from topicbus.domain.bus import EventBus
from topicbus.domain.events import HostSignal, Topic
from topicbus.domain.models import HostStatus


class StatusTracker:
    """Subscribes to the host-signal topics and maintains a HostStatus.

    Updates and reads of the status are serialized by one lock; handlers
    can run concurrently on the HTTP host's threadpool.
    """

    def __init__(self, bus: EventBus) -> None:
        self.bus = bus
        self._status = HostStatus()
        self._lock = threading.Lock()
        self._register()

    def _register(self) -> None:
        self.bus.subscribe(Topic.ONLINE, self.on_online)
        self.bus.subscribe(Topic.OFFLINE, self.on_offline)
        self.bus.subscribe(Topic.ROTATED, self.on_rotated)

    def detach(self) -> None:
        self.bus.unsubscribe(Topic.ONLINE, self.on_online)
        self.bus.unsubscribe(Topic.OFFLINE, self.on_offline)
        self.bus.unsubscribe(Topic.ROTATED, self.on_rotated)

    @property
    def status(self) -> HostStatus:
        """A consistent copy of the current status."""
        with self._lock:
            return self._status.model_copy()

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_online(self, signal: HostSignal) -> HostStatus:
        with self._lock:
            self._status.online = True
            return self._record(signal)

    def on_offline(self, signal: HostSignal) -> HostStatus:
        with self._lock:
            self._status.online = False
            return self._record(signal)

    def on_rotated(self, signal: HostSignal) -> HostStatus:
        with self._lock:
            self._status.orientation = signal.orientation
            return self._record(signal)

    def _record(self, signal: HostSignal) -> HostStatus:
        # Caller holds self._lock.
        self._status.last_signal = signal
        self._status.updated_at = signal.received_at
        return self._status.model_copy()

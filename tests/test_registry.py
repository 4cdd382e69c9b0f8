"""Tests for the in-memory topic registry."""

from __future__ import annotations

import threading

from topicbus.repos.memory import TopicRegistry, same_handler


def _noop(*_args):
    return None


def test_append_creates_topic_and_keeps_order():
    registry = TopicRegistry()
    first, second = (lambda: 1), (lambda: 2)

    registry.append("a", [first])
    registry.append("a", iter([second]))

    assert registry.snapshot("a") == (first, second)
    assert registry.count("a") == 2
    assert registry.topics() == ["a"]


def test_snapshot_is_detached_from_later_changes():
    registry = TopicRegistry()
    registry.append("a", [_noop])

    snap = registry.snapshot("a")
    registry.append("a", [_noop])

    assert snap == (_noop,)
    assert registry.snapshot("missing") is None


def test_removing_last_handler_drops_topic():
    registry = TopicRegistry()
    registry.append("a", [_noop])

    assert registry.remove("a", _noop) is True
    assert "a" not in registry
    assert len(registry) == 0
    assert registry.count("a") == 0


def test_delete_and_clear():
    registry = TopicRegistry()
    registry.append("a", [_noop])
    registry.append("b", [_noop, _noop])

    assert registry.delete("a") is True
    assert registry.delete("a") is False
    assert registry.topics() == ["b"]

    registry.clear()
    assert len(registry) == 0


def test_same_handler_rules():
    class Thing:
        def method(self):
            return None

    a, b = Thing(), Thing()
    items: list[int] = []

    assert same_handler(_noop, _noop)
    assert same_handler(a.method, a.method)
    assert not same_handler(a.method, b.method)
    assert same_handler(items.append, items.append)
    assert not same_handler(items.append, items.extend)
    assert not same_handler(_noop, a.method)


def test_concurrent_appends_are_not_lost():
    registry = TopicRegistry()

    def worker():
        for _ in range(200):
            registry.append("a", [_noop])

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert registry.count("a") == 1600

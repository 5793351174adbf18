"""Tests for the library-mode host API."""

from __future__ import annotations

from sutra.domain.bus import EventBus
from sutra.domain.engine import RESET_MESSAGE, SchwarzschildEngine
from sutra.domain.topics import EventType
from sutra.host import create_host_api


def _wired():
    bus = EventBus()
    SchwarzschildEngine(bus)
    return bus, create_host_api(bus)


def test_calculate_reaches_subscribed_host_callback():
    _, api = _wired()
    results = []
    api.subscribe_to_calculations(results.append)

    api.calculate(1.989e30, 1000)

    assert len(results) == 1
    assert results[0].is_inside_horizon is True


def test_unsubscribe_from_calculations():
    _, api = _wired()
    results = []
    unsubscribe = api.subscribe_to_calculations(results.append)
    unsubscribe()

    api.calculate(5.972e24, 6371000)

    assert results == []


def test_reset_logs_on_the_bus():
    bus, api = _wired()
    logs = []
    bus.subscribe(EventType.LOG_MESSAGE, logs.append)

    api.reset()

    assert logs == [RESET_MESSAGE]


def test_independent_hosts_do_not_interfere():
    _, first = _wired()
    _, second = _wired()
    seen_first, seen_second = [], []
    first.subscribe_to_calculations(seen_first.append)
    second.subscribe_to_calculations(seen_second.append)

    first.calculate(5.972e24, 6371000)

    assert len(seen_first) == 1
    assert seen_second == []

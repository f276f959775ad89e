"""Unit tests for AngleState change notification."""
from __future__ import annotations

from unitcircle import AngleState


def test_set_and_flush():
    """Subscribers receive (old, new) on flush, not on set."""
    state = AngleState()
    received = []
    state.subscribe(lambda old, new: received.append((old, new)))

    state.set(10.0)
    assert received == []
    assert state.value == 10.0

    state.flush()
    assert received == [(0.0, 10.0)]


def test_unchanged_value_is_not_queued():
    state = AngleState(value=5.0)
    state.set(5.0)
    assert state.pending == 0


def test_multiple_updates_flush_in_order():
    state = AngleState()
    received = []
    state.subscribe(lambda old, new: received.append((old, new)))

    state.set(1.0)
    state.set(2.0)
    state.set(0.0)
    state.flush()

    assert received == [(0.0, 1.0), (1.0, 2.0), (2.0, 0.0)]
    assert state.pending == 0


def test_readers_called_in_registration_order():
    state = AngleState()
    order = []
    state.subscribe(lambda old, new: order.append("circle"))
    state.subscribe(lambda old, new: order.append("curves"))

    state.set(90.0)
    state.flush()

    assert order == ["circle", "curves"]


def test_unsubscribe():
    state = AngleState()
    received = []

    def handler(old: float, new: float) -> None:
        received.append(new)

    state.subscribe(handler)
    state.unsubscribe(handler)
    state.set(3.0)
    state.flush()

    assert received == []


def test_unsubscribe_unknown_handler_is_noop():
    state = AngleState()
    state.unsubscribe(lambda old, new: None)

"""Tests for reactive cells."""

import pytest

from form_validator.services.reactive import Cell, derive, subscribe


def test_cell_notifies_with_new_and_previous():
    cell = Cell({"a": 1})
    calls = []
    subscribe(cell, lambda new, old: calls.append((new, old)))

    first = cell.value
    cell.value = {"a": 2}

    assert calls == [({"a": 2}, first)]


def test_cell_skips_notification_for_same_object():
    cell = Cell({"a": 1})
    calls = []
    cell.subscribe(lambda new, old: calls.append(new))

    cell.value = cell.value

    assert calls == []


def test_update_replaces_dict_with_changes():
    cell = Cell({"a": 1, "b": 2})
    seen = []
    cell.subscribe(lambda new, old: seen.append((new, old)))

    cell.update(b=3, c=4)

    assert cell.value == {"a": 1, "b": 3, "c": 4}
    assert seen == [({"a": 1, "b": 3, "c": 4}, {"a": 1, "b": 2})]


def test_unsubscribe_stops_notifications():
    cell = Cell(0)
    calls = []
    stop = cell.subscribe(lambda new, old: calls.append(new))

    cell.value = 1
    stop()
    stop()  # second call is a no-op
    cell.value = 2

    assert calls == [1]
    assert cell.listener_count == 0


def test_listener_error_propagates_to_writer():
    cell = Cell(0)

    def broken(new, old):
        raise RuntimeError("boom")

    cell.subscribe(broken)
    with pytest.raises(RuntimeError, match="boom"):
        cell.value = 1
    assert cell.value == 1


def test_derived_recomputes_on_every_read():
    cell = Cell(2)
    doubled = derive(lambda: cell.value * 2)

    assert doubled.value == 4
    cell.value = 5
    assert doubled.value == 10


def test_listener_error_does_not_skip_later_listeners():
    cell = Cell(0)
    seen = []

    def broken(new, old):
        raise ValueError("first")

    def also_broken(new, old):
        raise RuntimeError("second")

    cell.subscribe(broken)
    cell.subscribe(lambda new, old: seen.append((new, old)))
    cell.subscribe(also_broken)

    with pytest.raises(ValueError, match="first"):
        cell.value = 1

    assert seen == [(1, 0)]

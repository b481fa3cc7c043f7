"""Tests for snapshot diffing and the auto-validation gate."""

from form_validator.validators.change_tracker import diff, should_auto_validate


def test_diff_reports_changed_fields_in_order():
    previous = {"a": 1, "b": "x", "c": None}
    current = {"a": 2, "b": "x", "c": 0}

    assert diff(previous, current) == ["a", "c"]


def test_diff_counts_removed_field_as_changed():
    assert diff({"a": None}, {}) == ["a"]


def test_diff_ignores_fields_only_in_current():
    assert diff({"a": 1}, {"a": 1, "b": 2}) == []


def test_identical_snapshots_have_no_changes():
    assert diff({"a": [1, 2]}, {"a": [1, 2]}) == []


def test_single_change_does_not_trigger_auto_validation():
    assert not should_auto_validate([])
    assert not should_auto_validate(["a"])


def test_multiple_changes_trigger_auto_validation():
    assert should_auto_validate(["a", "b"])
    assert should_auto_validate(["a", "b", "c"])

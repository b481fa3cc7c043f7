"""Change tracker — finds fields that differ between two value snapshots."""

from typing import Any, Mapping

from form_validator.models.results import MISSING

# Auto-validation on change only runs when at least this many fields
# changed in one update. Single-field edits are not auto-validated.
AUTO_VALIDATE_MIN_CHANGED = 2


def diff(previous: Mapping[str, Any], current: Mapping[str, Any]) -> list[str]:
    """Names in ``previous`` whose value differs in ``current``.

    A name missing from ``current`` counts as changed. Keys only present
    in ``current`` are not reported. Order follows ``previous``.
    """
    return [
        name
        for name, old_value in previous.items()
        if current.get(name, MISSING) != old_value
    ]


def should_auto_validate(changed: list[str]) -> bool:
    return len(changed) >= AUTO_VALIDATE_MIN_CHANGED

"""Error store — reactive field error map and the derived validity flag."""

from typing import Mapping

from form_validator.models.results import ErrorEntry
from form_validator.services.reactive import Cell, Derived, derive


def has_errors(errors: Mapping[str, ErrorEntry]) -> bool:
    """True if any entry is True or a message string (empty strings included)."""
    return any(isinstance(entry, str) or entry is True for entry in errors.values())


class ErrorStore:
    """Owns the field name -> error entry map for one engine.

    Every write replaces the held dict, so subscribers of ``errors`` see
    each change.
    """

    def __init__(self):
        self.errors: Cell[dict[str, ErrorEntry]] = Cell({})
        self.is_valid: Derived[bool] = derive(lambda: not has_errors(self.errors.value))

    def set(self, name: str, entry: ErrorEntry) -> None:
        self.errors.value = {**self.errors.value, name: entry}

    def replace(self, errors: Mapping[str, ErrorEntry]) -> None:
        self.errors.value = dict(errors)

    def clear(self) -> None:
        self.errors.value = {}

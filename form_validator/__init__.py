"""Reactive form validation on top of pydantic models."""

from form_validator.exceptions import (
    FormValidatorError,
    MissingNameAttributeError,
    SchemaTypeError,
    UnsupportedTriggerError,
)
from form_validator.models.events import BlurEvent, EventTarget
from form_validator.models.results import ErrorEntry, ValidationMode, ValidationResult
from form_validator.services.reactive import Cell, Derived, derive, subscribe
from form_validator.validators import ValidationEngine, create_validator

__all__ = [
    "BlurEvent",
    "Cell",
    "Derived",
    "ErrorEntry",
    "EventTarget",
    "FormValidatorError",
    "MissingNameAttributeError",
    "SchemaTypeError",
    "UnsupportedTriggerError",
    "ValidationEngine",
    "ValidationMode",
    "ValidationResult",
    "create_validator",
    "derive",
    "subscribe",
]

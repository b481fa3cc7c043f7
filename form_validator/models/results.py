"""Result models — validation modes, error entries, and whole-form results."""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field

# False = no error, True or a message = error present
ErrorEntry = Union[bool, str]


class _Missing:
    """Marker for a field that is absent from the values map."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class ValidationMode(str, Enum):
    """When fields are validated automatically."""

    ON_BLUR = "onBlur"      # Only on explicit handle_field_trigger calls
    ON_CHANGE = "onChange"  # Also when the values cell changes


class ValidationResult(BaseModel):
    """Outcome of a whole-form validate() call."""

    is_valid: bool = Field(description="True if no error entry is set after validation")
    sanitized_values: dict[str, Any] = Field(
        default_factory=dict,
        description="Coerced values on success, empty on failure",
    )

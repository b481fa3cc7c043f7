"""Field validator — runs one field's rule and records its first error."""

from typing import Any, Mapping, Optional

import structlog
from pydantic import ValidationError
from pydantic_core import PydanticKnownError

from form_validator.models.results import MISSING, ErrorEntry
from form_validator.validators.error_store import ErrorStore
from form_validator.validators.schema_adapter import SchemaShape

logger = structlog.get_logger()


def first_error(exc: ValidationError) -> ErrorEntry:
    """First reported violation message, as pydantic worded it."""
    issues = exc.errors()
    return issues[0]["msg"] if issues else True


class FieldValidator:
    """Validates single fields against the schema shape."""

    def __init__(self, shape: SchemaShape, store: ErrorStore):
        self.shape = shape
        self.store = store

    def validate_field(
        self,
        name: str,
        value: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> ErrorEntry:
        """Validate ``value`` with the rule for ``name`` and store the entry.

        An absent value (``MISSING``) passes for fields with a default and
        fails with pydantic's "missing" message for required fields.

        Args:
            name: Field name, must be present in the shape
            value: Raw value to check, or MISSING
            context: Current form values, passed to the schema's validators

        Returns:
            False if the value passes, else the first violation message
        """
        rule = self.shape[name]
        if value is MISSING:
            entry: ErrorEntry = (
                PydanticKnownError("missing").message() if rule.field_info.is_required() else False
            )
        else:
            try:
                rule.validate(value, context)
                entry = False
            except ValidationError as e:
                entry = first_error(e)

        self.store.set(name, entry)
        logger.debug("field_validated", field=name, error=entry)
        return entry

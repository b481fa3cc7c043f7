"""Sanitizer — coerces the whole values map through the schema."""

from typing import Any, Mapping, Type

from pydantic import BaseModel, ValidationError, create_model


class Sanitizer:
    """Re-wraps the schema as an object model and parses values with it.

    The wrapper inherits the schema's fields, validators and config, so its
    output matches a successful whole-form validation.
    """

    def __init__(self, schema: Type[BaseModel]):
        self.model = create_model(f"{schema.__name__}Sanitized", __base__=schema)

    def sanitize(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Coerced values, or an empty dict if any field fails."""
        try:
            return self.model.model_validate(values).model_dump()
        except ValidationError:
            return {}

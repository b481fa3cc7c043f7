"""Exceptions for structural misuse of the validator.

Field and form validation failures are never raised; they are recorded as
data in the engine's ``errors`` map.
"""


class FormValidatorError(Exception):
    """Base class for all validator misuse errors."""


class SchemaTypeError(FormValidatorError, TypeError):
    """Raised at construction when the schema is not an object-shaped model."""

    def __init__(self, schema: object):
        self.schema = schema
        super().__init__(
            "validation schema needs to be a pydantic model class, use class Form(BaseModel): ..."
        )


class MissingNameAttributeError(FormValidatorError, ValueError):
    """Raised when a blur event's target carries no name."""

    def __init__(self):
        super().__init__("handle_field_trigger must be used with an input that has a name attribute")


class UnsupportedTriggerError(FormValidatorError, TypeError):
    """Raised when a trigger is neither a field name nor an event-like object."""

    def __init__(self, trigger: object):
        self.trigger = trigger
        super().__init__(f"handle_field_trigger got wrong event type: {type(trigger).__name__}")

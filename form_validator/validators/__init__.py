"""Form validators — field error tracking bound to reactive form values.

Usage:
    from form_validator.validators import create_validator

    form = create_validator(values, SignupForm)
    form.handle_field_trigger("email")
    if not form.is_valid.value:
        # Render form.errors.value next to the inputs
"""

from form_validator.validators.engine import ValidationEngine, create_validator
from form_validator.validators.schema_adapter import FieldRule, SchemaShape, adapt

__all__ = [
    "ValidationEngine",
    "create_validator",
    "FieldRule",
    "SchemaShape",
    "adapt",
]

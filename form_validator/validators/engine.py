"""Validation Engine — binds a schema to reactive form values and tracks field errors.

This is the main entry point. It adapts the schema once, keeps a reactive
error map and a derived validity flag, and exposes the operations a form
needs: validate one field on blur, validate everything on submit, set errors
by hand, clear them, and pull out the coerced values.

Usage:
    values = Cell({"name": "John", "age": "30"})
    form = create_validator(values, SignupForm, mode="onChange")

    form.handle_field_trigger("name")        # or a blur event
    form.errors.value                        # {"name": "String should have ..."}
    result = form.validate()
    if result.is_valid:
        save(result.sanitized_values)
"""

import time
from typing import Any, Callable, Mapping, Optional, Type, Union

import structlog
from pydantic import BaseModel, ValidationError

from form_validator.config import get_settings
from form_validator.models.results import MISSING, ErrorEntry, ValidationMode, ValidationResult
from form_validator.services.reactive import Cell, Derived, subscribe
from form_validator.validators import change_tracker, event_resolver
from form_validator.validators.error_store import ErrorStore
from form_validator.validators.field_validator import FieldValidator
from form_validator.validators.sanitizer import Sanitizer
from form_validator.validators.schema_adapter import adapt

logger = structlog.get_logger()


class ValidationEngine:
    """Field-level validation state for one form.

    Design principles:
        - Structural misuse (bad schema, malformed trigger) raises
        - Validation outcomes are data in ``errors``, never exceptions
        - Unknown field names are ignored rather than rejected
        - Synchronous: every operation completes before returning
    """

    def __init__(
        self,
        values: Cell,
        schema: Type[BaseModel],
        mode: Union[ValidationMode, str, None] = None,
    ):
        """Adapt the schema and, in onChange mode, subscribe to value changes.

        Args:
            values: Reactive cell holding the form values dict
            schema: Pydantic model class describing the form
            mode: "onBlur" or "onChange". Defaults to the configured DEFAULT_MODE.

        Raises:
            SchemaTypeError: If the schema is not an object-shaped model class
        """
        self.shape = adapt(schema)
        self.schema = schema
        self.values = values
        self.mode = ValidationMode(mode or get_settings().DEFAULT_MODE)

        self._store = ErrorStore()
        self._field_validator = FieldValidator(self.shape, self._store)
        self._sanitizer = Sanitizer(schema)
        self._unsubscribe: Optional[Callable[[], None]] = None

        if self.mode == ValidationMode.ON_CHANGE:
            self._unsubscribe = subscribe(values, self._on_values_changed)

        logger.info(
            "validator_created",
            schema=schema.__name__,
            fields=list(self.shape),
            mode=self.mode.value,
        )

    # ── Reactive State ──

    @property
    def errors(self) -> Cell:
        """Reactive map of field name -> False, True or error message."""
        return self._store.errors

    @property
    def is_valid(self) -> Derived:
        """Reactive flag, True while no error entry is set."""
        return self._store.is_valid

    # ── Field Validation ──

    def handle_field_trigger(self, trigger: Any) -> None:
        """Validate the field named by ``trigger``.

        Args:
            trigger: Field name, or a blur event whose target has a name

        Raises:
            MissingNameAttributeError: Event target has no name
            UnsupportedTriggerError: Trigger is neither a name nor an event
        """
        name, value = event_resolver.resolve(trigger, self.values.value)
        self.validate_field(name, value, context=self.values.value)

    # Name used by existing blur handlers
    handle_input_blur = handle_field_trigger

    def validate_field(
        self,
        name: str,
        value: Any,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Optional[ErrorEntry]:
        """Validate one field against ``value``; unknown fields return None.

        ``value`` may be MISSING for a field absent from the values map.
        ``context`` holds the other form values seen by cross-field validators.
        """
        if name not in self.shape:
            logger.debug("field_skipped_unknown", field=name)
            return None
        return self._field_validator.validate_field(name, value, context)

    def override_field_error(self, name: str, value: ErrorEntry) -> None:
        """Set an error entry directly, e.g. from a server-side check."""
        self._store.set(name, value)
        logger.debug("field_error_overridden", field=name, error=value)

    # ── Whole Form ──

    def validate(self) -> ValidationResult:
        """Validate every field and return validity plus coerced values.

        Errors are keyed by the dotted location of each violation, so nested
        fields produce keys like ``"address.city"``.
        """
        start_time = time.perf_counter()
        self._store.clear()

        errors: dict[str, ErrorEntry] = {}
        sanitized: dict[str, Any] = {}
        try:
            sanitized = self.schema.model_validate(self.values.value).model_dump()
        except ValidationError as e:
            for issue in e.errors():
                errors[".".join(str(part) for part in issue["loc"])] = issue["msg"]

        self._store.replace(errors)
        result = ValidationResult(is_valid=self.is_valid.value, sanitized_values=sanitized)

        logger.info(
            "form_validated",
            schema=self.schema.__name__,
            is_valid=result.is_valid,
            total_errors=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result

    def get_sanitized_values(self) -> dict[str, Any]:
        """Coerced copy of the current values, or {} if any field fails."""
        return self._sanitizer.sanitize(self.values.value)

    def clear(self) -> None:
        """Drop every error entry."""
        self._store.clear()
        logger.debug("errors_cleared", schema=self.schema.__name__)

    def dispose(self) -> None:
        """Stop validating on value changes."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # ── Change Subscription ──

    def _on_values_changed(self, new_values: dict, old_values: dict) -> None:
        changed = change_tracker.diff(old_values, new_values)
        if not change_tracker.should_auto_validate(changed):
            logger.debug("auto_validation_skipped", changed=changed)
            return

        for name in changed:
            self.validate_field(name, new_values.get(name, MISSING), context=new_values)


def create_validator(
    values: Cell,
    schema: Type[BaseModel],
    mode: Union[ValidationMode, str, None] = None,
) -> ValidationEngine:
    """Create a validation engine bound to ``values``.

    Raises:
        SchemaTypeError: If the schema is not an object-shaped model class
    """
    return ValidationEngine(values, schema, mode=mode)

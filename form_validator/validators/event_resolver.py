"""Event resolver — turns a field trigger into a (field name, raw value) pair.

A trigger is either a field name or a blur-event-like object whose
``target`` carries the input's ``name`` and ``value``. Both attribute
access and mapping access are supported, so plain dicts work too:

    resolve("email", values)
    resolve({"target": {"name": "email", "value": "a@b.c"}}, values)
"""

from typing import Any, Mapping, Tuple

from form_validator.exceptions import MissingNameAttributeError, UnsupportedTriggerError
from form_validator.models.results import MISSING


def _read(obj: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute, or None if absent."""
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def resolve(trigger: Any, values: Mapping[str, Any]) -> Tuple[str, Any]:
    """Resolve a trigger against the current values.

    Args:
        trigger: Field name or blur-event-like object
        values: Current values map

    Returns:
        (field_name, raw_value). The value is taken from ``values`` when the
        field is present there, otherwise from the event's ``target.value``.
        A field name absent from ``values`` resolves to MISSING.

    Raises:
        MissingNameAttributeError: Event target has no name
        UnsupportedTriggerError: Trigger is neither a name nor an event
    """
    if trigger and isinstance(trigger, str):
        return trigger, values.get(trigger, MISSING)

    target = None if isinstance(trigger, str) else _read(trigger, "target")
    if target is None:
        raise UnsupportedTriggerError(trigger)

    name = _read(target, "name")
    if not name:
        raise MissingNameAttributeError()

    value = values.get(name, MISSING)
    if value is MISSING:
        value = _read(target, "value")
    return name, value

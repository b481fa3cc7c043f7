"""Schema adapter — turns a pydantic model class into a per-field rule table.

Each rule validates its field through the schema's own core validator, so
constraints, ``@field_validator`` functions and ``model_config`` all apply
exactly as they do when the whole model is parsed.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic.fields import FieldInfo

from form_validator.exceptions import SchemaTypeError


@dataclass(frozen=True)
class FieldRule:
    """Constraint rule for a single field of ``model``."""

    name: str
    field_info: FieldInfo
    model: Type[BaseModel]

    def validate(self, value: Any, context: Optional[Mapping[str, Any]] = None) -> None:
        """Validate ``value`` as an assignment to this field.

        Args:
            value: Raw value to check
            context: Other form values, visible to validators as ``info.data``

        Raises:
            pydantic.ValidationError: If the schema rejects the value
        """
        instance = self.model.model_construct(**dict(context or {}))
        self.model.__pydantic_validator__.validate_assignment(instance, self.name, value)


# Field name -> rule, read-only after adaptation
SchemaShape = Mapping[str, FieldRule]


def is_object_schema(schema: Any) -> bool:
    """True for BaseModel subclasses that describe an object (not RootModel)."""
    return (
        isinstance(schema, type)
        and issubclass(schema, BaseModel)
        and not issubclass(schema, RootModel)
    )


def adapt(schema: Any) -> SchemaShape:
    """Build the field rule table for an object-shaped schema.

    Args:
        schema: A pydantic model class

    Returns:
        Read-only mapping of field name to FieldRule

    Raises:
        SchemaTypeError: If the schema is not an object-shaped model class
    """
    if not is_object_schema(schema):
        raise SchemaTypeError(schema)

    model = _assignable(schema)
    rules = {
        name: FieldRule(name=name, field_info=info, model=model)
        for name, info in model.model_fields.items()
    }
    return MappingProxyType(rules)


def _assignable(schema: Type[BaseModel]) -> Type[BaseModel]:
    """Subclass of ``schema`` that accepts field assignment.

    Frozen models reject ``validate_assignment`` outright; the subclass
    keeps every validator and only lifts model-level freezing.
    """
    if not schema.model_config.get("frozen"):
        return schema
    return type(
        f"{schema.__name__}Fields",
        (schema,),
        {"__module__": schema.__module__, "model_config": ConfigDict(frozen=False)},
    )

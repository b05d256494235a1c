"""Field descriptors for external models and the field existence check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache
from operator import attrgetter
from typing import Any, Callable

from pydantic import BaseModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Maps an externally visible field name to an accessor.

    Args:
        name: Field name as it appears on the wire (alias when one is set).
        getter: Callable returning the field value from a model instance.
    """

    name: str
    getter: Callable[[Any], Any]


class InvalidFieldSelectionError(ValueError):
    """Raised when a client asks to shape on fields the model does not declare."""

    def __init__(self, fields: str):
        self.fields = fields
        super().__init__(
            f"Not all requested data shaping fields exist on the resource: {fields}"
        )


def _external_name(model_type: type[BaseModel], attr_name: str, info: Any) -> str:
    if info.serialization_alias or info.alias:
        return info.serialization_alias or info.alias
    generator = model_type.model_config.get("alias_generator")
    return generator(attr_name) if callable(generator) else attr_name


@cache
def _descriptors_for(model_type: type[BaseModel]) -> tuple[FieldDescriptor, ...]:
    return tuple(
        FieldDescriptor(
            name=_external_name(model_type, attr_name, info),
            getter=attrgetter(attr_name),
        )
        for attr_name, info in model_type.model_fields.items()
    )


class ShapeableModel(BaseModel):
    """Base for external models that support data shaping.

    The descriptor list is built once per model class, in declaration
    order, and reused for every request.
    """

    @classmethod
    def describe_fields(cls) -> tuple[FieldDescriptor, ...]:
        """Return the declared fields as (name, getter) descriptors."""
        return _descriptors_for(cls)

    @classmethod
    def find_field(cls, name: str) -> FieldDescriptor | None:
        """Look up a declared field by name, ignoring case."""
        wanted = name.lower()
        for descriptor in cls.describe_fields():
            if descriptor.name.lower() == wanted:
                return descriptor
        return None


def split_field_list(fields: str | None) -> list[str] | None:
    """Split a comma-separated field list into trimmed names.

    Returns None when no selection was made (absent or blank input).
    Empty entries such as the middle of ``"id,,name"`` are kept as empty
    strings so callers reject them instead of silently ignoring them.
    """
    if fields is None or not fields.strip():
        return None
    return [name.strip() for name in fields.split(",")]


def type_has_properties(model_type: type[ShapeableModel], fields: str | None) -> bool:
    """Check that every requested field is declared on ``model_type``.

    Args:
        model_type: External model class to check against.
        fields: Comma-separated field names, or None.

    Returns:
        True when no fields were requested or all of them exist.
    """
    names = split_field_list(fields)
    if names is None:
        return True
    for name in names:
        if model_type.find_field(name) is None:
            return False
    return True


def ensure_fields_exist(model_type: type[ShapeableModel], fields: str | None) -> None:
    """Raise InvalidFieldSelectionError unless ``fields`` all exist on the model."""
    if not type_has_properties(model_type, fields):
        logger.info("Rejected data shaping fields %r for %s", fields, model_type.__name__)
        raise InvalidFieldSelectionError(fields or "")

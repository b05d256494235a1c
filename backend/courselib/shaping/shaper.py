"""Projects external model instances onto the requested field subset."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from courselib.shaping.fields import ShapeableModel, split_field_list

ShapedRecord = dict[str, Any]


class InvalidFieldError(LookupError):
    """Raised when an undeclared field reaches the projector.

    Requested fields are checked with ``type_has_properties`` before
    shaping, so this signals a caller bug rather than bad client input.
    """


def shape_data(record: ShapeableModel, fields: str | None = None) -> ShapedRecord:
    """Shape one external model instance.

    Args:
        record: A full external model instance, never a shaped dict.
        fields: Comma-separated field names; None or blank means all.

    Returns:
        Insertion-ordered mapping of declared field name to value. With no
        selection the model's declaration order is used, otherwise the
        order in which the client listed the fields.

    Raises:
        TypeError: If ``record`` is not a ShapeableModel instance.
        InvalidFieldError: If a requested field is not declared.
    """
    if not isinstance(record, ShapeableModel):
        raise TypeError(
            f"shape_data expects an external model instance, got {type(record).__name__}"
        )

    model_type = type(record)
    names = split_field_list(fields)

    if names is None:
        return {d.name: d.getter(record) for d in model_type.describe_fields()}

    shaped: ShapedRecord = {}
    for name in names:
        descriptor = model_type.find_field(name)
        if descriptor is None:
            raise InvalidFieldError(f"Field '{name}' is not declared on {model_type.__name__}")
        shaped[descriptor.name] = descriptor.getter(record)
    return shaped


def shape_collection(
    records: Iterable[ShapeableModel], fields: str | None = None
) -> list[ShapedRecord]:
    """Shape every record with the same field selection."""
    return [shape_data(record, fields) for record in records]

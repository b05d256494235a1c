"""Data shaping: return only the fields a client asked for.

External models declare their fields once through ``describe_fields``;
the existence checker and the projector both work from that list.
"""

from courselib.shaping.fields import (
    FieldDescriptor,
    InvalidFieldSelectionError,
    ShapeableModel,
    ensure_fields_exist,
    split_field_list,
    type_has_properties,
)
from courselib.shaping.shaper import InvalidFieldError, shape_collection, shape_data

__all__ = [
    "FieldDescriptor",
    "InvalidFieldError",
    "InvalidFieldSelectionError",
    "ShapeableModel",
    "ensure_fields_exist",
    "shape_collection",
    "shape_data",
    "split_field_list",
    "type_has_properties",
]

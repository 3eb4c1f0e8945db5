"""
Serialized field selection.

Decides which fields of a target type take part in editor generation,
using the same visibility rule as Unity's serializer.
"""

from __future__ import annotations

from ..errors import InvalidInputError
from ..type_model.nodes import FieldDescription, NonSerializedMarker, SerializeMarker, TypeDescription


def is_serialized(field: FieldDescription) -> bool:
    """
    Check whether a field is serialized.

    A field qualifies when it is public and not marked [NonSerialized],
    or when it is explicitly marked [SerializeField].
    """
    if field.has_annotation(SerializeMarker):
        return True
    return field.is_public and not field.has_annotation(NonSerializedMarker)


def select_serialized_fields(type_description: TypeDescription | None) -> list[FieldDescription]:
    """
    Select the serialized fields of a type, in declaration order.

    Args:
        type_description: The target type

    Returns:
        The qualifying fields, in the order they are declared

    Raises:
        InvalidInputError: If no type description was given
    """
    if type_description is None:
        raise InvalidInputError("A target type description is required")
    return [field for field in type_description.fields if is_serialized(field)]

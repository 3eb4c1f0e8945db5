"""
Tests for serialized field selection.
"""

from __future__ import annotations

import pytest

from editor_generator.pipeline.analyzer import is_serialized, select_serialized_fields
from editor_generator.pipeline.errors import InvalidInputError
from editor_generator.pipeline.type_model import (
    FieldDescription,
    Header,
    NonSerializedMarker,
    SerializeMarker,
    TypeDescription,
    Visibility,
)

PUBLIC = Visibility.PUBLIC
NON_PUBLIC = Visibility.NON_PUBLIC


@pytest.mark.parametrize(
    "visibility, annotations, expected",
    [
        (PUBLIC, (), True),
        (PUBLIC, (NonSerializedMarker(),), False),
        (NON_PUBLIC, (), False),
        (NON_PUBLIC, (SerializeMarker(),), True),
        (PUBLIC, (SerializeMarker(),), True),
        (NON_PUBLIC, (Header("Stats"),), False),
    ],
    ids=[
        "public",
        "public-non-serialized",
        "private",
        "private-serialize-field",
        "public-serialize-field",
        "private-with-header",
    ],
)
def test_is_serialized(visibility, annotations, expected):
    field = FieldDescription(name="value", type_name="int", visibility=visibility, annotations=annotations)
    assert is_serialized(field) is expected


def test_serialize_field_wins_over_non_serialized():
    """[SerializeField] always includes the field, even next to [NonSerialized]."""
    field = FieldDescription(name="value", visibility=PUBLIC, annotations=(NonSerializedMarker(), SerializeMarker()))
    assert is_serialized(field)


def test_selection_keeps_declaration_order():
    fields = (
        FieldDescription(name="zeta"),
        FieldDescription(name="hidden", annotations=(NonSerializedMarker(),)),
        FieldDescription(name="alpha", visibility=NON_PUBLIC, annotations=(SerializeMarker(),)),
        FieldDescription(name="secret", visibility=NON_PUBLIC),
        FieldDescription(name="middle"),
    )
    type_description = TypeDescription(name="Foo", base_types=("MonoBehaviour",), fields=fields)

    selected = select_serialized_fields(type_description)

    assert [f.name for f in selected] == ["zeta", "alpha", "middle"]


def test_selection_of_type_without_fields():
    assert select_serialized_fields(TypeDescription(name="Empty")) == []


def test_selection_requires_type_description():
    with pytest.raises(InvalidInputError):
        select_serialized_fields(None)

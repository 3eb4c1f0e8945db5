"""
Type description loader.

Builds a TypeDescription from a JSON document exported by a reflection
facility (for example an editor-side dump of a MonoBehaviour). This is the
input adapter of the pipeline: the generator itself only ever sees the
resulting immutable nodes.

Expected document shape:

    {
        "name": "Foo",
        "namespace": "Game",
        "base_types": ["MonoBehaviour", "Behaviour", "Component", "Object"],
        "fields": [
            {
                "name": "speed",
                "type": "int",
                "visibility": "public",
                "annotations": [{"kind": "Range", "min": 0, "max": 10}]
            }
        ]
    }
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from ..errors import InvalidInputError
from .nodes import (
    Annotation,
    DeferredAnnotation,
    DeferredKind,
    FieldDescription,
    Header,
    NonSerializedMarker,
    Range,
    SerializeMarker,
    Space,
    Tooltip,
    TypeDescription,
    Unrecognized,
    Visibility,
)


class TypeDescriptionLoader:
    """Parses JSON type descriptions into TypeDescription nodes."""

    # Marker attribute names; a trailing "Attribute" suffix is stripped before matching
    SERIALIZE_KINDS = {"SerializeField"}
    NON_SERIALIZED_KINDS = {"NonSerialized"}

    def load(self, path: Path | str) -> TypeDescription:
        """
        Load a type description from a JSON file.

        Args:
            path: Path to the JSON document

        Returns:
            The parsed TypeDescription

        Raises:
            InvalidInputError: If the document is not valid JSON or is malformed
        """
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidInputError(f"{path} is not valid JSON: {e}") from e
        return self.parse(data)

    def parse(self, data: dict[str, Any] | None) -> TypeDescription:
        """
        Parse a type description dictionary.

        Args:
            data: The decoded JSON document

        Returns:
            The parsed TypeDescription
        """
        if not isinstance(data, dict):
            raise InvalidInputError("Type description must be a JSON object")

        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidInputError("Type description is missing its 'name'")

        namespace = data.get("namespace") or None
        base_types = data.get("base_types", [])
        if not isinstance(base_types, list):
            raise InvalidInputError(f"'base_types' of {name} must be a list")

        fields_data = data.get("fields", [])
        if not isinstance(fields_data, list):
            raise InvalidInputError(f"'fields' of {name} must be a list")

        fields = tuple(self._parse_field(field_data, name) for field_data in fields_data)

        return TypeDescription(
            name=name,
            namespace=namespace,
            base_types=tuple(str(b) for b in base_types),
            fields=fields,
        )

    def _parse_field(self, data: Any, type_name: str) -> FieldDescription:
        """Parse one field entry."""
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise InvalidInputError(f"Malformed field entry in {type_name}: {data!r}")

        visibility_raw = data.get("visibility", Visibility.PUBLIC.value)
        try:
            visibility = Visibility(visibility_raw)
        except ValueError:
            raise InvalidInputError(f"Unknown visibility {visibility_raw!r} for {type_name}.{data['name']}") from None

        annotations_data = data.get("annotations", [])
        if not isinstance(annotations_data, list):
            raise InvalidInputError(f"'annotations' of {type_name}.{data['name']} must be a list")

        annotations = tuple(self._parse_annotation(a, type_name, data["name"]) for a in annotations_data)

        return FieldDescription(
            name=data["name"],
            type_name=data.get("type", "object"),
            visibility=visibility,
            annotations=annotations,
        )

    def _parse_annotation(self, data: Any, type_name: str, field_name: str) -> Annotation:
        """
        Parse one annotation entry.

        Annotations may be given as a bare kind string ("SerializeField") or
        as an object with a "kind" key and the annotation's arguments.
        """
        if isinstance(data, str):
            data = {"kind": data}
        if not isinstance(data, dict) or not isinstance(data.get("kind"), str):
            raise InvalidInputError(f"Malformed annotation on {type_name}.{field_name}: {data!r}")

        kind = data["kind"].removesuffix("Attribute")

        if kind in self.SERIALIZE_KINDS:
            return SerializeMarker()
        if kind in self.NON_SERIALIZED_KINDS:
            return NonSerializedMarker()
        if kind == "Header":
            return Header(text=self._text(data))
        if kind == "Space":
            return Space(height=self._number(data.get("height", 8), type_name, field_name))
        if kind == "Range":
            if "min" not in data or "max" not in data:
                raise InvalidInputError(f"[Range] on {type_name}.{field_name} needs 'min' and 'max'")
            return Range(
                min=self._number(data["min"], type_name, field_name),
                max=self._number(data["max"], type_name, field_name),
            )
        if kind == "Tooltip":
            return Tooltip(text=self._text(data))

        try:
            return DeferredAnnotation(deferred_kind=DeferredKind(kind))
        except ValueError:
            return Unrecognized(name=kind)

    def _number(self, value: Any, type_name: str, field_name: str) -> float:
        """Validate a numeric annotation argument."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(f"Expected a number in annotation on {type_name}.{field_name}, got {value!r}")
        if not math.isfinite(value):
            raise InvalidInputError(f"Annotation argument on {type_name}.{field_name} must be finite, got {value!r}")
        return value

    def _text(self, data: dict[str, Any]) -> str:
        text = data.get("text")
        return "" if text is None else str(text)

"""
Type description model: the target type, its fields and their annotations.
"""

from __future__ import annotations

from .loader import TypeDescriptionLoader
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

__all__ = [
    "Annotation",
    "DeferredAnnotation",
    "DeferredKind",
    "FieldDescription",
    "Header",
    "NonSerializedMarker",
    "Range",
    "SerializeMarker",
    "Space",
    "Tooltip",
    "TypeDescription",
    "TypeDescriptionLoader",
    "Unrecognized",
    "Visibility",
]

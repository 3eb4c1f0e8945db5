"""
Type description node definitions.

These nodes describe the target type an editor is generated for: its
identity, its ancestors and its fields with their attached annotations.
They are built ahead of time by an adapter (see loader.py) so the
generator itself never inspects live types.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from ...utils import CS_RESERVED_KEYWORDS
from ..errors import InvalidInputError

# C# identifiers: letter or underscore, then letters, digits or underscores
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class Visibility(str, Enum):
    """Field visibility as seen by the serializer."""

    PUBLIC = "public"
    NON_PUBLIC = "non_public"


class DeferredKind(str, Enum):
    """Annotation kinds that are recognized but have no generated form yet."""

    TEXT_AREA = "TextArea"
    MULTILINE = "Multiline"
    CONTEXT_MENU_ITEM = "ContextMenuItem"
    GRADIENT_USAGE = "GradientUsage"
    DELAYED = "Delayed"
    MIN = "Min"


@dataclass(frozen=True)
class Annotation:
    """Base class for all field annotations."""

    @property
    def kind(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class SerializeMarker(Annotation):
    """[SerializeField]: forces a non-public field to be serialized."""

    @property
    def kind(self) -> str:
        return "SerializeField"


@dataclass(frozen=True)
class NonSerializedMarker(Annotation):
    """[NonSerialized]: hides a public field from the serializer."""

    @property
    def kind(self) -> str:
        return "NonSerialized"


@dataclass(frozen=True)
class Header(Annotation):
    """[Header("text")]: bold label drawn above the field."""

    text: str = ""

    @property
    def kind(self) -> str:
        return "Header"


@dataclass(frozen=True)
class Space(Annotation):
    """[Space(height)]: vertical gap drawn above the field."""

    height: float = 8

    @property
    def kind(self) -> str:
        return "Space"


@dataclass(frozen=True)
class Range(Annotation):
    """[Range(min, max)]: the field is edited with a slider."""

    min: float = 0
    max: float = 1

    @property
    def kind(self) -> str:
        return "Range"


@dataclass(frozen=True)
class Tooltip(Annotation):
    """[Tooltip("text")]: hover text for the field label."""

    text: str = ""

    @property
    def kind(self) -> str:
        return "Tooltip"


@dataclass(frozen=True)
class DeferredAnnotation(Annotation):
    """A known annotation kind the generator does not implement yet."""

    deferred_kind: DeferredKind = DeferredKind.TEXT_AREA

    @property
    def kind(self) -> str:
        return self.deferred_kind.value


@dataclass(frozen=True)
class Unrecognized(Annotation):
    """Any other annotation found on the field."""

    name: str = ""

    @property
    def kind(self) -> str:
        return self.name


def is_valid_identifier(name: str) -> bool:
    """Check that a name is usable as a C# identifier."""
    return bool(name) and _IDENTIFIER_PATTERN.fullmatch(name) is not None and name not in CS_RESERVED_KEYWORDS


@dataclass(frozen=True)
class FieldDescription:
    """One candidate field of the target type."""

    name: str = ""
    type_name: str = ""
    visibility: Visibility = Visibility.PUBLIC
    annotations: tuple[Annotation, ...] = ()

    def __post_init__(self):
        if not is_valid_identifier(self.name):
            raise InvalidInputError(f"Field name {self.name!r} is not a valid identifier")

        seen: set[str] = set()
        for annotation in self.annotations:
            if annotation.kind in seen:
                raise InvalidInputError(f"Field {self.name!r} carries more than one [{annotation.kind}] annotation")
            seen.add(annotation.kind)

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC

    def has_annotation(self, annotation_type: type[Annotation]) -> bool:
        """Check whether the field carries an annotation of the given variant."""
        return any(isinstance(a, annotation_type) for a in self.annotations)

    def find_annotation(self, annotation_type: type[Annotation]) -> Annotation | None:
        """Return the field's annotation of the given variant, if any."""
        return next((a for a in self.annotations if isinstance(a, annotation_type)), None)


@dataclass(frozen=True)
class TypeDescription:
    """The target type an editor is generated for."""

    name: str = ""
    namespace: str | None = None
    # Ancestors, nearest first; the type itself is not included
    base_types: tuple[str, ...] = ()
    fields: tuple[FieldDescription, ...] = field(default_factory=tuple)

    @property
    def qualified_name(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

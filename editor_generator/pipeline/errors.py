"""
Error types for the editor generation pipeline.

Fatal errors derive from EditorGenerationError and abort a request before
any AST is built. Unsupported annotations are reported as notices instead.
"""

from __future__ import annotations

from dataclasses import dataclass


class EditorGenerationError(Exception):
    """Base class for fatal generation errors."""


class InvalidInputError(EditorGenerationError):
    """Raised when the target type description is missing or malformed."""


class IneligibleTypeError(EditorGenerationError):
    """Raised when the target type does not derive from a supported base type."""


class GenerationStateError(RuntimeError):
    """Raised when an EditorGenerator operation is called out of order."""


class RenderPreconditionViolation(AssertionError):
    """Raised by the serializer when handed a malformed AST.

    This is a programming defect, never a user-triggerable condition.
    """


@dataclass(frozen=True)
class UnsupportedAnnotationNotice:
    """Advisory notice for an annotation that has no generated form yet."""

    kind: str
    field_name: str
    type_name: str = ""

    @property
    def message(self) -> str:
        owner = f"{self.type_name}." if self.type_name else ""
        return f"[{self.kind}] on {owner}{self.field_name} is not supported yet; using the default field drawer"

"""Unity Editor Generator

A Python package for generating Unity custom editors (C#) from a
description of a MonoBehaviour or ScriptableObject and its serialized
fields, with AST-based generation and deterministic output.
"""

__version__ = "1.0.0"

from .pipeline import (
    EditorGenerationError,
    EditorGenerator,
    EditorWriter,
    GeneratedSource,
    GeneratorConfig,
    IneligibleTypeError,
    InvalidInputError,
    OutputConfig,
    OutputMode,
    TypeDescription,
    TypeDescriptionLoader,
    UnsupportedAnnotationNotice,
    generate_editor,
    is_eligible,
)

__all__ = [
    "EditorGenerator",
    "EditorGenerationError",
    "EditorWriter",
    "GeneratedSource",
    "GeneratorConfig",
    "IneligibleTypeError",
    "InvalidInputError",
    "OutputConfig",
    "OutputMode",
    "TypeDescription",
    "TypeDescriptionLoader",
    "UnsupportedAnnotationNotice",
    "generate_editor",
    "is_eligible",
]

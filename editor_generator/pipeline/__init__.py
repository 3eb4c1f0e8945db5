"""
Pipeline - AST-based Unity custom editor generator.

Generates the C# source of a custom editor from a description of the
target type, in separate phases:

1. Phase 1 (Type model): Load the target type description
2. Phase 2 (Analyzer): Select serialized fields and map their annotations
3. Phase 3 (AST Backend): Build the frozen C# AST of the editor
4. Phase 4 (Serializer): Convert the AST to source code
5. Phase 5 (Writer): Optionally save the source atomically
"""

from __future__ import annotations

from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import (
    EditorGenerationError,
    GenerationStateError,
    IneligibleTypeError,
    InvalidInputError,
    RenderPreconditionViolation,
    UnsupportedAnnotationNotice,
)
from .generator import EditorGenerator, GeneratedSource, GenerationState, generate_editor, is_eligible
from .type_model import TypeDescription, TypeDescriptionLoader
from .writer import EditorWriter

__all__ = [
    "EditorGenerator",
    "EditorWriter",
    "EditorGenerationError",
    "GeneratedSource",
    "GenerationState",
    "GenerationStateError",
    "GeneratorConfig",
    "IneligibleTypeError",
    "InvalidInputError",
    "OutputConfig",
    "OutputMode",
    "RenderPreconditionViolation",
    "TypeDescription",
    "TypeDescriptionLoader",
    "UnsupportedAnnotationNotice",
    "generate_editor",
    "is_eligible",
]

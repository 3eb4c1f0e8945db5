"""
Editor generator - orchestrates the pipeline for one target type.

1. Validate: the type description is present and derives from an eligible base
2. Analyze: select serialized fields and map their annotations
3. Build: assemble the frozen C# AST
4. Render: serialize the AST to source text

Each EditorGenerator handles exactly one request and walks the states
IDLE -> VALIDATING -> BUILDING -> BUILT -> RENDERED, or ends in FAILED when
validation rejects the input. Nothing is written to disk here; saving the
GeneratedSource is the caller's job (see writer.EditorWriter).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .analyzer import AnnotationMapper, NoticeSink, select_serialized_fields
from .ast_backends.csharp_ast_backend import CSharpEditorBackend
from .ast_backends.csharp_ast_nodes import CSharpFile
from .ast_backends.csharp_serializer import CSharpSerializer
from .config import GeneratorConfig
from .errors import GenerationStateError, IneligibleTypeError, InvalidInputError
from .type_model.nodes import TypeDescription

logger = logging.getLogger(__name__)

# A target must derive from one of these to get a custom editor
ELIGIBLE_BASE_TYPES = ("MonoBehaviour", "ScriptableObject")


def is_eligible(type_description: TypeDescription | None) -> bool:
    """Check whether an editor can be generated for a type."""
    if type_description is None:
        return False
    return any(base in ELIGIBLE_BASE_TYPES for base in type_description.base_types)


class GenerationState(str, Enum):
    """States of a generation request."""

    IDLE = "idle"
    VALIDATING = "validating"
    BUILDING = "building"
    BUILT = "built"
    RENDERED = "rendered"
    FAILED = "failed"


@dataclass(frozen=True)
class GeneratedSource:
    """Rendered editor source and the file it is meant for."""

    text: str
    file_name: str
    path: Path | None = None


class EditorGenerator:
    """Generates the custom editor of a single target type."""

    def __init__(
        self,
        type_description: TypeDescription | None,
        config: GeneratorConfig | None = None,
        notice_sink: NoticeSink | None = None,
    ):
        """
        Initialize the generator.

        Args:
            type_description: The target type
            config: Generator configuration
            notice_sink: Receives unsupported-annotation notices (logged by default)
        """
        self.type_description = type_description
        self.config = config or GeneratorConfig()
        self.notice_sink = notice_sink
        self.backend = CSharpEditorBackend(self.config)
        self.state = GenerationState.IDLE
        self._ast: CSharpFile | None = None
        self._source: GeneratedSource | None = None

    @property
    def ast(self) -> CSharpFile | None:
        return self._ast

    @property
    def source(self) -> GeneratedSource | None:
        return self._source

    def build(self) -> CSharpFile:
        """
        Validate the target type and build the editor AST.

        Returns:
            The frozen file AST

        Raises:
            InvalidInputError: If no type description was given
            IneligibleTypeError: If the type is not a MonoBehaviour or ScriptableObject
            GenerationStateError: If the generator was already used
        """
        self._require_state(GenerationState.IDLE, "build")

        self.state = GenerationState.VALIDATING
        try:
            type_description = self._validate()
        except (InvalidInputError, IneligibleTypeError):
            self.state = GenerationState.FAILED
            raise

        self.state = GenerationState.BUILDING
        mapper = AnnotationMapper(self.notice_sink, type_name=type_description.qualified_name)
        fields = select_serialized_fields(type_description)
        plans = [mapper.map_field(field) for field in fields]
        self._ast = self.backend.build(type_description, plans)
        logger.debug("Built %s with %d serialized field(s)", self.backend.editor_class_name(type_description), len(plans))

        self.state = GenerationState.BUILT
        return self._ast

    def render(self, output_dir: Path | str | None = None) -> GeneratedSource:
        """
        Render the built AST to source text.

        Args:
            output_dir: Directory the caller intends to write to; the
                returned path is <output_dir>/<TypeName>Editor.cs

        Returns:
            The generated source
        """
        self._require_state(GenerationState.BUILT, "render")

        text = CSharpSerializer().serialize(self._ast)
        file_name = self.backend.file_name(self.type_description)
        path = Path(output_dir) / file_name if output_dir is not None else None

        self._source = GeneratedSource(text=text, file_name=file_name, path=path)
        self.state = GenerationState.RENDERED
        return self._source

    def generate(self, output_dir: Path | str | None = None) -> GeneratedSource:
        """Build and render in one step."""
        self.build()
        return self.render(output_dir)

    def _validate(self) -> TypeDescription:
        type_description = self.type_description
        if type_description is None:
            raise InvalidInputError("A target type description is required")
        if not is_eligible(type_description):
            raise IneligibleTypeError(f"{type_description.qualified_name} must derive from {' or '.join(ELIGIBLE_BASE_TYPES)}")
        return type_description

    def _require_state(self, expected: GenerationState, operation: str) -> None:
        if self.state != expected:
            raise GenerationStateError(f"Cannot {operation} in state {self.state.value}; expected {expected.value}")


def generate_editor(
    type_description: TypeDescription | None,
    config: GeneratorConfig | None = None,
    notice_sink: NoticeSink | None = None,
    output_dir: Path | str | None = None,
) -> GeneratedSource:
    """
    Generate the custom editor source of a type.

    Args:
        type_description: The target type
        config: Generator configuration
        notice_sink: Receives unsupported-annotation notices
        output_dir: Directory the caller intends to write to

    Returns:
        The generated source
    """
    return EditorGenerator(type_description, config, notice_sink).generate(output_dir)

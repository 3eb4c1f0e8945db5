"""
Annotation to code mapping.

Turns one serialized field and its annotations into the pieces of the
generated editor that draw it: a GUIContent label field, statements drawn
before the field ([Header], [Space]) and exactly one statement drawing the
field itself (a PropertyField, or a slider when [Range] is present).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ...utils import csharp_float_literal, csharp_int_literal, csharp_string_literal, nicify_variable_name
from ..ast_backends.csharp_ast_nodes import (
    AccessModifier,
    CSharpExpression,
    CSharpExpressionStatement,
    CSharpField,
    CSharpIdentifier,
    CSharpInvocation,
    CSharpLiteral,
    CSharpObjectCreation,
    CSharpStatement,
)
from ..errors import UnsupportedAnnotationNotice
from ..type_model.nodes import (
    Annotation,
    DeferredAnnotation,
    FieldDescription,
    Header,
    NonSerializedMarker,
    Range,
    SerializeMarker,
    Space,
    Tooltip,
    Unrecognized,
)

logger = logging.getLogger(__name__)

NoticeSink = Callable[[UnsupportedAnnotationNotice], None]

# Declared types drawn with IntSlider instead of Slider
INT_TYPE_NAMES = {"int", "Int32", "System.Int32"}

SERIALIZED_OBJECT = CSharpIdentifier("serializedObject")
EDITOR_GUI_LAYOUT = CSharpIdentifier("EditorGUILayout")


def log_notice(notice: UnsupportedAnnotationNotice) -> None:
    """Default notice sink: log the notice as a warning."""
    logger.warning("%s", notice.message)


@dataclass(frozen=True)
class FieldGenerationPlan:
    """Everything generated for one field."""

    field_name: str
    label_field: CSharpField
    prefix_statements: tuple[CSharpStatement, ...]
    body_statement: CSharpStatement


class AnnotationMapper:
    """Maps field annotations onto editor statements."""

    def __init__(self, notice_sink: NoticeSink | None = None, type_name: str = ""):
        """
        Initialize the mapper.

        Args:
            notice_sink: Receives a notice for each unsupported annotation
            type_name: Name of the target type, used in notices
        """
        self.notice_sink = notice_sink or log_notice
        self.type_name = type_name

    def map_field(self, field: FieldDescription) -> FieldGenerationPlan:
        """
        Build the generation plan for a field.

        [Range] replaces the default PropertyField statement; [Header] and
        [Space] only add statements before it, in declaration order.
        Unsupported annotations are reported and otherwise ignored.

        Args:
            field: A serialized field of the target type

        Returns:
            The field's generation plan
        """
        prefix_statements: list[CSharpStatement] = []
        range_annotation: Range | None = None
        tooltip: Tooltip | None = None

        for annotation in field.annotations:
            if isinstance(annotation, (SerializeMarker, NonSerializedMarker)):
                continue
            if isinstance(annotation, Header):
                prefix_statements.append(self._header_statement(annotation))
            elif isinstance(annotation, Space):
                prefix_statements.append(self._space_statement(annotation))
            elif isinstance(annotation, Range):
                range_annotation = annotation
            elif isinstance(annotation, Tooltip):
                tooltip = annotation
            elif isinstance(annotation, (DeferredAnnotation, Unrecognized)):
                self._report_unsupported(annotation, field)
            else:
                raise TypeError(f"Unknown annotation variant {type(annotation).__name__} on field {field.name}")

        if range_annotation is not None:
            body_statement = self._slider_statement(field, range_annotation)
        else:
            body_statement = self._property_field_statement(field)

        return FieldGenerationPlan(
            field_name=field.name,
            label_field=self._label_field(field, tooltip),
            prefix_statements=tuple(prefix_statements),
            body_statement=body_statement,
        )

    def _report_unsupported(self, annotation: Annotation, field: FieldDescription) -> None:
        self.notice_sink(UnsupportedAnnotationNotice(kind=annotation.kind, field_name=field.name, type_name=self.type_name))

    @staticmethod
    def content_name(field: FieldDescription) -> str:
        """Name of the GUIContent field generated for a field."""
        return f"{field.name}Content"

    def _label_field(self, field: FieldDescription, tooltip: Tooltip | None) -> CSharpField:
        arguments: list[CSharpExpression] = [CSharpLiteral(csharp_string_literal(nicify_variable_name(field.name)))]
        if tooltip is not None:
            arguments.append(CSharpLiteral(csharp_string_literal(tooltip.text)))

        return CSharpField(
            name=self.content_name(field),
            type_name="GUIContent",
            access=AccessModifier.PRIVATE,
            initializer=CSharpObjectCreation(type_name="GUIContent", arguments=tuple(arguments)),
        )

    def _find_property(self, field: FieldDescription) -> CSharpExpression:
        return CSharpInvocation(
            method="FindProperty",
            target=SERIALIZED_OBJECT,
            arguments=(CSharpLiteral(csharp_string_literal(field.name)),),
        )

    def _property_field_statement(self, field: FieldDescription) -> CSharpStatement:
        return _editor_gui_layout_call(
            "PropertyField",
            self._find_property(field),
            CSharpIdentifier(self.content_name(field)),
        )

    def _slider_statement(self, field: FieldDescription, range_annotation: Range) -> CSharpStatement:
        if field.type_name in INT_TYPE_NAMES:
            method = "IntSlider"
            bounds = (csharp_int_literal(range_annotation.min), csharp_int_literal(range_annotation.max))
        else:
            method = "Slider"
            bounds = (csharp_float_literal(range_annotation.min), csharp_float_literal(range_annotation.max))

        return _editor_gui_layout_call(
            method,
            self._find_property(field),
            CSharpLiteral(bounds[0]),
            CSharpLiteral(bounds[1]),
            CSharpIdentifier(self.content_name(field)),
        )

    def _header_statement(self, header: Header) -> CSharpStatement:
        return _editor_gui_layout_call(
            "LabelField",
            CSharpLiteral(csharp_string_literal(header.text)),
            CSharpIdentifier("EditorStyles.boldLabel"),
        )

    def _space_statement(self, space: Space) -> CSharpStatement:
        height = space.height
        if isinstance(height, float) and not height.is_integer():
            literal = csharp_float_literal(height)
        else:
            literal = csharp_int_literal(height)
        return _editor_gui_layout_call("Space", CSharpLiteral(literal))


def _editor_gui_layout_call(method: str, *arguments: CSharpExpression) -> CSharpStatement:
    """Build an EditorGUILayout.<method>(...) statement."""
    return CSharpExpressionStatement(CSharpInvocation(method=method, target=EDITOR_GUI_LAYOUT, arguments=arguments))

"""
C# AST-based editor backend.

Assembles the AST of a Unity custom editor from the target type and the
per-field generation plans. Members are built first, then the class, then
the file, so every node is complete when it is created.
"""

from __future__ import annotations

from ..analyzer.annotation_mapper import SERIALIZED_OBJECT, FieldGenerationPlan
from ..config import GeneratorConfig
from ..generation_comment import render_generation_comment
from ..type_model.nodes import TypeDescription
from .csharp_ast_nodes import (
    AccessModifier,
    CSharpAttribute,
    CSharpClass,
    CSharpExpressionStatement,
    CSharpFile,
    CSharpInvocation,
    CSharpMember,
    CSharpMethod,
    CSharpStatement,
    CSharpTypeOf,
    MemberModifier,
    UsingDirective,
)


class CSharpEditorBackend:
    """Builds the C# AST of a custom editor."""

    FILE_EXTENSION = "cs"

    # Namespaces the generated editor always needs, in emission order
    BASE_USINGS = ("UnityEditor", "UnityEngine")

    BASE_CLASS = "Editor"

    # Appended to the target's namespace and class name
    NAME_SUFFIX = "Editor"

    INSPECTOR_METHOD = "OnInspectorGUI"

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generator configuration
        """
        self.config = config

    def editor_class_name(self, type_description: TypeDescription) -> str:
        """Name of the generated editor class (Foo -> FooEditor)."""
        return f"{type_description.name}{self.NAME_SUFFIX}"

    def editor_namespace(self, type_description: TypeDescription) -> str | None:
        """Namespace of the generated editor (Game -> GameEditor), None without one."""
        if not type_description.namespace:
            return None
        return f"{type_description.namespace}{self.NAME_SUFFIX}"

    def file_name(self, type_description: TypeDescription) -> str:
        """File name of the generated editor (FooEditor.cs)."""
        return f"{self.editor_class_name(type_description)}.{self.FILE_EXTENSION}"

    def build(self, type_description: TypeDescription, plans: list[FieldGenerationPlan]) -> CSharpFile:
        """
        Build the editor AST.

        Args:
            type_description: The target type
            plans: Generation plans of the serialized fields, in field order

        Returns:
            The complete, frozen file AST
        """
        members: list[CSharpMember] = [plan.label_field for plan in plans]
        members.append(self._inspector_method(plans))

        cls = CSharpClass(
            name=self.editor_class_name(type_description),
            access=AccessModifier.PUBLIC,
            base_class=self.BASE_CLASS,
            attributes=self._class_attributes(type_description),
            members=tuple(members),
        )

        generation_comment = ""
        if self.config.add_generation_comment:
            generation_comment = render_generation_comment(self.config.generation_command)

        return CSharpFile(
            using_directives=self._using_directives(),
            generation_comment=generation_comment,
            namespace=self.editor_namespace(type_description),
            cls=cls,
        )

    def _using_directives(self) -> tuple[UsingDirective, ...]:
        # dict.fromkeys drops duplicates and keeps the first occurrence
        namespaces = dict.fromkeys([*self.BASE_USINGS, *self.config.additional_usings])
        return tuple(UsingDirective(namespace=ns) for ns in namespaces)

    def _class_attributes(self, type_description: TypeDescription) -> tuple[CSharpAttribute, ...]:
        attributes = [
            CSharpAttribute(
                name="CustomEditor",
                arguments=(CSharpTypeOf(type_description.qualified_name),),
            )
        ]
        if self.config.can_edit_multiple_objects:
            attributes.append(CSharpAttribute(name="CanEditMultipleObjects"))
        return tuple(attributes)

    def _inspector_method(self, plans: list[FieldGenerationPlan]) -> CSharpMethod:
        body: list[CSharpStatement] = [_serialized_object_call("Update")]
        for plan in plans:
            body.extend(plan.prefix_statements)
            body.append(plan.body_statement)
        body.append(_serialized_object_call("ApplyModifiedProperties"))

        return CSharpMethod(
            name=self.INSPECTOR_METHOD,
            access=AccessModifier.PUBLIC,
            modifiers=(MemberModifier.OVERRIDE,),
            body=tuple(body),
        )


def _serialized_object_call(method: str) -> CSharpStatement:
    return CSharpExpressionStatement(CSharpInvocation(method=method, target=SERIALIZED_OBJECT))

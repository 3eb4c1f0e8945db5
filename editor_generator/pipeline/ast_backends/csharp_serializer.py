"""
C# AST Serializer.

Converts C# AST nodes to properly-formatted C# source code.
The output layout is fixed so regenerated editors diff cleanly:
- Braces on new lines (Allman style)
- 4-space indentation
- One using directive per line, in AST order, followed by a blank line
- Attributes on separate lines above declarations
- Fields first, a blank line before each method
- A trailing newline at end of file
"""

from __future__ import annotations

from ..errors import RenderPreconditionViolation
from .csharp_ast_nodes import (
    CSharpAttribute,
    CSharpClass,
    CSharpExpression,
    CSharpExpressionStatement,
    CSharpField,
    CSharpFile,
    CSharpIdentifier,
    CSharpInvocation,
    CSharpLiteral,
    CSharpMethod,
    CSharpObjectCreation,
    CSharpStatement,
    CSharpTypeOf,
    UsingDirective,
)


class CSharpSerializer:
    """Serializes C# AST nodes to source code."""

    INDENT = "    "  # 4 spaces

    def serialize(self, file: CSharpFile) -> str:
        """Serialize a complete C# file to source code."""
        if file.cls is None:
            raise RenderPreconditionViolation("CSharpFile has no class to render")

        lines: list[str] = []

        # Generation comment
        if file.generation_comment:
            lines.extend(file.generation_comment.splitlines())
            lines.append("")

        # Using directives
        for using in file.using_directives:
            lines.append(self._serialize_using(using))

        if file.using_directives:
            lines.append("")

        # Namespace wrapping
        if file.namespace:
            lines.append(f"namespace {file.namespace}")
            lines.append("{")
            indent_level = 1
        else:
            indent_level = 0

        class_lines = self._serialize_class(file.cls)
        lines.extend(self._indent_lines(class_lines, indent_level))

        # Close namespace
        if file.namespace:
            lines.append("}")

        return "\n".join(lines) + "\n"

    def _indent_lines(self, lines: list[str], level: int) -> list[str]:
        """Add indentation to a list of lines."""
        if level == 0:
            return lines
        prefix = self.INDENT * level
        return [prefix + line if line.strip() else line for line in lines]

    def _serialize_using(self, using: UsingDirective) -> str:
        """Serialize a using directive."""
        return f"using {using.namespace};"

    def _serialize_attribute(self, attr: CSharpAttribute) -> str:
        """Serialize an attribute to [Name] or [Name(args)]."""
        if attr.arguments:
            return f"[{attr.name}({self._serialize_arguments(attr.arguments)})]"
        return f"[{attr.name}]"

    def _serialize_class(self, cls: CSharpClass) -> list[str]:
        """Serialize a class declaration."""
        if not cls.name:
            raise RenderPreconditionViolation("Class declaration has no name")

        lines: list[str] = []

        # Attributes
        for attr in cls.attributes:
            lines.append(self._serialize_attribute(attr))

        # Class declaration
        declaration = f"{cls.access.value} class {cls.name}"
        if cls.base_class:
            declaration += f" : {cls.base_class}"

        lines.append(declaration)
        lines.append("{")

        previous = None
        for member in cls.members:
            if isinstance(member, CSharpField):
                if isinstance(previous, CSharpMethod):
                    lines.append("")
                lines.extend(self._serialize_field(member, 1))
            elif isinstance(member, CSharpMethod):
                if previous is not None:
                    lines.append("")
                lines.extend(self._serialize_method(member, 1))
            else:
                raise RenderPreconditionViolation(f"Unexpected class member {type(member).__name__}")
            previous = member

        lines.append("}")

        return lines

    def _serialize_field(self, field: CSharpField, indent: int) -> list[str]:
        """Serialize a field declaration."""
        prefix = self.INDENT * indent

        modifiers = " ".join(m.value for m in field.modifiers)
        if modifiers:
            modifiers = f" {modifiers}"

        declaration = f"{prefix}{field.access.value}{modifiers} {field.type_name} {field.name}"
        if field.initializer is not None:
            declaration += f" = {self.serialize_expression(field.initializer)}"
        declaration += ";"

        return [declaration]

    def _serialize_method(self, method: CSharpMethod, indent: int) -> list[str]:
        """Serialize a method declaration."""
        if not method.name:
            raise RenderPreconditionViolation("Method declaration has no name")

        lines: list[str] = []
        prefix = self.INDENT * indent

        # Modifiers
        modifiers = " ".join(m.value for m in method.modifiers)
        if modifiers:
            modifiers = f" {modifiers}"

        # Parameter list
        params = ", ".join(f"{p.type_name} {p.name}" for p in method.parameters)

        lines.append(f"{prefix}{method.access.value}{modifiers} {method.return_type} {method.name}({params})")
        lines.append(f"{prefix}{{")

        # Body
        body_prefix = prefix + self.INDENT
        for stmt in method.body:
            lines.append(f"{body_prefix}{self.serialize_statement(stmt)}")

        lines.append(f"{prefix}}}")

        return lines

    def serialize_statement(self, stmt: CSharpStatement) -> str:
        """Serialize a single statement (without indentation)."""
        if isinstance(stmt, CSharpExpressionStatement) and stmt.expression is not None:
            return f"{self.serialize_expression(stmt.expression)};"
        raise RenderPreconditionViolation(f"Cannot render statement {stmt!r}")

    def serialize_expression(self, expr: CSharpExpression) -> str:
        """Serialize a single expression."""
        if isinstance(expr, CSharpLiteral):
            return expr.text
        if isinstance(expr, CSharpIdentifier):
            return expr.name
        if isinstance(expr, CSharpTypeOf):
            return f"typeof({expr.type_name})"
        if isinstance(expr, CSharpInvocation):
            call = f"{expr.method}({self._serialize_arguments(expr.arguments)})"
            if expr.target is not None:
                return f"{self.serialize_expression(expr.target)}.{call}"
            return call
        if isinstance(expr, CSharpObjectCreation):
            return f"new {expr.type_name}({self._serialize_arguments(expr.arguments)})"
        raise RenderPreconditionViolation(f"Cannot render expression {expr!r}")

    def _serialize_arguments(self, arguments: tuple[CSharpExpression, ...]) -> str:
        return ", ".join(self.serialize_expression(arg) for arg in arguments)

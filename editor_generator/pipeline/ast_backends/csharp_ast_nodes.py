"""
C# AST node definitions.

These nodes represent the structure of a generated C# editor file.
They are built bottom-up (expressions, then members, then the class, then
the file) and are frozen: once a CSharpFile is assembled it is never
mutated, and the serializer can render it any number of times.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AccessModifier(str, Enum):
    """C# access modifiers."""

    PUBLIC = "public"
    PRIVATE = "private"


class MemberModifier(str, Enum):
    """C# member modifiers."""

    OVERRIDE = "override"


@dataclass(frozen=True)
class CSharpNode:
    """Base class for all C# AST nodes."""

    pass


# Expressions


@dataclass(frozen=True)
class CSharpExpression(CSharpNode):
    """Base class for expressions."""

    pass


@dataclass(frozen=True)
class CSharpLiteral(CSharpExpression):
    """A literal already formatted as C# source (e.g. "\"Speed\"", "0f", "8")."""

    text: str = ""


@dataclass(frozen=True)
class CSharpIdentifier(CSharpExpression):
    """A bare or dotted name (e.g. speedContent, EditorStyles.boldLabel)."""

    name: str = ""


@dataclass(frozen=True)
class CSharpTypeOf(CSharpExpression):
    """typeof(T)."""

    type_name: str = ""


@dataclass(frozen=True)
class CSharpInvocation(CSharpExpression):
    """A method call: target.method(arguments)."""

    method: str = ""
    target: CSharpExpression | None = None
    arguments: tuple[CSharpExpression, ...] = ()


@dataclass(frozen=True)
class CSharpObjectCreation(CSharpExpression):
    """new T(arguments)."""

    type_name: str = ""
    arguments: tuple[CSharpExpression, ...] = ()


# Statements


@dataclass(frozen=True)
class CSharpStatement(CSharpNode):
    """Base class for statements."""

    pass


@dataclass(frozen=True)
class CSharpExpressionStatement(CSharpStatement):
    """An expression evaluated for its side effects (a call followed by ;)."""

    expression: CSharpExpression | None = None


# Declarations


@dataclass(frozen=True)
class CSharpAttribute(CSharpNode):
    """Represents a C# attribute (e.g., [CustomEditor(typeof(Foo))])."""

    name: str = ""
    arguments: tuple[CSharpExpression, ...] = ()


@dataclass(frozen=True)
class CSharpField(CSharpNode):
    """Represents a class field with an optional initializer."""

    name: str = ""
    type_name: str = ""
    access: AccessModifier = AccessModifier.PRIVATE
    modifiers: tuple[MemberModifier, ...] = ()
    initializer: CSharpExpression | None = None


@dataclass(frozen=True)
class CSharpParameter(CSharpNode):
    """Represents a method parameter."""

    name: str = ""
    type_name: str = ""


@dataclass(frozen=True)
class CSharpMethod(CSharpNode):
    """Represents a class method."""

    name: str = ""
    return_type: str = "void"
    access: AccessModifier = AccessModifier.PUBLIC
    modifiers: tuple[MemberModifier, ...] = ()
    parameters: tuple[CSharpParameter, ...] = ()
    body: tuple[CSharpStatement, ...] = ()


CSharpMember = CSharpField | CSharpMethod


@dataclass(frozen=True)
class CSharpClass(CSharpNode):
    """Represents a class declaration; members keep their generation order."""

    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    base_class: str | None = None
    attributes: tuple[CSharpAttribute, ...] = ()
    members: tuple[CSharpMember, ...] = ()


@dataclass(frozen=True)
class UsingDirective(CSharpNode):
    """Represents a using directive."""

    namespace: str = ""


@dataclass(frozen=True)
class CSharpFile(CSharpNode):
    """Represents a complete C# source file holding one class."""

    using_directives: tuple[UsingDirective, ...] = ()
    generation_comment: str = ""
    namespace: str | None = None  # Optional namespace wrapping the class
    cls: CSharpClass | None = None

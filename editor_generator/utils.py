"""
Utility functions for the editor generator.
"""

import re

# Regex pattern to split a variable name into display words, keeping acronyms together
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

# C# reserved keywords, which cannot be used as plain field names
CS_RESERVED_KEYWORDS = frozenset(
    {
        "abstract",
        "as",
        "base",
        "bool",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "checked",
        "class",
        "const",
        "continue",
        "decimal",
        "default",
        "delegate",
        "do",
        "double",
        "else",
        "enum",
        "event",
        "explicit",
        "extern",
        "false",
        "finally",
        "fixed",
        "float",
        "for",
        "foreach",
        "goto",
        "if",
        "implicit",
        "in",
        "int",
        "interface",
        "internal",
        "is",
        "lock",
        "long",
        "namespace",
        "new",
        "null",
        "object",
        "operator",
        "out",
        "override",
        "params",
        "private",
        "protected",
        "public",
        "readonly",
        "ref",
        "return",
        "sbyte",
        "sealed",
        "short",
        "sizeof",
        "stackalloc",
        "static",
        "string",
        "struct",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "uint",
        "ulong",
        "unchecked",
        "unsafe",
        "ushort",
        "using",
        "virtual",
        "void",
        "volatile",
        "while",
    }
)

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _strip_member_prefix(name: str) -> str:
    """Remove the m_, _ and k member prefixes."""
    if name.startswith("m_"):
        return name[2:]
    if name.startswith("_"):
        return name[1:]
    if len(name) > 1 and name[0] == "k" and name[1].isupper():
        return name[1:]
    return name


def nicify_variable_name(name: str) -> str:
    """Turn a field name into a display label, like Unity's inspector does.

    Examples:
        "speed" -> "Speed"
        "m_maxSpeed" -> "Max Speed"
        "kTimeout" -> "Timeout"
        "HPValue" -> "HP Value"
        "level2Boss" -> "Level 2 Boss"

    Args:
        name: The field name

    Returns:
        Space-separated label with a capitalized first letter
    """
    words = _WORD_PATTERN.findall(_strip_member_prefix(name))
    if not words:
        return name
    text = " ".join(words)
    return text[0].upper() + text[1:]


def csharp_string_literal(text: str) -> str:
    """Quote and escape text as a C# regular string literal."""
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in text) + '"'


def csharp_float_literal(value: float) -> str:
    """Format a number as a C# float literal (0f, 2.5f)."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}f"


def csharp_int_literal(value: float) -> str:
    """Format a number as a C# int literal, truncating like an (int) cast."""
    return str(int(value))

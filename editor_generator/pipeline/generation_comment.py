"""
Generation comment rendering.

The banner placed at the top of generated editors, in the same
<auto-generated> form the .NET code generators emit. It carries no
timestamp, so regenerating an unchanged type yields an identical file.
"""

from __future__ import annotations

import jinja2

GENERATION_COMMENT_TEMPLATE = """\
//------------------------------------------------------------------------------
// <auto-generated>
//     This code was generated by {{ tool }}.
{% if command %}
//     Command: {{ command }}
{% endif %}
//
//     Changes to this file may cause incorrect behavior and will be lost if
//     the code is regenerated.
// </auto-generated>
//------------------------------------------------------------------------------
"""

_jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=False)
_template = _jinja_env.from_string(GENERATION_COMMENT_TEMPLATE)


def render_generation_comment(command: str = "", tool: str = "editor_generator") -> str:
    """
    Render the generation banner.

    Args:
        command: Command line that produced the file (omitted when empty)
        tool: Name of the generating tool

    Returns:
        The banner as C# line comments, without a trailing newline
    """
    return _template.render(tool=tool, command=command).rstrip("\n")

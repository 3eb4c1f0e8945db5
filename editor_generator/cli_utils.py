"""
CLI utilities for command line reconstruction.

The reconstructed command is recorded in the generated editor's banner so
a reader knows how to regenerate the file.
"""

from pathlib import Path

import click

PROGRAM_NAME = "editor_generator"


def _format_value(value) -> str:
    """Show paths by file name only, so banners do not leak local directories."""
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return PROGRAM_NAME

    cmd_parts = [PROGRAM_NAME]
    options = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if value is None or value is False:
            continue

        if isinstance(param, click.Argument):
            cmd_parts.append(_format_value(value))
        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _format_value(value)])

    cmd_parts.extend(options)
    return " ".join(cmd_parts)

import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .pipeline import (
    EditorGenerationError,
    EditorWriter,
    GeneratorConfig,
    OutputMode,
    TypeDescription,
    TypeDescriptionLoader,
    generate_editor,
)
from .pipeline.analyzer import select_serialized_fields
from .pipeline.type_model import Header, Range, Space, Tooltip

# Annotations Unity keeps drawing on top of a custom editor's PropertyField
GUI_ANNOTATIONS = (Header, Space, Range, Tooltip)


def has_gui_annotations(type_description: TypeDescription) -> bool:
    """Check whether any serialized field still carries a GUI annotation."""
    return any(field.has_annotation(kind) for field in select_serialized_fields(type_description) for kind in GUI_ANNOTATIONS)


def _confirm_overwrite(path: Path) -> bool:
    return click.confirm(f"{path.name} already exists. Replace it?", default=False)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Replace an existing editor without asking")
@click.option("--stdout", "to_stdout", is_flag=True, default=False, help="Print the editor instead of saving it")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output_dir", required=False, default=None, type=click.Path(file_okay=False, resolve_path=True))
def editor_generator(config, force, to_stdout, verbose, path, output_dir):
    """Generate a Unity custom editor from the type description in PATH.

    The editor is written to OUTPUT_DIR (default: next to PATH) as
    <TypeName>Editor.cs.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            try:
                config_data = json.load(f)
                if not isinstance(config_data, dict):
                    raise ValueError("expected a JSON object")
                config = GeneratorConfig.from_dict(config_data)
            except ValueError as e:
                # JSONDecodeError and unknown output modes are both ValueErrors
                raise click.BadParameter(str(e), param_hint="'--config'") from e
    else:
        config = GeneratorConfig()

    # CLI flag overrides the config file
    if force:
        config.output.mode = OutputMode.FORCE

    if config.add_generation_comment and not config.generation_command:
        config.generation_command = reconstruct_command_line(editor_generator)

    if output_dir is None:
        output_dir = Path(path).parent

    try:
        type_description = TypeDescriptionLoader().load(path)
        source = generate_editor(type_description, config, output_dir=output_dir)
    except EditorGenerationError as e:
        raise click.ClickException(str(e)) from e

    if to_stdout:
        click.echo(source.text, nl=False)
        return

    written = EditorWriter(config.output, confirm_overwrite=_confirm_overwrite).save(source)
    if written is None:
        click.echo("Cancelled, nothing was written.")
        return

    click.echo(f"Wrote {written}")
    if has_gui_annotations(type_description):
        click.echo(f"Don't forget to remove GUI attributes from {type_description.name}. If you don't, they'll be drawn by the custom editor and the attributes.")

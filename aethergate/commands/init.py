"""
Init command for aethergate.

Writes the default aethergate.toml and layout.html. Existing files are
never overwritten.
"""

from pathlib import Path

import click

from ..config import default_configuration, get_config_path, get_layout_path, write_default
from ..errors import AethergateError
from ..exit_codes import SUCCESS, exit_with_code, get_exit_code_for_exception
from ..template import write_default_layout


def _init_file(path: Path, label: str, write) -> int:
    if path.exists():
        click.echo(f"{label} {path} already exists")
        return SUCCESS
    try:
        write(path)
    except AethergateError as e:
        click.echo(f"Error: {e}", err=True)
        return get_exit_code_for_exception(e)
    click.echo(f"Created {label.lower()} {path}")
    return SUCCESS


@click.command("init")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Configuration file to create (default: aethergate.toml)')
@click.option('--layout', 'layout_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Layout file to create (default: layout.html)')
def init_handler(config_path, layout_path):
    """Create the configuration and layout files if they do not exist.

    Both files are checked independently; an existing file is reported
    and left untouched.

    \b
    Examples:
        aethergate init
        aethergate init --config site.toml --layout site.html
    """
    config_path = config_path or get_config_path()
    layout_path = layout_path or get_layout_path()

    config_code = _init_file(
        config_path, "Config file",
        lambda p: write_default(default_configuration(), p),
    )
    layout_code = _init_file(layout_path, "Layout file", write_default_layout)

    code = config_code or layout_code
    if code != SUCCESS:
        exit_with_code(code)

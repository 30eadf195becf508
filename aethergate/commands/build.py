"""
Build command for aethergate.

Loads the configuration, then regenerates every page into the output
directory. Any failure aborts the build with exit status 1.
"""

from pathlib import Path

import click

from ..builder import build
from ..config import get_config_path, get_layout_path, load
from ..errors import AethergateError, NotFoundError
from ..exit_codes import exit_with_code, get_exit_code_for_exception
from ..render import render_build_summary

DEFAULT_OUTPUT_DIR = "dist"


@click.command("build")
@click.argument('output_dir', required=False, default=DEFAULT_OUTPUT_DIR,
                type=click.Path(file_okay=False, path_type=Path))
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Configuration file (default: aethergate.toml)')
@click.option('--layout', 'layout_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Layout template (default: layout.html)')
@click.option('-q', '--quiet', is_flag=True, help='Do not print the summary table')
def build_handler(output_dir, config_path, layout_path, quiet):
    """Build the static site into OUTPUT_DIR (default: dist).

    The output directory is deleted and recreated on every run.
    """
    config_path = config_path or get_config_path()
    layout_path = layout_path or get_layout_path()

    try:
        config = load(config_path)
    except AethergateError as e:
        exit_with_code(get_exit_code_for_exception(e), f"Error: {e.with_context('load config')}")

    try:
        if not layout_path.exists():
            raise NotFoundError(f"load layout: {layout_path} does not exist")
        written = build(config, layout_path, output_dir)
    except AethergateError as e:
        exit_with_code(get_exit_code_for_exception(e), f"Error: {e.with_context('build static site')}")

    if not quiet:
        render_build_summary(config, written)

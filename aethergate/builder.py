"""
Static site generation.

Every build is a full rebuild: the output directory is removed, recreated,
and one page is rendered per repository record in declared order.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Union

from .domain import Configuration, RenderContext
from .errors import AethergateError, FilesystemError
from .template import render

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def output_path_for(out_dir: PathLike, path: str) -> Path:
    """Page location for a record path: ``<out_dir>/<path>.html``."""
    return Path(out_dir) / f"{path}.html"


def clean_output_dir(out_dir: PathLike) -> Path:
    """
    Remove ``out_dir`` if present and create it empty.

    Raises:
        FilesystemError: If removal or creation fails
    """
    out = Path(out_dir)
    try:
        if out.is_dir() and not out.is_symlink():
            shutil.rmtree(out)
        elif out.exists() or out.is_symlink():
            out.unlink()
    except OSError as e:
        raise FilesystemError(f"remove output dir: {e}") from e

    try:
        out.mkdir(parents=True)
    except OSError as e:
        raise FilesystemError(f"make output dir: {e}") from e

    return out


def build(config: Configuration, layout_path: PathLike, out_dir: PathLike) -> List[Path]:
    """
    Regenerate the static site into ``out_dir``.

    Records sharing a path overwrite each other; the last one wins.

    Args:
        config: Loaded configuration
        layout_path: Layout template, read again for every record
        out_dir: Output directory, deleted and recreated

    Returns:
        Paths written, in record order

    Raises:
        AethergateError: The first render failure, prefixed with
            ``render and write static site``
    """
    out = clean_output_dir(out_dir)

    written = []
    seen = set()
    for record in config.repositories:
        if record.path in seen:
            logger.warning(f"Duplicate path '{record.path}': overwriting earlier page")
        seen.add(record.path)

        context = RenderContext.from_record(config, record)
        output_path = output_path_for(out, record.path)
        try:
            render(context, layout_path, output_path)
        except AethergateError as e:
            raise e.with_context("render and write static site") from e

        logger.debug(f"{config.import_prefix(record)} -> {output_path}")
        written.append(output_path)

    logger.info(f"Built {len(written)} pages into {out}")
    return written

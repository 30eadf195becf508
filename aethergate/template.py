"""
HTML template rendering for aethergate.

Each page is built from two templates: a fixed meta-tag fragment carrying
the ``go-import`` tag, and a user-editable layout that wraps it. The
fragment is handed to the layout as markup so it is not escaped a second
time.
"""

import dataclasses
import logging
import os
from pathlib import Path
from typing import Union

import jinja2
from markupsafe import Markup

from . import __version__
from .domain import RenderContext
from .errors import (
    AethergateError,
    FilesystemError,
    NotFoundError,
    TemplateExecError,
    TemplateParseError,
)
from .minify import new_minifier

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

DEFAULT_META_TEMPLATE = """<title>{{ path }}</title>
        <meta name="go-import" content="{{ domain }}/{{ path }} {{ vcs }} {{ repo }}" />
        <meta name="generator" content="aethergate v{{ version }}" />"""

DEFAULT_LAYOUT_TEMPLATE = """<!doctype html>
<html>
    <head>
        {{ meta_tags }}
        <meta http-equiv="refresh" content="0;url={{ repo }}" />
        <meta name="robots" content="noindex,noarchive" />
        <style>
            html {
                background-color: oklch(98.5% 0 0);
                color: oklch(14.1% 0.005 285.823);
                transition: background-color 0.3s ease;
            }

            body {
                font-family: ui-sans-serif, system-ui, sans-serif, 'Apple Color Emoji', 'Segoe UI Emoji', 'Segoe UI Symbol', 'Noto Color Emoji';
            }

            @media (prefers-color-scheme: dark) {
                html {
                    background-color: oklch(21% 0.006 285.885);
                    color: oklch(98.5% 0 0);
                }
            }

            .centered-text {
                text-align: center;
                margin-top: calc(.24rem * 6);
            }

            .repo-link {
                color: inherit;
                text-decoration: underline;
            }
        </style>
    </head>
    <body>
        <p class="centered-text">
            Redirecting to <a href="{{ repo }}" class="repo-link">repository</a>...
        </p>
    </body>
</html>
"""


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        autoescape=True,
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )


def _compile(env: jinja2.Environment, source: str, name: str) -> jinja2.Template:
    try:
        return env.from_string(source)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateParseError(f"parse {name} template: line {e.lineno}: {e.message}") from e


def _execute(template: jinja2.Template, name: str, **values) -> str:
    try:
        return template.render(**values)
    except jinja2.TemplateError as e:
        raise TemplateExecError(f"execute {name} template: {e}") from e
    except (TypeError, ValueError, AttributeError) as e:
        raise TemplateExecError(f"execute {name} template: {e}") from e


def render_meta_tags(context: RenderContext) -> Markup:
    """Render the title, go-import and generator tags for one record."""
    env = _environment()
    template = _compile(env, DEFAULT_META_TEMPLATE, "meta")
    html = _execute(
        template,
        "meta",
        domain=context.domain,
        path=context.path,
        vcs=context.vcs,
        repo=context.repo,
        version=__version__,
    )
    return Markup(html)


def read_layout(layout_path: PathLike) -> str:
    path = Path(layout_path)
    try:
        return path.read_text(encoding='utf-8')
    except FileNotFoundError as e:
        raise NotFoundError(f"parse layout template: {path} does not exist") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FilesystemError(f"parse layout template: {e}") from e


def render_page(context: RenderContext, layout_source: str) -> str:
    """
    Render a complete, unminified page.

    Args:
        context: Record values; ``meta_tags`` is filled in here
        layout_source: Text of the layout template

    Returns:
        The rendered HTML document
    """
    env = _environment()
    layout = _compile(env, layout_source, "layout")

    context = dataclasses.replace(context, meta_tags=render_meta_tags(context))

    return _execute(
        layout,
        "layout",
        meta_tags=context.meta_tags,
        domain=context.domain,
        path=context.path,
        vcs=context.vcs,
        repo=context.repo,
    )


def render(context: RenderContext, layout_path: PathLike, output_path: PathLike) -> None:
    """
    Render one record through the layout and write the minified page.

    The layout is read from disk on every call. The output file is flushed
    and synced to storage before it is closed.

    Raises:
        NotFoundError: If the layout file does not exist
        TemplateParseError: If the layout has a syntax error
        TemplateExecError: If substitution fails
        FilesystemError: If the directory or file cannot be written
        MinifyError: If the minifier rejects the document
    """
    minifier = new_minifier()

    document = render_page(context, read_layout(layout_path))

    out = Path(output_path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"create output directory: {e}") from e

    try:
        minified = minifier.minify("text/html", document)
    except AethergateError as e:
        raise e.with_context("minify HTML output") from e

    try:
        with open(out, 'wb') as f:
            f.write(minified.encode('utf-8'))
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        raise FilesystemError(f"create output file: {e}") from e

    logger.debug(f"Wrote {out} ({len(minified)} bytes)")


def write_default_layout(path: PathLike) -> None:
    """
    Write the built-in layout template to ``path``.

    Raises:
        FilesystemError: If the file cannot be written
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(DEFAULT_LAYOUT_TEMPLATE)
    except OSError as e:
        raise FilesystemError(f"write default layout: {e}") from e

    logger.info(f"Layout saved to {path}")

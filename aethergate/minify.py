"""
Content-type keyed minifier.

A Minifier holds one minify function per media type. The HTML function
hands the bodies of ``<style>`` elements to whatever is registered for
``text/css`` before compressing the markup itself.
"""

import re
from typing import Callable, Dict

import csscompressor
import minify_html

from .errors import MinifyError

MinifyFunc = Callable[['Minifier', str], str]

_STYLE_RE = re.compile(r'(<style\b[^>]*>)(.*?)(</style\s*>)', re.IGNORECASE | re.DOTALL)


class Minifier:
    """
    Registry of minify functions by media type.

    Example:
        m = Minifier()
        m.add_func("text/html", minify_html_document)
        m.add_func("text/css", minify_css)
        out = m.minify("text/html", document)
    """

    def __init__(self):
        self._funcs: Dict[str, MinifyFunc] = {}

    def add_func(self, mediatype: str, func: MinifyFunc) -> None:
        self._funcs[mediatype] = func

    def supports(self, mediatype: str) -> bool:
        return mediatype in self._funcs

    def minify(self, mediatype: str, text: str) -> str:
        """
        Minify ``text`` with the function registered for ``mediatype``.

        Raises:
            MinifyError: If no function is registered or the function fails
        """
        func = self._funcs.get(mediatype)
        if func is None:
            raise MinifyError(f"no minifier registered for {mediatype}")
        try:
            return func(self, text)
        except MinifyError:
            raise
        except Exception as e:
            raise MinifyError(f"minify {mediatype}: {e}") from e


def minify_css(m: Minifier, text: str) -> str:
    return csscompressor.compress(text)


def minify_html_document(m: Minifier, text: str) -> str:
    """Compress an HTML document, minifying inline styles when CSS is registered.

    minify_html cannot call back into an external CSS minifier, so style
    bodies are handed to the registered text/css function before it runs.
    """
    if m.supports("text/css"):
        def _style(match):
            return match.group(1) + m.minify("text/css", match.group(2)) + match.group(3)
        text = _STYLE_RE.sub(_style, text)

    return minify_html.minify(
        text,
        minify_css=False,
        minify_js=False,
        keep_closing_tags=True,
        keep_html_and_head_opening_tags=True,
    )


def new_minifier() -> Minifier:
    """Minifier with text/html and text/css registered."""
    m = Minifier()
    m.add_func("text/html", minify_html_document)
    m.add_func("text/css", minify_css)
    return m

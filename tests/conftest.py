"""
Shared fixtures for aethergate tests.
"""
from html.parser import HTMLParser
from pathlib import Path

import pytest

from aethergate.config import write_default
from aethergate.domain import Configuration, RepositoryRecord
from aethergate.template import write_default_layout


class PageParser(HTMLParser):
    """Collects meta tags, the title and links from a rendered page."""

    def __init__(self):
        super().__init__()
        self.metas = []
        self.links = []
        self.title = None
        self._in_title = False

    def handle_starttag(self, tag, attrs):
        if tag == 'meta':
            self.metas.append(dict(attrs))
        elif tag == 'a':
            self.links.append(dict(attrs).get('href'))
        elif tag == 'title':
            self._in_title = True
            self.title = ''

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag):
        if tag == 'title':
            self._in_title = False

    def handle_data(self, data):
        if self._in_title:
            self.title += data

    def meta_named(self, name):
        return [m['content'] for m in self.metas if m.get('name') == name]

    def refresh(self):
        return [m['content'] for m in self.metas if m.get('http-equiv') == 'refresh']


@pytest.fixture
def parse_page():
    """Parse an HTML file (or string) into a PageParser."""
    def _parse(source):
        if isinstance(source, Path):
            source = source.read_text(encoding='utf-8')
        parser = PageParser()
        parser.feed(source)
        parser.close()
        return parser
    return _parse


@pytest.fixture(autouse=True)
def clear_path_overrides(monkeypatch):
    """Keep a developer's environment from redirecting config or layout paths."""
    monkeypatch.delenv('AETHERGATE_CONFIG', raising=False)
    monkeypatch.delenv('AETHERGATE_LAYOUT', raising=False)


@pytest.fixture
def example_config():
    return Configuration(
        version=1,
        domain="go.example.com",
        repositories=(
            RepositoryRecord(path="foo", vcs="git", repo="https://github.com/x/foo"),
        ),
    )


@pytest.fixture
def layout_file(tmp_path):
    path = tmp_path / "layout.html"
    write_default_layout(path)
    return path


@pytest.fixture
def site(tmp_path, monkeypatch, example_config):
    """Working directory holding aethergate.toml and layout.html."""
    write_default(example_config, tmp_path / "aethergate.toml")
    write_default_layout(tmp_path / "layout.html")
    monkeypatch.chdir(tmp_path)
    return tmp_path

"""
aethergate - Static vanity import pages for Go packages.

aethergate reads a list of repositories from aethergate.toml and writes one
minified HTML page per repository. Each page carries the ``go-import`` meta
tag the go tool reads to find the real repository, and redirects human
visitors to it.

Quick Start:
    import aethergate

    config = aethergate.load("aethergate.toml")
    aethergate.build(config, "layout.html", "dist")

Command line:
    aethergate init           Create aethergate.toml and layout.html
    aethergate build [DIR]    Regenerate the site into DIR (default: dist)
"""

__version__ = "1.0.0"

# Domain objects
from .domain import Configuration, RepositoryRecord, RenderContext

# Configuration
from .config import load, write_default, default_configuration

# Rendering and building
from .template import write_default_layout
from .builder import build

# Errors
from .errors import (
    AethergateError,
    NotFoundError,
    ParseError,
    FilesystemError,
    WriteError,
    TemplateParseError,
    TemplateExecError,
    MinifyError,
)

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "Configuration",
    "RepositoryRecord",
    "RenderContext",
    # Configuration
    "load",
    "write_default",
    "default_configuration",
    # Rendering and building
    "write_default_layout",
    "build",
    # Errors
    "AethergateError",
    "NotFoundError",
    "ParseError",
    "FilesystemError",
    "WriteError",
    "TemplateParseError",
    "TemplateExecError",
    "MinifyError",
]

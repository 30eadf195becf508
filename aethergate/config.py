#!/usr/bin/env python3

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

import logging
import sys

import toml

from .domain import Configuration, RepositoryRecord
from .errors import NotFoundError, ParseError, FilesystemError, WriteError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("aethergate")

CONFIG_FILENAME = "aethergate.toml"
LAYOUT_FILENAME = "layout.html"

# Comment written above each field of the configuration file
FIELD_COMMENTS = {
    "version": "Version of aethergate",
    "domain": "Domain of vanity remote import",
    "repository": "List of repositories to serve",
    "path": "Path of vanity remote import",
    "vcs": "Version control system",
    "repo": "Repository URL",
}

PathLike = Union[str, os.PathLike]


def get_config_path() -> Path:
    """Get the path to the configuration file.

    The AETHERGATE_CONFIG environment variable overrides the default
    ``aethergate.toml`` in the working directory.
    """
    if 'AETHERGATE_CONFIG' in os.environ:
        return Path(os.environ['AETHERGATE_CONFIG'])
    return Path(CONFIG_FILENAME)


def get_layout_path() -> Path:
    """Get the path to the layout file (AETHERGATE_LAYOUT overrides)."""
    if 'AETHERGATE_LAYOUT' in os.environ:
        return Path(os.environ['AETHERGATE_LAYOUT'])
    return Path(LAYOUT_FILENAME)


def default_configuration() -> Configuration:
    """Configuration written by ``aethergate init``."""
    return Configuration(
        version=1,
        domain="go.endfieldind.com",
        repositories=(
            RepositoryRecord(
                path="aethergate",
                vcs="git",
                repo="https://git.sr.ht/~endmin/aethergate",
            ),
        ),
    )


def _optional_str(table: Dict[str, Any], key: str, where: str) -> str:
    value = table.get(key, "")
    if not isinstance(value, str):
        raise ParseError(f"{where}: field '{key}' must be a string, got {type(value).__name__}")
    return value


def parse_config(data: Dict[str, Any]) -> Configuration:
    """
    Build a Configuration from a decoded TOML document.

    Only the shape is checked. Absent fields take zero values (``0`` for
    version, ``""`` for strings) and are rendered as-is downstream.

    Raises:
        ParseError: If a field has the wrong type
    """
    version = data.get("version", 0)
    if isinstance(version, bool) or not isinstance(version, int):
        raise ParseError(f"field 'version' must be an integer, got {type(version).__name__}")

    domain = _optional_str(data, "domain", "config")

    raw_repos = data.get("repository", [])
    if not isinstance(raw_repos, list):
        raise ParseError("field 'repository' must be a list of tables")

    records = []
    for i, item in enumerate(raw_repos):
        where = f"repository[{i}]"
        if not isinstance(item, dict):
            raise ParseError(f"{where}: expected a table, got {type(item).__name__}")
        records.append(RepositoryRecord(
            path=_optional_str(item, "path", where),
            vcs=_optional_str(item, "vcs", where),
            repo=_optional_str(item, "repo", where),
        ))

    return Configuration(version=version, domain=domain, repositories=tuple(records))


def load(path: PathLike) -> Configuration:
    """
    Load the configuration file at ``path``.

    Raises:
        NotFoundError: If the file does not exist
        ParseError: If the content is not TOML or does not fit the schema
        FilesystemError: If the file exists but cannot be read
    """
    config_path = Path(path)
    try:
        with open(config_path, 'rb') as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise NotFoundError(f"read config file: {config_path} does not exist") from e
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"unmarshal data: {e}") from e
    except OSError as e:
        raise FilesystemError(f"read config file: {e}") from e

    try:
        config = parse_config(data)
    except ParseError as e:
        raise e.with_context("unmarshal data") from e

    logger.debug(f"Loaded {len(config.repositories)} repositories from {config_path}")
    return config


def dumps(cfg: Configuration) -> str:
    """Serialize a Configuration to commented TOML."""
    data = cfg.to_dict()
    lines = []
    for key in ("version", "domain"):
        lines.append(f"# {FIELD_COMMENTS[key]}")
        lines.append(toml.dumps({key: data[key]}).rstrip("\n"))

    lines.append("")
    lines.append(f"# {FIELD_COMMENTS['repository']}")
    for field in ("path", "vcs", "repo"):
        lines.append(f"#   {field}: {FIELD_COMMENTS[field]}")
    lines.append(toml.dumps({"repository": data["repository"]}).rstrip("\n"))
    return "\n".join(lines) + "\n"


def write_default(cfg: Configuration, path: PathLike) -> None:
    """
    Write ``cfg`` as a commented TOML file at ``path``.

    Raises:
        WriteError: If the file cannot be written
    """
    config_path = Path(path)
    content = dumps(cfg)
    try:
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise WriteError(f"write config file: {e}") from e

    logger.info(f"Configuration saved to {config_path}")

"""
Configuration domain objects for aethergate.

Configuration and RepositoryRecord are immutable once loaded for a build
run. RenderContext lives only for the duration of one render call.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class RepositoryRecord:
    """One vanity import path and the repository it resolves to."""
    path: str
    vcs: str
    repo: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'vcs': self.vcs,
            'repo': self.repo,
        }


@dataclass(frozen=True)
class Configuration:
    """
    Parsed aethergate.toml.

    ``repositories`` keeps the declared order; duplicate paths are allowed
    and resolved by the builder (later records win).
    """
    version: int
    domain: str
    repositories: Tuple[RepositoryRecord, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Mirror the TOML document shape."""
        return {
            'version': self.version,
            'domain': self.domain,
            'repository': [r.to_dict() for r in self.repositories],
        }

    def import_prefix(self, record: RepositoryRecord) -> str:
        """Full import path of a record, e.g. ``go.example.com/foo``."""
        return f"{self.domain}/{record.path}"


@dataclass(frozen=True)
class RenderContext:
    """Values substituted into the meta-tag fragment and the layout."""
    domain: str
    path: str
    vcs: str
    repo: str
    meta_tags: str = ""

    @classmethod
    def from_record(cls, config: Configuration, record: RepositoryRecord) -> 'RenderContext':
        return cls(
            domain=config.domain,
            path=record.path,
            vcs=record.vcs,
            repo=record.repo,
        )

"""
Domain layer for aethergate.

Contains pure domain objects with no I/O or side effects:
- Configuration: The parsed configuration file
- RepositoryRecord: One vanity path and its repository
- RenderContext: Per-record values handed to the renderer
"""

from .repository import Configuration, RepositoryRecord, RenderContext

__all__ = [
    'Configuration',
    'RepositoryRecord',
    'RenderContext',
]

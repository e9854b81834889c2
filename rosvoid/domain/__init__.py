"""
Domain layer for rosvoid.

Contains pure domain objects with no I/O or side effects:
- Catalog: A decoded distribution file
- RepositoryRecord: One catalog entry (source, release, doc)
- SubPackage: An installable unit described by a manifest
- EnrichedRepository: Everything the recipe template needs
"""

from .repository import (
    RepositoryRecord,
    SourceInfo,
    ReleaseInfo,
    SubPackage,
    EnrichedRepository,
    EnrichmentState,
)
from .catalog import Catalog

__all__ = [
    'Catalog',
    'RepositoryRecord',
    'SourceInfo',
    'ReleaseInfo',
    'SubPackage',
    'EnrichedRepository',
    'EnrichmentState',
]

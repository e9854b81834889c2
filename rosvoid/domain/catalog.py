"""
Catalog domain object: a decoded rosdistro distribution file.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List

from .repository import RepositoryRecord


@dataclass(frozen=True)
class Catalog:
    """Repositories keyed by name plus the distribution-level metadata."""
    repositories: Dict[str, RepositoryRecord] = field(default_factory=dict)
    type: str = ""
    version: str = ""
    release_platforms: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Catalog':
        repositories = data.get('repositories') or {}
        platforms = data.get('release_platforms') or {}
        return cls(
            repositories={
                str(name): RepositoryRecord.from_dict(str(name), entry)
                for name, entry in repositories.items()
            },
            type=str(data.get('type') or ''),
            version=str(data.get('version') or ''),
            release_platforms={
                str(os_name): [str(v) for v in versions or []]
                for os_name, versions in platforms.items()
            },
        )

    def __len__(self) -> int:
        return len(self.repositories)

    def __contains__(self, name: str) -> bool:
        return name in self.repositories

    def get(self, name: str):
        return self.repositories.get(name)

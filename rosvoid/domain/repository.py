"""
Repository domain objects for rosvoid.

RepositoryRecord mirrors one entry of a rosdistro distribution file.
SubPackage is what a package.xml manifest declares. EnrichedRepository
collects everything the recipe template needs for one repository.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List, Tuple


@dataclass(frozen=True)
class SourceInfo:
    """A source (or doc) entry: where the upstream code lives."""
    url: str = ""
    version: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'SourceInfo':
        data = data or {}
        return cls(
            url=str(data.get('url') or ''),
            version=str(data.get('version') or ''),
            type=str(data.get('type') or ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'url': self.url, 'version': self.version}


@dataclass(frozen=True)
class ReleaseInfo:
    """A release entry: the bloom release repository and its packages."""
    url: str = ""
    version: str = ""
    packages: Tuple[str, ...] = ()
    tags: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReleaseInfo':
        tags = data.get('tags') or {}
        return cls(
            url=str(data.get('url') or ''),
            version=str(data.get('version') or ''),
            packages=tuple(str(p) for p in data.get('packages') or ()),
            tags=tuple((str(k), str(v)) for k, v in tags.items()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'url': self.url,
            'version': self.version,
            'packages': list(self.packages),
            'tags': dict(self.tags),
        }


@dataclass(frozen=True)
class RepositoryRecord:
    """One catalog entry."""
    name: str
    source: SourceInfo = field(default_factory=SourceInfo)
    release: Optional[ReleaseInfo] = None
    doc: Optional[SourceInfo] = None
    status: str = ""

    @classmethod
    def from_dict(cls, name: str, data: Optional[Dict[str, Any]]) -> 'RepositoryRecord':
        data = data or {}
        release = data.get('release')
        doc = data.get('doc')
        return cls(
            name=name,
            source=SourceInfo.from_dict(data.get('source')),
            release=ReleaseInfo.from_dict(release) if isinstance(release, dict) else None,
            doc=SourceInfo.from_dict(doc) if isinstance(doc, dict) else None,
            status=str(data.get('status') or ''),
        )

    @property
    def has_release(self) -> bool:
        """True when the repository has a release channel to build from."""
        return self.release is not None and bool(self.release.url)

    @property
    def subpackage_names(self) -> List[str]:
        """Explicit release package list, or the repository itself."""
        if self.release and self.release.packages:
            return list(self.release.packages)
        return [self.name]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'source': self.source.to_dict(),
            'release': self.release.to_dict() if self.release else None,
            'doc': self.doc.to_dict() if self.doc else None,
            'status': self.status,
        }


@dataclass(frozen=True)
class SubPackage:
    """An installable unit described by a package.xml manifest."""
    name: str
    description: str = ""
    build_dependencies: Tuple[str, ...] = ()
    run_dependencies: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'build_dependencies': list(self.build_dependencies),
            'run_dependencies': list(self.run_dependencies),
        }


class EnrichmentState(Enum):
    """Where a repository is in its enrichment pipeline."""
    PENDING = "pending"
    URL_DERIVED = "url_derived"
    CHECKSUM_COMPUTED = "checksum_computed"
    NO_RELEASE = "no_release"
    SUBPACKAGES_RESOLVING = "subpackages_resolving"
    ENRICHED = "enriched"
    FAILED = "failed"


@dataclass
class EnrichedRepository:
    """
    A repository with everything needed to render its recipe.

    Owned by a single pipeline task; not shared between threads.
    """
    record: RepositoryRecord
    tarball_url: str = ""
    checksum: str = ""
    sub_packages: List[SubPackage] = field(default_factory=list)
    state: EnrichmentState = EnrichmentState.PENDING

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def release(self) -> Optional[ReleaseInfo]:
        return self.record.release

    @property
    def source(self) -> SourceInfo:
        return self.record.source

    @property
    def primary(self) -> SubPackage:
        """The sub-package that provides the file-level recipe header."""
        return self.sub_packages[0]

    @property
    def extra_packages(self) -> List[SubPackage]:
        """Sub-packages rendered as appended named blocks."""
        return self.sub_packages[1:]

    @property
    def is_renderable(self) -> bool:
        return self.state is EnrichmentState.ENRICHED and bool(self.sub_packages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'state': self.state.value,
            'tarball_url': self.tarball_url,
            'checksum': self.checksum,
            'sub_packages': [sp.to_dict() for sp in self.sub_packages],
        }

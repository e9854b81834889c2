"""
rosvoid - Generate Void Linux xbps-src templates from a ROS distribution.

rosvoid reads a rosdistro distribution file, resolves the packages each
released repository produces, fetches their package.xml manifests,
checksums the release tarball and renders one template per repository.

Quick Start:
    from rosvoid import load_settings, fetch_catalog, GenerateService

    settings = load_settings()
    catalog = fetch_catalog(settings.catalog_url)

    for result in GenerateService(settings).generate(catalog):
        print(result.name, result.status.value)

Domain Objects:
    Catalog - Decoded distribution file
    RepositoryRecord - One catalog entry
    SubPackage - One package.xml manifest
    EnrichedRepository - Everything a recipe needs

Services:
    EnrichmentService - Tarball checksum and manifest resolution
    GenerateService - Per-repository fan-out and rendering
"""

__version__ = "0.1.0"

# Domain objects
from .domain import (
    Catalog,
    RepositoryRecord,
    SourceInfo,
    ReleaseInfo,
    SubPackage,
    EnrichedRepository,
    EnrichmentState,
)

# Pipeline building blocks
from .catalog import fetch_catalog
from .manifest import fetch_subpackage_manifest, parse_source_url
from .tarball import derive_tarball_url, compute_checksum
from .recipe import RecipeRenderer, render_recipe

# Services
from .services import (
    EnrichmentService,
    GenerateService,
    GenerationResult,
    GenerationStatus,
)

# Errors
from .errors import (
    RosVoidError,
    FetchError,
    DecodeError,
    InvalidSourceURLError,
    RenderError,
    EnrichmentError,
)

# Configuration
from .config import load_config, load_settings, Settings

__all__ = [
    "__version__",
    "Catalog",
    "RepositoryRecord",
    "SourceInfo",
    "ReleaseInfo",
    "SubPackage",
    "EnrichedRepository",
    "EnrichmentState",
    "fetch_catalog",
    "fetch_subpackage_manifest",
    "parse_source_url",
    "derive_tarball_url",
    "compute_checksum",
    "RecipeRenderer",
    "render_recipe",
    "EnrichmentService",
    "GenerateService",
    "GenerationResult",
    "GenerationStatus",
    "RosVoidError",
    "FetchError",
    "DecodeError",
    "InvalidSourceURLError",
    "RenderError",
    "EnrichmentError",
    "load_config",
    "load_settings",
    "Settings",
]

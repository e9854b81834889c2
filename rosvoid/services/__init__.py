"""
Service layer for rosvoid.

Contains business logic that orchestrates domain objects and infrastructure:
- EnrichmentService: Tarball checksum and manifest resolution per repository
- GenerateService: Per-repository fan-out of enrichment and rendering

Services are the primary API for commands to use.
"""

from .enrichment_service import EnrichmentService
from .generate_service import GenerateService, GenerationResult, GenerationStatus

__all__ = [
    'EnrichmentService',
    'GenerateService',
    'GenerationResult',
    'GenerationStatus',
]

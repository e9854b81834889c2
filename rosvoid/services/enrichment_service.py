"""
Enrichment service for rosvoid.

Turns a catalog RepositoryRecord into an EnrichedRepository by resolving
the release tarball (URL and checksum) and fetching the manifest of every
sub-package the release produces. All network calls for one repository
run sequentially.
"""

import logging
from typing import Optional

from ..config import Settings
from ..domain import RepositoryRecord, EnrichedRepository, EnrichmentState
from ..errors import EnrichmentError, RosVoidError
from ..infra import HttpClient
from ..manifest import fetch_subpackage_manifest
from ..tarball import derive_tarball_url, compute_checksum

logger = logging.getLogger(__name__)


class EnrichmentService:
    """
    Service that resolves the data a recipe needs for one repository.

    Example:
        service = EnrichmentService(settings)
        enriched = service.enrich(record)
        if enriched is None:
            print("no release channel")
    """

    def __init__(self, settings: Settings, client: Optional[HttpClient] = None):
        """
        Initialize EnrichmentService.

        Args:
            settings: Effective run settings
            client: HTTP client (creates one from settings if None)
        """
        self.settings = settings
        self.client = client or HttpClient(
            timeout=settings.timeout, user_agent=settings.user_agent
        )

    def enrich(self, record: RepositoryRecord) -> Optional[EnrichedRepository]:
        """
        Enrich a single repository.

        Args:
            record: Catalog entry

        Returns:
            The enriched repository, or None when the repository has no
            release channel (not an error).

        Raises:
            EnrichmentError: When the checksum or any manifest cannot be
                resolved. ``partial`` carries the sub-packages fetched so far.
        """
        enriched = EnrichedRepository(record=record)

        if not record.has_release:
            enriched.state = EnrichmentState.NO_RELEASE
            logger.debug(f"{record.name}: no release channel, skipping")
            return None

        release = record.release
        enriched.tarball_url = derive_tarball_url(
            record.name, release.version, release.url, self.settings.distro
        )
        enriched.state = EnrichmentState.URL_DERIVED
        logger.info(enriched.tarball_url)

        try:
            enriched.checksum = compute_checksum(enriched.tarball_url, self.client)
        except RosVoidError as e:
            enriched.state = EnrichmentState.FAILED
            raise EnrichmentError(record.name, e, partial=enriched) from e
        enriched.state = EnrichmentState.CHECKSUM_COMPUTED

        enriched.state = EnrichmentState.SUBPACKAGES_RESOLVING
        for subpackage_name in record.subpackage_names:
            try:
                sub_package = fetch_subpackage_manifest(
                    subpackage_name,
                    record.source.version,
                    record.source.url,
                    client=self.client,
                    raw_host=self.settings.raw_host,
                    strict=self.settings.strict_manifests,
                )
            except RosVoidError as e:
                enriched.state = EnrichmentState.FAILED
                raise EnrichmentError(record.name, e, partial=enriched) from e
            enriched.sub_packages.append(sub_package)

        enriched.state = EnrichmentState.ENRICHED
        return enriched

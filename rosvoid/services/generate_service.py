"""
Generation service for rosvoid.

Fans the enrich → render pipeline out over catalog repositories. Each
repository runs as one independent task; failures are reported per
repository and never stop sibling tasks.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Generator, Iterable, Optional

from ..config import Settings
from ..domain import Catalog, RepositoryRecord
from ..errors import RosVoidError
from ..infra import HttpClient
from ..recipe import RecipeRenderer
from .enrichment_service import EnrichmentService

logger = logging.getLogger(__name__)


class GenerationStatus(Enum):
    RENDERED = "rendered"
    NO_RELEASE = "no_release"
    FAILED = "failed"


@dataclass
class GenerationResult:
    """Outcome of the pipeline for one repository."""
    name: str
    status: GenerationStatus
    path: Optional[Path] = None
    error: Optional[str] = None
    sub_packages: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'status': self.status.value,
            'path': str(self.path) if self.path else None,
            'error': self.error,
            'sub_packages': self.sub_packages,
        }


class GenerateService:
    """
    Service that produces recipes for catalog repositories.

    Example:
        service = GenerateService(settings)
        for result in service.generate(catalog):
            print(result.name, result.status.value)
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[HttpClient] = None,
        renderer: Optional[RecipeRenderer] = None,
    ):
        """
        Initialize GenerateService.

        Args:
            settings: Effective run settings
            client: HTTP client shared by all tasks (creates default if None)
            renderer: Recipe renderer (creates default if None)
        """
        self.settings = settings
        self.client = client or HttpClient(
            timeout=settings.timeout, user_agent=settings.user_agent
        )
        self.enricher = EnrichmentService(settings, self.client)
        self.renderer = renderer or RecipeRenderer(settings)

    def process(self, record: RepositoryRecord) -> GenerationResult:
        """
        Run the full pipeline for one repository.

        Never raises for repository-level failures; they are logged and
        returned as a FAILED result.
        """
        try:
            enriched = self.enricher.enrich(record)
            if enriched is None:
                return GenerationResult(record.name, GenerationStatus.NO_RELEASE)
            path = self.renderer.render(enriched, self.settings.output_path)
        except RosVoidError as e:
            logger.error(f"ERROR AT {record.name}: {e}")
            return GenerationResult(record.name, GenerationStatus.FAILED, error=str(e))
        except Exception as e:
            logger.error(f"ERROR AT {record.name}: unexpected {type(e).__name__}: {e}")
            logger.debug("Traceback:", exc_info=True)
            return GenerationResult(record.name, GenerationStatus.FAILED,
                                    error=f"{type(e).__name__}: {e}")

        return GenerationResult(
            record.name,
            GenerationStatus.RENDERED,
            path=path,
            sub_packages=len(enriched.sub_packages),
        )

    def generate(
        self,
        catalog: Catalog,
        package: Optional[str] = None,
    ) -> Generator[GenerationResult, None, None]:
        """
        Generate recipes for the catalog, or only for ``package``.

        Args:
            catalog: Decoded catalog
            package: Single repository name; yields nothing if not in the catalog

        Yields:
            GenerationResult per repository, in completion order
        """
        if package:
            logger.info(f"Single mode: generating {package}")
            record = catalog.get(package)
            if record is None:
                logger.warning(f"{package} not found in catalog")
                return
            yield self.process(record)
            return

        yield from self.generate_all(catalog.repositories.values())

    def generate_all(self, records: Iterable[RepositoryRecord]) -> Generator[GenerationResult, None, None]:
        """Run one task per record and wait for all of them."""
        records = list(records)
        if not records:
            return

        workers = max(1, min(self.settings.max_workers, len(records)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self.process, r): r for r in records}

            for future in as_completed(futures):
                yield future.result()

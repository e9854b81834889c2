#!/usr/bin/env python3
"""
Distribution catalog retrieval.

The catalog is a rosdistro distribution.yaml: a mapping with a
``repositories`` section plus distribution metadata.
"""

from typing import Any, Optional

import yaml

from .config import logger
from .domain import Catalog
from .errors import DecodeError
from .infra import HttpClient

NUMERIC_TAGS = frozenset({'tag:yaml.org,2002:int', 'tag:yaml.org,2002:float'})


class CatalogLoader(yaml.SafeLoader):
    """SafeLoader that keeps numeric-looking scalars as text.

    Versions such as ``1.10`` must not collapse to the float ``1.1``.
    """


CatalogLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in NUMERIC_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _require(value: Any, kind: type, what: str, source: Optional[str]) -> None:
    """Raise DecodeError unless ``value`` is None or a ``kind``."""
    if value is not None and not isinstance(value, kind):
        raise DecodeError(f"Catalog {what} must be a {kind.__name__}", source)


def _check_repository(name: str, entry: dict, source: Optional[str]) -> None:
    for section in ('release', 'source', 'doc'):
        _require(entry.get(section), dict, f"{name!r} {section}", source)

    release = entry.get('release') or {}
    _require(release.get('packages'), list, f"{name!r} release packages", source)
    _require(release.get('tags'), dict, f"{name!r} release tags", source)


def decode_catalog(body: bytes, source: Optional[str] = None) -> Catalog:
    """Decode raw distribution file bytes into a Catalog."""
    try:
        data = yaml.load(body, Loader=CatalogLoader)
    except yaml.YAMLError as e:
        raise DecodeError(f"Catalog is not valid YAML: {e}", source) from e

    if not isinstance(data, dict):
        raise DecodeError("Catalog must be a mapping", source)

    _require(data.get('release_platforms'), dict, "'release_platforms'", source)
    for os_name, versions in (data.get('release_platforms') or {}).items():
        _require(versions, list, f"release platform {os_name!r}", source)

    repositories = data.get('repositories')
    _require(repositories, dict, "'repositories'", source)

    for name, entry in (repositories or {}).items():
        _require(entry, dict, f"entry {name!r}", source)
        if entry:
            _check_repository(name, entry, source)

    return Catalog.from_dict(data)


def fetch_catalog(url: str, client: Optional[HttpClient] = None) -> Catalog:
    """
    Retrieve and decode the catalog at ``url``.

    Raises:
        FetchError: If the catalog cannot be retrieved
        DecodeError: If it is not a valid distribution file
    """
    client = client or HttpClient()
    body = client.fetch(url)
    catalog = decode_catalog(body, source=url)
    logger.debug(f"Catalog {url}: {len(catalog)} repositories")
    return catalog

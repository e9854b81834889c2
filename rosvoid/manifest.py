#!/usr/bin/env python3
"""
package.xml manifest retrieval and decoding.

Manifests are read from the raw-content host of the repository named in
a catalog entry's source URL:

    <raw host>/<owner>/<repo>/<version>/<sub-package>/package.xml
"""

import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urlsplit

from .config import logger
from .domain import SubPackage
from .errors import DecodeError, InvalidSourceURLError
from .infra import HttpClient

DEFAULT_RAW_HOST = "https://raw.githubusercontent.com"
MANIFEST_FILENAME = "package.xml"


def parse_source_url(url: str) -> str:
    """
    Extract ``owner/repo`` from a source URL.

    Grammar::

        url     := scheme "://" host ["/" segment]* "/" repo [".git"] ["/"]
        segment := one or more characters other than "/"
        repo    := segment, not just ".git"

    The owner is the segment right before ``repo``; for single-segment
    paths (``https://host/repo.git``) that is the host itself.

    >>> parse_source_url("https://github.com/ros/ros_comm.git")
    'ros/ros_comm'

    Raises:
        InvalidSourceURLError: If ``url`` does not follow the grammar
    """
    if not url:
        raise InvalidSourceURLError(url, "empty URL")

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidSourceURLError(url, str(e)) from e
    if not parts.scheme or not parts.netloc:
        raise InvalidSourceURLError(url, "missing scheme or host")
    if parts.query or parts.fragment:
        raise InvalidSourceURLError(url, "unexpected query or fragment")

    path = parts.path.strip('/')
    if not path:
        raise InvalidSourceURLError(url, "missing repository path")
    segments = [parts.netloc] + path.split('/')
    if any(not segment for segment in segments):
        raise InvalidSourceURLError(url, "empty path segment")

    owner, repo = segments[-2:]
    if repo.endswith('.git'):
        repo = repo[:-len('.git')]
    if not repo:
        raise InvalidSourceURLError(url, "empty repository name")

    return f"{owner}/{repo}"


def manifest_url(subpackage_name: str, version: str, source_url: str,
                 raw_host: str = DEFAULT_RAW_HOST) -> str:
    """Build the raw-content URL of a sub-package's package.xml."""
    repo = parse_source_url(source_url)
    return f"{raw_host.rstrip('/')}/{repo}/{version}/{subpackage_name}/{MANIFEST_FILENAME}"


def _unique(values: Iterable[str]) -> Tuple[str, ...]:
    """Drop duplicates, keeping first-seen order."""
    seen: List[str] = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return tuple(seen)


def _text(element: Optional[ET.Element]) -> str:
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def decode_manifest(body: bytes, fallback_name: str, strict: bool = False,
                    source: Optional[str] = None) -> SubPackage:
    """
    Decode package.xml bytes into a SubPackage.

    Only ``name``, ``description``, ``buildtool_depend`` and
    ``run_depend`` are read. When the XML cannot be parsed, strict mode
    raises DecodeError; lenient mode logs a warning and returns an empty
    record named ``fallback_name``.
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        if strict:
            raise DecodeError(f"Malformed manifest: {e}", source) from e
        logger.warning(f"Ignoring malformed manifest {source or fallback_name}: {e}")
        return SubPackage(name=fallback_name)

    return SubPackage(
        name=_text(root.find('name')) or fallback_name,
        description=_text(root.find('description')),
        build_dependencies=_unique(_text(e) for e in root.findall('buildtool_depend')),
        run_dependencies=_unique(_text(e) for e in root.findall('run_depend')),
    )


def fetch_subpackage_manifest(subpackage_name: str, version: str, source_url: str,
                              client: Optional[HttpClient] = None,
                              raw_host: str = DEFAULT_RAW_HOST,
                              strict: bool = False) -> SubPackage:
    """
    Fetch and decode the manifest for one sub-package.

    Raises:
        InvalidSourceURLError: If ``source_url`` is not an owner/repo URL
        FetchError: If the manifest cannot be retrieved
        DecodeError: In strict mode, if the manifest is malformed
    """
    url = manifest_url(subpackage_name, version, source_url, raw_host)
    client = client or HttpClient()
    body = client.fetch(url)
    return decode_manifest(body, subpackage_name, strict=strict, source=url)

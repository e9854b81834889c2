#!/usr/bin/env python3
"""
Release tarball location and checksum.

Release repositories publish one tag per package and version, which the
hosting service exposes as ``<repo>/archive/<tag>.tar.gz``.
"""

from typing import Optional

from .infra import HttpClient

DEFAULT_DISTRO = "melodic"


def derive_tarball_url(name: str, version: str, release_url: str,
                       distro: str = DEFAULT_DISTRO) -> str:
    """
    Build the release tarball URL for ``name`` at ``version``.

    >>> derive_tarball_url("foo", "1.0.0-1", "https://github.com/ros-gbp/foo-release.git")
    'https://github.com/ros-gbp/foo-release/archive/release/melodic/foo/1.0.0-1.tar.gz'
    """
    base = release_url[:-len('.git')] if release_url.endswith('.git') else release_url
    return f"{base}/archive/release/{distro}/{name}/{version}.tar.gz"


def compute_checksum(tarball_url: str, client: Optional[HttpClient] = None) -> str:
    """
    Download the tarball and return its lowercase hex SHA-256.

    Raises:
        FetchError: If the tarball cannot be retrieved
    """
    client = client or HttpClient()
    return client.sha256(tarball_url)

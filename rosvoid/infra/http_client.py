"""
HTTP client infrastructure for rosvoid.

Provides the single "fetch bytes from URL" capability the pipeline needs:
- fetch() returns a whole response body
- sha256() streams a (possibly large) body through a digest

Any transport failure or non-2xx status surfaces as FetchError. There is
no retry or backoff.
"""

import hashlib
import logging
from typing import Optional

import requests

from ..errors import FetchError

logger = logging.getLogger(__name__)

# Chunk size used when streaming tarballs
CHUNK_SIZE = 64 * 1024


class HttpClient:
    """
    Thin wrapper around a requests.Session.

    Example:
        client = HttpClient(timeout=30)
        body = client.fetch("https://example.com/file.yaml")
    """

    def __init__(self, timeout: Optional[float] = None, user_agent: str = "rosvoid",
                 session: Optional[requests.Session] = None):
        """
        Initialize HttpClient.

        Args:
            timeout: Request timeout in seconds (None waits indefinitely)
            user_agent: User-Agent header sent with every request
            session: Optional pre-built session (useful for testing)
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': user_agent})

    def fetch(self, url: str) -> bytes:
        """
        Retrieve the full body at ``url``.

        Raises:
            FetchError: On connection failure or a non-2xx response
        """
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, e) from e
        return response.content

    def sha256(self, url: str) -> str:
        """
        Stream the body at ``url`` and return its lowercase hex SHA-256.

        Raises:
            FetchError: On connection failure or a non-2xx response
        """
        logger.debug(f"GET (digest) {url}")
        digest = hashlib.sha256()
        try:
            with self.session.get(url, timeout=self.timeout, stream=True) as response:
                response.raise_for_status()
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    digest.update(chunk)
        except requests.RequestException as e:
            raise FetchError(url, e) from e
        return digest.hexdigest()

    def close(self) -> None:
        self.session.close()

"""
Infrastructure layer for rosvoid.

Contains abstractions for external systems:
- HttpClient: byte retrieval and streamed digests over HTTP(S)

These provide clean interfaces that can be mocked for testing.
"""

from .http_client import HttpClient

__all__ = [
    'HttpClient',
]

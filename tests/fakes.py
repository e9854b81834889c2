"""
Test doubles shared by the rosvoid tests.

FakeSession stands in for requests.Session: it serves canned bodies by
URL and records every request made.
"""

import threading
from pathlib import Path

import requests

from rosvoid.config import Settings
from rosvoid.infra import HttpClient


class FakeResponse:
    def __init__(self, url, body=b"", status_code=200):
        self.url = url
        self.content = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} for url: {self.url}")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeSession:
    """Serves ``routes`` (url -> bytes or exception); anything else is a 404."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.headers = {}
        self.requests = []
        self._lock = threading.Lock()

    def get(self, url, timeout=None, stream=False):
        with self._lock:
            self.requests.append(url)
        body = self.routes.get(url)
        if isinstance(body, Exception):
            raise body
        if body is None:
            return FakeResponse(url, b"404: Not Found", status_code=404)
        return FakeResponse(url, body)

    def close(self):
        pass


def fake_client(routes=None):
    """HttpClient backed by a FakeSession."""
    return HttpClient(session=FakeSession(routes))


def make_settings(output_path=".", **overrides):
    values = dict(
        catalog_url="https://example.com/melodic/distribution.yaml",
        distro="melodic",
        prefix="ros-melodic",
        python_version="3.6",
        raw_host="https://raw.example.com",
        output_path=Path(output_path),
        recipe_name="template",
        maintainer="Jane Doe <jane@example.com>",
        license="BSD-3-Clause",
        max_workers=4,
    )
    values.update(overrides)
    return Settings(**values)


def package_xml(name, description="", buildtool=(), run=()):
    lines = ['<?xml version="1.0"?>', '<package format="1">', f"  <name>{name}</name>",
             "  <version>1.0.0</version>", f"  <description>{description}</description>"]
    lines += [f"  <buildtool_depend>{d}</buildtool_depend>" for d in buildtool]
    lines += [f"  <run_depend>{d}</run_depend>" for d in run]
    lines.append("</package>")
    return "\n".join(lines).encode("utf-8")

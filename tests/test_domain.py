"""Tests for the domain layer."""

import dataclasses

import pytest

from rosvoid.domain import (
    Catalog,
    EnrichedRepository,
    EnrichmentState,
    RepositoryRecord,
    SubPackage,
)


def record(**release):
    data = {'source': {'url': 'https://github.com/example/foo.git', 'version': 'master'}}
    if release:
        data['release'] = release
    return RepositoryRecord.from_dict("foo", data)


class TestRepositoryRecord:
    """Tests for RepositoryRecord domain object."""

    def test_has_release(self):
        assert record(url="https://github.com/ros-gbp/foo-release.git", version="1.0.0-0").has_release

    def test_empty_release_url(self):
        assert not record(url="", version="1.0.0-0").has_release

    def test_missing_release(self):
        rec = record()
        assert rec.release is None
        assert not rec.has_release

    def test_numeric_version_becomes_string(self):
        rec = record(url="https://x/foo.git", version=1.0)
        assert rec.release.version == "1.0"

    def test_subpackage_names_explicit(self):
        rec = record(url="https://x/foo.git", version="1", packages=["a", "b"])
        assert rec.subpackage_names == ["a", "b"]

    def test_subpackage_names_implicit(self):
        assert record(url="https://x/foo.git", version="1").subpackage_names == ["foo"]

    def test_frozen(self):
        rec = record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            rec.name = "bar"


class TestEnrichedRepository:
    """Tests for EnrichedRepository."""

    def test_primary_and_extra(self):
        enriched = EnrichedRepository(
            record=record(url="https://x/foo.git", version="1"),
            sub_packages=[SubPackage("a"), SubPackage("b"), SubPackage("c")],
            state=EnrichmentState.ENRICHED,
        )
        assert enriched.primary.name == "a"
        assert [sp.name for sp in enriched.extra_packages] == ["b", "c"]
        assert enriched.is_renderable

    def test_not_renderable_until_enriched(self):
        enriched = EnrichedRepository(record=record(url="https://x/foo.git", version="1"),
                                      sub_packages=[SubPackage("a")])
        assert enriched.state is EnrichmentState.PENDING
        assert not enriched.is_renderable

    def test_not_renderable_without_subpackages(self):
        enriched = EnrichedRepository(record=record(url="https://x/foo.git", version="1"),
                                      state=EnrichmentState.ENRICHED)
        assert not enriched.is_renderable

    def test_to_dict(self):
        enriched = EnrichedRepository(
            record=record(url="https://x/foo.git", version="1"),
            checksum="00" * 32,
            sub_packages=[SubPackage("a", "desc", ("catkin",), ("roscpp",))],
            state=EnrichmentState.ENRICHED,
        )
        data = enriched.to_dict()
        assert data['state'] == "enriched"
        assert data['sub_packages'][0] == {
            'name': "a",
            'description': "desc",
            'build_dependencies': ["catkin"],
            'run_dependencies': ["roscpp"],
        }


class TestCatalog:
    """Tests for Catalog."""

    def test_from_dict(self):
        catalog = Catalog.from_dict({
            'repositories': {
                'foo': {'release': {'url': 'https://x/foo.git', 'version': '1'}},
                'bar': None,
            },
            'type': 'distribution',
            'version': 2,
        })
        assert len(catalog) == 2
        assert "foo" in catalog
        assert catalog.get("bar").name == "bar"
        assert not catalog.get("bar").has_release
        assert catalog.version == "2"

    def test_get_missing(self):
        assert Catalog.from_dict({}).get("nothing") is None

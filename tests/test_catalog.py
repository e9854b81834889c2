"""
Unit tests for rosvoid.catalog and the catalog domain objects
"""
import unittest

from rosvoid.catalog import decode_catalog, fetch_catalog
from rosvoid.errors import DecodeError, FetchError
from tests.fakes import fake_client

CATALOG_URL = "https://example.com/melodic/distribution.yaml"

SAMPLE_DISTRIBUTION = b"""
release_platforms:
  debian:
  - stretch
  ubuntu:
  - bionic
repositories:
  roscpp_core:
    doc:
      type: git
      url: https://github.com/ros/roscpp_core.git
      version: kinetic-devel
    release:
      packages:
      - cpp_common
      - roscpp_serialization
      - roscpp_traits
      - rostime
      tags:
        release: release/melodic/{package}/{version}
      url: https://github.com/ros-gbp/roscpp_core-release.git
      version: 0.6.13-1
    source:
      type: git
      url: https://github.com/ros/roscpp_core.git
      version: kinetic-devel
    status: maintained
  single:
    release:
      tags:
        release: release/melodic/{package}/{version}
      url: https://github.com/ros-gbp/single-release.git
      version: 1.0.0-0
    source:
      type: git
      url: https://github.com/example/single.git
      version: master
  doc_only:
    doc:
      type: git
      url: https://github.com/example/doc_only.git
      version: master
type: distribution
version: 2
"""


class TestDecodeCatalog(unittest.TestCase):

    def setUp(self):
        self.catalog = decode_catalog(SAMPLE_DISTRIBUTION)

    def test_repositories(self):
        self.assertEqual(len(self.catalog), 3)
        self.assertIn("roscpp_core", self.catalog)
        self.assertIsNone(self.catalog.get("missing"))

    def test_metadata(self):
        self.assertEqual(self.catalog.type, "distribution")
        self.assertEqual(self.catalog.version, "2")
        self.assertEqual(self.catalog.release_platforms, {"debian": ["stretch"], "ubuntu": ["bionic"]})

    def test_release_record(self):
        record = self.catalog.get("roscpp_core")
        self.assertEqual(record.name, "roscpp_core")
        self.assertEqual(record.release.version, "0.6.13-1")
        self.assertEqual(record.release.url, "https://github.com/ros-gbp/roscpp_core-release.git")
        self.assertEqual(
            record.subpackage_names,
            ["cpp_common", "roscpp_serialization", "roscpp_traits", "rostime"],
        )
        self.assertEqual(dict(record.release.tags), {"release": "release/melodic/{package}/{version}"})
        self.assertEqual(record.source.version, "kinetic-devel")
        self.assertEqual(record.doc.url, "https://github.com/ros/roscpp_core.git")
        self.assertEqual(record.status, "maintained")
        self.assertTrue(record.has_release)

    def test_implicit_single_package(self):
        record = self.catalog.get("single")
        self.assertEqual(record.subpackage_names, ["single"])
        self.assertIsNone(record.doc)

    def test_repository_without_release(self):
        record = self.catalog.get("doc_only")
        self.assertIsNone(record.release)
        self.assertFalse(record.has_release)
        self.assertEqual(record.source.url, "")

    def test_to_dict(self):
        data = self.catalog.get("single").to_dict()
        self.assertEqual(data["name"], "single")
        self.assertEqual(data["release"]["packages"], [])
        self.assertEqual(data["source"]["version"], "master")

    def test_invalid_yaml(self):
        with self.assertRaises(DecodeError):
            decode_catalog(b"repositories: [unclosed")

    def test_not_a_mapping(self):
        with self.assertRaises(DecodeError):
            decode_catalog(b"- just\n- a list\n")

    def test_bad_repository_entry(self):
        with self.assertRaises(DecodeError):
            decode_catalog(b"repositories:\n  foo: not-a-mapping\n")

    def test_nested_shapes_validated(self):
        bad_documents = [
            b"release_platforms: [ubuntu]\nrepositories: {}\n",
            b"release_platforms:\n  ubuntu: bionic\n",
            b"repositories:\n  foo:\n    release: [x]\n",
            b"repositories:\n  foo:\n    source: https://github.com/x/foo.git\n",
            b"repositories:\n  foo:\n    release:\n      tags: [x]\n",
            b"repositories:\n  foo:\n    release:\n      packages: foo_core\n",
        ]
        for body in bad_documents:
            with self.subTest(body=body):
                with self.assertRaises(DecodeError):
                    decode_catalog(body)

    def test_versions_keep_their_text(self):
        catalog = decode_catalog(
            b"repositories:\n"
            b"  foo:\n"
            b"    release:\n"
            b"      url: https://github.com/ros-gbp/foo-release.git\n"
            b"      version: 1.10\n"
            b"    source:\n"
            b"      url: https://github.com/example/foo.git\n"
            b"      version: 2.0\n"
        )
        record = catalog.get("foo")
        self.assertEqual(record.release.version, "1.10")
        self.assertEqual(record.source.version, "2.0")

    def test_empty_repositories(self):
        self.assertEqual(len(decode_catalog(b"type: distribution\n")), 0)


class TestFetchCatalog(unittest.TestCase):

    def test_fetch(self):
        client = fake_client({CATALOG_URL: SAMPLE_DISTRIBUTION})
        catalog = fetch_catalog(CATALOG_URL, client)
        self.assertEqual(len(catalog), 3)

    def test_fetch_failure(self):
        with self.assertRaises(FetchError):
            fetch_catalog(CATALOG_URL, fake_client())

    def test_decode_failure(self):
        client = fake_client({CATALOG_URL: b"{{{{"})
        with self.assertRaises(DecodeError):
            fetch_catalog(CATALOG_URL, client)


if __name__ == '__main__':
    unittest.main()

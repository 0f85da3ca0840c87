"""Tests for the repository hunt orchestration."""

import asyncio
import logging

import pytest

from common.http_client import HttpFetchError
from registry.hunt.client import get_releases, hunt_registries, search_roots
from versioning.parser import parse_package_identifier

REPO = "https://repo.example.org/maven2"
NESTED_ROOT = f"{REPO}/org/example"
FLAT_ROOT = f"{REPO}/org.example"

POM = """<project xmlns="http://maven.apache.org/POM/4.0.0">
  <url>https://example.org/foo</url>
  <scm><url>scm:git:git@github.com:example/foo.git</url></scm>
</project>"""


class TestSearchRoots:
    """Test search_roots function."""

    def test_nested_layout_first(self):
        package = parse_package_identifier("org.example:foo_2.13")

        assert search_roots(REPO, package) == [NESTED_ROOT, FLAT_ROOT]

    def test_registry_with_trailing_slash(self):
        package = parse_package_identifier("org.example:foo")

        assert search_roots(f"{REPO}/", package) == [NESTED_ROOT, FLAT_ROOT]


class TestGetReleases:
    """Test get_releases end to end against a fake transport."""

    def test_nested_root_wins(self, make_transport, make_listing):
        """The first root with versions short-circuits the flat root."""
        transport = make_transport({
            f"{NESTED_ROOT}/": make_listing("foo_2.12", "foo_2.13", "foo_sjs1_2.13"),
            f"{NESTED_ROOT}/foo_2.13/": make_listing("..", "1.0", "1.2", "1.10"),
            f"{NESTED_ROOT}/foo_2.13/1.10/foo_2.13-1.10.pom": POM,
        })

        result = asyncio.run(get_releases(transport, "org.example:foo_2.13", REPO))

        assert result is not None
        assert result.versions == ("1.0", "1.2", "1.10")
        assert [r.version for r in result.releases] == ["1.0", "1.2", "1.10"]
        assert result.dependency_url == NESTED_ROOT
        assert result.homepage == "https://example.org/foo"
        assert result.source_url == "https://github.com/example/foo"
        assert not any(url.startswith(FLAT_ROOT) for url in transport.calls)

    def test_falls_back_to_flat_root(self, make_transport, make_listing):
        """Metadata is only fetched from the root that produced versions."""
        transport = make_transport({
            f"{FLAT_ROOT}/": make_listing("foo"),
            f"{FLAT_ROOT}/foo/": make_listing("1.0", "2.0"),
            f"{FLAT_ROOT}/foo/2.0/foo-2.0.pom": POM,
        })

        result = asyncio.run(get_releases(transport, "org.example:foo", REPO))

        assert result.dependency_url == FLAT_ROOT
        assert result.versions == ("1.0", "2.0")
        assert result.homepage == "https://example.org/foo"
        nested_calls = [url for url in transport.calls if url.startswith(f"{NESTED_ROOT}/")]
        assert nested_calls == [f"{NESTED_ROOT}/"]

    def test_reachable_root_without_artifact_falls_through(self, make_transport, make_listing):
        transport = make_transport({
            f"{NESTED_ROOT}/": make_listing("other"),
            f"{FLAT_ROOT}/": make_listing("foo"),
            f"{FLAT_ROOT}/foo/": make_listing("0.1"),
        })

        result = asyncio.run(get_releases(transport, "org.example:foo", REPO))

        assert result.dependency_url == FLAT_ROOT
        assert result.versions == ("0.1",)
        assert result.homepage is None and result.source_url is None

    def test_nothing_found_returns_none_and_logs(self, make_transport, caplog):
        """Total absence is None with an informational note, not an error."""
        transport = make_transport()

        with caplog.at_level(logging.INFO, logger="registry.hunt.client"):
            result = asyncio.run(get_releases(transport, "org.example:foo", REPO))

        assert result is None
        assert transport.calls == [f"{NESTED_ROOT}/", f"{FLAT_ROOT}/"]
        assert "No versions found for org.example:foo in 2 repositories" in caplog.text

    def test_fault_on_subdir_fetch_propagates(self, make_transport, make_listing):
        """Transport faults escape instead of becoming a not-found result."""
        transport = make_transport({
            f"{NESTED_ROOT}/": make_listing("foo"),
            f"{NESTED_ROOT}/foo/": HttpFetchError(f"{NESTED_ROOT}/foo/", "HTTP 500", status=500),
            f"{FLAT_ROOT}/": make_listing("foo"),
            f"{FLAT_ROOT}/foo/": make_listing("1.0"),
        })

        with pytest.raises(HttpFetchError):
            asyncio.run(get_releases(transport, "org.example:foo", REPO))
        assert f"{FLAT_ROOT}/" not in transport.calls

    def test_missing_registry_url(self, make_transport):
        transport = make_transport()

        assert asyncio.run(get_releases(transport, "org.example:foo", None)) is None
        assert transport.calls == []

    def test_invalid_lookup_name(self, make_transport):
        with pytest.raises(ValueError):
            asyncio.run(get_releases(make_transport(), "no-colon", REPO))


class TestHuntRegistries:
    """Test hunt_registries function."""

    def test_second_registry_answers(self, make_transport, make_listing):
        mirror = "https://mirror.example.net/releases"
        transport = make_transport({
            f"{mirror}/org/example/": make_listing("foo"),
            f"{mirror}/org/example/foo/": make_listing("1.0"),
        })

        result = asyncio.run(hunt_registries(transport, "org.example:foo", [REPO, mirror]))

        assert result.dependency_url == f"{mirror}/org/example"
        assert transport.calls[:2] == [f"{NESTED_ROOT}/", f"{FLAT_ROOT}/"]

    def test_no_registry_knows_package(self, make_transport):
        result = asyncio.run(hunt_registries(make_transport(), "org.example:foo", [REPO]))

        assert result is None

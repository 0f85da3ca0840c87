"""Repository hunt: locate a package under candidate roots and report its releases."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from versioning.maven_compare import compare as maven_compare
from versioning.models import PackageIdentifier, ReleaseResult
from versioning.parser import parse_package_identifier

from .discovery import (
    Comparator,
    ensure_trailing_slash,
    get_artifact_subdirs,
    get_latest_version,
    get_package_releases,
    get_urls,
)
from .fallback import first_result

logger = logging.getLogger(__name__)


def search_roots(registry_url: str, package: PackageIdentifier) -> List[str]:
    """Candidate roots for ``package``: slash-joined group first, then dot-joined."""
    repo_root = ensure_trailing_slash(registry_url)
    return [
        f"{repo_root}{'/'.join(package.group_segments)}",
        f"{repo_root}{'.'.join(package.group_segments)}",
    ]


async def _search_root(
    transport,
    search_root: str,
    package: PackageIdentifier,
    compare: Comparator,
) -> Optional[ReleaseResult]:
    """Run the discovery pipeline against one root."""
    artifact_subdirs = await get_artifact_subdirs(
        transport, search_root, package.artifact, package.platform_suffix
    )
    versions = await get_package_releases(transport, search_root, artifact_subdirs, compare)
    if versions is None:
        return None

    latest_version = get_latest_version(versions, compare)
    urls = await get_urls(transport, search_root, artifact_subdirs, latest_version)
    return ReleaseResult(
        versions=tuple(versions),
        dependency_url=search_root,
        homepage=urls.homepage,
        source_url=urls.source_url,
    )


async def get_releases(
    transport,
    lookup_name: str,
    registry_url: Optional[str],
    compare: Comparator = maven_compare,
) -> Optional[ReleaseResult]:
    """Find releases of ``lookup_name`` (``group:artifact[_suffix]``) under ``registry_url``.

    Args:
        transport: Object exposing ``async fetch(url) -> FetchResult``.
        lookup_name: Package identifier.
        registry_url: Repository base URL.
        compare: Version ordering used to sort and pick the latest version.

    Returns:
        ReleaseResult from the first root holding versions, or None.

    Raises:
        ValueError: for a malformed ``lookup_name``.
        HttpFetchError: when the repository cannot be reached.
        DescriptorParseError: when the chosen descriptor is malformed.
    """
    if not registry_url:
        return None

    package = parse_package_identifier(lookup_name)
    roots = search_roots(registry_url, package)

    with Timer() as t:
        result = await first_result(
            roots, lambda root: _search_root(transport, root, package, compare)
        )

    if result is None:
        logger.info(
            "No versions found for %s in %d repositories",
            lookup_name,
            len(roots),
            extra=extra_context(
                event="function_exit",
                component="hunt",
                action="get_releases",
                outcome="not_found",
                duration_ms=t.duration_ms(),
            ),
        )
        return None

    if is_debug_enabled(logger):
        logger.debug(
            "Releases found",
            extra=extra_context(
                event="function_exit",
                component="hunt",
                action="get_releases",
                outcome="found",
                target=safe_url(result.dependency_url),
                count=len(result.versions),
                duration_ms=t.duration_ms(),
            ),
        )
    return result


async def hunt_registries(
    transport,
    lookup_name: str,
    registry_urls: Sequence[str],
    compare: Comparator = maven_compare,
) -> Optional[ReleaseResult]:
    """Try each registry in order and return the first that knows ``lookup_name``."""
    return await first_result(
        registry_urls,
        lambda registry_url: get_releases(transport, lookup_name, registry_url, compare),
    )

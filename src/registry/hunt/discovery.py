"""Hunt pipeline stages: subdirectory discovery, version collection and metadata lookup.

Every network step goes through the transport's ``fetch(url)`` and is awaited
one at a time. A missing body means "nothing here" and the stage moves on;
transport exceptions are left to propagate.
"""
from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from versioning.maven_compare import compare as maven_compare
from versioning.models import ProjectUrls

from .descriptor import PomDescriptor, normalize_scm_url
from .fallback import first_result
from .listing import is_dots, parse_index_dir

logger = logging.getLogger(__name__)

Comparator = Callable[[str, str], int]


def ensure_trailing_slash(url: str) -> str:
    """Append "/" unless already present."""
    return url if url.endswith("/") else f"{url}/"


def _is_artifact_subdir(name: str, artifact: str) -> bool:
    """Decide whether listing entry ``name`` holds builds of ``artifact``."""
    if name == artifact:
        return True
    if name.startswith(f"{artifact}_native"):
        return False
    if name.startswith(f"{artifact}_sjs"):
        return False
    return name.startswith(f"{artifact}_")


async def get_artifact_subdirs(
    transport,
    search_root: str,
    artifact: str,
    platform_suffix: Optional[str] = None,
) -> Optional[List[str]]:
    """List the subdirectories of ``search_root`` holding ``artifact`` builds.

    Cross-build variants (``artifact_<suffix>``) are included, native and
    Scala.js variants are not. When ``platform_suffix`` names a variant that
    is present, only that variant is returned.

    Returns:
        Matched names in listing order; an empty list when the root listing
        has no match; None when the root listing itself is absent.
    """
    result = await transport.fetch(ensure_trailing_slash(search_root))
    if not result.body:
        return None

    subdirs = parse_index_dir(result.body, lambda x: _is_artifact_subdir(x, artifact))
    if platform_suffix:
        exact = f"{artifact}_{platform_suffix}"
        if exact in subdirs:
            subdirs = [exact]

    if is_debug_enabled(logger):
        logger.debug(
            "Artifact subdirectories discovered",
            extra=extra_context(
                event="decision",
                component="discovery",
                action="get_artifact_subdirs",
                target=safe_url(search_root),
                count=len(subdirs),
            ),
        )
    return subdirs


async def get_package_releases(
    transport,
    search_root: str,
    artifact_subdirs: Optional[Sequence[str]],
    compare: Comparator = maven_compare,
) -> Optional[List[str]]:
    """Collect version directories under each artifact subdirectory.

    Returns:
        Deduplicated versions sorted ascending by ``compare``, or None when
        no subdirectory yielded any version.
    """
    if not artifact_subdirs:
        return None

    releases: List[str] = []
    for subdir in artifact_subdirs:
        result = await transport.fetch(ensure_trailing_slash(f"{search_root}/{subdir}"))
        if result.body:
            releases.extend(parse_index_dir(result.body, lambda x: not is_dots(x)))

    if not releases:
        return None

    unique: Dict[str, None] = dict.fromkeys(releases)
    return sorted(unique, key=cmp_to_key(compare))


def get_latest_version(
    versions: Optional[Sequence[str]],
    compare: Comparator = maven_compare,
) -> Optional[str]:
    """Return the greatest version, keeping the earliest one among equals."""
    if not versions:
        return None
    latest = versions[0]
    for candidate in versions[1:]:
        if compare(candidate, latest) > 0:
            latest = candidate
    return latest


def _descriptor_urls(search_root: str, artifact_dirs: Sequence[str], version: str) -> List[str]:
    """Candidate descriptor URLs in probe order."""
    ext = Constants.DESCRIPTOR_EXT
    urls: List[str] = []
    for artifact_dir in artifact_dirs:
        artifact = artifact_dir.split("_", 1)[0]
        for file_name in (f"{artifact_dir}-{version}.{ext}", f"{artifact}-{version}.{ext}"):
            urls.append(f"{search_root}/{artifact_dir}/{version}/{file_name}")
    return urls


async def get_urls(
    transport,
    search_root: str,
    artifact_dirs: Optional[Sequence[str]],
    version: Optional[str],
) -> ProjectUrls:
    """Read homepage and source URL from the first descriptor found for ``version``.

    Only the first descriptor with a body is parsed, even if it lacks the
    fields. Missing inputs short-circuit without any request.
    """
    urls = ProjectUrls()
    if not artifact_dirs or not version:
        return urls

    async def _probe(url: str) -> Optional[Tuple[str, str]]:
        result = await transport.fetch(url)
        return (url, result.body) if result.body else None

    found = await first_result(_descriptor_urls(search_root, artifact_dirs, version), _probe)
    if found is None:
        return urls

    pom_url, content = found
    pom = PomDescriptor(content)

    homepage = pom.value_with_path("url")
    if homepage:
        urls.homepage = homepage

    source_url = pom.value_with_path("scm.url")
    if source_url:
        urls.source_url = normalize_scm_url(source_url)

    if is_debug_enabled(logger):
        logger.debug(
            "Descriptor parsed",
            extra=extra_context(
                event="parse",
                component="discovery",
                action="get_urls",
                target=safe_url(pom_url),
                homepage_found=bool(urls.homepage),
                source_found=bool(urls.source_url),
            ),
        )
    return urls

"""Release discovery for packages hosted in directory-listing repositories."""
from .client import get_releases, hunt_registries, search_roots
from .descriptor import DescriptorParseError, PomDescriptor, normalize_scm_url
from .discovery import get_artifact_subdirs, get_latest_version, get_package_releases, get_urls
from .fallback import first_result
from .listing import is_dots, parse_index_dir

__all__ = [
    "get_releases",
    "hunt_registries",
    "search_roots",
    "DescriptorParseError",
    "PomDescriptor",
    "normalize_scm_url",
    "get_artifact_subdirs",
    "get_latest_version",
    "get_package_releases",
    "get_urls",
    "first_result",
    "is_dots",
    "parse_index_dir",
]

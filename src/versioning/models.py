"""Data models for package lookup and release results."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class PackageIdentifier:
    """Parsed ``group:artifact[_suffix]`` lookup name."""
    group_segments: Tuple[str, ...]
    artifact: str
    platform_suffix: Optional[str] = None


@dataclass(frozen=True)
class Release:
    """A single published version."""
    version: str


@dataclass
class ProjectUrls:
    """Project metadata recovered from a version descriptor; both fields optional."""
    homepage: Optional[str] = None
    source_url: Optional[str] = None


@dataclass(frozen=True)
class ReleaseResult:
    """Lookup outcome for one package at the repository root that answered."""
    versions: Tuple[str, ...]
    dependency_url: str
    homepage: Optional[str] = None
    source_url: Optional[str] = None

    def __post_init__(self):
        if not self.versions:
            raise ValueError("ReleaseResult requires at least one version")
        object.__setattr__(self, "versions", tuple(self.versions))

    @property
    def releases(self) -> List[Release]:
        """Versions as release records, in ascending order."""
        return [Release(version=v) for v in self.versions]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON export; absent metadata fields are omitted."""
        data: Dict[str, Any] = {
            "dependencyUrl": self.dependency_url,
            "releases": [{"version": r.version} for r in self.releases],
        }
        if self.homepage:
            data["homepage"] = self.homepage
        if self.source_url:
            data["sourceUrl"] = self.source_url
        return data

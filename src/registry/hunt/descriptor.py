"""Project descriptor (POM) parsing and SCM URL normalization."""
from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Optional


class DescriptorParseError(Exception):
    """Raised when a descriptor body is not well-formed XML."""


def _local_name(tag: str) -> str:
    """Drop the ``{namespace}`` prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


class PomDescriptor:
    """Parsed descriptor exposing dotted-path lookups of scalar fields.

    Lookups ignore XML namespaces, so POMs with or without the
    ``http://maven.apache.org/POM/4.0.0`` default namespace behave the same.
    """

    def __init__(self, content: str):
        try:
            self._root = ET.fromstring(content)
        except ET.ParseError as exc:
            raise DescriptorParseError(f"Malformed descriptor: {exc}") from exc

    def value_with_path(self, path: str) -> Optional[str]:
        """Return the text at ``path`` (e.g. ``"scm.url"``) verbatim.

        None when the path does not resolve or the element has no text.
        """
        node = self._root
        for part in path.split("."):
            node = next((child for child in node if _local_name(child.tag) == part), None)
            if node is None:
                return None
        return node.text or None


_SCM_PREFIX = re.compile(r"^scm:")
_GIT_PREFIX = re.compile(r"^git:")
_GITHUB_SSH_PREFIX = re.compile(r"^git@github\.com:")
_GIT_SUFFIX = re.compile(r"\.git$")


def normalize_scm_url(url: str) -> str:
    """Best-effort conversion of an SCM URL to a browsable HTTPS form.

    ``scm:git:git@github.com:org/repo.git`` becomes ``https://github.com/org/repo``.
    Each rewrite applies only when its pattern matches; the result is not validated.
    """
    url = _SCM_PREFIX.sub("", url)
    url = _GIT_PREFIX.sub("", url)
    url = _GITHUB_SSH_PREFIX.sub("https://github.com/", url)
    return _GIT_SUFFIX.sub("", url)

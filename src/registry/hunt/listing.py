"""Directory-listing parsing for HTML index pages served by flat repositories."""
from __future__ import annotations

import re
from typing import Callable, List, Optional

# Anchor targets that end with "/" are subdirectories; the name is the whole href
# before that slash. Hrefs are taken as relative to the listed directory: an absolute
# href such as "/maven2/org/foo/" yields "/maven2/org/foo", not "foo".
_DIR_HREF = re.compile(r"""(?<=href=['"])[^'"]*(?=/['"])""")
_ALL_DOTS = re.compile(r"^\.+$")
_LEADING_DOT = re.compile(r"^\.+")


def is_dots(name: str) -> bool:
    """True for navigation entries made only of dots (``.``, ``..``)."""
    return bool(_ALL_DOTS.match(name))


def parse_index_dir(
    content: str,
    filter_fn: Optional[Callable[[str], bool]] = None,
) -> List[str]:
    """Return directory entry names from listing ``content`` accepted by ``filter_fn``.

    Order of first appearance is preserved and duplicates are kept.
    Without a predicate, entries starting with a dot are skipped.
    """
    if filter_fn is None:
        filter_fn = lambda x: not _LEADING_DOT.match(x)  # noqa: E731
    return [name for name in _DIR_HREF.findall(content or "") if filter_fn(name)]

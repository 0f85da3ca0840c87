"""Shared fixtures for hunt pipeline tests."""

import pytest

from common.http_client import FetchResult


class FakeTransport:
    """In-memory transport: URLs map to bodies or to exceptions to raise.

    Unknown URLs behave like 404s. Every requested URL is recorded in order.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    async def fetch(self, url):
        self.calls.append(url)
        page = self.pages.get(url)
        if isinstance(page, Exception):
            raise page
        return FetchResult(body=page)


def listing(*names):
    """Render a minimal HTML directory index for ``names``."""
    rows = "\n".join(f'<a href="{name}/" title="{name}/">{name}/</a>' for name in names)
    return f"<html><body><pre>\n{rows}\n</pre></body></html>"


@pytest.fixture
def make_transport():
    """Factory fixture building a FakeTransport from a URL -> body mapping."""
    return FakeTransport


@pytest.fixture
def make_listing():
    """Expose the listing renderer to tests."""
    return listing

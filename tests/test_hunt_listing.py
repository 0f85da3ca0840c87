"""Tests for directory listing parsing."""

from registry.hunt.listing import is_dots, parse_index_dir


NEXUS_STYLE = """
<html><body>
<table>
<tr><td><a href="../">Parent Directory</a></td></tr>
<tr><td><a href='1.0/'>1.0/</a></td></tr>
<tr><td><a href="1.1/">1.1/</a></td></tr>
<tr><td><a href="maven-metadata.xml">maven-metadata.xml</a></td></tr>
<tr><td><a href="maven-metadata.xml.sha1">maven-metadata.xml.sha1</a></td></tr>
</table>
</body></html>
"""


class TestParseIndexDir:
    """Test parse_index_dir function."""

    def test_extracts_only_directory_links(self):
        """Files without a trailing slash are not entries."""
        names = parse_index_dir(NEXUS_STYLE, lambda x: not is_dots(x))

        assert names == ["1.0", "1.1"]

    def test_default_filter_skips_dot_entries(self):
        """Without a predicate, dot-prefixed names are dropped."""
        content = '<a href="./">.</a><a href="../">..</a><a href=".hidden/">x</a><a href="2.0/">2.0</a>'

        assert parse_index_dir(content) == ["2.0"]

    def test_predicate_decides_navigation_entries(self):
        """Dot entries survive when the caller's predicate accepts them."""
        content = '<a href="../">..</a><a href="2.0/">2.0</a>'

        assert parse_index_dir(content, lambda x: True) == ["..", "2.0"]

    def test_preserves_order_and_duplicates(self, make_listing):
        """First-seen order is kept and duplicates are not collapsed."""
        content = make_listing("b", "a", "b")

        assert parse_index_dir(content, lambda x: True) == ["b", "a", "b"]

    def test_hrefs_are_taken_verbatim(self):
        """Absolute hrefs keep their full path and are not reduced to a basename."""
        content = '<a href="/maven2/org/foo/">foo/</a><a href="foo_2.13/">foo_2.13/</a>'

        assert parse_index_dir(content, lambda x: True) == ["/maven2/org/foo", "foo_2.13"]

    def test_empty_content(self):
        """Empty or None content yields no entries."""
        assert parse_index_dir("") == []
        assert parse_index_dir(None) == []


class TestIsDots:
    """Test is_dots helper."""

    def test_dot_names(self):
        assert is_dots(".")
        assert is_dots("..")

    def test_regular_names(self):
        assert not is_dots("1.0")
        assert not is_dots(".hidden")
        assert not is_dots("")

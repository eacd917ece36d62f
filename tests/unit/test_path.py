"""tests/unit/test_path.py"""

import pytest

from urlkit.utils.path import split


class TestSplit:
    """Tests for split()."""

    def test_no_argument(self):
        """Test split() without arguments returns no segments."""
        assert split() == []

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("", []),
            ("/", []),
            ("/foo//bar/index.php", ["foo", "", "bar", "index.php"]),
            ("/foo//bar/index.php/", ["foo", "", "bar", "index.php"]),
            ("/api/User/[userId]", ["api", "User", "[userId]"]),
            ("foo", ["foo"]),
        ],
    )
    def test_paths(self, path, expected):
        """Test splitting plain paths."""
        assert split(path) == expected

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("www.example.com/index.php", ["www.example.com", "index.php"]),
            ("localhost:3000/User//", ["localhost:3000", "User", ""]),
            (
                "http://localhost:3000/test/index.php?id=36&a=b#top",
                ["http://localhost:3000", "test", "index.php?id=36&a=b#top"],
            ),
            ("http://example.com", ["http://example.com"]),
            ("http://example.com/a/", ["http://example.com", "a", ""]),
        ],
    )
    def test_urls(self, url, expected):
        """Test splitting full and partial URLs."""
        assert split(url) == expected

    def test_malformed_query_does_not_raise(self):
        """Test split never decodes the query."""
        assert split("http://x/a?q=%zz") == ["http://x", "a?q=%zz"]

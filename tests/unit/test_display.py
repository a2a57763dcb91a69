"""Unit tests for display names and data URI elision."""

import logging

from urlmatch import DisplayNameOptions, elide_data_uri, get_url_display_name
from urlmatch.display import ELLIPSIS, format_display_name
from urlmatch.parsing import parse_url


class TestElideDataURI:
    """Test suite for elide_data_uri."""

    def test_long_data_uri(self):
        """Test long data URIs are cut to 100 characters of the original."""
        url = "data:image/png;base64," + "A" * 200
        result = elide_data_uri(url)
        assert result == url[:100]
        assert len(result) == 100

    def test_short_data_uri(self):
        """Test short data URIs are untouched."""
        assert elide_data_uri("data:text/plain,hi") == "data:text/plain,hi"

    def test_other_urls_unchanged(self):
        """Test non-data URLs and invalid strings are untouched."""
        long_url = "https://example.com/" + "a" * 200
        assert elide_data_uri("https://example.com") == "https://example.com"
        assert elide_data_uri(long_url) == long_url
        assert elide_data_uri("not a url") == "not a url"

    def test_invalid_logged(self, caplog):
        """Test a parse failure is logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="urlmatch"):
            assert elide_data_uri("not a url") == "not a url"
        assert any("not a url" in record.getMessage() for record in caplog.records)

    def test_configured_length(self, monkeypatch):
        """Test the cut-off length comes from configuration."""
        monkeypatch.setenv("URLMATCH_DISPLAY_DATA_URI_MAX_LENGTH", "20")
        url = "data:text/plain," + "x" * 50
        assert elide_data_uri(url) == url[:20]


class TestGetURLDisplayName:
    """Test suite for get_url_display_name."""

    def test_trailing_path_parts(self):
        """Test only the last two path segments are kept by default."""
        name = get_url_display_name("https://example.com/a/b/c/app.js")
        assert name == f"{ELLIPSIS}c/app.js"

    def test_short_path(self):
        """Test short paths keep their leading slash and query."""
        assert get_url_display_name("https://example.com/app.js?v=1") == "/app.js?v=1"

    def test_drop_query(self):
        """Test preserve_query=False drops the query."""
        options = DisplayNameOptions(preserve_query=False)
        assert get_url_display_name("https://example.com/app.js?v=1", options) == "/app.js"

    def test_preserve_host(self):
        """Test preserve_host prefixes the host."""
        options = DisplayNameOptions(preserve_host=True)
        name = get_url_display_name("https://example.com:8080/app.js", options)
        assert name == "example.com:8080/app.js"

    def test_all_path_parts(self):
        """Test num_path_parts=0 keeps the whole path."""
        options = DisplayNameOptions(num_path_parts=0)
        assert get_url_display_name("https://example.com/a/b/c/app.js", options) == "/a/b/c/app.js"

    def test_about_and_data_urls(self):
        """Test about: and data: URLs render their full href."""
        assert get_url_display_name("about:blank") == "about:blank"
        url = "data:image/png;base64," + "A" * 100
        assert get_url_display_name(url) == f"data:image/png;base64,AAAAAAAAA{ELLIPSIS}"

    def test_hex_hash_elided(self):
        """Test long hexadecimal hashes are shortened."""
        name = get_url_display_name("https://example.com/bundle.0123456789abcdef0123.js")
        assert name == f"/bundle.0123456{ELLIPSIS}.js"

    def test_long_number_elided(self):
        """Test long digit runs are shortened."""
        assert get_url_display_name("https://example.com/item/1234567890") == f"/item/123{ELLIPSIS}"

    def test_long_name_truncated(self):
        """Test overlong names are cut while keeping the extension."""
        url = "https://example.com/" + "abc.def." * 10 + "js"
        name = get_url_display_name(url)
        assert len(name) == 64
        assert name.endswith(f"{ELLIPSIS}.js")

    def test_long_query_elided(self):
        """Test an overlong query is reduced to its first key."""
        query = "&".join(f"k{i}=v{i}" for i in range(20))
        name = get_url_display_name(f"https://example.com/app.js?{query}")
        assert name == f"/app.js?k0={ELLIPSIS}"

    def test_invalid_url_unchanged(self):
        """Test invalid URLs are returned as given."""
        assert get_url_display_name("not a url") == "not a url"

    def test_format_parsed_url(self):
        """Test formatting an already parsed URL."""
        parsed = parse_url("https://example.com/a/b/c/app.js")
        options = DisplayNameOptions(num_path_parts=1)
        assert format_display_name(parsed, options) == f"{ELLIPSIS}app.js"

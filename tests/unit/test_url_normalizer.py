"""
Unit tests for core/url_normalizer.py

Tests scheme prefixing, origin extraction and asset URL absolutization.
"""

import pytest
from core.url_normalizer import URLNormalizer


class TestEnsureScheme:
    """Tests for ensure_scheme()"""

    @pytest.mark.unit
    def test_prefixes_https(self):
        assert URLNormalizer.ensure_scheme("example.com") == "https://example.com"

    @pytest.mark.unit
    def test_keeps_existing_schemes(self):
        assert URLNormalizer.ensure_scheme("http://example.com") == "http://example.com"
        assert URLNormalizer.ensure_scheme("https://example.com/a") == "https://example.com/a"

    @pytest.mark.unit
    def test_strips_whitespace(self):
        assert URLNormalizer.ensure_scheme("  example.com/about ") == "https://example.com/about"

    @pytest.mark.unit
    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            URLNormalizer.ensure_scheme("")
        with pytest.raises(ValueError):
            URLNormalizer.ensure_scheme("   ")


class TestGetOrigin:
    """Tests for get_origin()"""

    @pytest.mark.unit
    def test_drops_path_and_query(self):
        assert URLNormalizer.get_origin("https://example.com/about?x=1#top") == "https://example.com"

    @pytest.mark.unit
    def test_keeps_port(self):
        assert URLNormalizer.get_origin("http://localhost:3000/page") == "http://localhost:3000"


class TestAbsolutize:
    """Tests for absolutize()"""

    @pytest.mark.unit
    def test_root_relative_path(self):
        assert URLNormalizer.absolutize("/logo.png", "https://example.com/about") == \
            "https://example.com/logo.png"

    @pytest.mark.unit
    def test_relative_path_resolves_against_origin_not_page(self):
        assert URLNormalizer.absolutize("img/logo.png", "https://example.com/blog/post") == \
            "https://example.com/img/logo.png"

    @pytest.mark.unit
    def test_protocol_relative_url(self):
        assert URLNormalizer.absolutize("//cdn.example.com/logo.png", "https://example.com") == \
            "https://cdn.example.com/logo.png"

    @pytest.mark.unit
    def test_absolute_url_unchanged(self):
        url = "http://cdn.example.com/logo.png"
        assert URLNormalizer.absolutize(url, "https://example.com") == url

    @pytest.mark.unit
    def test_empty_value_unchanged(self):
        assert URLNormalizer.absolutize("", "https://example.com") == ""

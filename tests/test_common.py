"""Tests for common utilities."""

import logging

import pytest
from config import Config, load_config
from shortlink.common.validators import is_valid_url, normalize_url
from shortlink.common.urls import forwarded_origin, public_base_url, build_short_url
from shortlink.common.logging_config import setup_logging, get_logger


class TestValidators:
    """Test validation utilities."""

    def test_valid_urls(self):
        """Test valid URL validation."""
        valid, _ = is_valid_url("https://example.com")
        assert valid

        valid, _ = is_valid_url("http://example.com/path")
        assert valid

        valid, _ = is_valid_url("https://sub.example.com:8080/path?query=value")
        assert valid

        valid, _ = is_valid_url("http://localhost:3000")
        assert valid

        valid, _ = is_valid_url("http://127.0.0.1/x")
        assert valid

    def test_invalid_urls(self):
        """Test invalid URL validation."""
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_url("not-a-url")
        assert not valid

        valid, error = is_valid_url("ftp://example.com")
        assert not valid
        assert "http" in error.lower()

        valid, error = is_valid_url("https://not a url at all")
        assert not valid

        valid, error = is_valid_url("https://example.com:99999")
        assert not valid

    def test_normalize_url(self):
        """https:// is added only when no http(s) prefix exists."""
        assert normalize_url("example.com") == "https://example.com"
        assert normalize_url("http://example.com") == "http://example.com"
        assert normalize_url("https://example.com") == "https://example.com"
        assert normalize_url("  example.com \n") == "https://example.com"
        assert normalize_url("not a url at all") == "https://not a url at all"

    def test_normalize_trims_before_prefixing(self):
        """Surrounding whitespace is dropped first, so a padded domain stays valid."""
        url = normalize_url(" example.com")

        assert url == "https://example.com"
        assert is_valid_url(url)[0]

    def test_normalize_scheme_prefix_is_case_sensitive(self):
        """Only lowercase http:// and https:// count as a scheme."""
        assert normalize_url("HTTP://example.com") == "https://HTTP://example.com"
        assert normalize_url("Https://example.com") == "https://Https://example.com"

    @pytest.mark.parametrize(
        "url", ["https://exa\nmple.com", "https://example.com/a\tb", "https://example.com/\x00", "https://example.com/\x7f"]
    )
    def test_control_characters_rejected(self, url):
        valid, error = is_valid_url(url)

        assert not valid
        assert "control characters" in error


class TestPublicURLs:
    """Test short URL origin and path construction."""

    def test_forwarded_origin(self):
        """Header names are case-insensitive; missing values are empty."""
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "example.com",
            "X-Forwarded-For": "1.2.3.4",
        }

        assert forwarded_origin(headers) == ("https", "example.com")
        assert forwarded_origin({}) == ("", "")

    def test_public_base_url_from_headers(self):
        """Test base URL building from headers."""
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "sho.rt",
        }

        base_url = public_base_url(
            headers=headers,
            fallback_base_url="http://localhost:3000",
            request_scheme="http",
            request_host="internal:3000",
        )

        assert base_url == "https://sho.rt"

    def test_public_base_url_forwarded_chain(self):
        """Only the first proxy hop is used."""
        headers = {
            "x-forwarded-proto": "https, http",
            "x-forwarded-host": "sho.rt, internal",
        }

        assert public_base_url(headers, "http://localhost:3000") == "https://sho.rt"

    def test_public_base_url_from_request(self):
        """Request scheme and host come second."""
        base_url = public_base_url(
            headers={},
            fallback_base_url="http://localhost:3000",
            request_scheme="http",
            request_host="example.org:8080",
        )

        assert base_url == "http://example.org:8080"

    def test_public_base_url_fallback(self):
        """Test base URL fallback."""
        base_url = public_base_url(
            headers={},
            fallback_base_url="http://localhost:3000/",
        )

        assert base_url == "http://localhost:3000"

    def test_build_short_url(self):
        """Test short URL building."""
        assert build_short_url("abc123", "https://sho.rt") == "https://sho.rt/abc123"
        assert build_short_url("abc123", "https://sho.rt/") == "https://sho.rt/abc123"

    def test_build_short_url_with_prefix(self):
        """Test short URL building with path prefix."""
        assert build_short_url("abc123", "https://sho.rt", "/s") == "https://sho.rt/s/abc123"
        assert build_short_url("abc123", "https://sho.rt", "s/") == "https://sho.rt/s/abc123"


class TestLogging:
    """Test logging setup."""

    def test_setup_logging(self):
        logger = setup_logging(level="warning")

        assert logger.name == "shortlink"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_setup_logging_is_repeatable(self, tmp_path):
        """Handlers are replaced, not stacked."""
        log_file = tmp_path / "shortlink.log"
        setup_logging(level="INFO")
        logger = setup_logging(level="INFO", log_file=str(log_file), json_format=True)

        assert len(logger.handlers) == 2

        get_logger("shortlink.registry").info("hello", extra={"code": "abc123"})
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert '"level": "INFO"' in content
        assert '"message": "hello"' in content
        assert '"code": "abc123"' in content

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_unknown_level_defaults_to_info(self):
        assert setup_logging(level="chatty").level == logging.INFO


class TestConfig:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "BASE_URL", "SHORT_CODE_LENGTH", "PATH_PREFIX"):
            monkeypatch.delenv(name, raising=False)

        config = Config(_env_file=None)

        assert config.port == 3000
        assert config.short_code_length == 6
        assert config.path_prefix == ""
        assert config.workers == 1

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("BASE_URL", "https://sho.rt")
        monkeypatch.setenv("short_code_length", "8")

        config = load_config()

        assert config.port == 8080
        assert config.base_url == "https://sho.rt"
        assert config.short_code_length == 8

    def test_rejects_zero_workers(self):
        with pytest.raises(ValueError):
            Config(workers=0)

"""Validation utilities for URL submissions."""

from urllib.parse import urlparse
from typing import Tuple

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

MAX_URL_LENGTH = 2048

_http_url = TypeAdapter(HttpUrl)


def normalize_url(raw_url: str) -> str:
    """Trim the submission and prepend ``https://`` when no http(s) scheme is given.

    Only the literal prefixes ``http://`` and ``https://`` count as a scheme;
    anything else (``example.com``, ``ftp://host``) gets ``https://`` in front.
    """
    url = raw_url.strip()
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate an absolute http(s) URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "Original URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    # urlparse and HttpUrl both drop tabs and newlines, which would let them through
    if any(ord(c) < 32 or ord(c) == 127 for c in url):
        return False, "URL must not contain control characters"

    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    # Check if scheme is http or https
    if result.scheme not in ("http", "https"):
        return False, "URL must use http or https protocol"

    # Check if netloc (domain) exists
    if not result.netloc:
        return False, "URL must have a valid domain"

    # Full syntax check (host characters, port range, ...)
    try:
        _http_url.validate_python(url)
    except PydanticValidationError:
        return False, "Invalid URL format"

    return True, ""

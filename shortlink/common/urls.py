"""Public short URL construction.

The registry only stores bare codes; the scheme/host a client sees is decided
per request, because the service usually sits behind a reverse proxy.
"""

from typing import Mapping, Optional, Tuple


def _first_hop(value: Optional[str]) -> str:
    # Proxy chains send "a, b, c"; the left-most value is the client-facing one
    return (value or "").split(",")[0].strip()


def forwarded_origin(headers: Mapping[str, str]) -> Tuple[str, str]:
    """Return (proto, host) from X-Forwarded-Proto / X-Forwarded-Host.

    Header names are matched case-insensitively; missing values are ''.
    """
    lowered = {k.lower(): v for k, v in headers.items()}
    return (
        _first_hop(lowered.get("x-forwarded-proto")),
        _first_hop(lowered.get("x-forwarded-host")),
    )


def public_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Origin the client used to reach us, without trailing slash.

    Forwarded headers win over the request's own scheme/host, which win over
    the configured fallback.
    """
    proto, host = forwarded_origin(headers)
    if proto and host:
        return f"{proto}://{host}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")


def build_short_url(code: str, base_url: str, path_prefix: str = "") -> str:
    """Join origin, optional prefix and code: ``https://sho.rt/s/abc123``."""
    parts = [base_url.rstrip("/"), path_prefix.strip("/"), code]
    return "/".join(part for part in parts if part)

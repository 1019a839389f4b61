"""Public short URL construction for a request. No app imports to avoid circular deps."""

from starlette.requests import Request

from shortlink.common.urls import build_short_url, public_base_url


def short_url_for(request: Request, short_code: str) -> str:
    """Full short URL for ``short_code`` as seen by the client that sent ``request``."""
    config = request.app.state.config
    base_url = public_base_url(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )
    return build_short_url(short_code, base_url, config.path_prefix)

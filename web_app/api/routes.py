"""API routes implementation."""

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    URLStatsResponse,
    URLListResponse,
    HealthResponse,
    ErrorResponse,
)
from shortlink.models import Entry
from ..short_urls import short_url_for

router = APIRouter()


def _stats_response(request: Request, entry: Entry) -> URLStatsResponse:
    return URLStatsResponse(
        short_url=short_url_for(request, entry.code),
        original_url=entry.target_url,
        clicks=entry.clicks,
        created_at=entry.created_at,
    )


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Shorten a URL. Submitting an already shortened URL returns its existing short URL.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    registry = request.app.state.registry

    # ValidationError / InternalError are turned into responses by the app's handlers
    entry, created = registry.submit_with_status(body.original_url)

    return ShortenResponse(
        original_url=entry.target_url,
        short_url=short_url_for(request, entry.code),
        message="URL shortened successfully" if created else "URL already shortened",
    )


@router.get(
    "/stats/{short_code}",
    response_model=URLStatsResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get URL statistics",
    description="Click count and creation time of a short URL. Does not count as a click.",
)
async def get_url_stats(request: Request, short_code: str):
    """Get statistics for a shortened URL."""
    registry = request.app.state.registry

    entry = registry.stats(short_code)

    return _stats_response(request, entry)


@router.get(
    "/urls",
    response_model=URLListResponse,
    summary="List URLs",
    description="All short URLs, oldest first.",
)
async def list_urls(request: Request):
    """List all shortened URLs."""
    registry = request.app.state.registry

    entries = registry.list()

    return URLListResponse(
        total_urls=len(entries),
        urls=[_stats_response(request, entry) for entry in entries],
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Process liveness plus the number of registered short URLs.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    registry = request.app.state.registry

    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        total_urls=registry.count(),
    )

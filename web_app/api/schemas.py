"""Pydantic schemas for API requests and responses.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ShortenRequest(_CamelModel):
    """Request to shorten a URL."""

    # Optional so a missing value reaches the registry and gets its message
    original_url: Optional[str] = Field(
        None,
        alias="originalUrl",
        description="The URL to shorten; https:// is added when no scheme is given",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"originalUrl": "https://example.com/very/long/path/to/resource"},
                {"originalUrl": "github.com"},
            ]
        },
    )


class ShortenResponse(_CamelModel):
    """Response after shortening a URL."""

    original_url: str = Field(..., alias="originalUrl", description="The normalized original URL")
    short_url: str = Field(..., alias="shortUrl", description="The complete short URL")
    message: str = Field(..., description="Whether the URL was newly shortened or already known")


class URLStatsResponse(_CamelModel):
    """Statistics for one short URL."""

    short_url: str = Field(..., alias="shortUrl")
    original_url: str = Field(..., alias="originalUrl")
    clicks: int
    created_at: datetime = Field(..., alias="createdAt")


class URLListResponse(_CamelModel):
    """All short URLs, oldest first."""

    total_urls: int = Field(..., alias="totalUrls")
    urls: List[URLStatsResponse]


class HealthResponse(_CamelModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    timestamp: datetime = Field(..., description="Check timestamp")
    total_urls: int = Field(..., alias="totalUrls", description="Number of registered short URLs")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")

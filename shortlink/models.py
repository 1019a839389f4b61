"""Data models for the short link registry."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Entry:
    """Snapshot of one short code mapping.

    Instances handed out by the registry are immutable copies; later clicks
    do not change an Entry that was already returned.
    """

    code: str
    target_url: str
    created_at: datetime
    clicks: int = 0


@dataclass
class _Record:
    """Mutable registry-side record. Never leaves the registry."""

    code: str
    target_url: str
    created_at: datetime
    clicks: int = 0

    def snapshot(self) -> Entry:
        return Entry(
            code=self.code,
            target_url=self.target_url,
            created_at=self.created_at,
            clicks=self.clicks,
        )

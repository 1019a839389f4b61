"""In-memory short code registry.

The registry owns every Entry. All reads and writes go through a single
``threading.Lock`` and no I/O happens while it is held, so the registry can be
shared by async request handlers, thread pools and plain scripts alike.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from .common.validators import is_valid_url, normalize_url
from .exceptions import InternalError, NotFoundError, ValidationError
from .models import Entry, _Record
from .shortcode import ShortCodeGenerator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Registry:
    """Maps short codes to target URLs and counts clicks."""

    def __init__(
        self,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 1000,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize an empty registry.

        Args:
            short_code_generator: Code generator (default: 6-char random codes)
            logger: Optional logger
            max_collision_retries: Candidate codes tried before giving up
            clock: Returns the creation timestamp for new entries
        """
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger("shortlink.registry")
        self.max_collision_retries = max_collision_retries
        self.clock = clock

        self._lock = threading.Lock()
        # dict preserves insertion order, which list() relies on
        self._entries: Dict[str, _Record] = {}
        self._codes_by_url: Dict[str, str] = {}

    def submit(self, raw_url: str) -> Entry:
        """Shorten a URL, returning the existing Entry if it was already shortened.

        Args:
            raw_url: URL as submitted; ``https://`` is prepended when no
                http(s) scheme is present

        Returns:
            Entry for the normalized URL

        Raises:
            ValidationError: If the URL is empty or malformed
            InternalError: If no unused code could be generated
        """
        entry, _ = self.submit_with_status(raw_url)
        return entry

    def submit_with_status(self, raw_url: str) -> Tuple[Entry, bool]:
        """Same as :meth:`submit`, also reporting whether a new Entry was created.

        Returns:
            Tuple of (entry, created)
        """
        if not isinstance(raw_url, str) or not raw_url.strip():
            raise ValidationError("Original URL is required")

        target_url = normalize_url(raw_url)
        is_valid, error = is_valid_url(target_url)
        if not is_valid:
            raise ValidationError(error or "Invalid URL format")

        with self._lock:
            existing = self._codes_by_url.get(target_url)
            if existing is not None:
                entry = self._entries[existing].snapshot()
            else:
                code, attempts = self._generate_unique_code()
                record = _Record(code=code, target_url=target_url, created_at=self.clock())
                self._entries[code] = record
                self._codes_by_url[target_url] = code
                entry = record.snapshot()

        # Logging happens outside the lock
        if existing is not None:
            self.logger.debug(f"URL already shortened: {existing} -> {target_url}")
            return entry, False

        if attempts > 1:
            self.logger.debug(f"Generated code after {attempts} attempts: {code}")
        self.logger.info(f"Created short URL: {code} -> {target_url}")
        return entry, True

    def resolve(self, code: str) -> str:
        """Look up the redirect target for a code and count the click.

        Args:
            code: The short code

        Returns:
            The target URL

        Raises:
            NotFoundError: If the code is unknown
        """
        with self._lock:
            record = self._entries.get(code)
            if record is not None:
                record.clicks += 1
                target_url = record.target_url
                clicks = record.clicks

        if record is None:
            self.logger.warning(f"Short code not found: {code}")
            raise NotFoundError("Short URL not found")

        self.logger.debug(f"Resolved {code} -> {target_url} (clicks={clicks})")
        return target_url

    def stats(self, code: str) -> Entry:
        """Return a snapshot of the Entry for a code without counting a click.

        Raises:
            NotFoundError: If the code is unknown
        """
        with self._lock:
            record = self._entries.get(code)
            if record is None:
                raise NotFoundError("Short URL not found")
            return record.snapshot()

    def list(self) -> List[Entry]:
        """Snapshot of all entries, oldest first."""
        with self._lock:
            return [record.snapshot() for record in self._entries.values()]

    def count(self) -> int:
        """Number of registered entries."""
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._entries

    def _generate_unique_code(self) -> Tuple[str, int]:
        """Draw candidate codes until one is unused. Caller must hold the lock.

        Returns:
            Tuple of (code, attempts)

        Raises:
            InternalError: If every attempt collided or the generator failed
        """
        for attempt in range(1, self.max_collision_retries + 1):
            try:
                code = self.generator.generate()
            except Exception as e:
                raise InternalError(f"Short code generator failed: {e}") from e

            if not ShortCodeGenerator.is_valid_format(code):
                raise InternalError(f"Short code generator produced an invalid code: {code!r}")

            if code not in self._entries:
                return code, attempt

        raise InternalError(
            f"Unable to generate unique short code after {self.max_collision_retries} attempts"
        )

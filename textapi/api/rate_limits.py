import logging
import re
import threading

import httpx

from pydantic import BaseModel, ConfigDict

from ..config import service_config

logger = logging.getLogger(__name__)


_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_header(headers: httpx.Headers, name: str) -> int:
    # Missing or malformed counters read as zero; repeated headers use the first value
    values = headers.get_list(name)
    if not values or not _INTEGER.fullmatch(values[0]):
        return 0
    return int(values[0])


class RateLimitSnapshot(BaseModel):
    """X-RateLimit-* counters reported by one response."""
    model_config = ConfigDict(frozen=True)

    limit: int = 0
    remaining: int = 0
    reset: int = 0

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "RateLimitSnapshot":
        return cls(
            limit=_parse_header(headers, service_config.RATE_LIMIT_LIMIT_HEADER),
            remaining=_parse_header(headers, service_config.RATE_LIMIT_REMAINING_HEADER),
            reset=_parse_header(headers, service_config.RATE_LIMIT_RESET_HEADER),
        )


class RateLimits:
    """
    Last observed rate-limit snapshot, shared by every endpoint of a client.

    The snapshot is swapped as a whole under a lock, so a reader always sees
    the three counters of a single response.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot = RateLimitSnapshot()

    def update(self, snapshot: RateLimitSnapshot) -> None:
        with self._lock:
            self._snapshot = snapshot
        logger.debug(
            "Rate limits updated: limit=%s remaining=%s reset=%s",
            snapshot.limit, snapshot.remaining, snapshot.reset,
        )

    @property
    def snapshot(self) -> RateLimitSnapshot:
        with self._lock:
            return self._snapshot

    @property
    def limit(self) -> int:
        return self.snapshot.limit

    @property
    def remaining(self) -> int:
        return self.snapshot.remaining

    @property
    def reset(self) -> int:
        return self.snapshot.reset

    def __repr__(self) -> str:
        snapshot = self.snapshot
        return f"RateLimits(limit={snapshot.limit}, remaining={snapshot.remaining}, reset={snapshot.reset})"

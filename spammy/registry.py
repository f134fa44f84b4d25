"""In-memory suppression registry: key -> wall-clock ms of the last permitted output."""

from __future__ import annotations

from typing import Dict, Hashable

MILLIS_PER_SECOND = 1000


class SuppressionRegistry:
    """
    Mapping from an arbitrary hashable key to the timestamp (ms since epoch)
    at which output was last allowed for it.

    Missing keys read as 0, so a key that was never seen is always allowed.
    Entries are never evicted: the registry grows with the number of distinct
    keys used over the life of the process.
    """

    def __init__(self) -> None:
        self._last_emit: Dict[Hashable, int] = {}

    def get(self, key: Hashable) -> int:
        return self._last_emit.get(key, 0)

    def put(self, key: Hashable, timestamp_ms: int) -> None:
        self._last_emit[key] = timestamp_ms

    def next_allowed(self, key: Hashable, interval_seconds: int) -> int:
        return self.get(key) + interval_seconds * MILLIS_PER_SECOND

    def try_acquire(self, key: Hashable, interval_seconds: int, now_ms: int) -> bool:
        """Return True when ``key`` may emit at ``now_ms``. Does not record anything."""
        return now_ms >= self.next_allowed(key, interval_seconds)

    def __contains__(self, key: object) -> bool:
        return key in self._last_emit

    def __len__(self) -> int:
        return len(self._last_emit)

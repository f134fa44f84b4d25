"""Minimal in-process counters for emit/suppress decisions (not shared across processes)."""

from __future__ import annotations

from collections import Counter
from threading import Lock
from typing import Dict


class SuppressionMetrics:
    def __init__(self) -> None:
        self._lock = Lock()
        self._emitted: Counter[str] = Counter()
        self._suppressed: Counter[str] = Counter()

    def record(self, sink: str, *, emitted: bool) -> None:
        with self._lock:
            if emitted:
                self._emitted[sink] += 1
            else:
                self._suppressed[sink] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "emitted": dict(self._emitted),
                "suppressed": dict(self._suppressed),
                "emitted_total": sum(self._emitted.values()),
                "suppressed_total": sum(self._suppressed.values()),
            }

    def reset(self) -> None:
        with self._lock:
            self._emitted.clear()
            self._suppressed.clear()


default_metrics = SuppressionMetrics()

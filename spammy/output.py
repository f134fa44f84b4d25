"""
Rate-limited console output.

``SpammyOutput`` writes a message to stderr or stdout only when the same key
has not produced output within the requested number of seconds. Both streams
share one ``SuppressionRegistry``, so a key emitted through ``emit_error``
also suppresses ``emit_info`` for that key, and the reverse.

A process-wide instance is created lazily by ``get_default()``. Applications
that prefer explicit wiring can construct their own instance and pass it
around instead.
"""

from __future__ import annotations

import enum
import logging
import sys
import time
from contextlib import nullcontext
from threading import Lock
from typing import Callable, ContextManager, Hashable, Optional, TextIO

from spammy.config import SpammyConfig, default_config
from spammy.metrics import SuppressionMetrics, default_metrics
from spammy.registry import SuppressionRegistry

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


class Sink(str, enum.Enum):
    ERR = "err"
    OUT = "out"


class SpammyOutput:
    """Service object gating console output per key."""

    def __init__(
        self,
        config: Optional[SpammyConfig] = None,
        *,
        registry: Optional[SuppressionRegistry] = None,
        clock: Optional[Clock] = None,
        stderr: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        metrics: Optional[SuppressionMetrics] = None,
    ) -> None:
        self.config = config or default_config
        self.registry = registry if registry is not None else SuppressionRegistry()
        self.clock = clock or wall_clock_ms
        self.metrics = metrics if metrics is not None else SuppressionMetrics()
        self._stderr = stderr
        self._stdout = stdout
        self._lock: ContextManager[object] = Lock() if self.config.synchronized else nullcontext()

    def _stream(self, sink: Sink) -> TextIO:
        # Resolve sys streams late so redirection after construction is honored.
        if sink is Sink.ERR:
            return self._stderr if self._stderr is not None else sys.stderr
        return self._stdout if self._stdout is not None else sys.stdout

    def emit(self, message: str, min_interval_seconds: int, key: Hashable, sink: Sink) -> bool:
        """
        Write ``message`` to ``sink`` unless ``key`` emitted less than
        ``min_interval_seconds`` ago.

        Returns True when the message was written. The interval is measured
        from the last successful emission, never from a suppressed call.
        """
        with self._lock:
            now = self.clock()
            emitted = self.registry.try_acquire(key, min_interval_seconds, now)
            if emitted:
                print(message, file=self._stream(sink))
                self.registry.put(key, now)
        # Bookkeeping stays outside the lock; handlers may call back into this service.
        outcome = "emitted" if emitted else "suppressed"
        self.metrics.record(sink.value, emitted=emitted)
        logger.debug(
            "key=%r outcome=%s sink=%s",
            key,
            outcome,
            sink.value,
            extra={"key": repr(key), "sink": sink.value, "outcome": outcome},
        )
        return emitted

    def emit_error(self, message: str, seconds_between_logs: int, key: Hashable) -> bool:
        """Print ``message`` to stderr, at most once per ``seconds_between_logs`` for ``key``."""
        return self.emit(message, seconds_between_logs, key, Sink.ERR)

    def emit_info(self, message: str, seconds_between_logs: int, key: Hashable) -> bool:
        """Print ``message`` to stdout, at most once per ``seconds_between_logs`` for ``key``."""
        return self.emit(message, seconds_between_logs, key, Sink.OUT)

    err = emit_error
    out = emit_info


_default: Optional[SpammyOutput] = None
_default_lock = Lock()


def get_default() -> SpammyOutput:
    """Return the process-wide instance, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = SpammyOutput(default_config, metrics=default_metrics)
    return _default


def err(message: str, seconds_between_logs: int, key: Hashable) -> bool:
    return get_default().emit_error(message, seconds_between_logs, key)


def out(message: str, seconds_between_logs: int, key: Hashable) -> bool:
    return get_default().emit_info(message, seconds_between_logs, key)


emit_error = err
emit_info = out

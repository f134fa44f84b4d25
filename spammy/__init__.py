"""
Rate-limited diagnostic output.

Print a message only if the same key has not printed within a given number of
seconds, to keep hot error paths from flooding the console::

    import spammy

    spammy.err("cache miss storm", 60, "cache-miss")
    spammy.out("still waiting for peers", 10, ("peers", host))

    spammy.configure_logging()  # optional: surface emit/suppress decisions

See DESIGN.md for details.
"""

from spammy.logging_setup import configure_logging
from spammy.output import Sink, SpammyOutput, emit_error, emit_info, err, get_default, out
from spammy.registry import SuppressionRegistry

__all__ = [
    "Sink",
    "SpammyOutput",
    "SuppressionRegistry",
    "configure_logging",
    "emit_error",
    "emit_info",
    "err",
    "get_default",
    "out",
]

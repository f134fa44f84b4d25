import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from spammy import output  # noqa: E402
from spammy.metrics import default_metrics  # noqa: E402

# Comfortably after the epoch so a first call passes any realistic interval.
BASE_MS = 1_700_000_000_000


class FakeClock:
    def __init__(self, start_ms: int = BASE_MS) -> None:
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def reset_default(monkeypatch):
    default_metrics.reset()
    monkeypatch.setattr(output, "_default", None)
    yield
    default_metrics.reset()

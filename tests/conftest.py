"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`landbattle` package without requiring an editable install in CI.  It also
provides a scripted die source for tests that need exact control over rolls.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


class ScriptedDice:
    """Die source that repeats a fixed pattern of values."""

    def __init__(self, pattern):
        self.pattern = list(pattern)
        self.requests: list[int] = []

    def roll(self, count):
        self.requests.append(count)
        repeats = -(-count // len(self.pattern))
        return np.tile(np.asarray(self.pattern, dtype=np.int64), repeats)[:count]


@pytest.fixture
def scripted_dice():
    """Factory for :class:`ScriptedDice` sources."""

    return ScriptedDice

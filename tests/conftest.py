import random
import sys
from pathlib import Path

import pytest

# Repo root holds the flat modules
ROOT = Path(__file__).resolve().parent.parent
if ROOT.as_posix() not in sys.path:
    sys.path.insert(0, ROOT.as_posix())


@pytest.fixture
def rng():
    """Seeded random source so generated questions / trials are repeatable."""
    return random.Random(1234)


class FixedRandom:
    """Stand-in rng returning the same value from every draw."""

    def __init__(self, value: float):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom

import pytest

from game.air_combat import Session


class FixedRng:
    """Stand-in random source whose uniform() always lands at the same fraction"""

    def __init__(self, fraction: float = 0.5):
        self.fraction = fraction

    def uniform(self, a, b):
        return a + (b - a) * self.fraction


@pytest.fixture
def fixed_rng():
    return FixedRng(0.5)


@pytest.fixture
def session(fixed_rng):
    return Session(400, 800, rng=fixed_rng)

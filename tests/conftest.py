import os

import pytest

from dino_run.simulation import Simulation

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class ScriptedRandom:
    """Stands in for random.Random: returns the given rolls in order, then repeats the last one."""

    def __init__(self, rolls):
        self.rolls = list(rolls)

    def random(self):
        if len(self.rolls) > 1:
            return self.rolls.pop(0)
        return self.rolls[0]


@pytest.fixture
def make_simulation():
    def factory(*rolls, running=True):
        sim = Simulation(rng=ScriptedRandom(rolls or (1.0,)))
        if running:
            sim.start_run()
        return sim
    return factory


@pytest.fixture
def sim(make_simulation):
    """A running simulation whose spawn rolls never fire."""
    return make_simulation()

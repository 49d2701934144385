import numpy as np
import pytest


class ScriptedRng:
    """Stand-in for np.random.Generator that replays queued draws.

    integers() pops from ``ints`` and checks the value against numpy's
    half-open range; random() pops from ``floats`` (an array when a size
    is requested).
    """

    def __init__(self, ints=(), floats=()):
        self.ints = list(ints)
        self.floats = list(floats)

    def integers(self, low, high=None):
        if high is None:
            low, high = 0, low
        value = self.ints.pop(0)
        assert low <= value < high, f"{value} outside [{low}, {high})"
        return value

    def random(self, size=None):
        value = self.floats.pop(0)
        if size is not None:
            value = np.asarray(value, dtype=np.float64)
            assert value.shape == (size,)
        return value

    @property
    def exhausted(self):
        return not self.ints and not self.floats


@pytest.fixture
def scripted():
    return ScriptedRng


@pytest.fixture(params=range(0, 300, 7))
def seeded_rng(request):
    return np.random.default_rng(request.param)

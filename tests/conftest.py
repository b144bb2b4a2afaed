import itertools

import pytest


class FixedRandom:

    """Random source returning a fixed, repeating sequence of values."""

    def __init__(self, *values):
        self._values = itertools.cycle(values)

    def randrange(self, n):
        return next(self._values) % n

    def choice(self, seq):
        return seq[self.randrange(len(seq))]


@pytest.fixture()
def fixed_random():
    return FixedRandom


@pytest.fixture()
def config_file(tmp_path):
    return tmp_path / 'passforge.conf'

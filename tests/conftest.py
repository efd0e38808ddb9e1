"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details
"""

import random

import pytest

from ucrypto import config
from ucrypto.crypto import rando
from ucrypto.crypto.ecc.curve import Curve
from ucrypto.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture(autouse=True)
def isolateConfig(tmp_path, monkeypatch):
    """
    Keep a user's ucrypto.conf out of the tests.
    """
    monkeypatch.setenv(config.CONFIG_ENV, str(tmp_path / "missing.conf"))
    config.reset()
    yield
    config.reset()


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture
def rng():
    return rando.SeededRandomSource(0)


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def toyCurve():
    """
    y^2 = x^3 + 2x + 2 over F_17. The generator (5, 1) has prime order 19.
    """
    return Curve(17, 2, 2, 19, 5, 1, name="toy17")

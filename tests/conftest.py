import numpy as np
import pytest

from tomography.phantoms import disc_phantom


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def disc_32():
    return disc_phantom(32, radius=8.0)

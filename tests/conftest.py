import matplotlib

matplotlib.use("Agg")

import pytest

from cleanmae.core.sampling import NumpySampler
from cleanmae.stats.schemes.noisy_validation.simulator import SignalSimulator


@pytest.fixture
def sampler():
    return NumpySampler.from_seed(20240611)


@pytest.fixture
def simulator(sampler):
    return SignalSimulator(sampler)

"""
cleanmae.core.sampling
======================

Random sampling provider.

The simulator never touches a global random state; it draws through a
`SamplingProvider` injected at construction time. `NumpySampler` is the
default implementation over `numpy.random.Generator` and can be seeded for
reproducible runs.

Examples
--------
>>> from cleanmae.core.sampling import NumpySampler
>>> sampler = NumpySampler.from_seed(7)
>>> draws = sampler.uniform(1.0, 2.0, size=5)
>>> bool(((draws >= 1.0) & (draws <= 2.0)).all())
True
>>> sampler.gaussian([3.0, 4.0], 0.0).tolist()
[3.0, 4.0]
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import numpy as np

from cleanmae.core.names import Signal


class SamplingProvider(ABC):
    """
    Source of independent uniform and Gaussian draws.

    Implementations must support ``std = 0`` in `gaussian`, returning the
    means unchanged.
    """

    @abstractmethod
    def uniform(self, low: float, high: float, size: int) -> Signal:
        """Draw ``size`` samples uniformly over ``[low, high]`` (both inclusive)."""

    @abstractmethod
    def gaussian(self, mean: Union[Sequence[float], Signal], std: float) -> Signal:
        """Draw one ``Normal(m, std)`` sample for every ``m`` in ``mean``."""


@dataclass
class NumpySampler(SamplingProvider):
    """Sampling provider backed by `numpy.random.Generator`."""

    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "NumpySampler":
        """Create a sampler; ``seed=None`` draws fresh OS entropy."""
        return cls(np.random.default_rng(seed))

    def uniform(self, low: float, high: float, size: int) -> Signal:
        # Generator.uniform is half-open; nudge the upper bound so `high` is reachable.
        upper = np.nextafter(high, np.inf)
        draws = self.rng.uniform(low, upper, size)
        return np.clip(draws, low, high).astype(np.float64)

    def gaussian(self, mean: Union[Sequence[float], Signal], std: float) -> Signal:
        means = np.asarray(mean, dtype=np.float64)
        if std == 0:
            return means.copy()
        return self.rng.normal(loc=means, scale=std)

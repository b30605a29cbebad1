"""
cleanmae.config
===============

Configuration of the synthetic validation experiments.

Examples
--------
>>> from cleanmae.config import SimulationConfig
>>> config = SimulationConfig()
>>> config.validate()
>>> config.with_overrides(seed=3, sample_size=500).sample_size
500
>>> SimulationConfig(low=2.0, high=1.0).validate()
Traceback (most recent call last):
...
cleanmae.core.errors.InvalidParameterError: low must not exceed high, got low=2.0, high=1.0
"""

from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Any, Optional

from cleanmae.core.errors import InvalidParameterError
from cleanmae.core.names import DEFAULT_SPAN, DEFAULT_TABLE_SIZE


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters of the model-validation demonstration.

    Attributes
    ----------
    sigma_model : float, default=0.07
        The model's own error std; what the validation wants to recover
    sigma_input : float, default=0.18
        Error std propagated from the (measured) model inputs
    sigma_test : float, default=0.20
        Error std of every test data point
    sample_size : int, default=1000
        Number of points per simulated signal
    low, high : float, default=8.0, 12.0
        Range of the uniform base signal
    narrow_low, narrow_high : float, default=9.0, 11.0
        Range of the second population in the delta-sigma demonstration
    delta_noise : float, default=0.2
        Measurement noise applied in the delta-sigma demonstration
    table_size : int, default=10000
        Resolution of the expected-MAD curve
    span : float, default=5.0
        Extent of the curve in units of the combined noise scale
    seed : int, optional
        Seed for the random source; None draws fresh entropy
    trials : int, default=0
        Number of repeated trials to summarise (0 disables the summary)

    Examples
    --------
    >>> noisy_inputs = SimulationConfig(sigma_input=0.3, seed=42)
    >>> noisy_inputs.sigma_test
    0.2
    """

    sigma_model: float = 0.07
    sigma_input: float = 0.18
    sigma_test: float = 0.20
    sample_size: int = 1_000
    low: float = 8.0
    high: float = 12.0
    narrow_low: float = 9.0
    narrow_high: float = 11.0
    delta_noise: float = 0.2
    table_size: int = DEFAULT_TABLE_SIZE
    span: float = DEFAULT_SPAN
    seed: Optional[int] = None
    trials: int = 0

    def validate(self) -> None:
        """Validate configuration; raises InvalidParameterError on the first problem."""
        for name in ("sigma_model", "sigma_input", "sigma_test", "delta_noise"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidParameterError(
                    f"{name} must be finite and non-negative, got {value}"
                )
        if self.sample_size <= 0:
            raise InvalidParameterError(
                f"sample_size must be positive, got {self.sample_size}"
            )
        if self.low > self.high:
            raise InvalidParameterError(
                f"low must not exceed high, got low={self.low}, high={self.high}"
            )
        if self.narrow_low > self.narrow_high:
            raise InvalidParameterError(
                "narrow_low must not exceed narrow_high, "
                f"got narrow_low={self.narrow_low}, narrow_high={self.narrow_high}"
            )
        if self.table_size < 2:
            raise InvalidParameterError(
                f"table_size must be at least 2, got {self.table_size}"
            )
        if not math.isfinite(self.span) or self.span <= 0:
            raise InvalidParameterError(f"span must be positive, got {self.span}")
        if self.trials < 0:
            raise InvalidParameterError(f"trials must be non-negative, got {self.trials}")

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a validated copy with the non-None ``overrides`` applied."""
        updated = replace(
            self, **{k: v for k, v in overrides.items() if v is not None}
        )
        updated.validate()
        return updated

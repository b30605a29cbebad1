"""
cleanmae.stats.schemes.noisy_validation.experiments
===================================================

The two demonstrations of the noisy-validation scheme.

**MAE experiment** (`run_mae_experiment`):
    b: true signal, ``U[low, high]``
    y = b + N(0, sigma_test)         test data
    a = b + N(0, sigma_model)        model output from exact inputs
    x = a + N(0, sigma_input)        model output from measured inputs

    true MAE  = MAD(a, b)            what validation should report
    wrong MAE = MAD(x, y)            what a naive comparison reports
    clean MAE = clean_mae_calc(wrong MAE, sigma_input, sigma_test)

**Delta-sigma experiment** (`run_delta_sigma_experiment`):
    Two populations of different spread are measured with the same noise.
    The observed change in standard deviation differs from the real one,
    which is why spreads must not be compared on raw measurements.

Examples
--------
>>> from cleanmae.config import SimulationConfig
>>> from cleanmae.core.sampling import NumpySampler
>>> from cleanmae.stats.schemes.noisy_validation.simulator import SignalSimulator
>>> from cleanmae.stats.schemes.noisy_validation.experiments import run_mae_experiment
>>> sim = SignalSimulator(NumpySampler.from_seed(1))
>>> result = run_mae_experiment(SimulationConfig(sample_size=20_000), sim)
>>> result.wrong_mae > result.true_mae
True
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict

from cleanmae.config import SimulationConfig
from cleanmae.stats.common.aggregates import population_std
from cleanmae.stats.methods.bias_correction.core import (
    clean_mae_calc,
    combined_scale,
    mad_to_std,
)
from cleanmae.stats.schemes.noisy_validation.simulator import SignalSimulator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MAEExperimentResult:
    """Outcome of one MAE experiment."""

    true_mae: float
    wrong_mae: float
    clean_mae: float
    sigma_combined: float

    @property
    def wrong_error(self) -> float:
        """Absolute error of the naive estimate."""
        return abs(self.wrong_mae - self.true_mae)

    @property
    def clean_error(self) -> float:
        """Absolute error of the corrected estimate."""
        return abs(self.clean_mae - self.true_mae)

    @property
    def error_ratio(self) -> float:
        """``|wrong - true| / |clean - true|``; infinite if the correction is exact."""
        if self.clean_error == 0:
            return math.inf
        return self.wrong_error / self.clean_error

    @property
    def model_std(self) -> float:
        """The model's own error std implied by the corrected MAE."""
        return mad_to_std(self.clean_mae)

    @property
    def clean_is_closer(self) -> bool:
        return self.clean_error < self.wrong_error

    def to_dict(self) -> Dict[str, Any]:
        row = asdict(self)
        row.update(
            {
                "wrong_error": self.wrong_error,
                "clean_error": self.clean_error,
                "error_ratio": self.error_ratio,
                "model_std": self.model_std,
            }
        )
        return row


@dataclass(frozen=True)
class DeltaSigmaResult:
    """Real vs observed standard deviations of two populations."""

    real_std_a: float
    real_std_b: float
    observed_std_a: float
    observed_std_b: float

    @property
    def real_delta(self) -> float:
        return self.real_std_a - self.real_std_b

    @property
    def observed_delta(self) -> float:
        return self.observed_std_a - self.observed_std_b


def run_mae_experiment(
    config: SimulationConfig, simulator: SignalSimulator
) -> MAEExperimentResult:
    """
    Simulate model output and test data, then compare naive and clean MAE.

    Args:
        config: Noise scales, sample size and curve settings
        simulator: Signal source (seed its sampler for reproducibility)

    Returns:
        The true, naive and corrected MAE of one run

    Raises:
        OutOfDomainError: If the naive MAE falls below the curve's range,
            which happens occasionally for small samples
    """
    config.validate()

    base = simulator.new(config.sample_size, config.low, config.high)
    test = simulator.simulate(base, config.sigma_test)
    model_exact = simulator.simulate(base, config.sigma_model)
    model_noisy = simulator.simulate(model_exact, config.sigma_input)

    true_mae = simulator.mean_absolute_difference(model_exact, base)
    wrong_mae = simulator.mean_absolute_difference(model_noisy, test)
    clean_mae = clean_mae_calc(
        wrong_mae,
        config.sigma_input,
        config.sigma_test,
        table_size=config.table_size,
        span=config.span,
    )
    logger.info(
        "MAE experiment: true=%.5f wrong=%.5f clean=%.5f", true_mae, wrong_mae, clean_mae
    )

    return MAEExperimentResult(
        true_mae=true_mae,
        wrong_mae=wrong_mae,
        clean_mae=clean_mae,
        sigma_combined=combined_scale(config.sigma_input, config.sigma_test),
    )


def run_delta_sigma_experiment(
    config: SimulationConfig, simulator: SignalSimulator
) -> DeltaSigmaResult:
    """Compare the real and observed change in spread between two populations."""
    config.validate()

    wide = simulator.new(config.sample_size, config.low, config.high)
    narrow = simulator.new(config.sample_size, config.narrow_low, config.narrow_high)
    wide_obs = simulator.simulate(wide, config.delta_noise)
    narrow_obs = simulator.simulate(narrow, config.delta_noise)

    return DeltaSigmaResult(
        real_std_a=population_std(wide),
        real_std_b=population_std(narrow),
        observed_std_a=population_std(wide_obs),
        observed_std_b=population_std(narrow_obs),
    )

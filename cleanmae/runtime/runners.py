"""
cleanmae.runtime.runners
========================

Runners that execute the MAE experiment repeatedly.

A single run of the experiment says little: the estimates are statistical.
`RepeatedTrialRunner` repeats the experiment with fresh randomness, keeps
every outcome (including trials whose naive MAE fell outside the correction
curve) and summarises how often the corrected estimate lands closer to the
true MAE than the naive one.

Examples
--------
>>> from cleanmae.config import SimulationConfig
>>> from cleanmae.runtime.runners import RepeatedTrialRunner
>>> runner = RepeatedTrialRunner.from_config(SimulationConfig(seed=11, sample_size=20_000))
>>> _ = runner.run(20)
>>> summary = runner.get_summary()
>>> summary["total_trials"], summary["clean_wins"]
(20, 20)
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from scipy.stats import binomtest

from cleanmae.config import SimulationConfig
from cleanmae.core.errors import InvalidParameterError, OutOfDomainError
from cleanmae.core.names import TrialStatus
from cleanmae.core.sampling import NumpySampler
from cleanmae.stats.schemes.noisy_validation.experiments import (
    MAEExperimentResult,
    run_mae_experiment,
)
from cleanmae.stats.schemes.noisy_validation.simulator import SignalSimulator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialRecord:
    """Outcome of one trial; ``result`` is None unless ``status == "ok"``."""

    trial: int
    status: TrialStatus
    result: Optional[MAEExperimentResult] = None
    wrong_mae: Optional[float] = None


class RepeatedTrialRunner:
    """
    Repeat the MAE experiment and aggregate the outcomes.

    Provides:
    - Sequential execution with a shared, optionally seeded, simulator
    - Recording of out-of-domain trials instead of aborting the batch
    - A summary with a one-sided binomial test of "clean beats naive"
    """

    def __init__(self, config: SimulationConfig, simulator: SignalSimulator):
        config.validate()
        self.config = config
        self.simulator = simulator
        self._records: List[TrialRecord] = []

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "RepeatedTrialRunner":
        """Build a runner whose simulator is seeded from ``config.seed``."""
        return cls(config, SignalSimulator(NumpySampler.from_seed(config.seed)))

    def run(self, n_trials: int) -> List[TrialRecord]:
        """Run ``n_trials`` more trials and return their records."""
        if n_trials <= 0:
            raise InvalidParameterError(f"n_trials must be positive, got {n_trials}")

        new_records = []
        for _ in range(n_trials):
            index = len(self._records)
            try:
                result = run_mae_experiment(self.config, self.simulator)
            except OutOfDomainError as exc:
                logger.warning(
                    "Trial %d skipped: naive MAE %g outside the curve", index, exc.value
                )
                record = TrialRecord(
                    trial=index, status="out_of_domain", wrong_mae=exc.value
                )
            else:
                record = TrialRecord(
                    trial=index, status="ok", result=result, wrong_mae=result.wrong_mae
                )
            self._records.append(record)
            new_records.append(record)

        return new_records

    def get_results(self) -> List[MAEExperimentResult]:
        """Results of all successful trials so far."""
        return [r.result for r in self._records if r.result is not None]

    def get_records(self) -> List[TrialRecord]:
        """All trial records so far, in execution order."""
        return self._records.copy()

    def get_summary(self) -> Dict[str, Any]:
        """
        Summarise all trials so far.

        Returns:
            Dictionary with trial counts, the number of trials where the
            corrected estimate was closer to the truth, mean absolute errors
            of both estimators and the p-value of a one-sided binomial test
            against a 50% win rate
        """
        results = self.get_results()
        wins = sum(1 for r in results if r.clean_is_closer)
        completed = len(results)

        if completed:
            p_value = float(binomtest(wins, completed, p=0.5, alternative="greater").pvalue)
            mean_wrong_error = sum(r.wrong_error for r in results) / completed
            mean_clean_error = sum(r.clean_error for r in results) / completed
        else:
            p_value = math.nan
            mean_wrong_error = mean_clean_error = math.nan

        return {
            "total_trials": len(self._records),
            "completed_trials": completed,
            "out_of_domain_trials": len(self._records) - completed,
            "clean_wins": wins,
            "win_rate": wins / completed if completed else math.nan,
            "mean_wrong_error": mean_wrong_error,
            "mean_clean_error": mean_clean_error,
            "p_value": p_value,
        }

    def reset(self) -> None:
        """Forget all recorded trials."""
        self._records.clear()

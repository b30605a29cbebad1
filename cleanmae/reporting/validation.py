"""
cleanmae.reporting.validation
=============================

Reporting for the noisy-validation scheme.

- `format_mae_report`, `format_out_of_domain_report`,
  `format_delta_sigma_report`: the text lines printed by
  the command line, in a fixed order.
- `TrialReporter`: polars view over repeated-trial records, with a summary
  table and a plot of both estimators' errors.
- `plot_expected_mad_curve`: the correction curve with the inversion point.

Examples
--------
>>> from cleanmae.stats.schemes.noisy_validation.experiments import MAEExperimentResult
>>> from cleanmae.reporting.validation import format_mae_report
>>> result = MAEExperimentResult(true_mae=0.05, wrong_mae=0.23, clean_mae=0.1, sigma_combined=0.27)
>>> print("\\n".join(format_mae_report(result)))  # doctest: +NORMALIZE_WHITESPACE
MAE (real): 0.05
WrongMAE (usual way): 0.23
CleanMAE (our method) = 0.1
|WrongMAE - MAE| / |CleanMAE - MAE| = 3.6
Model STD: 0.12535
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import matplotlib.pyplot as plt
import polars as pl

from cleanmae.core.errors import OutOfDomainError
from cleanmae.runtime.runners import TrialRecord
from cleanmae.stats.common.expected_mad import ExpectedMADCurve
from cleanmae.stats.schemes.noisy_validation.experiments import (
    DeltaSigmaResult,
    MAEExperimentResult,
)

TRIAL_SCHEMA = {
    "trial": pl.Int64,
    "status": pl.Utf8,
    "true_mae": pl.Float64,
    "wrong_mae": pl.Float64,
    "clean_mae": pl.Float64,
    "wrong_error": pl.Float64,
    "clean_error": pl.Float64,
    "error_ratio": pl.Float64,
    "model_std": pl.Float64,
    "clean_is_closer": pl.Boolean,
}


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def format_mae_report(result: MAEExperimentResult) -> List[str]:
    """Lines reporting the true, naive and corrected MAE of one experiment."""
    return [
        f"MAE (real): {_fmt(result.true_mae)}",
        f"WrongMAE (usual way): {_fmt(result.wrong_mae)}",
        f"CleanMAE (our method) = {_fmt(result.clean_mae)}",
        f"|WrongMAE - MAE| / |CleanMAE - MAE| = {_fmt(result.error_ratio)}",
        f"Model STD: {_fmt(result.model_std)}",
    ]


def format_out_of_domain_report(error: OutOfDomainError) -> List[str]:
    """Lines reporting that the naive MAE could not be corrected."""
    return [
        f"WrongMAE (usual way): {_fmt(error.value)}",
        "CleanMAE (our method) = undefined: WrongMAE is outside the correction "
        f"range [{_fmt(error.lower)}, {_fmt(error.upper)}]",
    ]


def format_delta_sigma_report(result: DeltaSigmaResult) -> List[str]:
    """Lines comparing the real and observed change in standard deviation."""
    return [
        "Delta Sigma (obs) VS. Delta Sigma (real)",
        f"STD (real): {_fmt(result.real_std_a)} -> {_fmt(result.real_std_b)}, "
        f"diff: {_fmt(result.real_delta)}",
        f"STD (obs): {_fmt(result.observed_std_a)} -> {_fmt(result.observed_std_b)}, "
        f"diff: {_fmt(result.observed_delta)}",
    ]


def _record_row(record: TrialRecord) -> dict:
    row: dict = {name: None for name in TRIAL_SCHEMA}
    row.update(trial=record.trial, status=record.status, wrong_mae=record.wrong_mae)
    if record.result is not None:
        row.update(record.result.to_dict())
        row["clean_is_closer"] = record.result.clean_is_closer
    return {name: row[name] for name in TRIAL_SCHEMA}


@dataclass
class TrialReporter:
    """Repeated-trial view backed by a polars DataFrame."""

    df: pl.DataFrame

    @classmethod
    def from_records(cls, records: Iterable[TrialRecord]) -> "TrialReporter":
        """One row per trial; error columns are null for out-of-domain trials."""
        rows = [_record_row(r) for r in records]
        return cls(pl.DataFrame(rows, schema=TRIAL_SCHEMA))

    def summary_table(self) -> pl.DataFrame:
        """
        Returns one row per trial status with columns:
        - status, trials, clean_wins, mean_wrong_error, mean_clean_error
        """
        return (
            self.df.group_by("status")
            .agg(
                pl.len().alias("trials"),
                pl.col("clean_is_closer").sum().alias("clean_wins"),
                pl.col("wrong_error").mean().alias("mean_wrong_error"),
                pl.col("clean_error").mean().alias("mean_clean_error"),
            )
            .sort("status")
        )

    def plot(self, show: bool = True) -> Any:
        """Plot the absolute error of both estimators per trial."""
        ok = self.df.filter(pl.col("status") == "ok")

        fig = plt.figure(figsize=(6.5, 4.2))
        trials = ok["trial"].to_list()
        plt.plot(
            trials,
            ok["wrong_error"].to_list(),
            marker="o",
            linestyle="",
            label="|WrongMAE - MAE|",
        )
        plt.plot(
            trials,
            ok["clean_error"].to_list(),
            marker="s",
            linestyle="",
            label="|CleanMAE - MAE|",
        )
        plt.xlabel("Trial")
        plt.ylabel("Absolute error")
        plt.title("Naive vs corrected MAE")
        plt.legend()
        plt.tight_layout()
        if show:
            plt.show()
        return fig


def plot_expected_mad_curve(
    curve: ExpectedMADCurve,
    phi_obs: Optional[float] = None,
    ax: Optional[Any] = None,
) -> Any:
    """
    Plot ``h -> expected MAD`` and, if given, the inversion at ``phi_obs``.

    Returns:
        The matplotlib Figure holding the axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6.5, 4.2))
    else:
        fig = ax.figure

    ax.plot(curve.h, curve.phi, label=f"sigma = {curve.sigma:.4g}")
    if phi_obs is not None:
        h_obs = curve.invert(phi_obs)
        ax.axhline(phi_obs, linestyle=":", linewidth=1)
        ax.scatter([h_obs], [phi_obs], s=50, color="red", zorder=5, label="Observed")
    ax.set_xlabel("h")
    ax.set_ylabel("Expected MAD")
    ax.set_title("Expected MAD curve")
    ax.legend()
    return fig

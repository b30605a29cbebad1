import math

import pytest

from cleanmae.config import SimulationConfig
from cleanmae.core.errors import CleanMAEError, InvalidParameterError, OutOfDomainError
from cleanmae.runtime.runners import RepeatedTrialRunner
from cleanmae.stats.schemes.noisy_validation import experiments


def test_clean_estimate_beats_naive_over_repeated_runs():
    # sigma=0.07, sigma_x=0.18, sigma_y=0.20, 1000 points from U[8, 12]
    config = SimulationConfig(seed=2024, sample_size=1_000)
    runner = RepeatedTrialRunner.from_config(config)
    runner.run(200)

    summary = runner.get_summary()
    assert summary["total_trials"] == 200
    assert summary["completed_trials"] >= 150
    assert summary["win_rate"] > 0.9
    assert summary["p_value"] < 1e-6
    assert summary["mean_clean_error"] < summary["mean_wrong_error"]


def test_out_of_domain_trials_are_recorded(monkeypatch, caplog):
    calls = {"n": 0}
    real = experiments.run_mae_experiment

    def flaky(config, simulator):
        calls["n"] += 1
        if calls["n"] == 2:
            raise OutOfDomainError(0.1, 0.2, 1.3)
        return real(config, simulator)

    monkeypatch.setattr("cleanmae.runtime.runners.run_mae_experiment", flaky)
    runner = RepeatedTrialRunner.from_config(SimulationConfig(seed=1, sample_size=20_000))

    with caplog.at_level("WARNING"):
        records = runner.run(3)

    assert [r.status for r in records] == ["ok", "out_of_domain", "ok"]
    assert records[1].result is None
    assert records[1].wrong_mae == 0.1
    assert "Trial 1 skipped" in caplog.text

    summary = runner.get_summary()
    assert summary["completed_trials"] == 2
    assert summary["out_of_domain_trials"] == 1


def test_summary_of_empty_runner_is_nan():
    runner = RepeatedTrialRunner.from_config(SimulationConfig(seed=0))
    summary = runner.get_summary()
    assert summary["total_trials"] == 0
    assert math.isnan(summary["p_value"])


def test_run_accumulates_and_reset_clears():
    runner = RepeatedTrialRunner.from_config(SimulationConfig(seed=3, sample_size=5_000))
    runner.run(2)
    runner.run(3)
    assert [r.trial for r in runner.get_records()] == [0, 1, 2, 3, 4]
    runner.reset()
    assert runner.get_records() == []


def test_run_rejects_non_positive_counts():
    runner = RepeatedTrialRunner.from_config(SimulationConfig(seed=3))
    with pytest.raises(InvalidParameterError):
        runner.run(0)
    with pytest.raises(CleanMAEError):
        runner.run(-2)

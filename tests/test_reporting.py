import matplotlib.pyplot as plt
import polars as pl
import pytest

from cleanmae.core.errors import OutOfDomainError
from cleanmae.reporting.validation import (
    TrialReporter,
    format_delta_sigma_report,
    format_mae_report,
    format_out_of_domain_report,
    plot_expected_mad_curve,
)
from cleanmae.runtime.runners import TrialRecord
from cleanmae.stats.common.expected_mad import ExpectedMADCurve
from cleanmae.stats.schemes.noisy_validation.experiments import (
    DeltaSigmaResult,
    MAEExperimentResult,
)


@pytest.fixture
def records():
    return [
        TrialRecord(
            trial=0,
            status="ok",
            result=MAEExperimentResult(0.05, 0.22, 0.07, 0.27),
            wrong_mae=0.22,
        ),
        TrialRecord(trial=1, status="out_of_domain", wrong_mae=0.21),
        TrialRecord(
            trial=2,
            status="ok",
            result=MAEExperimentResult(0.06, 0.23, 0.2, 0.27),
            wrong_mae=0.23,
        ),
    ]


def test_mae_report_order():
    lines = format_mae_report(MAEExperimentResult(0.05, 0.23, 0.1, 0.27))
    prefixes = [
        "MAE (real): ",
        "WrongMAE (usual way): ",
        "CleanMAE (our method) = ",
        "|WrongMAE - MAE| / |CleanMAE - MAE| = ",
        "Model STD: ",
    ]
    assert len(lines) == len(prefixes)
    assert all(line.startswith(p) for line, p in zip(lines, prefixes))


def test_out_of_domain_report():
    lines = format_out_of_domain_report(OutOfDomainError(0.21, 0.2147, 1.3))
    assert lines[0] == "WrongMAE (usual way): 0.21"
    assert "undefined" in lines[1] and "0.2147" in lines[1]


def test_delta_sigma_report():
    lines = format_delta_sigma_report(DeltaSigmaResult(1.15, 0.58, 1.17, 0.61))
    assert lines[0] == "Delta Sigma (obs) VS. Delta Sigma (real)"
    assert lines[1] == "STD (real): 1.15 -> 0.58, diff: 0.57"
    assert lines[2].startswith("STD (obs): 1.17 -> 0.61, diff: 0.56")


def test_trial_frame(records):
    df = TrialReporter.from_records(records).df
    assert df.height == 3
    assert df["status"].to_list() == ["ok", "out_of_domain", "ok"]
    assert df["clean_mae"].null_count() == 1
    assert df["wrong_mae"].to_list() == [0.22, 0.21, 0.23]
    assert df.schema["clean_is_closer"] == pl.Boolean


def test_summary_table(records):
    summary = TrialReporter.from_records(records).summary_table()
    assert summary["status"].to_list() == ["ok", "out_of_domain"]
    assert summary["trials"].to_list() == [2, 1]

    ok = summary.filter(pl.col("status") == "ok").row(0, named=True)
    assert ok["clean_wins"] == 2
    assert ok["mean_wrong_error"] == pytest.approx((0.17 + 0.17) / 2)
    assert ok["mean_clean_error"] == pytest.approx((0.02 + 0.14) / 2)


def test_trial_plot(records):
    fig = TrialReporter.from_records(records).plot(show=False)
    ax = fig.axes[0]
    assert len(ax.lines) == 2
    assert len(ax.lines[0].get_xdata()) == 2
    plt.close(fig)


def test_curve_plot_marks_inversion():
    curve = ExpectedMADCurve.build(0.2692, size=500)
    fig = plot_expected_mad_curve(curve, phi_obs=0.25)
    ax = fig.axes[0]
    assert len(ax.collections) == 1
    offsets = ax.collections[0].get_offsets()
    assert offsets[0][0] == pytest.approx(curve.invert(0.25))
    plt.close(fig)


def test_curve_plot_rejects_out_of_range_observation():
    curve = ExpectedMADCurve.build(0.2692, size=500)
    fig, ax = plt.subplots()
    with pytest.raises(OutOfDomainError):
        plot_expected_mad_curve(curve, phi_obs=10.0, ax=ax)
    plt.close(fig)

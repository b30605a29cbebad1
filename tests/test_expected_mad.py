import math

import numpy as np
import pytest

from cleanmae.core.errors import InvalidParameterError
from cleanmae.stats.common.expected_mad import ExpectedMADCurve, expected_abs_gaussian


def test_zero_offset_is_gaussian_mean_absolute_deviation():
    for sigma in (0.1, 1.0, 7.5):
        expected = sigma * math.sqrt(2.0 / math.pi)
        assert float(expected_abs_gaussian(0.0, sigma)) == pytest.approx(expected, rel=1e-12)


def test_large_offset_tends_to_offset():
    assert float(expected_abs_gaussian(50.0, 1.0)) == pytest.approx(50.0, rel=1e-12)


def test_symmetric_in_offset_sign():
    m = np.linspace(-3.0, 3.0, 61)
    values = expected_abs_gaussian(m, 0.8)
    assert np.allclose(values, values[::-1])


def test_matches_monte_carlo():
    rng = np.random.default_rng(3)
    draws = rng.normal(0.4, 0.5, size=400_000)
    assert float(expected_abs_gaussian(0.4, 0.5)) == pytest.approx(np.abs(draws).mean(), rel=5e-3)


def test_zero_sigma_limit_is_absolute_value():
    m = np.array([-2.0, -0.5, 0.0, 0.5, 2.0])
    with np.errstate(all="raise"):
        values = expected_abs_gaussian(m, 0.0)
    assert np.array_equal(values, np.abs(m))


def test_negative_sigma_rejected():
    with pytest.raises(InvalidParameterError):
        expected_abs_gaussian(1.0, -0.1)


def test_curve_grid_shape_and_extent():
    curve = ExpectedMADCurve.build(0.2692)
    assert curve.h.shape == curve.phi.shape == (10_000,)
    assert curve.h[0] == 0.0
    assert curve.h[-1] == pytest.approx(5 * 0.2692)
    assert np.all(np.diff(curve.h) > 0)
    assert curve.phi_range == (float(curve.phi[0]), float(curve.phi[-1]))


@pytest.mark.parametrize("sigma", [1e-4, 0.07, 0.2692, 1.0, 42.0])
def test_curve_is_monotone_on_dense_grid(sigma):
    curve = ExpectedMADCurve.build(sigma, size=200_000)
    assert curve.is_monotone()
    assert np.all(np.diff(curve.phi) >= 0)


def test_dense_closed_form_non_decreasing():
    h = np.linspace(0.0, 10.0, 100_001)
    assert np.all(np.diff(expected_abs_gaussian(h, 1.3)) >= 0)


def test_curve_rejects_bad_grid():
    with pytest.raises(InvalidParameterError):
        ExpectedMADCurve.build(1.0, size=1)
    with pytest.raises(InvalidParameterError):
        ExpectedMADCurve.build(1.0, span=0.0)


def test_curves_are_rebuilt_each_time():
    first = ExpectedMADCurve.build(0.5)
    second = ExpectedMADCurve.build(0.5)
    assert first is not second
    assert np.array_equal(first.phi, second.phi)

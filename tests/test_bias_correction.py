import math

import numpy as np
import pytest

from cleanmae.core.errors import (
    InvalidParameterError,
    NegativeRadicandError,
    OutOfDomainError,
)
from cleanmae.stats.common.expected_mad import ExpectedMADCurve, expected_abs_gaussian
from cleanmae.stats.methods.bias_correction.core import (
    clean_mae_calc,
    combined_scale,
    mad_to_std,
    quadrature_subtract,
)


def test_combined_scale():
    assert combined_scale(0.18, 0.20) == pytest.approx(0.2691, abs=1e-4)
    assert combined_scale(0.0, 0.0) == 0.0
    with pytest.raises(InvalidParameterError):
        combined_scale(-0.1, 0.2)


@pytest.mark.parametrize("sigma", [0.05, 0.2692, 1.0, 3.7])
def test_round_trip_on_own_curve(sigma):
    sigma_x, sigma_y = 0.6 * sigma, 0.8 * sigma
    curve = ExpectedMADCurve.build(combined_scale(sigma_x, sigma_y))
    for k in (0, 1, 137, 5_000, 9_998, 9_999):
        clean = clean_mae_calc(float(curve.phi[k]), sigma_x, sigma_y)
        assert clean == pytest.approx(float(curve.h[k]), rel=1e-3, abs=1e-9 * sigma)


@pytest.mark.parametrize("sigma", [0.07, 0.2692, 2.0])
def test_round_trip_off_grid(sigma):
    for h in np.linspace(0.5 * sigma, 4.5 * sigma, 9):
        phi = float(expected_abs_gaussian(h, sigma))
        assert clean_mae_calc(phi, sigma, 0.0) == pytest.approx(h, rel=1e-3)


@pytest.mark.parametrize("phi", [0.0, 0.05, 0.3, 12.0])
def test_zero_noise_is_identity(phi):
    assert clean_mae_calc(phi, 0.0, 0.0) == pytest.approx(phi)


@pytest.mark.parametrize("phi", [-0.1, math.inf, -math.inf, math.nan])
def test_zero_noise_rejects_invalid_observation(phi):
    with pytest.raises(OutOfDomainError):
        clean_mae_calc(phi, 0.0, 0.0)


@pytest.mark.parametrize("phi", [0.22, 0.25, 0.4, 1.0])
def test_symmetric_in_noise_scales(phi):
    assert clean_mae_calc(phi, 0.18, 0.20) == pytest.approx(clean_mae_calc(phi, 0.20, 0.18))


def test_lower_boundary_maps_to_zero():
    sigma_x, sigma_y = 0.18, 0.20
    curve = ExpectedMADCurve.build(combined_scale(sigma_x, sigma_y))
    assert clean_mae_calc(float(curve.phi[0]), sigma_x, sigma_y) == float(curve.h[0]) == 0.0


def test_out_of_range_observations_raise():
    sigma_x, sigma_y = 0.18, 0.20
    curve = ExpectedMADCurve.build(combined_scale(sigma_x, sigma_y))
    lower, upper = curve.phi_range

    with pytest.raises(OutOfDomainError) as above:
        clean_mae_calc(upper * 1.01, sigma_x, sigma_y)
    assert above.value.upper == pytest.approx(upper)

    with pytest.raises(OutOfDomainError):
        clean_mae_calc(lower * 0.99, sigma_x, sigma_y)


def test_correction_reduces_naive_value():
    phi_obs = 0.229
    clean = clean_mae_calc(phi_obs, 0.18, 0.20)
    assert 0.0 < clean < phi_obs


def test_quadrature_subtract():
    assert quadrature_subtract(5.0, 3.0) == pytest.approx(4.0)
    assert quadrature_subtract(13.0, 3.0, 4.0) == pytest.approx(math.sqrt(144.0))
    assert quadrature_subtract(1.0) == 1.0
    assert quadrature_subtract(1.0, 0.6) == pytest.approx(0.8)
    assert quadrature_subtract(0.3, 0.3) == 0.0


def test_negative_radicand_raises():
    corrected = clean_mae_calc(0.3, 0.18, 0.20)
    with pytest.raises(NegativeRadicandError) as err:
        quadrature_subtract(corrected, corrected, corrected)
    assert err.value.radicand == pytest.approx(-corrected**2)


def test_negative_radicand_clamped_on_request(caplog):
    with caplog.at_level("WARNING"):
        assert quadrature_subtract(0.1, 0.2, clamp=True) == 0.0
    assert "clamping" in caplog.text


def test_mad_to_std():
    assert mad_to_std(1.0) == pytest.approx(1.2535)
    assert mad_to_std(1.0) == pytest.approx(math.sqrt(math.pi / 2), abs=5e-4)
    assert mad_to_std(0.0) == 0.0

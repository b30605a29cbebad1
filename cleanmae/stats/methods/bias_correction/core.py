"""
cleanmae.stats.methods.bias_correction.core
===========================================

Core mathematics of the bias correction.

Provides:
- `combined_scale`: quadrature sum of independent noise scales
- `clean_mae_calc`: curve-and-invert correction of an observed mean
  absolute difference
- `quadrature_subtract`: isolate an unknown noise component
- `mad_to_std`: convert a single-source MAD estimate to a standard deviation

Modeling assumption: real pairs have varying, unobserved true-value
differences, while the curve is swept over a single synthetic offset ``h``.
The population MAD is matched against that single-offset curve anyway; the
inverted ``h`` is a calibration value, not a physical offset. The procedure
is empirical.

Examples
--------
>>> from cleanmae.stats.methods.bias_correction.core import (
...     combined_scale, clean_mae_calc, quadrature_subtract, mad_to_std)
>>> round(combined_scale(0.18, 0.20), 4)
0.2691
>>> round(clean_mae_calc(0.25, 0.20, 0.18), 4) == round(clean_mae_calc(0.25, 0.18, 0.20), 4)
True
>>> round(quadrature_subtract(5.0, 3.0), 6)
4.0
>>> mad_to_std(2.0)
2.507
"""

from __future__ import annotations
import logging
import math

from cleanmae.core.errors import NegativeRadicandError, OutOfDomainError
from cleanmae.core.names import DEFAULT_SPAN, DEFAULT_TABLE_SIZE, GAUSSIAN_STD_PER_MAD
from cleanmae.stats.common.expected_mad import ExpectedMADCurve, check_scale

logger = logging.getLogger(__name__)


def combined_scale(sigma_x: float, sigma_y: float) -> float:
    """Return ``sqrt(sigma_x**2 + sigma_y**2)`` for two independent noise sources."""
    check_scale(sigma_x, "sigma_x")
    check_scale(sigma_y, "sigma_y")
    return math.hypot(sigma_x, sigma_y)


def clean_mae_calc(
    phi_obs: float,
    sigma_x: float,
    sigma_y: float,
    table_size: int = DEFAULT_TABLE_SIZE,
    span: float = DEFAULT_SPAN,
) -> float:
    """
    Bias-corrected mean absolute difference.

    Builds the expected-MAD curve for the combined scale of ``sigma_x`` and
    ``sigma_y`` over ``[0, span * sigma]`` and inverts it at ``phi_obs`` by
    linear interpolation.

    Args:
        phi_obs: Observed mean absolute difference between the noisy signals
        sigma_x: Noise scale propagated from the model inputs
        sigma_y: Noise scale of the test measurements
        table_size: Number of grid points of the curve
        span: Extent of the grid in units of the combined scale

    Returns:
        The offset ``h`` whose expected MAD equals ``phi_obs``

    Raises:
        InvalidParameterError: For negative or non-finite noise scales
        OutOfDomainError: If ``phi_obs`` is outside the tabulated range

    Note:
        With both scales zero the curve is the identity and ``phi_obs`` is
        returned unchanged; it must still be finite and non-negative.
    """
    sigma = combined_scale(sigma_x, sigma_y)

    if sigma == 0:
        if not math.isfinite(phi_obs) or phi_obs < 0:
            raise OutOfDomainError(float(phi_obs), 0.0, math.inf)
        return float(phi_obs)

    curve = ExpectedMADCurve.build(sigma, size=table_size, span=span)
    clean = curve.invert(phi_obs)
    logger.debug("Corrected MAD %g -> %g (combined sigma=%g)", phi_obs, clean, sigma)
    return clean


def quadrature_subtract(total: float, *known: float, clamp: bool = False) -> float:
    """
    Remove known independent noise components from a total scale.

    Args:
        total: Total scale (>= 0)
        *known: Scales of the known components (each >= 0)
        clamp: Return 0.0 instead of raising when the radicand is negative

    Returns:
        ``sqrt(total**2 - sum(k**2 for k in known))``

    Raises:
        NegativeRadicandError: If the known components exceed the total and
            ``clamp`` is False
    """
    check_scale(total, "total")
    for k in known:
        check_scale(k, "known")

    radicand = total**2 - sum(k**2 for k in known)
    if radicand < 0:
        if not clamp:
            raise NegativeRadicandError(radicand)
        logger.warning(
            "Known noise components exceed total scale %g (radicand=%g); clamping to 0",
            total,
            radicand,
        )
        return 0.0
    return math.sqrt(radicand)


def mad_to_std(mad: float) -> float:
    """Convert a single-source mean absolute difference to a Gaussian standard deviation.

    Uses ``std ≈ 1.2535 × MAD``. Apply to final estimates only.
    """
    return GAUSSIAN_STD_PER_MAD * mad

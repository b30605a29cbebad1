"""
cleanmae: a package for estimating a model's own error from noisy test data.

Comparing model output with measured "ground truth" overstates the model
error: the model inputs carry measurement noise that propagates into the
prediction, and the test data carry their own noise on top of that. The naive
mean absolute error (MAE) therefore mixes three independent Gaussian sources.

cleanmae separates them. A closed-form expression for the expected absolute
value of a shifted Gaussian is tabulated over a fine grid and inverted by
interpolation, which maps the naively observed MAE back to a bias-corrected
one. Known noise components can then be removed in quadrature, and a
MAD-based estimate converted into a Gaussian standard deviation.

The package is organised leaves-first:

- ``cleanmae.core``: errors, constants and the random sampling provider.
- ``cleanmae.stats``: generic numerics (``common``), the bias correction
  method (``methods``) and the synthetic validation scheme (``schemes``).
- ``cleanmae.runtime``: repeated-trial execution of synthetic experiments.
- ``cleanmae.reporting``: text, polars and matplotlib views of results.
- ``cleanmae.api``: a facade for real (non-synthetic) paired data.

Example
-------
>>> import cleanmae
>>> assert hasattr(cleanmae, "core")
>>> assert hasattr(cleanmae, "stats")
>>> round(cleanmae.clean_mae_calc(0.3, 0.0, 0.0), 6)
0.3
"""

from cleanmae import core, stats
from cleanmae.core.errors import (
    CleanMAEError,
    InvalidParameterError,
    LengthMismatchError,
    NegativeRadicandError,
    OutOfDomainError,
)
from cleanmae.stats.methods.bias_correction.core import (
    clean_mae_calc,
    combined_scale,
    mad_to_std,
    quadrature_subtract,
)

__all__ = [
    "core",
    "stats",
    "CleanMAEError",
    "InvalidParameterError",
    "LengthMismatchError",
    "NegativeRadicandError",
    "OutOfDomainError",
    "clean_mae_calc",
    "combined_scale",
    "mad_to_std",
    "quadrature_subtract",
]

"""
cleanmae.stats.common.interpolation
===================================

Linear interpolation over a monotone table.

Unlike `numpy.interp`, which silently clamps queries to the end values, the
interpolator here rejects anything outside the table. Values exactly on a
table boundary are returned exactly.

Examples
--------
>>> from cleanmae.stats.common.interpolation import interpolate_monotone
>>> interpolate_monotone([0.0, 1.0, 2.0], [10.0, 20.0, 40.0], 1.5)
30.0
>>> interpolate_monotone([0.0, 1.0, 2.0], [10.0, 20.0, 40.0], 0.0)
10.0
>>> interpolate_monotone([0.0, 1.0, 2.0], [10.0, 20.0, 40.0], 2.5)
Traceback (most recent call last):
...
cleanmae.core.errors.OutOfDomainError: Value 2.5 is outside the table range [0.0, 2.0]; extrapolation is not supported
"""

from __future__ import annotations
import math
from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

from cleanmae.core.errors import InvalidParameterError, OutOfDomainError

TableLike = Union[Sequence[float], npt.NDArray[np.float64]]


def interpolate_monotone(x_table: TableLike, y_table: TableLike, query: float) -> float:
    """
    Interpolate ``y`` at ``query`` between the two bracketing table entries.

    Args:
        x_table: Non-decreasing abscissae, at least two entries
        y_table: Ordinates, same length as ``x_table``
        query: Point to evaluate

    Returns:
        Linearly interpolated ordinate

    Raises:
        InvalidParameterError: If the tables are malformed or ``query`` is NaN
        OutOfDomainError: If ``query`` lies outside ``[x_table[0], x_table[-1]]``
    """
    xs = np.asarray(x_table, dtype=np.float64)
    ys = np.asarray(y_table, dtype=np.float64)

    if xs.ndim != 1 or xs.shape != ys.shape:
        raise InvalidParameterError("x_table and y_table must be 1-D and of equal length")
    if xs.size < 2:
        raise InvalidParameterError("Interpolation tables need at least two entries")
    if np.any(np.diff(xs) < 0):
        raise InvalidParameterError("x_table must be non-decreasing")
    if math.isnan(query):
        raise InvalidParameterError("Cannot interpolate at NaN")

    lower, upper = float(xs[0]), float(xs[-1])
    if query < lower or query > upper:
        raise OutOfDomainError(float(query), lower, upper)

    return float(np.interp(query, xs, ys))

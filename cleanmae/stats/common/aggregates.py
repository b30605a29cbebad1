"""
cleanmae.stats.common.aggregates
================================

Aggregate statistics over paired and single sequences.

Examples
--------
>>> from cleanmae.stats.common.aggregates import mean_absolute_difference, population_std
>>> mean_absolute_difference([1.0, 2.0, 3.0], [1.5, 2.0, 2.0])
0.5
>>> population_std([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
2.0
"""

from __future__ import annotations
from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

from cleanmae.core.errors import LengthMismatchError

SequenceLike = Union[Sequence[float], npt.NDArray[np.float64]]


def mean_absolute_difference(a: SequenceLike, b: SequenceLike) -> float:
    """Return the mean of ``|a[i] - b[i]|`` over paired positions.

    Raises:
        LengthMismatchError: If the sequences differ in length or are empty
    """
    xa = np.asarray(a, dtype=np.float64)
    xb = np.asarray(b, dtype=np.float64)
    if xa.shape != xb.shape:
        raise LengthMismatchError(
            f"Paired sequences differ in length: {xa.size} != {xb.size}"
        )
    if xa.size == 0:
        raise LengthMismatchError("Paired sequences must not be empty")
    return float(np.mean(np.abs(xa - xb)))


def population_std(values: SequenceLike) -> float:
    """Population standard deviation (``ddof=0``) of a non-empty sequence."""
    xs = np.asarray(values, dtype=np.float64)
    if xs.size == 0:
        raise LengthMismatchError("Cannot compute the spread of an empty sequence")
    return float(np.std(xs, ddof=0))

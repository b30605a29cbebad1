"""
cleanmae.core.names
===================

Typed names and constants shared across the package.

- `Signal`: a one-dimensional float array of samples.
- `GAUSSIAN_STD_PER_MAD`: ratio between the standard deviation and the mean
  absolute deviation of a zero-mean Gaussian. The value 1.2535 is empirical
  and close to, but not equal to, ``sqrt(pi / 2) = 1.25331...``.
- `DEFAULT_TABLE_SIZE`, `DEFAULT_SPAN`: resolution and extent (in units of
  the combined noise scale) of the expected-MAD curve.

Examples
--------
>>> import math
>>> from cleanmae.core.names import GAUSSIAN_STD_PER_MAD
>>> abs(GAUSSIAN_STD_PER_MAD - math.sqrt(math.pi / 2)) < 5e-4
True
"""

from __future__ import annotations
from typing import Literal

import numpy as np
import numpy.typing as npt

Signal = npt.NDArray[np.float64]

GAUSSIAN_STD_PER_MAD = 1.2535

DEFAULT_TABLE_SIZE = 10_000
DEFAULT_SPAN = 5.0

# Trial outcome tags used by the runtime and reporting layers.
TrialStatus = Literal["ok", "out_of_domain"]

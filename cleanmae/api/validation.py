"""
cleanmae.api.validation
=======================

Model validation against noisy test data.

Use this when you have paired model outputs and test measurements and
know (or have estimated) the noise of the model inputs and of the test data.

Examples
--------
>>> from cleanmae.api.validation import estimate_model_error
>>> est = estimate_model_error(
...     model_output=[10.3, 9.6, 11.2, 8.9],
...     test_data=[10.0, 9.9, 11.0, 9.3],
...     sigma_input=0.18,
...     sigma_test=0.20,
... )
>>> round(est.naive_mae, 4)
0.3
>>> est.clean_mae < est.naive_mae
True
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

from cleanmae.core.names import DEFAULT_SPAN, DEFAULT_TABLE_SIZE
from cleanmae.stats.common.aggregates import mean_absolute_difference
from cleanmae.stats.methods.bias_correction.core import (
    clean_mae_calc,
    combined_scale,
    mad_to_std,
)

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], npt.NDArray[np.float64]]


@dataclass(frozen=True)
class ModelErrorEstimate:
    """
    Model error estimated from noisy test data.

    Attributes
    ----------
    naive_mae : float
        Mean absolute difference between model output and test data
    clean_mae : float
        Bias-corrected MAE, free of input and test noise
    model_std : float
        Gaussian standard deviation of the model's own error
    sigma_combined : float
        Combined scale of the input and test noise that was removed
    sample_size : int
        Number of paired points used
    """

    naive_mae: float
    clean_mae: float
    model_std: float
    sigma_combined: float
    sample_size: int


def estimate_model_error(
    model_output: ArrayLike,
    test_data: ArrayLike,
    sigma_input: float,
    sigma_test: float,
    table_size: int = DEFAULT_TABLE_SIZE,
    span: float = DEFAULT_SPAN,
) -> ModelErrorEstimate:
    """
    Estimate a model's own error from paired, noisy data.

    Parameters
    ----------
    model_output : array-like
        Model predictions computed from measured (noisy) inputs
    test_data : array-like
        Test measurements of the same quantity, paired with ``model_output``
    sigma_input : float
        Noise std propagated from the model inputs into its output
    sigma_test : float
        Noise std of each test measurement
    table_size, span : optional
        Resolution and extent of the correction curve

    Returns
    -------
    ModelErrorEstimate

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length or are empty
    OutOfDomainError
        If the naive MAE is below what the stated noise alone would produce;
        the noise scales are then overestimated or the sample is too small
    """
    naive = mean_absolute_difference(model_output, test_data)
    clean = clean_mae_calc(naive, sigma_input, sigma_test, table_size=table_size, span=span)
    logger.info("Model error estimate: naive MAE=%.5g, clean MAE=%.5g", naive, clean)

    return ModelErrorEstimate(
        naive_mae=naive,
        clean_mae=clean,
        model_std=mad_to_std(clean),
        sigma_combined=combined_scale(sigma_input, sigma_test),
        sample_size=int(np.asarray(model_output).size),
    )

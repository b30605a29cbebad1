"""
cleanmae.api - User-Friendly Facade
===================================

Off-the-shelf entry points for validating a model against real (not
simulated) test data. The facade hides the curve construction and the
noise bookkeeping behind a single call.

Examples
--------
>>> from cleanmae.api.validation import estimate_model_error
>>> estimate = estimate_model_error([1.0, 2.0], [1.0, 2.0], sigma_input=0.0, sigma_test=0.0)
>>> estimate.naive_mae, estimate.clean_mae
(0.0, 0.0)
"""

"""
Bias correction of mean absolute differences between noisy signals.

When a model output and a test measurement of the same quantity each carry
independent Gaussian noise, their naive mean absolute difference overstates
the model's own error. The correction tabulates the closed-form expected
absolute difference over a fine grid and inverts it at the observed value.

The core functions, including the curve inversion, quadrature subtraction
and the MAD-to-standard-deviation conversion, are available in the `core`
module.

Key concepts:
- Combined scale: ``sqrt(sigma_x**2 + sigma_y**2)`` for independent sources
- Quadrature subtraction: removing known variances from a total
- ``std ≈ 1.2535 × MAD`` for a single zero-mean Gaussian source
"""

"""
Statistical methods for bias-corrected error estimation.

The subpackage separates generic numerics from their application:

1. **Common** (cleanmae.stats.common):
   Generic, reusable building blocks that know nothing about models or
   test data: paired aggregates, monotone-table interpolation and the
   closed-form expected absolute value of a shifted Gaussian.

2. **Methods** (cleanmae.stats.methods):
   The bias correction itself, composed from the common blocks.

3. **Schemes** (cleanmae.stats.schemes):
   Problem-specific setups that apply the methods, e.g. the synthetic
   noisy-validation experiment used to check the correction.

Example:
--------
>>> # Generic building block
>>> from cleanmae.stats.common.expected_mad import expected_abs_gaussian
>>> round(float(expected_abs_gaussian(0.0, 1.0)), 4)
0.7979

>>> # Method built on top of it
>>> from cleanmae.stats.methods.bias_correction.core import clean_mae_calc
>>> phi = float(expected_abs_gaussian(1.0, 1.0))
>>> round(clean_mae_calc(phi, 0.6, 0.8), 3)
1.0
"""

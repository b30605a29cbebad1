"""
Methods that turn noisy comparisons into bias-corrected error estimates.

Available methods:
- `bias_correction`: curve-and-invert correction of the naive mean absolute
  difference, quadrature subtraction and MAD-to-std conversion.
"""

"""
Problem-specific setups that apply the bias correction.

Available schemes:
- `noisy_validation`: validating a model against noisy test data when the
  model inputs are themselves noisy measurements. Provides the signal
  simulator and the demonstration experiments.
"""

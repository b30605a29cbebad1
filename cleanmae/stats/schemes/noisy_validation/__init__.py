"""
Noisy model validation scheme.

A true signal ``b`` is measured for testing (``y = b + e_y``) and predicted
by a model with its own error (``a = b + e_model``). In practice the model
is fed measured inputs, so its output carries propagated input noise as well
(``x = a + e_x``). Only ``x`` and ``y`` are observable.

Modules:
- `simulator`: `SignalSimulator`, synthetic signals and noisy derivatives
- `experiments`: the MAE and delta-sigma demonstrations
"""

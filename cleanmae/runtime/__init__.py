"""
cleanmae.runtime
================

Runtime environment for executing synthetic validation experiments.

Key Components
--------------
- `TrialRecord`: outcome of one trial, successful or not
- `RepeatedTrialRunner`: runs the MAE experiment many times and summarises
  how often the corrected estimate beats the naive one

Examples
--------
>>> from cleanmae.config import SimulationConfig
>>> from cleanmae.runtime.runners import RepeatedTrialRunner
>>> runner = RepeatedTrialRunner.from_config(SimulationConfig(seed=5, sample_size=2_000))
>>> records = runner.run(3)
>>> len(records)
3
"""

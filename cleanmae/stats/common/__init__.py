"""
cleanmae.stats.common.__init__.py
=================================

Common numerical methods and utilities.

This module contains generic implementations that the bias correction
method and the simulation schemes are built from. Nothing here depends on
the meaning of the sequences involved.
"""

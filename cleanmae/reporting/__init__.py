"""
cleanmae.reporting
==================

Views of experiment outcomes: text lines for the command line, polars
tables of repeated trials and matplotlib plots of the correction curve.
"""

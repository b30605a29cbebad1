"""
cleanmae.core
=============

Infrastructure shared by every other subpackage: the exception hierarchy,
named constants and the pluggable random sampling provider.
"""

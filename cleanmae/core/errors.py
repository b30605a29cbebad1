"""
cleanmae.core.errors
====================

Exceptions raised by cleanmae.

Every error is a local computation failure: the caller either supplies valid
parameters or receives exactly one of the exceptions below. All of them are
``ValueError`` subclasses, so callers that already guard numeric input with
``except ValueError`` keep working.

Examples
--------
>>> from cleanmae.core.errors import OutOfDomainError, CleanMAEError
>>> err = OutOfDomainError(2.0, 0.0, 1.0)
>>> isinstance(err, CleanMAEError), isinstance(err, ValueError)
(True, True)
>>> err.value, err.lower, err.upper
(2.0, 0.0, 1.0)
"""

from __future__ import annotations


class CleanMAEError(ValueError):
    """Base class for all cleanmae errors."""


class InvalidParameterError(CleanMAEError):
    """A parameter was rejected before any computation took place.

    Raised for non-positive sample counts, ``low > high``, negative or
    non-finite noise scales and malformed tables.
    """


class LengthMismatchError(CleanMAEError):
    """Paired sequences have unequal or zero length."""


class OutOfDomainError(CleanMAEError):
    """A query falls outside the range covered by an interpolation table.

    Attributes:
        value: The rejected query
        lower: Smallest value covered by the table
        upper: Largest value covered by the table
    """

    def __init__(self, value: float, lower: float, upper: float):
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Value {value!r} is outside the table range [{lower!r}, {upper!r}]; "
            "extrapolation is not supported"
        )


class NegativeRadicandError(CleanMAEError):
    """Quadrature subtraction produced a negative value under the square root.

    This means the known noise components exceed the observed total, i.e. the
    noise model does not describe the data.

    Attributes:
        radicand: The negative value ``total**2 - sum(known**2)``
    """

    def __init__(self, radicand: float):
        self.radicand = radicand
        super().__init__(
            f"Known noise components exceed the total scale (radicand={radicand!r})"
        )

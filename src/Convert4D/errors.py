# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 10:21:08 2026

@author: p-sik

Errors and advisories raised by the Convert4D converters.

Errors abort a conversion. Advisories are warnings: the conversion succeeded
but a guess (not an explicit argument) decided part of the result. Use the
standard ``warnings`` filters to silence them or turn them into errors::

    import warnings
    from Convert4D.errors import ConversionAdvisory

    warnings.simplefilter("error", ConversionAdvisory)
"""

__all__ = [
    "ConversionError",
    "IncompatibleDimensions",
    "DimensionsRequired",
    "UnsupportedRank",
    "CoordinateOutOfRange",
    "NonPositiveCoordinate",
    "MissingValueColumn",
    "MissingCoordinateColumns",
    "ConversionAdvisory",
    "DimensionGuessWarning",
    "AxisGuessWarning",
    "ColourScaleWarning",
    "DegenerateRescaleWarning",
    "OneDimensionalWarning",
]


class ConversionError(ValueError):
    """Base class of all conversion failures."""


class IncompatibleDimensions(ConversionError):
    """Explicit dimensions do not match the number of values."""


class DimensionsRequired(ConversionError):
    """No explicit dimensions and no shape guess fits the input length."""


class UnsupportedRank(ConversionError):
    """Array has a number of (non-empty) axes the converter cannot map."""


class CoordinateOutOfRange(ConversionError, IndexError):
    """A coordinate is not an integer in ``[1, axis size]``."""


class NonPositiveCoordinate(ConversionError):
    """A table holds a coordinate value <= 0."""


class MissingValueColumn(ConversionError):
    """The requested value column is not in the table."""


class MissingCoordinateColumns(ConversionError):
    """The table has none of the recognized coordinate columns."""


# -----------------------------------------------------------------------------
# Advisories
# -----------------------------------------------------------------------------

class ConversionAdvisory(UserWarning):
    """Base class of all advisories."""


class DimensionGuessWarning(ConversionAdvisory):
    """Image dimensions were guessed."""


class AxisGuessWarning(ConversionAdvisory):
    """The meaning of an array axis (colour or depth) was guessed."""


class ColourScaleWarning(ConversionAdvisory):
    """A custom colour scale is combined with rescaling."""


class DegenerateRescaleWarning(ConversionAdvisory):
    """Rescaling a constant image; all values were mapped to the midpoint."""


class OneDimensionalWarning(ConversionAdvisory):
    """Image has a single non-empty axis."""

# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 10:47:15 2026

@author: p-sik

Image dimensions: resolving a 4-axis shape for flat input, and mapping
1-based pixel coordinates to offsets into the canonical flat sequence.
"""
from __future__ import annotations

import math
import warnings
from typing import Mapping, NamedTuple, Optional, Sequence

import numpy as np

from .dtypes import AXES, COORD_COLUMNS
from .errors import (
    CoordinateOutOfRange,
    DimensionGuessWarning,
    DimensionsRequired,
    IncompatibleDimensions,
)


class Dimensions(NamedTuple):
    """Canonical image dimensions (width, height, depth, spectrum)."""
    x: int
    y: int
    z: int
    c: int

    @property
    def size(self) -> int:
        """Number of pixel values."""
        return self.x * self.y * self.z * self.c


def as_dimensions(dims: Sequence[int]) -> Dimensions:
    """
    Validate a 4-sequence of axis sizes and return it as ``Dimensions``.

    Raises
    ------
    IncompatibleDimensions
        If ``dims`` does not hold exactly four positive integers.
    """
    if isinstance(dims, Dimensions):
        return dims
    dims = tuple(dims)
    if len(dims) != 4:
        raise IncompatibleDimensions(
            f"dims must have 4 entries (x, y, z, c), got {dims}")
    return Dimensions(*(_axis_size(AXES[i], d) for i, d in enumerate(dims)))


def _axis_size(name, value):
    if isinstance(value, (bool, np.bool_)):
        raise IncompatibleDimensions(f"{name} size must be an integer, got {value!r}")
    try:
        size = int(value)
    except (TypeError, ValueError):
        raise IncompatibleDimensions(
            f"{name} size must be an integer, got {value!r}") from None
    if size != value or size < 1:
        raise IncompatibleDimensions(
            f"{name} size must be a positive integer, got {value!r}")
    return size


def _integer_root(n, power):
    """Return ``d`` with ``d**power == n`` exactly, else None."""
    if n < 1:
        return None
    if power == 2:
        d = math.isqrt(n)
    else:
        d = int(round(float(np.cbrt(n))))
        # float cube roots can land one off for large n
        d = min((d - 1, d, d + 1), key=lambda k: abs(k ** power - n))
    return d if d >= 1 and d ** power == n else None


# (advisory, channels, root power, dims built from the root d)
_GUESSES = (
    ("square 2D image", 1, 2, lambda d: (d, d, 1, 1)),
    ("square 2D RGB image", 3, 2, lambda d: (d, d, 1, 3)),
    ("cubic 3D image", 1, 3, lambda d: (d, d, d, 1)),
    ("cubic 3D RGB image", 3, 3, lambda d: (d, d, d, 3)),
)


def infer_dimensions(length: int,
                     x: Optional[int] = None,
                     y: Optional[int] = None,
                     z: Optional[int] = None,
                     cc: Optional[int] = None,
                     dim: Optional[Sequence[int]] = None) -> Dimensions:
    """
    Resolve the 4-axis shape of a flat sequence of ``length`` values.

    If any axis size is given (individually or through ``dim``), the axes
    left unspecified default to 1 and the product of the sizes must equal
    ``length``. If none is given, the shape is guessed, trying in order a
    square grayscale image, a square RGB image, a cubic grayscale volume and
    a cubic RGB volume. A guess emits a ``DimensionGuessWarning``.

    Parameters
    ----------
    length : int
        Number of values.
    x, y, z, cc : int or None
        Width, height, depth and spectrum. ``None`` means unspecified.
    dim : sequence of 4 ints or None
        All four sizes at once; overrides ``x, y, z, cc``.

    Returns
    -------
    Dimensions

    Raises
    ------
    IncompatibleDimensions
        Explicit sizes do not multiply to ``length`` or are not positive
        integers.
    DimensionsRequired
        No size given and no guess matches.
    """
    if dim is not None:
        dim = tuple(dim)
        if len(dim) != 4:
            raise IncompatibleDimensions(
                f"dim must have 4 entries (x, y, z, c), got {dim}")
        x, y, z, cc = dim

    explicit = (x, y, z, cc)
    if any(v is not None for v in explicit):
        dims = as_dimensions([1 if v is None else v for v in explicit])
        if dims.size != length:
            raise IncompatibleDimensions(
                f"Dimensions {tuple(dims)} hold {dims.size} values, "
                f"input has {length}")
        return dims

    if length >= 1:
        for label, channels, power, build in _GUESSES:
            if length % channels:
                continue
            d = _integer_root(int(length) // channels, power)
            if d is not None and Dimensions(*build(d)).size == length:
                warnings.warn(f"Guessing input is a {label}",
                              DimensionGuessWarning, stacklevel=2)
                return Dimensions(*build(d))

    raise DimensionsRequired(
        f"Cannot guess the shape of {length} values, "
        "please provide image dimensions")


def linear_offset(dims: Sequence[int], coord: Mapping[str, object]):
    """
    Map 1-based pixel coordinates to 0-based offsets into the flat
    (x-fastest) sequence of an image of dimensions ``dims``.

    ``offset = (x-1) + (y-1)*X + (z-1)*X*Y + (c-1)*X*Y*Z``

    Parameters
    ----------
    dims : sequence of 4 ints
        Image dimensions.
    coord : mapping
        Coordinates keyed by axis name (``x``, ``y``, ``z``, ``c`` or
        ``cc``). Values are scalars or equal-length arrays. Missing axes
        default to 1.

    Returns
    -------
    int or numpy.ndarray of int64

    Raises
    ------
    CoordinateOutOfRange
        A coordinate is not an integer in ``[1, axis size]``.
    """
    dims = as_dimensions(dims)

    per_axis = {}
    for name, value in coord.items():
        key = str(name).lower()
        if key not in COORD_COLUMNS:
            raise ValueError(f"Unknown coordinate axis {name!r}")
        axis = COORD_COLUMNS[key]
        if axis in per_axis:
            raise ValueError(f"Coordinate for axis {AXES[axis]!r} given twice")
        per_axis[axis] = value

    offset = 0
    stride = 1
    for axis, size in enumerate(dims):
        if axis in per_axis:
            v = _checked_coordinate(AXES[axis], per_axis[axis], size)
            offset = offset + (v - 1) * stride
        stride *= size

    if np.ndim(offset) == 0:
        return int(offset)
    return offset


def _checked_coordinate(name, value, size):
    v = np.asarray(value)
    if v.dtype.kind == "b" or v.dtype.kind not in "iuf":
        raise CoordinateOutOfRange(
            f"{name} coordinates must be integers, got dtype {v.dtype}")
    if v.dtype.kind == "f":
        bad = ~np.isfinite(v) | (v != np.round(v))
        if np.any(bad):
            raise CoordinateOutOfRange(
                f"{name} coordinate {np.atleast_1d(v[bad])[0]} "
                "is not an integer")
    bad = (v < 1) | (v > size)
    if np.any(bad):
        raise CoordinateOutOfRange(
            f"{name} coordinate {np.atleast_1d(v[bad])[0]} "
            f"outside [1, {size}]")
    return v.astype(np.int64)

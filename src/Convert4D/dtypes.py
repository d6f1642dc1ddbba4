# -*- coding: utf-8 -*-
"""
Convert4D.dtypes
================

Canonical axis names and NumPy dtypes used across Convert4D.

Every pixel array handled by the library has exactly four axes, always in
the same order:

- ``x`` : width
- ``y`` : height
- ``z`` : depth (frames)
- ``c`` : channel / spectrum

The flat storage order is x-fastest (Fortran order in NumPy terms), so the
canonical flat sequence of an image ``im`` is ``im.ravel(order="F")``.
"""

from __future__ import annotations

import numpy as np

__all__ = [
    "AXES",
    "AXIS_INDEX",
    "COORD_COLUMNS",
    "FLAT_ORDER",
    "PIXEL_DTYPE",
    "DTYPE_MAP",
    "as_pixel_dtype",
]

# -----------------------------------------------------------------------------
# Axes
# -----------------------------------------------------------------------------

AXES = ("x", "y", "z", "c")

FLAT_ORDER = "F"
"""NumPy memory order giving the canonical x-fastest flat sequence."""

COORD_COLUMNS = {
    "x": 0,
    "y": 1,
    "z": 2,
    "c": 3,
    "cc": 3,
}
"""
Mapping of recognized coordinate column names to axis positions.

``c`` and ``cc`` are both accepted for the channel axis.
"""

AXIS_INDEX = {name: i for i, name in enumerate(AXES)}

# -----------------------------------------------------------------------------
# Element types
# -----------------------------------------------------------------------------

PIXEL_DTYPE = np.dtype(np.float64)
"""Floating point type boolean and integer input is coerced to."""

DTYPE_MAP = {
    "float16": np.float16,
    "float32": np.float32,
    "float64": np.float64,
}
"""
Mapping of dtype name strings to NumPy dtypes.

This is used to interpret the ``dtype`` entry of TOML configuration files.
"""


def as_pixel_dtype(arr):
    """
    Return ``arr`` with boolean and integer element types coerced to
    ``PIXEL_DTYPE``. Floating point (and complex) arrays pass through
    untouched, without a copy.
    """
    arr = np.asarray(arr)
    if arr.dtype.kind in "biu":
        return arr.astype(PIXEL_DTYPE)
    if arr.dtype.kind not in "fc":
        raise TypeError(f"Pixel values must be numeric, got dtype {arr.dtype}")
    return arr

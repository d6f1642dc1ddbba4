# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 14:03:22 2026

@author: p-sik

Conversion between pixel arrays and tables (pandas DataFrames).

A long table holds one row per pixel with 1-based coordinate columns
(``x``, ``y``, ``z``, ``cc``) and a value column. A wide table holds one row
per location and one value column per channel (``c.1``, ``c.2``, ...) or per
depth frame (``z.1``, ``z.2``, ...).
"""
from __future__ import annotations

import warnings

import numpy as np
import pandas as pd

from .config import CHANNEL_COLUMN, DEFAULT_DROP_UNUSED, DEFAULT_VALUE_COLUMN
from .dims import as_dimensions, linear_offset
from .dtypes import COORD_COLUMNS, FLAT_ORDER, PIXEL_DTYPE, as_pixel_dtype
from .errors import (
    CoordinateOutOfRange,
    DimensionGuessWarning,
    MissingCoordinateColumns,
    MissingValueColumn,
    NonPositiveCoordinate,
)
from .normalize import dimensions, normalize

# Column name of each axis in generated tables
GRID_COLUMNS = ("x", "y", "z", CHANNEL_COLUMN)

WIDE_MODES = {
    None: "none",
    False: "none",
    "none": "none",
    "c": "c",
    "by_channel": "c",
    "d": "d",
    "by_depth": "d",
}


def _wide_mode(wide):
    try:
        return WIDE_MODES[wide]
    except (KeyError, TypeError):
        raise ValueError(
            f"wide must be one of 'none', 'c' or 'd', got {wide!r}") from None


def pixel_grid(dims, drop_unused=DEFAULT_DROP_UNUSED, standardise=False,
               exclude=()):
    """
    Coordinates of every pixel of an image of dimensions ``dims``, in
    canonical (x-fastest) order.

    Parameters
    ----------
    dims : sequence of 4 ints
        Image dimensions (x, y, z, c).
    drop_unused : bool, optional
        If True, leave out the ``z`` and ``cc`` columns when that axis has
        size 1. ``x`` and ``y`` are always present. Default is True.
    standardise : bool, optional
        If True, centre the spatial coordinates (x, y, z) on the middle of
        the image and divide them by the largest of width and height, so
        that the longest side spans roughly [-0.5, 0.5]. Default is False.
    exclude : iterable of str, optional
        Column names to leave out regardless of ``drop_unused``.

    Returns
    -------
    pandas.DataFrame
        One row per pixel, one column per kept axis.
    """
    dims = as_dimensions(dims)
    exclude = set(exclude)
    index = np.unravel_index(np.arange(dims.size), dims, order=FLAT_ORDER)
    scale = max(dims.x, dims.y)

    columns = {}
    for axis, name in enumerate(GRID_COLUMNS):
        if name in exclude:
            continue
        if drop_unused and axis >= 2 and dims[axis] == 1:
            continue
        coord = index[axis] + 1
        if standardise and axis < 3:
            coord = (coord - (dims[axis] + 1) / 2) / scale
        columns[name] = coord

    return pd.DataFrame(columns)


def to_frame(image, wide=None, drop_unused=DEFAULT_DROP_UNUSED,
             standardise=False, value_column=DEFAULT_VALUE_COLUMN):
    """
    Convert a pixel array to a table.

    Parameters
    ----------
    image : array_like
        Pixel array (x, y, z, c). 2 and 3 axis arrays are normalized first.
    wide : {None, "c", "d"}, optional
        None (or "none") gives one row per pixel with a ``value_column``.
        "c" gives one row per (x, y, z) location and one column per channel,
        "d" one row per (x, y, c) location and one column per depth frame.
    drop_unused : bool, optional
        Leave out coordinate columns of unit axes (see ``pixel_grid``).
    standardise : bool, optional
        Use centred, scaled coordinates (see ``pixel_grid``). Such a table
        cannot be decoded back with ``from_frame``.
    value_column : str, optional
        Name of the value column in long format. Default is "value".

    Returns
    -------
    pandas.DataFrame

    Examples
    --------
    >>> im = np.arange(6.0).reshape(3, 2, 1, 1, order="F")
    >>> to_frame(im).head(2)
       x  y  value
    0  1  1    0.0
    1  2  1    1.0
    """
    im = normalize(image)
    dims = dimensions(im)
    mode = _wide_mode(wide)

    if mode == "c":
        table = pixel_grid(dims._replace(c=1), drop_unused, standardise,
                           exclude=(CHANNEL_COLUMN,))
        for k in range(dims.c):
            table[f"c.{k + 1}"] = im[:, :, :, k].ravel(order=FLAT_ORDER)
    elif mode == "d":
        table = pixel_grid(dims._replace(z=1), drop_unused, standardise,
                           exclude=("z",))
        for k in range(dims.z):
            table[f"z.{k + 1}"] = im[:, :, k, :].ravel(order=FLAT_ORDER)
    else:
        if value_column.lower() in COORD_COLUMNS:
            raise ValueError(
                f"value_column {value_column!r} clashes with a coordinate "
                "column")
        table = pixel_grid(dims, drop_unused, standardise)
        table[value_column] = im.ravel(order=FLAT_ORDER)

    return table


def from_frame(table, value_column=DEFAULT_VALUE_COLUMN, dims=None,
               dtype=None, verbose=0):
    """
    Build a pixel array from a long table.

    Each row holds the 1-based coordinates of one pixel (columns ``x``,
    ``y``, ``z`` and ``c`` or ``cc``, any subset, case-insensitive) and its
    value. Other columns are ignored. Pixels without a row are 0. When
    several rows address the same pixel, the last one wins.

    Parameters
    ----------
    table : pandas.DataFrame or mapping of columns
        Input table.
    value_column : str, optional
        Column holding the pixel values. Default is "value".
    dims : sequence of 4 ints or None, optional
        Image dimensions. If None, each axis size is taken as the largest
        coordinate found on that axis (1 for absent axes) and a
        ``DimensionGuessWarning`` is emitted.
    dtype : numpy dtype or None, optional
        Element type of the result. If None, float64 (or complex128 for
        complex values).
    verbose : int, optional
        Print status messages if > 0. Default is 0.

    Returns
    -------
    numpy.ndarray
        Newly allocated pixel array (x, y, z, c).

    Raises
    ------
    MissingCoordinateColumns
        No coordinate column in ``table``.
    MissingValueColumn
        No column named ``value_column``.
    NonPositiveCoordinate
        A coordinate is <= 0.
    CoordinateOutOfRange
        A coordinate is not an integer or exceeds ``dims``.
    """
    if not isinstance(table, pd.DataFrame):
        table = pd.DataFrame(table)

    lookup = {}
    for col in table.columns:
        key = str(col).lower()
        if key in lookup:
            raise ValueError(f"Column names {lookup[key]!r} and {col!r} "
                             "differ only by case")
        lookup[key] = col

    value_key = str(value_column).lower()
    coord_keys = [k for k in lookup if k in COORD_COLUMNS and k != value_key]
    if not coord_keys:
        raise MissingCoordinateColumns(
            "Input must have (x, y, value) format or similar, "
            f"found columns {list(table.columns)}")
    if "c" in coord_keys and "cc" in coord_keys:
        raise ValueError("Table has both 'c' and 'cc' channel columns")
    if value_key not in lookup:
        raise MissingValueColumn(f"Variable {value_column} is missing")

    coords = {k: table[lookup[k]].to_numpy() for k in coord_keys}
    for key, v in coords.items():
        if v.dtype.kind == "f" and not np.isfinite(v).all():
            raise CoordinateOutOfRange(
                f"Indices must be finite, column {lookup[key]!r} holds "
                f"{v[~np.isfinite(v)][0]}")
        if v.size and np.any(v <= 0):
            raise NonPositiveCoordinate(
                f"Indices must be positive, column {lookup[key]!r} "
                f"has minimum {v.min()}")

    if dims is None:
        warnings.warn("Guessing image dimensions from maximum coordinate "
                      "values", DimensionGuessWarning, stacklevel=2)
        guess = [1, 1, 1, 1]
        for key, v in coords.items():
            if v.size:
                guess[COORD_COLUMNS[key]] = int(np.ceil(np.nanmax(v)))
        dims = guess
    dims = as_dimensions(dims)

    if verbose:
        print(f"[INFO] Decoding {len(table)} rows into an image of "
              f"dimensions {tuple(dims)}...")

    offsets = np.atleast_1d(linear_offset(dims, coords))
    values = as_pixel_dtype(table[lookup[value_key]].to_numpy())

    # last occurrence of every offset
    _, first_rev = np.unique(offsets[::-1], return_index=True)
    keep = offsets.size - 1 - first_rev
    if verbose and keep.size < offsets.size:
        print(f"[INFO] {offsets.size - keep.size} rows address an already "
              "written pixel; keeping the last value.")

    flat = np.zeros(dims.size, dtype=np.result_type(PIXEL_DTYPE, values.dtype))
    flat[offsets[keep]] = values[keep]
    if dtype is not None:
        flat = flat.astype(dtype, copy=False)
    return flat.reshape(dims, order=FLAT_ORDER)

# -*- coding: utf-8 -*-
"""
Created on Thu Oct  8 16:30:57 2026

@author: p-sik

Exchange of pixel arrays with spatial grid objects (by default
``xarray.DataArray``).

Spatial grids are 2D and single-valued, with rows running along y from the
bottom of the image up and columns along x. A pixel array therefore maps to
one grid per (frame, channel) plane, each plane rotated by 90 degrees.
"""
from __future__ import annotations

import numpy as np
import xarray as xr

from .dtypes import as_pixel_dtype
from .errors import UnsupportedRank
from .normalize import dimensions, normalize


def default_window(width, height):
    """Spatial window ((xmin, xmax), (ymin, ymax)) of unit-sized pixels."""
    return ((0.0, float(width)), (0.0, float(height)))


def dataarray_grid(values, window):
    """
    Build an ``xarray.DataArray`` spatial grid from a (rows, cols) array.

    Coordinates are pixel centres spread evenly over ``window``; the window
    itself is kept in ``attrs["window"]``.
    """
    n_rows, n_cols = values.shape
    (xmin, xmax), (ymin, ymax) = window
    dx = (xmax - xmin) / n_cols
    dy = (ymax - ymin) / n_rows
    xs = xmin + (np.arange(n_cols) + 0.5) * dx
    ys = ymin + (np.arange(n_rows) + 0.5) * dy
    return xr.DataArray(values,
                        dims=("y", "x"),
                        coords={"y": ys, "x": xs},
                        attrs={"window": ((xmin, xmax), (ymin, ymax))})


def to_external(image, window=None, grid_factory=dataarray_grid):
    """
    Convert a pixel array to spatial grid objects.

    Parameters
    ----------
    image : array_like
        Pixel array (x, y, z, c). 2 and 3 axis arrays are normalized first.
    window : ((xmin, xmax), (ymin, ymax)) or None, optional
        Spatial extent of each grid. Default is one unit per pixel starting
        at the origin.
    grid_factory : callable, optional
        ``grid_factory(values, window)`` builds one grid from a 2D array.
        Default is ``dataarray_grid``.

    Returns
    -------
    grid, list of grids or list of lists of grids
        A single grid for a single frame, single channel image. Otherwise
        one grid per frame, per channel, or (both > 1) a list over frames
        of lists over channels.
    """
    im = normalize(image)
    dims = dimensions(im)
    if window is None:
        window = default_window(dims.x, dims.y)

    planes = []
    for z in range(dims.z):
        row = []
        for c in range(dims.c):
            # (x, y) -> (y, x) with the last y row first
            values = np.rot90(im[:, :, z, c]).copy()
            row.append(grid_factory(values, window))
        planes.append(row)

    if dims.z > 1 and dims.c > 1:
        return planes
    if dims.z > 1:
        return [row[0] for row in planes]
    if dims.c > 1:
        return planes[0]
    return planes[0][0]


def from_external(grid):
    """
    Convert a single spatial grid back to a pixel array of shape
    (x, y, 1, 1).

    ``grid`` is an ``xarray.DataArray`` (put in ("y", "x") order when it
    has those dimensions) or any 2D array-like.
    """
    if isinstance(grid, xr.DataArray):
        if set(grid.dims) == {"y", "x"}:
            grid = grid.transpose("y", "x")
        values = grid.values
    else:
        values = np.asarray(grid)

    if values.ndim != 2:
        raise UnsupportedRank(
            f"Spatial grid must be 2D, got {values.ndim} dimensions")

    plane = np.rot90(as_pixel_dtype(values), k=-1)
    return plane[:, :, np.newaxis, np.newaxis].copy()

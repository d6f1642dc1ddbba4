# -*- coding: utf-8 -*-
"""
Created on Mon Oct  5 11:55:39 2026

@author: p-sik

Bring arrays of 2, 3 or 4 axes into the canonical (x, y, z, c) layout, and
back down to a 2D matrix.
"""
from __future__ import annotations

import warnings

import numpy as np

from .dims import Dimensions, as_dimensions
from .dtypes import as_pixel_dtype
from .errors import AxisGuessWarning, OneDimensionalWarning, UnsupportedRank


def normalize(raw) -> np.ndarray:
    """
    Return ``raw`` as a 4-axis pixel array of shape (x, y, z, c).

    - 2 axes are read as (x, y) of a grayscale image.
    - 3 axes are read as (x, y, c) when the third axis has size 3 and as
      (x, y, z) otherwise. Either way an ``AxisGuessWarning`` is emitted.
    - 4 axes pass through.

    Boolean and integer values are converted to float64. The input is never
    modified; for float input the result may be a view of it.

    Raises
    ------
    UnsupportedRank
        ``raw`` has fewer than 2 or more than 4 axes.
    IncompatibleDimensions
        An axis has size 0.
    """
    arr = as_pixel_dtype(raw)

    if arr.ndim == 4:
        out = arr
    elif arr.ndim == 2:
        out = arr[:, :, np.newaxis, np.newaxis]
    elif arr.ndim == 3:
        if arr.shape[2] == 3:
            warnings.warn("Assuming third dimension corresponds to colour",
                          AxisGuessWarning, stacklevel=2)
            out = arr[:, :, np.newaxis, :]
        else:
            warnings.warn("Assuming third dimension corresponds to time/depth",
                          AxisGuessWarning, stacklevel=2)
            out = arr[:, :, :, np.newaxis]
    else:
        raise UnsupportedRank(
            f"Array must have 2 to 4 dimensions, got {arr.ndim}")

    as_dimensions(out.shape)
    return out


def dimensions(image) -> Dimensions:
    """Dimensions of a 4-axis pixel array."""
    shape = np.shape(image)
    if len(shape) != 4:
        raise UnsupportedRank(
            f"Pixel array must have 4 dimensions, got {len(shape)}")
    return as_dimensions(shape)


def to_matrix(image) -> np.ndarray:
    """
    Squeeze a pixel array down to a 2D matrix.

    The image must have at most two axes of size > 1; those become the rows
    and columns (in x, y, z, c order). An image with a single non-empty axis
    becomes an (n, 1) column and emits a ``OneDimensionalWarning``.
    """
    im = normalize(image)
    n_used = sum(1 for s in im.shape if s > 1)

    if n_used == 2:
        return np.squeeze(im)
    if n_used == 1:
        warnings.warn("Image is one-dimensional",
                      OneDimensionalWarning, stacklevel=2)
        return im.reshape(-1, 1, order="F")
    if n_used == 0:
        return im.reshape(1, 1)
    raise UnsupportedRank(
        f"Too many non-empty dimensions for a matrix: {im.shape}")

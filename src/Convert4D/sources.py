# -*- coding: utf-8 -*-
"""
Created on Tue Oct  6 15:42:30 2026

@author: p-sik

Building pixel arrays from any supported input.

Inputs are tagged once with a ``SourceKind`` and then converted by the
converter registered for that kind:

=========  ==========================  ==============================
kind       input                       converter
=========  ==========================  ==============================
FLAT       scalar or 1D sequence       dimensions resolved/guessed
MATRIX     2D array                    read as (x, y)
ARRAY3     3D array                    (x, y, c) or (x, y, z), guessed
ARRAY4     4D array                    (x, y, z, c) as is
TABLE      pandas.DataFrame            long table decoded
=========  ==========================  ==============================
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
import pandas as pd

from .config import DEFAULT_VALUE_COLUMN
from .convertor import from_frame
from .dims import infer_dimensions
from .dtypes import FLAT_ORDER, as_pixel_dtype
from .errors import UnsupportedRank
from .normalize import normalize


class SourceKind(Enum):
    FLAT = "flat"
    MATRIX = "matrix"
    ARRAY3 = "array3"
    ARRAY4 = "array4"
    TABLE = "table"


_RANK_KINDS = {
    0: SourceKind.FLAT,
    1: SourceKind.FLAT,
    2: SourceKind.MATRIX,
    3: SourceKind.ARRAY3,
    4: SourceKind.ARRAY4,
}


@dataclass(frozen=True)
class Source:
    """Input data tagged with its kind."""
    kind: SourceKind
    data: object


def classify(obj) -> Source:
    """
    Tag ``obj`` with its ``SourceKind``.

    Raises
    ------
    UnsupportedRank
        For arrays of more than 4 dimensions.
    """
    if isinstance(obj, Source):
        return obj
    if isinstance(obj, pd.DataFrame):
        return Source(SourceKind.TABLE, obj)

    arr = np.asarray(obj)
    if arr.ndim not in _RANK_KINDS:
        raise UnsupportedRank(
            f"Array must have at most 4 dimensions, got {arr.ndim}")
    return Source(_RANK_KINDS[arr.ndim], arr)


def _from_flat(data, sizes, value_column, dims):
    flat = as_pixel_dtype(np.ravel(data))
    shape = infer_dimensions(flat.size, **sizes)
    return np.array(flat).reshape(shape, order=FLAT_ORDER)


def _from_array(data, sizes, value_column, dims):
    if any(v is not None for v in sizes.values()):
        raise ValueError("x, y, z, cc and dim apply to flat input only")
    return normalize(data)


def _from_table(data, sizes, value_column, dims):
    if any(v is not None for v in sizes.values()):
        raise ValueError("Use dims to give the dimensions of a table")
    return from_frame(data, value_column=value_column, dims=dims)


_CONVERTERS = {
    SourceKind.FLAT: _from_flat,
    SourceKind.MATRIX: _from_array,
    SourceKind.ARRAY3: _from_array,
    SourceKind.ARRAY4: _from_array,
    SourceKind.TABLE: _from_table,
}


def as_image(obj, x=None, y=None, z=None, cc=None, dim=None,
             value_column=DEFAULT_VALUE_COLUMN, dims=None):
    """
    Convert ``obj`` to a pixel array (x, y, z, c).

    Parameters
    ----------
    obj : array_like, pandas.DataFrame or Source
        Flat values, a 2 to 4 axis array, or a long table.
    x, y, z, cc : int or None, optional
        Width, height, depth and spectrum of flat input. Unspecified axes
        default to 1 when at least one is given; when none is, the shape is
        guessed (see ``infer_dimensions``).
    dim : sequence of 4 ints or None, optional
        All four sizes of flat input at once.
    value_column : str, optional
        Value column of table input. Default is "value".
    dims : sequence of 4 ints or None, optional
        Dimensions of table input (see ``from_frame``).

    Returns
    -------
    numpy.ndarray

    Examples
    --------
    >>> as_image(np.arange(100), x=10, y=10).shape
    (10, 10, 1, 1)
    >>> as_image(np.tile(np.arange(100), 3), x=10, y=10, cc=3).shape
    (10, 10, 1, 3)
    """
    source = classify(obj)
    if source.kind is not SourceKind.TABLE and dims is not None:
        raise ValueError("dims applies to table input only, use dim")
    sizes = {"x": x, "y": y, "z": z, "cc": cc, "dim": dim}
    convert = _CONVERTERS[source.kind]
    return convert(source.data, sizes, value_column, dims)

# -*- coding: utf-8 -*-
"""
Created on Tue Oct  6 09:12:41 2026

@author: p-sik

Default conversion settings and loading them from a TOML file.

A configuration file holds a single ``[convert4d]`` table, e.g.::

    [convert4d]
    value_column = "intensity"
    drop_unused  = false
    rescale      = true
    dtype        = "float32"
    verbose      = 1

Settings are plain values handed to the converters as keyword arguments;
nothing in the library reads them implicitly::

    cfg = load_config("convert4d.toml")
    table = to_frame(image, **cfg.tabular_kwargs())
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields

from .dtypes import DTYPE_MAP

# Import tomlib packages
try:
    import tomllib
    def _read_toml(path):
        with open(path, "rb") as f:
            return tomllib.load(f)
except ImportError:
    import toml
    def _read_toml(path):
        return toml.load(path)


DEFAULT_VALUE_COLUMN = "value"
CHANNEL_COLUMN = "cc"
DEFAULT_RESCALE = True
DEFAULT_DROP_UNUSED = True

CONFIG_TABLE = "convert4d"


@dataclass(frozen=True)
class ConversionDefaults:
    """
    Settings shared by the converters.

    Parameters
    ----------
    value_column : str
        Name of the value column of long tables.
    drop_unused : bool
        Leave out coordinate columns of unit axes when encoding tables.
    rescale : bool
        Rescale images to [0, 1] before colour mapping.
    dtype : str
        Name of the floating point type decoded images are cast to
        (key of ``Convert4D.dtypes.DTYPE_MAP``).
    verbose : int
        Verbosity level; > 0 prints status messages.
    """
    value_column: str = DEFAULT_VALUE_COLUMN
    drop_unused: bool = DEFAULT_DROP_UNUSED
    rescale: bool = DEFAULT_RESCALE
    dtype: str = "float64"
    verbose: int = 0

    def __post_init__(self):
        if self.dtype not in DTYPE_MAP:
            raise ValueError(
                f"dtype must be one of {sorted(DTYPE_MAP)}, got {self.dtype!r}")

    @property
    def numpy_dtype(self):
        return DTYPE_MAP[self.dtype]

    def tabular_kwargs(self):
        """Keyword arguments for ``to_frame``."""
        return {"value_column": self.value_column,
                "drop_unused": self.drop_unused}

    def decode_kwargs(self):
        """Keyword arguments for ``from_frame``."""
        return {"value_column": self.value_column,
                "dtype": self.numpy_dtype,
                "verbose": self.verbose}

    def raster_kwargs(self):
        """Keyword arguments for ``to_raster``."""
        return {"rescale": self.rescale}


def load_config(path):
    """
    Read conversion settings from the ``[convert4d]`` table of a TOML file.

    Keys missing from the file keep their defaults.

    Parameters
    ----------
    path : str or pathlib.Path
        TOML file.

    Returns
    -------
    ConversionDefaults

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the file has no ``[convert4d]`` table or holds unknown keys.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    data = _read_toml(path)
    if CONFIG_TABLE not in data:
        raise ValueError(f"No [{CONFIG_TABLE}] table in {path}")
    table = data[CONFIG_TABLE]

    known = {f.name for f in fields(ConversionDefaults)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {path}: {unknown}")

    return ConversionDefaults(**table)

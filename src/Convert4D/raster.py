# -*- coding: utf-8 -*-
"""
Created on Wed Oct  7 13:18:04 2026

@author: p-sik

Conversion of pixel arrays to rasters: 2D grids of hexadecimal colour codes
("#rrggbb"), one per pixel, laid out with rows along y and columns along x.

Colour scales turn pixel values into colour codes. The default ones expect
values in [0, 1], so by default images are rescaled to that range first.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Callable

import matplotlib
import matplotlib.colors as mcolors
import numpy as np
from tqdm import tqdm

from .config import DEFAULT_RESCALE
from .errors import (
    ColourScaleWarning,
    CoordinateOutOfRange,
    DegenerateRescaleWarning,
)
from .normalize import dimensions, normalize


@dataclass(frozen=True)
class ColourScale:
    """
    A colour scale resolved for one conversion.

    Parameters
    ----------
    func : callable
        Called with ``n_inputs`` arrays of equal shape (one per channel),
        returns an array of colour code strings of that shape.
    n_inputs : int
        1 for grayscale scales, 3 for RGB scales.
    name : str
        Label used in messages.
    is_default : bool
        True for the built-in scales picked when no scale is given.
    """
    func: Callable
    n_inputs: int
    name: str
    is_default: bool = False

    def __call__(self, *channels):
        return self.func(*channels)


def _hex_codes(colours, keep_alpha=False):
    """Hex codes of an array of RGB(A) tuples in [0, 1] (last axis)."""
    colours = np.asarray(colours, dtype=float)
    shape = colours.shape[:-1]
    flat = colours.reshape(-1, colours.shape[-1])
    if flat.shape[0] == 0:
        return np.empty(shape, dtype=object)

    # images rarely hold many distinct colours; convert each one once
    uniq, inverse = np.unique(flat, axis=0, return_inverse=True)
    codes = np.array(
        [mcolors.to_hex(tuple(c), keep_alpha=keep_alpha) for c in uniq],
        dtype=object)
    return codes[inverse.reshape(-1)].reshape(shape)


def gray(v):
    """
    Grayscale colour codes of values in [0, 1] (0 is black, 1 is white).

    Raises
    ------
    ValueError
        If a value is outside [0, 1].
    """
    v = np.asarray(v, dtype=float)
    return _hex_codes(np.stack([v, v, v], axis=-1))


def rgb(r, g, b):
    """
    Colour codes of red, green and blue intensities in [0, 1].

    Raises
    ------
    ValueError
        If a value is outside [0, 1].
    """
    return _hex_codes(np.stack(np.broadcast_arrays(r, g, b), axis=-1))


GRAY = ColourScale(gray, 1, "gray", is_default=True)
RGB = ColourScale(rgb, 3, "rgb", is_default=True)


def colormap_scale(cmap, keep_alpha=False):
    """
    Grayscale colour scale backed by a matplotlib colormap.

    Parameters
    ----------
    cmap : str or matplotlib.colors.Colormap
        Colormap or its registered name, e.g. "viridis".
    keep_alpha : bool, optional
        Emit "#rrggbbaa" codes instead of "#rrggbb". Default is False.

    Returns
    -------
    ColourScale
    """
    if isinstance(cmap, str):
        try:
            cmap = matplotlib.colormaps[cmap]
        except KeyError:
            raise ValueError(f"Unknown colormap {cmap!r}") from None

    def func(v):
        rgba = cmap(np.asarray(v, dtype=float))
        if not keep_alpha:
            rgba = rgba[..., :3]
        return _hex_codes(rgba, keep_alpha=keep_alpha)

    return ColourScale(func, 1, cmap.name)


def resolve_colour_scale(n_channels, colour_scale=None):
    """
    Pick the colour scale used for an image with ``n_channels`` channels.

    Parameters
    ----------
    n_channels : int
        Spectrum of the image.
    colour_scale : None, str, Colormap, ColourScale or callable
        None selects ``GRAY`` for single channel images and ``RGB``
        otherwise. A string or Colormap selects a matplotlib colormap. A
        plain callable receives one array for single channel images and
        three (the first three channels) otherwise.

    Returns
    -------
    ColourScale
    """
    n_inputs = 1 if n_channels == 1 else 3

    if colour_scale is None:
        scale = GRAY if n_inputs == 1 else RGB
    elif isinstance(colour_scale, ColourScale):
        scale = colour_scale
    elif isinstance(colour_scale, (str, mcolors.Colormap)):
        scale = colormap_scale(colour_scale)
    elif callable(colour_scale):
        name = getattr(colour_scale, "__name__", type(colour_scale).__name__)
        scale = ColourScale(colour_scale, n_inputs, name)
    else:
        raise TypeError(
            "colour_scale must be a callable, a colormap or its name, "
            f"got {type(colour_scale).__name__}")

    if scale.n_inputs == 1 and n_channels != 1:
        raise ValueError(
            f"Colour scale {scale.name!r} takes a single channel, "
            f"image has {n_channels}")
    if scale.n_inputs == 3 and n_channels < 3:
        raise ValueError(
            f"Colour scale {scale.name!r} needs three channels, "
            f"image has {n_channels}")
    return scale


def rescale_values(image):
    """
    Map the values of ``image`` linearly onto [0, 1] using its global
    minimum and maximum (over all pixels, frames and channels together).

    A constant image cannot be stretched; all its values map to 0.5 and a
    ``DegenerateRescaleWarning`` is emitted.
    """
    im = np.asarray(image)
    lo = np.nanmin(im)
    hi = np.nanmax(im)
    if hi == lo:
        warnings.warn(f"Image is constant ({lo}); rescaling to 0.5",
                      DegenerateRescaleWarning, stacklevel=2)
        return np.full(im.shape, 0.5)
    return (im - lo) / (hi - lo)


def _plane_raster(plane, scale):
    """Raster of one (x, y, c) frame."""
    width, height = plane.shape[:2]
    channels = [plane[:, :, k].T for k in range(scale.n_inputs)]
    codes = np.asarray(scale(*channels), dtype=object)
    if codes.size != width * height:
        raise ValueError(
            f"Colour scale {scale.name!r} returned {codes.size} codes "
            f"for {width * height} pixels")
    return codes.reshape(height, width)


def to_raster(image, colour_scale=None, rescale=DEFAULT_RESCALE, frames=None,
              colorscale=None, progress=False):
    """
    Convert a pixel array to a raster (grid of colour codes) for plotting.

    Parameters
    ----------
    image : array_like
        Pixel array (x, y, z, c). 2 and 3 axis arrays are normalized first.
    colour_scale : None, str, Colormap, ColourScale or callable, optional
        How values become colours, see ``resolve_colour_scale``. Default is
        grayscale for single channel images and RGB (first three channels)
        otherwise.
    rescale : bool, optional
        Stretch the whole image to [0, 1] before colour mapping (see
        ``rescale_values``). Default is True. Combining it with a custom
        colour scale emits a ``ColourScaleWarning``.
    frames : iterable of int or None, optional
        1-based depth frames to convert when the image has depth > 1.
        Default is all frames.
    colorscale : optional
        Same as ``colour_scale``; used only when ``colour_scale`` is None.
    progress : bool, optional
        Show a tqdm progress bar over frames. Default is False.

    Returns
    -------
    numpy.ndarray or list of numpy.ndarray
        A (height, width) object array of "#rrggbb" strings, or for depth
        > 1 a list of them in frame order.
    """
    im = normalize(image)
    dims = dimensions(im)

    if colour_scale is None:
        colour_scale = colorscale
    scale = resolve_colour_scale(dims.c, colour_scale)

    if rescale:
        if not scale.is_default:
            warnings.warn("You've specified a colour scale, but rescale is "
                          "set to True. You may get unexpected results",
                          ColourScaleWarning, stacklevel=2)
        im = rescale_values(im)

    if dims.z == 1:
        return _plane_raster(im[:, :, 0, :], scale)

    if frames is None:
        frames = range(1, dims.z + 1)
    frames = [int(f) for f in frames]
    for f in frames:
        if not 1 <= f <= dims.z:
            raise CoordinateOutOfRange(
                f"Frame {f} outside [1, {dims.z}]")

    rasters = []
    for f in tqdm(frames, desc="Rasterising frames", disable=not progress):
        rasters.append(_plane_raster(im[:, :, f - 1, :], scale))
    return rasters

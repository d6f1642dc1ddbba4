"""
Convert4D is a lightweight Python toolkit for converting dense 4-axis pixel
arrays (width x height x depth x spectrum) to and from other representations.

Every image is a NumPy array of shape ``(x, y, z, c)`` whose flat sequence
runs x fastest, then y, then z, then c (``im.ravel(order="F")``).

The library converts between that canonical form and:

1) Flat values and arbitrary arrays
   - Flat sequences, with explicit or guessed dimensions
   - 2D (grayscale) and 3D (colour or depth, guessed) arrays

2) Tables (pandas DataFrames)
   - Long format: one row per pixel, columns ``x, y, z, cc, value``
   - Wide format: one value column per channel or per depth frame

3) Rasters
   - Grids of ``"#rrggbb"`` colour codes (rows along y), one per frame,
     through grayscale, RGB or matplotlib colour scales

4) Spatial grids
   - ``xarray.DataArray`` planes (one per frame and channel)

Guesses never pass silently: they emit a ``ConversionAdvisory`` warning.

Typical workflow
----------------
Rebuild an image from flat values and go to a table and back::

    import numpy as np
    import Convert4D as c4d

    im = c4d.as_image(np.random.rand(300), x=10, y=10, cc=3)
    df = c4d.to_frame(im)
    same = c4d.from_frame(df, dims=im.shape)

Wide table along colour::

    c4d.to_frame(im, wide="c").head()

Raster for plotting::

    r = c4d.to_raster(im)          # (10, 10) array of "#rrggbb" strings

Modules
-------
- ``Convert4D.dtypes``     : canonical axes and dtypes
- ``Convert4D.errors``     : conversion errors and advisories
- ``Convert4D.config``     : defaults and TOML configuration
- ``Convert4D.dims``       : dimension guessing and coordinate offsets
- ``Convert4D.normalize``  : 2/3/4 axis arrays to canonical form and back
- ``Convert4D.sources``    : single entry point for any input
- ``Convert4D.convertor``  : pixel arrays <-> tables
- ``Convert4D.raster``     : pixel arrays -> colour rasters
- ``Convert4D.grid``       : pixel arrays <-> spatial grids

Version
-------
This package follows semantic versioning starting from the development series.
"""

__version__ = "0.1.0"


from Convert4D.config import ConversionDefaults, load_config
from Convert4D.convertor import from_frame, pixel_grid, to_frame
from Convert4D.dims import Dimensions, infer_dimensions, linear_offset
from Convert4D.errors import *  # noqa: F401,F403
from Convert4D.grid import from_external, to_external
from Convert4D.normalize import normalize, to_matrix
from Convert4D.raster import (
    ColourScale,
    colormap_scale,
    rescale_values,
    resolve_colour_scale,
    to_raster,
)
from Convert4D.sources import Source, SourceKind, as_image, classify

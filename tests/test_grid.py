from __future__ import annotations

import numpy as np
import pytest
import xarray as xr

from Convert4D.errors import UnsupportedRank
from Convert4D.grid import dataarray_grid, default_window, from_external, to_external


def _image(dims, seed=0):
    return np.random.default_rng(seed).random(dims)


def test_single_plane_gives_one_grid() -> None:
    im = _image((4, 3, 1, 1))
    g = to_external(im)
    assert isinstance(g, xr.DataArray)
    assert g.dims == ("y", "x")
    assert g.shape == (3, 4)
    # bottom row of the grid is the last image row
    np.testing.assert_array_equal(g.values[0, :], im[:, 2, 0, 0])
    np.testing.assert_array_equal(g.values[:, 0], im[0, ::-1, 0, 0])


def test_round_trip_single_plane() -> None:
    im = _image((5, 7, 1, 1))
    back = from_external(to_external(im))
    assert back.shape == im.shape
    np.testing.assert_array_equal(back, im)


def test_round_trip_from_plain_array() -> None:
    im = _image((2, 3, 1, 1))
    grid = np.asarray(to_external(im))
    np.testing.assert_array_equal(from_external(grid), im)


def test_grid_does_not_alias_image() -> None:
    im = _image((2, 2, 1, 1))
    g = to_external(im)
    g.values[0, 0] = -1.0
    assert (im >= 0).all()


def test_default_window_and_coordinates() -> None:
    g = to_external(_image((4, 2, 1, 1)))
    assert g.attrs["window"] == default_window(4, 2)
    np.testing.assert_allclose(g["x"], [0.5, 1.5, 2.5, 3.5])
    np.testing.assert_allclose(g["y"], [0.5, 1.5])


def test_custom_window() -> None:
    g = to_external(_image((2, 2, 1, 1)), window=((0, 1), (10, 20)))
    np.testing.assert_allclose(g["x"], [0.25, 0.75])
    np.testing.assert_allclose(g["y"], [12.5, 17.5])


def test_frames_and_channels_nest() -> None:
    im = _image((3, 2, 2, 3))
    grids = to_external(im)
    assert len(grids) == 2
    assert all(len(row) == 3 for row in grids)
    for z in range(2):
        for c in range(3):
            np.testing.assert_array_equal(
                from_external(grids[z][c])[:, :, 0, 0], im[:, :, z, c])


def test_frames_only_and_channels_only_are_flat_lists() -> None:
    depth = to_external(_image((2, 2, 4, 1)))
    assert isinstance(depth, list) and len(depth) == 4
    assert all(isinstance(g, xr.DataArray) for g in depth)

    colour = to_external(_image((2, 2, 1, 3)))
    assert isinstance(colour, list) and len(colour) == 3
    assert all(isinstance(g, xr.DataArray) for g in colour)


def test_custom_grid_factory() -> None:
    made = []

    def factory(values, window):
        made.append((values.shape, window))
        return values

    out = to_external(_image((3, 2, 1, 1)), window=((0, 3), (0, 2)), grid_factory=factory)
    assert made == [((2, 3), ((0, 3), (0, 2)))]
    assert out.shape == (2, 3)


def test_from_external_transposes_named_dims() -> None:
    im = _image((3, 2, 1, 1))
    g = to_external(im).transpose("x", "y")
    np.testing.assert_array_equal(from_external(g), im)


def test_from_external_rejects_non_2d() -> None:
    with pytest.raises(UnsupportedRank):
        from_external(np.zeros((2, 2, 2)))


def test_dataarray_grid() -> None:
    g = dataarray_grid(np.zeros((2, 4)), ((0, 8), (0, 2)))
    np.testing.assert_allclose(g["x"], [1, 3, 5, 7])
    np.testing.assert_allclose(g["y"], [0.5, 1.5])

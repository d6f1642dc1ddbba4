from __future__ import annotations

import warnings

import numpy as np
import pandas as pd
import pytest

from Convert4D.errors import (
    AxisGuessWarning,
    DimensionGuessWarning,
    DimensionsRequired,
    IncompatibleDimensions,
    OneDimensionalWarning,
    UnsupportedRank,
)
from Convert4D.normalize import dimensions, normalize, to_matrix
from Convert4D.sources import _CONVERTERS, Source, SourceKind, as_image, classify


def test_matrix_becomes_grayscale_image() -> None:
    m = np.arange(12.0).reshape(3, 4)
    im = normalize(m)
    assert im.shape == (3, 4, 1, 1)
    np.testing.assert_array_equal(im[:, :, 0, 0], m)


def test_third_axis_of_three_is_colour() -> None:
    with pytest.warns(AxisGuessWarning, match="colour"):
        im = normalize(np.ones((10, 10, 3)))
    assert im.shape == (10, 10, 1, 3)


def test_other_third_axis_is_depth() -> None:
    with pytest.warns(AxisGuessWarning, match="depth"):
        im = normalize(np.ones((10, 10, 4)))
    assert im.shape == (10, 10, 4, 1)


def test_four_axes_pass_through() -> None:
    raw = np.random.default_rng(0).random((2, 3, 4, 5))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        im = normalize(raw)
    assert im.shape == raw.shape
    np.testing.assert_array_equal(im, raw)


def test_bool_and_int_become_float() -> None:
    assert normalize(np.ones((2, 2), dtype=bool)).dtype == np.float64
    assert normalize(np.ones((2, 2), dtype=np.int32)).dtype == np.float64
    assert normalize(np.ones((2, 2), dtype=np.float32)).dtype == np.float32


def test_unsupported_rank() -> None:
    with pytest.raises(UnsupportedRank):
        normalize(np.ones(5))
    with pytest.raises(UnsupportedRank):
        normalize(np.ones((1, 1, 1, 1, 1)))


def test_empty_axis_is_rejected() -> None:
    with pytest.raises(IncompatibleDimensions):
        normalize(np.ones((0, 3)))


def test_dimensions_of_pixel_array() -> None:
    assert dimensions(np.zeros((2, 3, 4, 5))) == (2, 3, 4, 5)
    with pytest.raises(UnsupportedRank):
        dimensions(np.zeros((2, 3)))


def test_to_matrix() -> None:
    m = np.arange(6.0).reshape(2, 3)
    np.testing.assert_array_equal(to_matrix(normalize(m)), m)

    im = np.zeros((4, 1, 5, 1))
    assert to_matrix(im).shape == (4, 5)

    with pytest.warns(OneDimensionalWarning):
        col = to_matrix(np.arange(4.0).reshape(4, 1, 1, 1))
    assert col.shape == (4, 1)

    assert to_matrix(np.zeros((1, 1, 1, 1))).shape == (1, 1)

    with pytest.raises(UnsupportedRank):
        to_matrix(np.zeros((2, 2, 2, 1)))


def test_classify() -> None:
    assert classify([1, 2, 3]).kind is SourceKind.FLAT
    assert classify(5.0).kind is SourceKind.FLAT
    assert classify(np.zeros((2, 2))).kind is SourceKind.MATRIX
    assert classify(np.zeros((2, 2, 2))).kind is SourceKind.ARRAY3
    assert classify(np.zeros((2, 2, 2, 2))).kind is SourceKind.ARRAY4
    assert classify(pd.DataFrame({"x": [1], "value": [1.0]})).kind is SourceKind.TABLE
    src = Source(SourceKind.FLAT, [1.0])
    assert classify(src) is src
    with pytest.raises(UnsupportedRank):
        classify(np.zeros((1,) * 5))


def test_as_image_from_flat_values() -> None:
    values = np.arange(100)
    im = as_image(values, x=10, y=10)
    assert im.shape == (10, 10, 1, 1)
    assert im.dtype == np.float64
    # x varies fastest
    assert im[1, 0, 0, 0] == 1
    assert im[0, 1, 0, 0] == 10

    rgb = as_image(np.tile(values, 3), x=10, y=10, cc=3)
    assert rgb.shape == (10, 10, 1, 3)
    assert rgb[0, 0, 0, 2] == 0

    assert as_image(values, dim=(10, 10, 1, 1)).shape == (10, 10, 1, 1)


def test_as_image_guesses_flat_dimensions() -> None:
    with pytest.warns(DimensionGuessWarning):
        assert as_image(np.arange(100)).shape == (10, 10, 1, 1)
    with pytest.warns(DimensionGuessWarning):
        assert as_image(np.tile(np.arange(100), 3)).shape == (10, 10, 1, 3)


def test_as_image_without_matching_guess_asks_for_dimensions() -> None:
    with pytest.raises(DimensionsRequired):
        as_image(np.zeros(2000**2 + 1))


def test_as_image_does_not_alias_flat_input() -> None:
    values = np.zeros(4)
    im = as_image(values, x=2, y=2)
    im[0, 0, 0, 0] = 1.0
    assert values[0] == 0.0


def test_as_image_logical_flat_input() -> None:
    im = as_image([True, False, True, False], x=2, y=2)
    assert im.dtype == np.float64
    np.testing.assert_array_equal(im.ravel(order="F"), [1.0, 0.0, 1.0, 0.0])


def test_as_image_dispatches_arrays_and_tables() -> None:
    assert as_image(np.zeros((3, 4))).shape == (3, 4, 1, 1)
    with pytest.warns(AxisGuessWarning):
        assert as_image(np.zeros((3, 4, 3))).shape == (3, 4, 1, 3)

    df = pd.DataFrame({"x": [1, 2], "y": [1, 1], "value": [3.0, 4.0]})
    im = as_image(df, dims=(2, 1, 1, 1))
    np.testing.assert_array_equal(im.ravel(), [3.0, 4.0])


def test_as_image_rejects_misplaced_sizes() -> None:
    with pytest.raises(ValueError):
        as_image(np.zeros((3, 4)), x=3)
    with pytest.raises(ValueError):
        as_image(np.zeros(4), dims=(2, 2, 1, 1))


def test_every_source_kind_has_a_converter() -> None:
    assert set(SourceKind) == set(_CONVERTERS)

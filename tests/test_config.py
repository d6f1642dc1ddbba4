from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from Convert4D.config import ConversionDefaults, load_config
from Convert4D.convertor import from_frame, to_frame


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    cfg = ConversionDefaults()
    assert cfg.value_column == "value"
    assert cfg.drop_unused is True
    assert cfg.rescale is True
    assert cfg.numpy_dtype is np.float64


def test_load_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "convert4d.toml",
        '[convert4d]\nvalue_column = "intensity"\ndrop_unused = false\ndtype = "float32"\n',
    )
    cfg = load_config(path)
    assert cfg.value_column == "intensity"
    assert cfg.drop_unused is False
    assert cfg.rescale is True
    assert cfg.raster_kwargs() == {"rescale": True}

    im = np.arange(4.0).reshape(2, 2, 1, 1)
    df = to_frame(im, **cfg.tabular_kwargs())
    assert list(df.columns) == ["x", "y", "z", "cc", "intensity"]
    back = from_frame(df, dims=im.shape, **cfg.decode_kwargs())
    assert back.dtype == np.float32
    np.testing.assert_array_equal(back, im)


def test_load_config_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")
    with pytest.raises(ValueError):
        load_config(_write(tmp_path / "a.toml", '[other]\nx = 1\n'))
    with pytest.raises(ValueError):
        load_config(_write(tmp_path / "b.toml", '[convert4d]\ncolour = "red"\n'))
    with pytest.raises(ValueError):
        load_config(_write(tmp_path / "c.toml", '[convert4d]\ndtype = "int8"\n'))


def test_decode_kwargs_work_on_plain_tables() -> None:
    cfg = ConversionDefaults(verbose=0)
    df = pd.DataFrame({"x": [1], "value": [2.0]})
    im = from_frame(df, dims=(1, 1, 1, 1), **cfg.decode_kwargs())
    assert im[0, 0, 0, 0] == 2.0

from pathlib import Path

import pandas as pd

from chartstats.classification import EmptyBreakSet, NoData, calculate_breaks
from chartstats.output import band_frame, breaks_frame, density_frame, save_tables_to_csv
from chartstats.stats.density import kernel_density
from chartstats.stats.regression import line_and_band


def test_band_frame_columns_and_rows():
    _, band = line_and_band([(0, 1), (1, 2), (2, 2.5)], 0, 2, steps=4)
    df = band_frame(band)
    assert list(df.columns) == ["x", "y", "lower", "upper"]
    assert len(df) == 5
    assert (df["lower"] <= df["upper"]).all()


def test_density_frame():
    df = density_frame(kernel_density([1.0, 2.0, 4.0], grid_size=10))
    assert list(df.columns) == ["x", "density"]
    assert len(df) == 10


def test_breaks_frame_variants():
    df = breaks_frame(calculate_breaks([10, 20, 30, 40, 50]))
    assert list(df["class"]) == [0, 1, 2, 3, 4]
    assert df.iloc[0]["label"] == "10 - 18"

    single = breaks_frame(EmptyBreakSet(min=5.0, max=5.0), fmt="percent")
    assert list(single["label"]) == ["5.0% - 5.0%"]

    assert breaks_frame(NoData()).empty


def test_save_tables_to_csv(tmp_path: Path):
    tables = {"density": density_frame(kernel_density([1.0, 3.0], grid_size=4))}
    paths = save_tables_to_csv(tables, str(tmp_path / "out"))
    saved = pd.read_csv(paths["density"])
    assert list(saved.columns) == ["x", "density"]
    assert len(saved) == 4

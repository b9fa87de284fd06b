"""Unit tests for file and DataFrame adapters."""
import json

import numpy as np
import pandas as pd
import pytest

from dtwpath.api import dtw
from dtwpath.io_adapters import from_pandas, load_sequence, result_to_frame, save_result


class TestFromPandas:
    def test_sorted_by_time(self):
        df = pd.DataFrame({
            "timestamp": pd.to_datetime(["2024-01-03", "2024-01-01", "2024-01-02"]),
            "value": [3.0, 1.0, 2.0],
        })
        np.testing.assert_array_equal(
            from_pandas(df, value_col="value", time_col="timestamp"), [1.0, 2.0, 3.0]
        )

    def test_keeps_nan_by_default(self):
        df = pd.DataFrame({"value": [1.0, None, 3.0]})
        values = from_pandas(df, value_col="value")
        assert np.isnan(values[1])
        assert len(from_pandas(df, value_col="value", dropna=True)) == 2

    def test_missing_column(self):
        with pytest.raises(KeyError):
            from_pandas(pd.DataFrame({"a": [1]}), value_col="value")


class TestLoadSequence:
    def test_text(self, tmp_path):
        path = tmp_path / "s.txt"
        np.savetxt(path, np.array([0.0, 1.0, 2.0]))
        np.testing.assert_array_equal(load_sequence(path), [0.0, 1.0, 2.0])

    def test_npy(self, tmp_path):
        path = tmp_path / "s.npy"
        np.save(path, np.arange(4.0))
        np.testing.assert_array_equal(load_sequence(path), np.arange(4.0))

    def test_csv_first_numeric_column(self, tmp_path):
        path = tmp_path / "s.csv"
        pd.DataFrame({"label": ["a", "b"], "value": [1.5, 2.5]}).to_csv(path, index=False)
        np.testing.assert_array_equal(load_sequence(path), [1.5, 2.5])

    def test_csv_named_column(self, tmp_path):
        path = tmp_path / "s.csv"
        pd.DataFrame({"x": [1, 2], "y": [3, 4]}).to_csv(path, index=False)
        np.testing.assert_array_equal(load_sequence(path, column="y"), [3.0, 4.0])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_sequence(tmp_path / "nope.txt")


class TestSaveResult:
    @pytest.fixture
    def result(self):
        return dtw([1, 1, 1], [5, 5, 5])

    def test_json(self, tmp_path, result):
        path = save_result(result, tmp_path / "out" / "r.json")
        payload = json.loads(path.read_text())
        assert payload["min_distance"] == 8.0
        assert payload["shape"] == [2, 2]
        assert payload["order"] == "backward"
        assert payload["path"] == [[2, 2, 8.0], [2, 1, 8.0], [1, 1, 1]]

    def test_json_forward(self, tmp_path, result):
        path = save_result(result, tmp_path / "r.json", forward=True)
        payload = json.loads(path.read_text())
        assert payload["path"][0] == [1, 1, 1]

    def test_csv(self, tmp_path, result):
        path = save_result(result, tmp_path / "r.csv")
        df = pd.read_csv(path)
        assert list(df.columns) == ["row", "col", "cost", "anchor"]
        assert df["anchor"].tolist() == [False, False, True]

    def test_frame(self, result):
        df = result_to_frame(result, forward=True)
        assert df.iloc[0]["anchor"]
        assert df.iloc[-1]["row"] == 2

    def test_no_overwrite(self, tmp_path, result):
        path = save_result(result, tmp_path / "r.json")
        with pytest.raises(FileExistsError):
            save_result(result, path, overwrite=False)

    def test_unsupported(self, tmp_path, result):
        with pytest.raises(ValueError, match="Unsupported"):
            save_result(result, tmp_path / "r.parquet")

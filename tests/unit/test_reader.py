"""
Unit tests for input reading (numconv.reader).

Uses small CSV and Parquet files written to temporary directories.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from numconv.exceptions import ReadError
from numconv.reader import (
    frame_to_records,
    read_frame,
    read_records,
    records_to_frame,
)


class TestReadRecords:
    """Tests for read_records() / read_frame()."""

    def test_csv_values_kept_as_written(self, european_csv):
        rows = read_records(european_csv)
        assert len(rows) == 4
        assert rows[0] == {"name": "Product A", "price": "1.234,56", "quantity": "100"}
        # No NA inference: empty cells stay empty strings
        assert rows[3]["price"] == ""

    def test_csv_column_order(self, european_csv):
        assert list(read_frame(european_csv).columns) == ["name", "price", "quantity"]

    def test_csv_with_bom(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_text("price\n\"1,5\"\n", encoding="utf-8-sig")
        assert read_records(path) == [{"price": "1,5"}]

    def test_parquet(self, tmp_path):
        path = tmp_path / "prices.parquet"
        table = pa.table({"price": ["1.234,56", None], "qty": [1, 2]})
        pq.write_table(table, path)
        rows = read_records(path)
        assert rows[0] == {"price": "1.234,56", "qty": 1}
        assert rows[1]["price"] is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReadError, match="not found"):
            read_records(tmp_path / "nope.csv")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "prices.xlsx"
        path.write_bytes(b"")
        with pytest.raises(ReadError, match="Unsupported"):
            read_records(path)

    def test_unparseable_parquet(self, tmp_path):
        path = tmp_path / "broken.parquet"
        path.write_text("not parquet", encoding="utf-8")
        with pytest.raises(ReadError, match="Failed to read"):
            read_records(path)


class TestFrameRecordConversion:
    """Tests for frame_to_records() / records_to_frame()."""

    def test_nan_becomes_none(self):
        df = pd.DataFrame({"p": ["1,5", np.nan], "q": [1.0, np.nan]})
        rows = frame_to_records(df)
        assert rows[0]["p"] == "1,5"
        assert rows[1] == {"p": None, "q": None}

    def test_ragged_rows(self):
        df = records_to_frame([{"a": "1"}, {"b": "2", "a": "3"}])
        assert list(df.columns) == ["a", "b"]
        assert df["a"].tolist() == ["1", "3"]
        assert pd.isna(df["b"].iloc[0])

    def test_empty_records(self):
        df = records_to_frame([])
        assert df.empty

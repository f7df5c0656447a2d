"""Shared type aliases for row-oriented datasets."""

from __future__ import annotations

from typing import Any, Mapping, NewType, Sequence

ColumnKey = NewType("ColumnKey", str)

# A row maps column keys to cell values. Keys are plain strings so rows
# read from CSV/Parquet can be passed in without wrapping.
Row = Mapping[str, Any]
Dataset = Sequence[Row]

"""
Input reading for numconv.

Loads a CSV or Parquet file into the row-oriented shape the detection
and conversion core works on: a list of ``dict`` rows, column order
preserved, missing values as ``None``.

CSV files are read with every cell as a string and without NA inference,
so "1.234,56" and "" reach the detectors exactly as written. Parquet
files are read through PyArrow and keep their stored types; only string
cells are candidates for conversion later on.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd
import pyarrow.parquet as pq

from numconv.exceptions import ReadError
from numconv.types import Dataset

logger = logging.getLogger(__name__)

_SUPPORTED_SUFFIXES = {".csv", ".parquet"}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_frame(path: str | Path) -> pd.DataFrame:
    """Read an input file into a DataFrame.

    Raises:
        ReadError: If the file does not exist, has an unsupported
            suffix, or cannot be parsed.
    """
    path = _resolve_input_path(path)
    try:
        if path.suffix.lower() == ".csv":
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
            )
        else:
            df = pq.read_table(path).to_pandas()
    except Exception as exc:
        raise ReadError(f"Failed to read {path.name}: {exc}") from exc

    logger.info("Read %s (%d rows, %d cols)", path.name, len(df), len(df.columns))
    return df


def read_records(path: str | Path) -> list[dict[str, Any]]:
    """Read an input file into a list of row dicts."""
    return frame_to_records(read_frame(path))


def frame_to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a DataFrame to row dicts, mapping missing values to ``None``."""
    cleaned = df.astype(object).where(df.notna(), None)
    return cleaned.to_dict(orient="records")


def records_to_frame(records: Dataset) -> pd.DataFrame:
    """Build a DataFrame from row dicts.

    Column order follows first appearance across rows; cells a row does
    not define become missing values.
    """
    columns: list[str] = []
    seen: set[str] = set()
    for row in records:
        for key in row:
            if key not in seen:
                seen.add(key)
                columns.append(key)
    return pd.DataFrame.from_records(list(records), columns=columns)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _resolve_input_path(path: str | Path) -> Path:
    """Validate that *path* exists and has a supported suffix."""
    path = Path(path)
    if not path.exists():
        raise ReadError(f"Input file not found: {path}")
    if path.suffix.lower() not in _SUPPORTED_SUFFIXES:
        raise ReadError(
            f"Unsupported input file type: '{path.suffix}'. "
            f"Supported: {sorted(_SUPPORTED_SUFFIXES)}"
        )
    return path

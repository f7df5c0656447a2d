"""
Exporter for numconv.

Writes converted rows to a single output file in CSV or Parquet format.

CSV files are written with ``utf-8-sig`` encoding (BOM) so that currency
symbols and accented column names display correctly when opened in Excel.
Parquet output goes through PyArrow and preserves dtypes, which matters
when ``coerce_numeric`` turned converted columns into numbers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from numconv.exceptions import ExportError
from numconv.reader import records_to_frame
from numconv.types import Dataset

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def write_frame(
    df: pd.DataFrame,
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "csv",
) -> str:
    """Write a DataFrame to *path*, creating the parent directory.

    Returns:
        The written path as a string.

    Raises:
        ExportError: If *output_format* is unsupported, or if the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc

    logger.info(
        "Exported %s (%d rows, %d cols)", path.name, len(df), len(df.columns)
    )
    return str(path)


def write_records(
    records: Dataset,
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "csv",
) -> str:
    """Write row dicts to *path*. See ``write_frame()``."""
    return write_frame(records_to_frame(records), path, output_format)

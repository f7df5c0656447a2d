"""
Before/after preview of a conversion for numconv.

Builds a small long-format table showing what the first few rows of each
selected column look like before and after conversion, so a caller can
confirm the column selection before converting the whole dataset.
"""

from __future__ import annotations

from itertools import islice

import pandas as pd

from numconv.transforms.convert import convert_data_format
from numconv.types import Dataset

PREVIEW_COLUMNS = ["column", "row", "before", "after"]


def _display(value: object) -> str:
    return "" if value is None else str(value)


def build_preview(
    dataset: Dataset,
    columns: list[str],
    n_rows: int = 5,
) -> pd.DataFrame:
    """Build a before/after preview for the selected columns.

    Args:
        dataset: Sequence of row mappings.
        columns: Columns selected for conversion.
        n_rows: Number of leading rows to preview per column.

    Returns:
        DataFrame with columns ``column``, ``row``, ``before``, ``after``;
        one record per (column, row). Missing cells render as ``""``.
    """
    if not columns:
        return pd.DataFrame(columns=PREVIEW_COLUMNS)

    head = list(islice(dataset, n_rows))
    converted = convert_data_format(head, columns, "English")

    records = [
        {
            "column": column,
            "row": idx,
            "before": _display(original.get(column)),
            "after": _display(new.get(column)),
        }
        for column in columns
        for idx, (original, new) in enumerate(zip(head, converted))
    ]
    return pd.DataFrame(records, columns=PREVIEW_COLUMNS)

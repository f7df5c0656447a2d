"""
Numeric coercion transform for numconv.

Turns English-format numeric strings into proper numeric dtypes. The file
pipeline runs it on the frame rebuilt from ``convert_dataset()`` output
(``convert_frame()`` output works the same), so every selected column uses:
- Comma as thousand separator (e.g., "25,200", "1,234.56")
- Dot as decimal separator
- Optional currency symbols and stray whitespace (e.g., "$ 12.50 ")

This transform:
1. Strips currency symbols and whitespace.
2. Removes comma thousand separators.
3. Coerces to numeric dtype (pd.to_numeric with errors='coerce').
4. Leaves every column not listed untouched.
"""

from __future__ import annotations

import re

import pandas as pd

from numconv.cells import CURRENCY_SYMBOLS

_CURRENCY_PATTERN = rf"[{re.escape(CURRENCY_SYMBOLS)}\s]"


def parse_numbers(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Parse English-format numeric strings in selected columns.

    Empty strings and values that do not parse become ``NaN``.

    Args:
        df: Input DataFrame with string values.
        columns: Columns to coerce. Names absent from *df* are ignored.

    Returns:
        DataFrame copy with the selected columns coerced to numeric dtypes.
    """
    df = df.copy()
    for col in columns:
        if col not in df.columns:
            continue
        series = df[col].astype(str)
        # Step 1 & 2: strip currency/whitespace and remove commas
        cleaned = (
            series.str.replace(_CURRENCY_PATTERN, "", regex=True)
            .str.replace(",", "", regex=False)
        )
        # Step 3: coerce to numeric (empty strings and non-numeric become NaN)
        df[col] = pd.to_numeric(cleaned, errors="coerce")

    return df

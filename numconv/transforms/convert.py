"""
European -> English conversion transform for numconv.

Rewrites European-format values ("1.234,56") in selected columns into
English form ("1,234.56"). Cells stay strings; use
``numconv.transforms.numbers.parse_numbers`` afterwards for numeric dtypes.

Guarantees:
- Input rows are never mutated; every output row is a new dict.
- Only non-empty ``str`` cells in selected columns are touched.
- A cell that fails to convert keeps its original value, a warning is
  logged, and the pass carries on with the next cell.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

import pandas as pd

from numconv.cells import convert_european_to_english
from numconv.types import Dataset

logger = logging.getLogger(__name__)

_SUPPORTED_TARGETS = {"English"}


@dataclass
class CellConversion:
    """Outcome of converting one cell.

    ``value`` is the converted string, or the original value when
    ``error`` is set.
    """
    value: Any
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ConversionStats:
    """Per-pass cell counts (only cells in selected columns are counted)."""
    converted: int = 0
    unchanged: int = 0
    failed: int = 0


@dataclass
class ConversionResult:
    """Converted rows plus cell statistics."""
    rows: list[dict[str, Any]] = field(default_factory=list)
    stats: ConversionStats = field(default_factory=ConversionStats)


def convert_cell(value: str) -> CellConversion:
    """Convert one cell, turning any converter failure into a result."""
    try:
        return CellConversion(value=convert_european_to_english(value))
    except Exception as exc:  # noqa: BLE001
        return CellConversion(value=value, error=exc)


def _should_convert(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _apply(value: Any, column: str, stats: ConversionStats) -> Any:
    """Convert one cell of *column*, updating *stats* and logging failures."""
    if not _should_convert(value):
        return value
    outcome = convert_cell(value)
    if not outcome.ok:
        stats.failed += 1
        logger.warning(
            "Failed to convert value %r in column '%s': %s",
            value,
            column,
            outcome.error,
        )
        return value
    if outcome.value == value:
        stats.unchanged += 1
    else:
        stats.converted += 1
    return outcome.value


def convert_dataset(
    dataset: Dataset,
    columns_to_convert: list[str],
    target_format: Literal["English"] = "English",
) -> ConversionResult:
    """Convert selected columns and report how many cells changed.

    Args:
        dataset: Sequence of row mappings.
        columns_to_convert: Column keys to rewrite. Keys a row does not
            define are skipped for that row.
        target_format: Only ``"English"`` is supported; anything else
            logs a warning and returns unconverted copies.

    Returns:
        ``ConversionResult`` with one new dict per input row.
    """
    rows = [dict(row) for row in dataset]
    stats = ConversionStats()

    if target_format not in _SUPPORTED_TARGETS:
        logger.warning(
            "Unsupported target format '%s' -- rows returned unconverted. "
            "Supported: %s",
            target_format,
            sorted(_SUPPORTED_TARGETS),
        )
        return ConversionResult(rows=rows, stats=stats)

    for new_row in rows:
        for column in columns_to_convert:
            if column in new_row:
                new_row[column] = _apply(new_row[column], column, stats)

    logger.debug(
        "Converted %d cell(s), %d unchanged, %d failed",
        stats.converted,
        stats.unchanged,
        stats.failed,
    )
    return ConversionResult(rows=rows, stats=stats)


def convert_data_format(
    dataset: Dataset,
    columns_to_convert: list[str],
    target_format: Literal["English"] = "English",
) -> list[dict[str, Any]]:
    """Return a copy of *dataset* with selected columns in English format.

    Example::

        convert_data_format([{"price": "1.234,56", "name": "A"}], ["price"])
        # [{"price": "1,234.56", "name": "A"}]
    """
    return convert_dataset(dataset, columns_to_convert, target_format).rows


def convert_frame(
    df: pd.DataFrame,
    columns_to_convert: list[str],
    stats: ConversionStats | None = None,
) -> pd.DataFrame:
    """DataFrame counterpart of ``convert_data_format()``.

    Returns a copy; only non-empty ``str`` cells are rewritten, so ``NaN``
    and non-string values pass through. Failed cells keep their value and
    are logged, as in ``convert_dataset()``. Columns missing from *df* are
    skipped with a warning.

    Args:
        df: Input DataFrame.
        columns_to_convert: Columns to rewrite.
        stats: Optional counter updated in place with the cell counts.
    """
    if stats is None:
        stats = ConversionStats()
    df = df.copy()
    for column in columns_to_convert:
        if column not in df.columns:
            logger.warning("Column '%s' not in DataFrame -- skipped", column)
            continue
        df[column] = df[column].map(lambda v, col=column: _apply(v, col, stats))
    return df

"""
Column-level format detection for numconv.

Aggregates the cell-level classifiers in ``numconv.cells`` into one
verdict per column:

1. ``detect_numeric_columns()`` -- which columns hold mostly numbers.
2. ``detect_european_format()`` -- which of those use comma decimals.
3. ``review_columns()`` -- both of the above plus a suggested selection
   and a skip flag, for callers that present the result to a user.

Sampling:
  Only the first ``sample_size`` rows (default 100) are inspected, so
  cost is bounded regardless of dataset size. Candidate columns are the
  keys of the first sampled row. Verdicts are an approximation and may
  disagree with a minority of unsampled rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import Any

from numconv.cells import is_european_format, is_numeric_value
from numconv.config import DEFAULT_SAMPLE_SIZE, DEFAULT_THRESHOLD, DetectionConfig
from numconv.types import ColumnKey, Dataset, Row

logger = logging.getLogger(__name__)


@dataclass
class ColumnVerdict:
    """Detection outcome for a single column."""

    column: ColumnKey
    is_numeric: bool
    is_european_format: bool


@dataclass
class DetectionResult:
    """Output of ``review_columns()``.

    Attributes:
        numeric_columns: Numeric columns, in first-row key order.
        european_columns: Maps each numeric column -> European verdict.
        verdicts: One ``ColumnVerdict`` per candidate column.
        suggested_columns: Numeric columns with a European verdict; the
            default conversion selection.
        should_skip: ``True`` when there is nothing to convert (no numeric
            columns, or none of them European).
    """

    numeric_columns: list[ColumnKey] = field(default_factory=list)
    european_columns: dict[ColumnKey, bool] = field(default_factory=dict)
    verdicts: list[ColumnVerdict] = field(default_factory=list)
    suggested_columns: list[ColumnKey] = field(default_factory=list)
    should_skip: bool = True


def _sample(dataset: Dataset, sample_size: int) -> list[Row]:
    return list(islice(dataset, sample_size))


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def detect_numeric_columns(
    dataset: Dataset,
    threshold: float = DEFAULT_THRESHOLD,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> list[ColumnKey]:
    """Detect columns whose sampled values are mostly numeric.

    A column is numeric when ``numeric_count / len(sample) >= threshold``.
    Absent and empty cells count against the column.

    Args:
        dataset: Sequence of row mappings.
        threshold: Minimum share of numeric sampled cells.
        sample_size: Number of leading rows to inspect.

    Returns:
        Numeric column keys in the key order of the first row. Keys that
        only appear in later rows are never considered.
    """
    sample = _sample(dataset, sample_size)
    if not sample:
        return []

    keys = [ColumnKey(k) for k in sample[0].keys()]
    numeric: list[ColumnKey] = []
    for key in keys:
        numeric_count = sum(
            1 for row in sample
            if _is_present(row.get(key)) and is_numeric_value(row.get(key))
        )
        if numeric_count / len(sample) >= threshold:
            numeric.append(key)

    logger.debug("Numeric columns (%d sampled rows): %s", len(sample), numeric)
    return numeric


def detect_european_format(
    dataset: Dataset,
    numeric_columns: list[ColumnKey] | list[str],
    threshold: float = DEFAULT_THRESHOLD,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> dict[ColumnKey, bool]:
    """Decide, per column, whether its numbers use European separators.

    Only present, numeric-looking sampled values are considered. A column
    with no such values gets ``False``; otherwise it is European when the
    European share of those values is ``>= threshold``.

    Args:
        dataset: Sequence of row mappings.
        numeric_columns: Columns to check (usually from
            ``detect_numeric_columns()``).
        threshold: Minimum share of European-format values.
        sample_size: Number of leading rows to inspect.

    Returns:
        Dict mapping column key -> European verdict. Empty for an empty
        dataset.
    """
    result: dict[ColumnKey, bool] = {}
    sample = _sample(dataset, sample_size)
    if not sample:
        return result

    for key in numeric_columns:
        values = [
            row.get(key) for row in sample
            if _is_present(row.get(key)) and is_numeric_value(row.get(key))
        ]
        if not values:
            result[ColumnKey(key)] = False
            continue

        european_count = sum(1 for v in values if is_european_format(str(v)))
        result[ColumnKey(key)] = european_count / len(values) >= threshold

    return result


def review_columns(
    dataset: Dataset,
    config: DetectionConfig | None = None,
) -> DetectionResult:
    """Run both detectors and derive a default conversion selection.

    Args:
        dataset: Sequence of row mappings.
        config: Sample size and thresholds. Defaults to ``DetectionConfig()``.

    Returns:
        ``DetectionResult`` with verdicts, the suggested selection and
        whether conversion can be skipped altogether.
    """
    if config is None:
        config = DetectionConfig()

    sample = _sample(dataset, config.sample_size)
    if not sample:
        logger.info("Empty dataset -- nothing to detect")
        return DetectionResult()

    numeric = detect_numeric_columns(
        sample, threshold=config.numeric_threshold, sample_size=config.sample_size
    )
    european: dict[ColumnKey, bool] = {}
    if numeric:
        european = detect_european_format(
            sample,
            numeric,
            threshold=config.european_threshold,
            sample_size=config.sample_size,
        )

    numeric_set = set(numeric)
    verdicts = [
        ColumnVerdict(
            column=ColumnKey(key),
            is_numeric=key in numeric_set,
            is_european_format=european.get(ColumnKey(key), False),
        )
        for key in sample[0].keys()
    ]
    suggested = [col for col in numeric if european[col]]

    logger.info(
        "Detected %d numeric column(s), %d European: %s",
        len(numeric),
        len(suggested),
        suggested,
    )
    return DetectionResult(
        numeric_columns=numeric,
        european_columns=european,
        verdicts=verdicts,
        suggested_columns=suggested,
        should_skip=not suggested,
    )

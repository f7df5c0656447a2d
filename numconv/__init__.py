"""
numconv: detect and convert European-format numbers in tabular data.

Public API surface:

- Cell level: ``is_numeric_value(value)``, ``is_european_format(value)``,
  ``convert_european_to_english(value)``.

- Column level: ``detect_numeric_columns(rows)``,
  ``detect_european_format(rows, columns)`` and ``review_columns(rows)``
  (both verdicts plus a suggested selection).

- Dataset level: ``convert_data_format(rows, columns, "English")`` --
  returns new rows with the selected columns in English format.

- File level: ``convert_file(input_path, output_path, ...)`` -- read a
  CSV/Parquet file, detect, convert, and write the result.

All row-level functions are pure: inputs are never modified and no state
is kept between calls.
"""

from __future__ import annotations

import logging
from typing import Literal

from numconv._pipeline import ConversionReport, run_conversion
from numconv.cells import (
    convert_european_to_english,
    is_european_format,
    is_numeric_value,
)
from numconv.config import ConvertConfig, generate_default_config, load_config
from numconv.detect import (
    ColumnVerdict,
    DetectionResult,
    detect_european_format,
    detect_numeric_columns,
    review_columns,
)
from numconv.transforms.convert import convert_data_format
from numconv.transforms.preview import build_preview

__all__ = [
    "is_numeric_value",
    "is_european_format",
    "convert_european_to_english",
    "detect_numeric_columns",
    "detect_european_format",
    "review_columns",
    "convert_data_format",
    "build_preview",
    "convert_file",
    "ColumnVerdict",
    "DetectionResult",
    "ConversionReport",
    "ConvertConfig",
]

logger = logging.getLogger(__name__)


def convert_file(
    input_path: str,
    output_path: str | None = None,
    columns: list[str] | None = None,
    config_path: str | None = None,
    output_format: Literal["csv", "parquet"] | None = None,
    coerce_numeric: bool = False,
) -> ConversionReport:
    """Convert European-format numbers in a CSV/Parquet file.

    Two ways to call it:

    - With *config_path*: the YAML config is loaded and every other
      argument is ignored.
    - Without: a default config is built from the arguments. When
      *columns* is ``None`` the detected European columns are converted.

    Args:
        input_path: CSV or Parquet file to convert.
        output_path: Where to write the result. Required unless
            *config_path* is given.
        columns: Explicit column selection; ``None`` uses detection.
        config_path: Optional YAML config written by ``save_config()``.
        output_format: ``"csv"`` or ``"parquet"``; inferred from the
            suffix of *output_path* when ``None``.
        coerce_numeric: Parse converted columns into numeric dtype.

    Returns:
        ``ConversionReport`` with detection verdicts, the selected columns,
        cell statistics and the written path.

    Raises:
        ValueError: If neither *output_path* nor *config_path* is given.
        ReadError: If the input cannot be read.
        ConfigValidationError: If a selected column is missing.
        ExportError: If the output cannot be written.

    Examples::

        report = numconv.convert_file("prices_eu.csv", "prices_en.csv")
        report.selected_columns   # ['price']
        report.stats.converted    # 1250
    """
    if config_path is not None:
        logger.info("convert_file() -- loading config from %s", config_path)
        config = load_config(config_path)
    else:
        if output_path is None:
            raise ValueError("output_path is required when config_path is not given")
        config = generate_default_config(
            input_path=input_path,
            output_path=output_path,
            columns=columns,
            output_format=output_format,
        )
        config.conversion.coerce_numeric = coerce_numeric

    logger.info(
        "convert_file() -- input=%s, output=%s",
        config.source.input_path,
        config.output.output_path,
    )
    return run_conversion(config)

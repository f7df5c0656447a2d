"""
Internal pipeline orchestration for numconv.

Runs the file-level sequence read -> detect -> select -> convert ->
(coerce) -> export for a validated ``ConvertConfig``. Kept separate from
``__init__.py`` so the public entry points stay thin.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from numconv.config import ConvertConfig, validate_columns_against_data
from numconv.detect import DetectionResult, review_columns
from numconv.export import write_frame
from numconv.reader import frame_to_records, read_frame, records_to_frame
from numconv.transforms.convert import ConversionStats, convert_dataset
from numconv.transforms.numbers import parse_numbers

logger = logging.getLogger(__name__)


@dataclass
class ConversionReport:
    """Summary of one ``run_conversion()`` call.

    Attributes:
        detection: Column verdicts computed on the input sample.
        selected_columns: Columns that were actually converted. Empty when
            nothing was selected and the step was skipped.
        stats: Cell counts from the conversion pass.
        output_path: Path of the written file.
    """

    detection: DetectionResult
    selected_columns: list[str] = field(default_factory=list)
    stats: ConversionStats = field(default_factory=ConversionStats)
    output_path: str = ""

    @property
    def skipped(self) -> bool:
        return not self.selected_columns


def _select_columns(config: ConvertConfig, detection: DetectionResult) -> list[str]:
    """Explicit config selection wins; otherwise use the detected suggestion."""
    if config.conversion.columns is not None:
        return list(config.conversion.columns)
    return list(detection.suggested_columns)


def run_conversion(config: ConvertConfig) -> ConversionReport:
    """Convert one input file according to *config* and write the result.

    Steps:
      1. Read the input file into rows.
      2. Cross-check explicitly selected columns against the data.
      3. Detect numeric / European columns on the sample window.
      4. Convert the selected columns (skipped when nothing is selected).
      5. Optionally coerce the converted columns to numeric dtype.
      6. Export.

    Raises:
        ReadError: If the input cannot be read.
        ConfigValidationError: If a selected column is missing from the data.
        ExportError: If the output cannot be written.
    """
    # -- Read --
    logger.info("Step 1/5: Reading %s", config.source.input_path)
    df = read_frame(config.source.input_path)
    records = frame_to_records(df)

    # -- Validate selection --
    validate_columns_against_data(config, set(df.columns))

    # -- Detect --
    logger.info("Step 2/5: Detecting number formats (%d rows)", len(records))
    detection = review_columns(records, config.detection)

    # -- Convert --
    selected = _select_columns(config, detection)
    if selected:
        logger.info("Step 3/5: Converting %d column(s): %s", len(selected), selected)
    else:
        logger.info("Step 3/5: Conversion SKIPPED (no European columns selected)")
    result = convert_dataset(records, selected, config.conversion.target_format)
    logger.info(
        "  Cells: %d converted, %d unchanged, %d failed",
        result.stats.converted,
        result.stats.unchanged,
        result.stats.failed,
    )

    # -- Coerce (configurable) --
    out_df = records_to_frame(result.rows) if result.rows else df.iloc[0:0].copy()
    if config.conversion.coerce_numeric and selected:
        logger.info("Step 4/5: Coercing converted columns to numeric")
        out_df = parse_numbers(out_df, selected)
    else:
        logger.info("Step 4/5: Numeric coercion SKIPPED")

    # -- Export --
    logger.info("Step 5/5: Writing %s", config.output.output_path)
    written = write_frame(out_df, config.output.output_path, config.output.output_format)

    return ConversionReport(
        detection=detection,
        selected_columns=selected,
        stats=result.stats,
        output_path=written,
    )

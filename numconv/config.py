"""
Configuration models and YAML I/O for numconv.

This module defines the Pydantic models that map 1:1 to a conversion
config YAML file, plus helper functions for loading, saving, and
auto-generating the config.

Key models:
- ConvertConfig: Top-level config (source + detection + conversion + output).
- DetectionConfig: Sample window and thresholds for the column heuristics.
- ConversionConfig: Target format, column selection, numeric coercion.
- OutputConfig: Output path and file format.

Key functions:
- load_config(path) -> ConvertConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(...) -> ConvertConfig: Build config for a file pair.
- validate_columns_against_data(config, available_columns): Cross-check
  selected columns vs the data.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from numconv.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

# Heuristic defaults: the first 100 rows are sampled, and a column verdict
# is positive when at least 40% of the sample satisfies the predicate.
DEFAULT_SAMPLE_SIZE = 100
DEFAULT_THRESHOLD = 0.4


class SourceConfig(BaseModel):
    """Source file information."""

    input_path: str = Field(..., description="Path to the CSV or Parquet input file")


class DetectionConfig(BaseModel):
    """Tuning knobs for the column-level heuristics."""

    sample_size: int = Field(
        DEFAULT_SAMPLE_SIZE, ge=1, description="Number of leading rows sampled"
    )
    numeric_threshold: float = Field(
        DEFAULT_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Minimum share of numeric cells for a column to count as numeric",
    )
    european_threshold: float = Field(
        DEFAULT_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Minimum share of European-format values for a European verdict",
    )


class ConversionConfig(BaseModel):
    """What to convert and how."""

    target_format: Literal["English"] = Field(
        "English", description="Only English (dot decimal) output is supported"
    )
    columns: list[str] | None = Field(
        None,
        description="Columns to convert. If None, the detected European columns are used.",
    )
    coerce_numeric: bool = Field(
        False, description="If True, parse converted columns into numeric dtype"
    )

    @field_validator("columns")
    @classmethod
    def _check_no_duplicate_columns(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and len(set(v)) != len(v):
            raise ValueError(f"Duplicate column names in conversion.columns: {v}")
        return v


class OutputConfig(BaseModel):
    """Output settings."""

    output_path: str = Field(..., description="Where the converted table is written")
    output_format: Literal["csv", "parquet"] = Field("csv", description="Output format")


class ConvertConfig(BaseModel):
    """Top-level configuration for a numconv file conversion."""

    source: SourceConfig
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    output: OutputConfig


def load_config(path: str | Path) -> ConvertConfig:
    """Load and validate a conversion config YAML into a ConvertConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ConvertConfig.model_validate(raw)


def save_config(config: ConvertConfig, path: str | Path) -> None:
    """Serialize a ConvertConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# numconv configuration\n")
        f.write("# Edit this file to pick columns, thresholds, output format, etc.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(
    input_path: str,
    output_path: str,
    columns: list[str] | None = None,
    output_format: Literal["csv", "parquet"] | None = None,
) -> ConvertConfig:
    """Build a ConvertConfig for an input/output file pair.

    Args:
        input_path: Path to the source file.
        output_path: Where the converted table should be written.
        columns: Explicit column selection; ``None`` defers to detection.
        output_format: Output format. If ``None``, inferred from the
            suffix of *output_path* (``.parquet`` -> parquet, else csv).

    Returns:
        A ConvertConfig with default detection settings.
    """
    if output_format is None:
        output_format = "parquet" if Path(output_path).suffix.lower() == ".parquet" else "csv"
    return ConvertConfig(
        source=SourceConfig(input_path=input_path),
        conversion=ConversionConfig(columns=columns),
        output=OutputConfig(output_path=output_path, output_format=output_format),
    )


def validate_columns_against_data(
    config: ConvertConfig, available_columns: set[str]
) -> None:
    """Check that every explicitly selected column exists in the data.

    Does nothing when the config defers to detection (``columns is None``).

    Raises:
        ConfigValidationError: If any selected column is missing.
    """
    selected = config.conversion.columns
    if selected is None:
        return

    missing = [c for c in selected if c not in available_columns]
    if missing:
        raise ConfigValidationError(
            f"The following columns in the config do not exist in the source data: "
            f"{missing}\n"
            f"Available columns: {sorted(available_columns)}"
        )
    logger.info("Config validation passed: all %d columns found", len(selected))

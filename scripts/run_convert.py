"""
Demo script: convert European-format numbers in a CSV/Parquet file.

Usage:
    uv run python scripts/run_convert.py inputs/prices_eu.csv outputs/prices_en.csv
    uv run python scripts/run_convert.py inputs/prices_eu.csv outputs/prices.parquet --coerce
    uv run python scripts/run_convert.py --config outputs/prices.yaml

Without --config, the European columns are detected on the first 100 rows
and converted. The per-column verdicts are logged after the run.
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_convert")

USAGE = "Usage: run_convert.py INPUT OUTPUT [--coerce] | --config CONFIG"


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str]) -> dict[str, object]:
    """Parse command-line arguments, exiting with status 2 on bad usage."""
    if "--config" in argv:
        idx = argv.index("--config")
        if idx + 1 >= len(argv) or argv[idx + 1].startswith("--"):
            log.error(USAGE)
            sys.exit(2)
        return {"config_path": argv[idx + 1]}

    args = [a for a in argv if not a.startswith("--")]
    if len(args) != 2:
        log.error(USAGE)
        sys.exit(2)
    return {
        "input_path": args[0],
        "output_path": args[1],
        "coerce_numeric": "--coerce" in argv,
    }


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    import numconv

    options = _parse_args(sys.argv[1:] if argv is None else argv)

    if "config_path" in options:
        report = numconv.convert_file("", config_path=options["config_path"])
    else:
        report = numconv.convert_file(
            options["input_path"],
            options["output_path"],
            coerce_numeric=options["coerce_numeric"],
        )

    for verdict in report.detection.verdicts:
        log.info(
            "  %-24s numeric=%-5s european=%s",
            verdict.column,
            verdict.is_numeric,
            verdict.is_european_format,
        )
    if report.skipped:
        log.info("No European columns found -- data written unchanged")
    log.info(
        "Done: %s (%d converted, %d unchanged, %d failed)",
        report.output_path,
        report.stats.converted,
        report.stats.unchanged,
        report.stats.failed,
    )


if __name__ == "__main__":
    main()

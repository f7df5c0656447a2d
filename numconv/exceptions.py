"""
Custom exception hierarchy for numconv.

The detection and conversion core never raises these: malformed cells are
returned unchanged and per-cell failures are logged. They are raised by the
file layer (config loading, reading, exporting) so callers can tell a bad
config apart from an unreadable input file.
"""


class NumconvError(Exception):
    """Base exception for all numconv errors."""


class ConfigValidationError(NumconvError):
    """Raised when a conversion config fails validation.

    This can happen if:
    - The YAML file is empty.
    - Columns selected for conversion do not exist in the source data.
    """


class ReadError(NumconvError):
    """Raised when an input file cannot be read into rows.

    For example, a missing file or an unsupported file extension.
    """


class ExportError(NumconvError):
    """Raised when the exporter fails to write the converted rows.

    For example, permission errors, disk full, or unsupported format.
    """

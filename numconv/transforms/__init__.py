"""
Transforms sub-package for numconv.

Contains the transformation steps applied after detection. Each transform
takes rows (or a DataFrame) plus a column selection and returns new data;
inputs are never modified.

- convert.py: Rewrite European-format values into English format.
- numbers.py: Coerce English-format strings to numeric dtypes.
- preview.py: Before/after table for a proposed column selection.
"""

"""
Shared test fixtures for numconv tests.

Sample datasets are defined here so unit and integration tests agree on
what "European" and "English" data look like.
"""

from __future__ import annotations

import pytest

# ---------------------------------------------------------------------------
# Sample rows
# ---------------------------------------------------------------------------
EUROPEAN_ROWS = [
    {"name": "Product A", "price": "1.234,56", "quantity": "100"},
    {"name": "Product B", "price": "2.345,67", "quantity": "200"},
    {"name": "Product C", "price": "€3.456,78", "quantity": "300"},
]

ENGLISH_ROWS = [
    {"name": "Product A", "price": "1,234.56", "discount": "10.5"},
    {"name": "Product B", "price": "2,345.67", "discount": "20.5"},
    {"name": "Product C", "price": "$3,456.78", "discount": "30.5"},
]

EUROPEAN_CSV = """\
name,price,quantity
Product A,"1.234,56",100
Product B,"2.345,67",200
Product C,"3.456,78",300
Product D,,400
"""


@pytest.fixture
def european_rows() -> list[dict[str, str]]:
    return [dict(r) for r in EUROPEAN_ROWS]


@pytest.fixture
def english_rows() -> list[dict[str, str]]:
    return [dict(r) for r in ENGLISH_ROWS]


@pytest.fixture
def european_csv(tmp_path):
    """Write EUROPEAN_CSV to a temp file and return its path."""
    path = tmp_path / "prices_eu.csv"
    path.write_text(EUROPEAN_CSV, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (reads and writes files)",
    )

"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path


@pytest.fixture
def queries_csv(tmp_path) -> Path:
    """Two queries: one exact match, one weak match below the review threshold."""
    path = tmp_path / "queries.csv"
    path.write_text("Id,Query\n1,new york mets\n2,zzz\n", encoding="utf-8")
    return path


@pytest.fixture
def choices_txt(tmp_path) -> Path:
    path = tmp_path / "choices.txt"
    path.write_text("New York Mets\nAtlanta Braves\n\n", encoding="utf-8")
    return path


@pytest.fixture
def choices_csv(tmp_path) -> Path:
    path = tmp_path / "choices.csv"
    path.write_text("Choice,Code\nNew York Mets,NYM\nAtlanta Braves,ATL\n", encoding="utf-8")
    return path

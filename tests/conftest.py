"""Pytest configuration and shared fixtures."""

import pytest

from planmerge.merge import CustomColumn, ImportedTable, TableData


@pytest.fixture
def weekly_labels() -> dict[str, str]:
    """Built-in labels of the weekly grid."""
    return {
        "focus": "Focus",
        "languageTarget": "Language Target",
        "assessment": "Assessment",
    }


@pytest.fixture
def weekly_table(weekly_labels) -> TableData:
    """A two-day weekly table with one custom column."""
    return TableData(
        rows=[
            {"day": "Monday", "focus": "Reading", "languageTarget": "", "assessment": "", "homework": "Page 4"},
            {"day": "Tuesday", "focus": "Writing", "languageTarget": "", "assessment": "", "homework": ""},
        ],
        column_labels=dict(weekly_labels),
        column_widths={"day": 150, "focus": 200, "languageTarget": 200, "assessment": 150, "homework": 200},
        custom_columns=[CustomColumn(key="homework", label="Homework", placeholder="")],
    )


@pytest.fixture
def scenario_current() -> dict:
    """Existing weekly table from the end-to-end import scenario."""
    return {
        "rows": [
            {"day": "Monday", "focus": "Reading"},
            {"day": "Tuesday", "focus": "Writing"},
        ],
        "columnLabels": {
            "focus": "Focus",
            "languageTarget": "Language Target",
            "assessment": "Assessment",
        },
        "columnWidths": {"day": 150, "focus": 200, "languageTarget": 200, "assessment": 150},
        "customColumns": [],
    }


@pytest.fixture
def scenario_import() -> ImportedTable:
    """Pasted spreadsheet data from the end-to-end import scenario."""
    return ImportedTable(
        headers=["Day", "Focus", "Homework"],
        rows=[
            ["monday", "Phonics", "Worksheet A"],
            ["Wednesday", "Math", "—"],
        ],
    )

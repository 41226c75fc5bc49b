"""Built-in column and row layouts for each lesson-plan period."""

from typing import Any, Union

from .constants import DEFAULT_COLUMN_WIDTH, ROW_LABEL_COLUMN_WIDTH
from .headers import row_label_key_for_period
from .models import ImportedTable, TableData, as_table_data

_DAILY_COLUMN_LABELS = {
    "stage": "Stage",
    "method": "Method",
    "teacherActions": "Teacher Actions",
    "studentActions": "Student Actions",
    "assessment": "Assessment",
}

_GRID_COLUMN_LABELS = {
    "focus": "Focus",
    "languageTarget": "Language Target",
    "assessment": "Assessment",
}

DEFAULT_COLUMN_LABELS: dict[str, dict[str, str]] = {
    "daily": _DAILY_COLUMN_LABELS,
    "weekly": _GRID_COLUMN_LABELS,
    "monthly": _GRID_COLUMN_LABELS,
    "yearly": _GRID_COLUMN_LABELS,
}

DEFAULT_ROW_LABELS: dict[str, list[str]] = {
    "daily": ["Engage", "Explore", "Explain", "Elaborate", "Evaluate"],
    "weekly": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
    "monthly": ["Engage", "Explore", "Explain", "Elaborate", "Evaluate"],
    "yearly": ["Desired Results", "Assessment Evidence", "Unit Overview"],
}

# Width overrides on top of the label/data defaults
_WIDTH_OVERRIDES: dict[str, dict[str, int]] = {
    "weekly": {"assessment": 150},
}


def _period_name(period_type: Any) -> str:
    value = getattr(period_type, "value", period_type)
    return str(value or "").lower()


def default_labels_for(period_type: Any) -> dict[str, str]:
    """Built-in column labels for a period; unknown periods use the grid layout."""
    return dict(DEFAULT_COLUMN_LABELS.get(_period_name(period_type), _GRID_COLUMN_LABELS))


def default_widths_for(period_type: Any) -> dict[str, int]:
    label_key = row_label_key_for_period(period_type)
    widths = {label_key: ROW_LABEL_COLUMN_WIDTH}
    for key in default_labels_for(period_type):
        widths.setdefault(key, DEFAULT_COLUMN_WIDTH)
    widths.update(_WIDTH_OVERRIDES.get(_period_name(period_type), {}))
    return widths


def initialize_table(period_type: Any) -> TableData:
    """Create the starting table for a period: one blank row per default label."""
    label_key = row_label_key_for_period(period_type)
    column_labels = default_labels_for(period_type)
    data_keys = [key for key in column_labels if key != label_key]

    rows = []
    for label in DEFAULT_ROW_LABELS.get(_period_name(period_type), []):
        row: dict[str, Any] = {label_key: label}
        row.update({key: "" for key in data_keys})
        rows.append(row)

    return TableData(
        rows=rows,
        column_labels=column_labels,
        column_widths=default_widths_for(period_type),
        custom_columns=[],
    )


def table_to_imported(table_data: Union[TableData, dict, None], period_type: Any) -> ImportedTable:
    """
    Flatten a table back into headers and rows.

    The row-label column comes first under its display label, followed by
    labelled columns and then custom columns. Data columns are headed by
    their keys, not their display labels, so a renamed label or a custom
    column keyed apart from its label still lines up on re-import.
    """
    table = as_table_data(table_data)
    label_key = row_label_key_for_period(period_type)
    column_labels = table.column_labels if table.column_labels is not None else {}

    keys = [key for key in column_labels if key != label_key]
    for column in table.custom_columns:
        if column.key != label_key and column.key not in keys:
            keys.append(column.key)
    headers = [column_labels.get(label_key) or label_key.capitalize(), *keys]

    rows = []
    for row in table.rows:
        values = [row.get(label_key) or ""]
        values.extend(row.get(key) or "" for key in keys)
        rows.append([str(value) for value in values])

    return ImportedTable(headers=headers, rows=rows)

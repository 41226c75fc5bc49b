"""Column set merging: custom columns, labels and widths."""

from typing import Optional, Sequence, Union

from .constants import DEFAULT_COLUMN_WIDTH
from .models import CustomColumn
from .text import normalize_label


def existing_column_keys(
    column_labels: dict[str, str],
    custom_columns: Sequence[CustomColumn],
) -> list[str]:
    """All addressable column keys: labelled columns first, then custom ones."""
    return [*column_labels.keys(), *(column.key for column in custom_columns)]


def build_new_custom_columns(
    new_headers: Sequence[str],
    header_mapping: dict[int, Optional[str]],
    column_labels: dict[str, str],
    custom_columns: Sequence[CustomColumn],
    row_label_column_index: Optional[int] = None,
    row_label_key: Optional[str] = None,
) -> list[CustomColumn]:
    """
    Create a custom column for every imported header that matched nothing.

    The row-label column, blank headers, the row-label key and keys the
    table already has are skipped. Duplicate keys keep their first header.
    """
    known_keys = set(existing_column_keys(column_labels, custom_columns))
    new_columns: list[CustomColumn] = []

    for index, header in enumerate(new_headers):
        if header_mapping.get(index) is not None or index == row_label_column_index:
            continue

        key = normalize_label(header)
        if not key or key == row_label_key or key in known_keys:
            continue

        known_keys.add(key)
        new_columns.append(CustomColumn(key=key, label=header, placeholder=""))

    return new_columns


def merge_column_labels(column_labels: dict[str, str]) -> dict[str, str]:
    # Imported headers never rename an existing column
    return dict(column_labels)


def merge_column_widths(
    column_widths: dict[str, Union[int, float]],
    new_columns: Sequence[CustomColumn],
) -> dict[str, Union[int, float]]:
    """Give every new column the default width, leaving existing widths alone."""
    merged = dict(column_widths)
    for column in new_columns:
        if column.key not in merged:
            merged[column.key] = DEFAULT_COLUMN_WIDTH
    return merged


def merge_custom_columns(
    custom_columns: Sequence[CustomColumn],
    new_columns: Sequence[CustomColumn],
) -> list[CustomColumn]:
    """Append new custom columns whose key is not already present."""
    merged = [column.model_copy() for column in custom_columns]
    keys = {column.key for column in merged}
    for column in new_columns:
        if column.key not in keys:
            keys.add(column.key)
            merged.append(column)
    return merged

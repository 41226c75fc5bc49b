"""Row matching and row merging."""

import logging
from typing import Any, Optional, Sequence

from .constants import MATCH_THRESHOLD
from .text import calculate_similarity, normalize_label

logger = logging.getLogger(__name__)


def cell_value(row: Sequence[Any], index: int) -> str:
    """Read a cell from an imported row; missing or empty cells read as ''."""
    if index < 0 or index >= len(row):
        return ""
    value = row[index]
    return str(value) if value else ""


def create_row_mapping(
    existing_rows: Sequence[dict],
    row_label_key: str,
    new_rows: Sequence[Sequence[Any]],
    row_label_column_index: int = 0,
) -> dict[int, Optional[int]]:
    """
    Map each imported row index to an existing row index, or None.

    Rows are matched independently: two imported rows may land on the same
    existing row, in which case the later one overwrites the earlier one.
    """
    mapping: dict[int, Optional[int]] = {}
    existing_labels = [normalize_label(row.get(row_label_key, "")) for row in existing_rows]

    for index, new_row in enumerate(new_rows):
        new_label = normalize_label(cell_value(new_row, row_label_column_index))

        if not new_label:
            mapping[index] = None
            continue

        # Find exact match first
        if new_label in existing_labels:
            mapping[index] = existing_labels.index(new_label)
            continue

        # Find fuzzy match
        best_index: Optional[int] = None
        best_score = 0.0
        for existing_index, existing_label in enumerate(existing_labels):
            if not existing_label:
                continue
            score = calculate_similarity(new_label, existing_label)
            if score > best_score and score >= MATCH_THRESHOLD:
                best_score = score
                best_index = existing_index

        if best_index is not None:
            logger.debug(
                f"Row '{new_label}' fuzzy-matched existing row {best_index} ({best_score:.2f})"
            )
        mapping[index] = best_index

    return mapping


def resolve_target_key(header: str, mapped_key: Optional[str]) -> str:
    """Column key an imported column writes to: its match, or its own normalized header."""
    return mapped_key or normalize_label(header)


def _fill_row(
    record: dict,
    new_row: Sequence[Any],
    new_headers: Sequence[str],
    header_mapping: dict[int, Optional[str]],
    row_label_key: str,
    row_label_column_index: int,
) -> None:
    for col_index, header in enumerate(new_headers):
        if col_index == row_label_column_index:
            continue
        key = resolve_target_key(header, header_mapping.get(col_index))
        if not key or key == row_label_key:
            continue
        record[key] = cell_value(new_row, col_index)


def merge_rows(
    existing_rows: Sequence[dict],
    new_rows: Sequence[Sequence[Any]],
    header_mapping: dict[int, Optional[str]],
    new_headers: Sequence[str],
    row_label_key: str,
    row_mapping: dict[int, Optional[int]],
    row_label_column_index: int = 0,
) -> list[dict]:
    """
    Merge imported rows into a copy of the existing rows.

    Matched rows are updated field by field, leaving their label alone.
    Unmatched rows are appended. Existing rows are never removed.
    """
    merged = [dict(row) for row in existing_rows]

    for index, new_row in enumerate(new_rows):
        existing_index = row_mapping.get(index)

        if existing_index is not None and 0 <= existing_index < len(existing_rows):
            _fill_row(
                merged[existing_index],
                new_row,
                new_headers,
                header_mapping,
                row_label_key,
                row_label_column_index,
            )
        else:
            record = {row_label_key: cell_value(new_row, row_label_column_index)}
            _fill_row(
                record,
                new_row,
                new_headers,
                header_mapping,
                row_label_key,
                row_label_column_index,
            )
            merged.append(record)

    return merged

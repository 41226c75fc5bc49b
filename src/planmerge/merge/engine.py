"""Smart import and full replace of lesson-plan tables."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .columns import (
    build_new_custom_columns,
    existing_column_keys,
    merge_column_labels,
    merge_column_widths,
    merge_custom_columns,
)
from .constants import DEFAULT_COLUMN_WIDTH, DEFAULT_SEMANTIC_KEYS, ROW_LABEL_COLUMN_WIDTH
from .headers import RowLabelColumn, create_header_mapping, detect_row_label_column
from .models import (
    CustomColumn,
    ImportedTable,
    TableData,
    as_imported_table,
    as_table_data,
)
from .rows import cell_value, create_row_mapping, merge_rows
from .text import normalize_label

logger = logging.getLogger(__name__)


@dataclass
class ImportPlan:
    """Every matching decision a smart import makes, before anything is merged."""

    imported: ImportedTable
    current: TableData
    column_labels: dict[str, str]
    row_label: RowLabelColumn
    header_mapping: dict[int, Optional[str]]
    new_custom_columns: list[CustomColumn]
    row_mapping: dict[int, Optional[int]]


def plan_import(
    current_data: Union[TableData, dict, None],
    table_data: Union[ImportedTable, dict, None],
    period_type: Any,
    default_labels: Optional[dict[str, str]] = None,
) -> ImportPlan:
    """
    Work out how an import lines up with the current table.

    Shared by smart_table_import and generate_import_report so a preview
    always agrees with the merge it describes.
    """
    imported = as_imported_table(table_data)
    current = as_table_data(current_data)

    column_labels = (
        dict(current.column_labels)
        if current.column_labels is not None
        else dict(default_labels or {})
    )

    row_label = detect_row_label_column(imported.headers, period_type)

    existing_keys = existing_column_keys(column_labels, current.custom_columns)
    header_mapping = create_header_mapping(imported.headers, existing_keys)

    new_custom_columns = build_new_custom_columns(
        imported.headers,
        header_mapping,
        column_labels,
        current.custom_columns,
        row_label_column_index=row_label.index,
        row_label_key=row_label.label_key,
    )

    row_mapping = create_row_mapping(
        current.rows,
        row_label.label_key,
        imported.rows,
        row_label_column_index=row_label.index,
    )

    return ImportPlan(
        imported=imported,
        current=current,
        column_labels=column_labels,
        row_label=row_label,
        header_mapping=header_mapping,
        new_custom_columns=new_custom_columns,
        row_mapping=row_mapping,
    )


def smart_table_import(
    current_data: Union[TableData, dict, None],
    table_data: Union[ImportedTable, dict, None],
    period_type: Any,
    default_labels: Optional[dict[str, str]] = None,
) -> TableData:
    """
    Merge an imported table into the current one.

    Imported columns and rows are matched to existing ones by fuzzy label
    comparison. Matches are updated in place, everything else is appended.
    Nothing is deleted and the existing column labels are kept as they are.
    The input is never mutated.
    """
    plan = plan_import(current_data, table_data, period_type, default_labels)

    merged_rows = merge_rows(
        plan.current.rows,
        plan.imported.rows,
        plan.header_mapping,
        plan.imported.headers,
        plan.row_label.label_key,
        plan.row_mapping,
        row_label_column_index=plan.row_label.index,
    )

    result = TableData(
        rows=merged_rows,
        column_labels=merge_column_labels(plan.column_labels),
        column_widths=merge_column_widths(plan.current.column_widths, plan.new_custom_columns),
        custom_columns=merge_custom_columns(plan.current.custom_columns, plan.new_custom_columns),
    )

    updated = sum(1 for index in plan.row_mapping.values() if index is not None)
    logger.info(
        f"Smart import: {len(plan.imported.headers)} headers "
        f"({len(plan.new_custom_columns)} new columns), "
        f"{len(plan.imported.rows)} rows ({updated} updates, "
        f"{len(plan.imported.rows) - updated} appended)"
    )

    return result


def replace_table_with_new(
    table_data: Union[ImportedTable, dict, None],
    period_type: Any,
    default_labels: Optional[dict[str, str]] = None,
) -> TableData:
    """
    Build a fresh table from an import, discarding whatever existed.

    Headers whose normalized key is one of the built-in semantic columns
    (focus, language target, assessment, teacher/student actions) become
    labelled columns; all others become custom columns. A semantic header
    takes the default-label key it normalizes to, so "Language Target"
    fills `languageTarget`.
    """
    imported = as_imported_table(table_data)
    row_label = detect_row_label_column(imported.headers, period_type)
    label_key = row_label.label_key

    column_labels = dict(default_labels or {})
    column_widths: dict[str, Union[int, float]] = {}
    custom_columns: list[CustomColumn] = []
    custom_keys: set[str] = set()

    # Semantic headers land on the built-in key spelled the way the defaults spell it
    default_keys = {normalize_label(key): key for key in column_labels}
    column_keys: dict[int, str] = {}

    for index, header in enumerate(imported.headers):
        if index == row_label.index:
            column_labels[label_key] = header
            column_widths[label_key] = ROW_LABEL_COLUMN_WIDTH
            continue

        key = normalize_label(header)
        if not key or key == label_key:
            continue

        if key in DEFAULT_SEMANTIC_KEYS:
            key = default_keys.get(key, key)
            column_labels[key] = header
        elif key not in custom_keys:
            custom_keys.add(key)
            custom_columns.append(CustomColumn(key=key, label=header, placeholder=""))
        column_widths[key] = DEFAULT_COLUMN_WIDTH
        column_keys[index] = key

    rows = []
    for row_values in imported.rows:
        row = {label_key: cell_value(row_values, row_label.index)}
        for index, key in column_keys.items():
            row[key] = cell_value(row_values, index)
        rows.append(row)

    logger.info(
        f"Replaced table: {len(rows)} rows, {len(custom_columns)} custom columns "
        f"(row labels from column {row_label.index})"
    )

    return TableData(
        rows=rows,
        column_labels=column_labels,
        column_widths=column_widths,
        custom_columns=custom_columns,
    )

"""Dry-run report of what a smart import would do."""

import logging
from typing import Any, Optional, Union

from .engine import plan_import
from .models import ColumnMatch, ImportedTable, ImportReport, RowUpdate, TableData
from .rows import cell_value

logger = logging.getLogger(__name__)


def generate_import_report(
    current_data: Union[TableData, dict, None],
    table_data: Union[ImportedTable, dict, None],
    period_type: Any,
    default_labels: Optional[dict[str, str]] = None,
) -> ImportReport:
    """
    Summarize the matches a smart import would make, without merging.

    Column details list every header that matched an existing column and
    every custom column the merge would create. Row details list every row
    that would update an existing row and every row that would be appended.
    """
    plan = plan_import(current_data, table_data, period_type, default_labels)
    headers = plan.imported.headers
    existing_rows = plan.current.rows
    label_key = plan.row_label.label_key

    matched_columns = [
        ColumnMatch(new=headers[index], existing=key)
        for index, key in plan.header_mapping.items()
        if key is not None
    ]
    new_columns = [column.label for column in plan.new_custom_columns]

    updated_rows: list[RowUpdate] = []
    added_rows: list[str] = []
    for index, row in enumerate(plan.imported.rows):
        row_label = cell_value(row, plan.row_label.index)
        existing_index = plan.row_mapping.get(index)

        if existing_index is not None:
            existing_label = existing_rows[existing_index].get(label_key) or ""
            updated_rows.append(RowUpdate(label=row_label, existing_label=str(existing_label)))
        else:
            added_rows.append(row_label)

    report = ImportReport(
        total_new_columns=len(headers),
        matched_columns=len(matched_columns),
        new_columns=len(new_columns),
        matched_column_details=matched_columns,
        new_column_details=new_columns,
        total_new_rows=len(plan.imported.rows),
        updated_rows=len(updated_rows),
        added_rows=len(added_rows),
        updated_row_details=updated_rows,
        added_row_details=added_rows,
    )

    logger.debug(
        f"Import report: {report.matched_columns} matched / {report.new_columns} new columns, "
        f"{report.updated_rows} updated / {report.added_rows} added rows"
    )
    return report

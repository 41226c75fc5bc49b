"""Smart table merge engine for lesson-plan imports."""

from .models import (
    PeriodType,
    ImportedTable,
    CustomColumn,
    TableData,
    ColumnMatch,
    RowUpdate,
    ImportReport,
)
from .text import normalize_label, calculate_similarity
from .headers import (
    HeaderMatch,
    RowLabelColumn,
    find_matching_header,
    create_header_mapping,
    detect_row_label_column,
    row_label_key_for_period,
)
from .rows import create_row_mapping, merge_rows
from .columns import (
    build_new_custom_columns,
    merge_column_labels,
    merge_column_widths,
    merge_custom_columns,
)
from .engine import ImportPlan, plan_import, smart_table_import, replace_table_with_new
from .report import generate_import_report
from .schema import default_labels_for, initialize_table, table_to_imported

__all__ = [
    "PeriodType",
    "ImportedTable",
    "CustomColumn",
    "TableData",
    "ColumnMatch",
    "RowUpdate",
    "ImportReport",
    "normalize_label",
    "calculate_similarity",
    "HeaderMatch",
    "RowLabelColumn",
    "find_matching_header",
    "create_header_mapping",
    "detect_row_label_column",
    "row_label_key_for_period",
    "create_row_mapping",
    "merge_rows",
    "build_new_custom_columns",
    "merge_column_labels",
    "merge_column_widths",
    "merge_custom_columns",
    "ImportPlan",
    "plan_import",
    "smart_table_import",
    "replace_table_with_new",
    "generate_import_report",
    "default_labels_for",
    "initialize_table",
    "table_to_imported",
]

"""Import operations: merge, replace, report and preview/apply."""

import logging
from typing import Any, Optional, Union

from ..config import settings
from ..merge import (
    ImportedTable,
    ImportReport,
    TableData,
    generate_import_report,
    replace_table_with_new,
    smart_table_import,
)
from ..merge.models import as_imported_table
from .cache import ImportPreviewCache
from .models import ImportPreview, ImportPreviewNotFoundError, ImportTooLargeError

logger = logging.getLogger(__name__)


class ImportOpsEngine:
    """
    Runs table imports for callers outside the merge engine.

    Adds size limits on incoming tables and a preview/apply workflow on top
    of the pure merge functions.
    """

    def __init__(
        self,
        max_rows: Optional[int] = None,
        max_columns: Optional[int] = None,
        preview_ttl_minutes: Optional[int] = None,
    ):
        self.max_rows = max_rows or settings.max_import_rows
        self.max_columns = max_columns or settings.max_import_columns
        self.preview_cache = ImportPreviewCache(
            default_ttl_minutes=preview_ttl_minutes or settings.preview_ttl_minutes
        )
        logger.info(
            f"ImportOpsEngine initialized (max {self.max_rows} rows, {self.max_columns} columns)"
        )

    def check_limits(self, table_data: Union[ImportedTable, dict, None]) -> ImportedTable:
        """Validate an imported table against the size limits."""
        imported = as_imported_table(table_data)
        if len(imported.headers) > self.max_columns:
            raise ImportTooLargeError(
                f"Import has {len(imported.headers)} columns, limit is {self.max_columns}"
            )
        if len(imported.rows) > self.max_rows:
            raise ImportTooLargeError(
                f"Import has {len(imported.rows)} rows, limit is {self.max_rows}"
            )
        return imported

    def merge(
        self,
        current_data: Union[TableData, dict, None],
        table_data: Union[ImportedTable, dict, None],
        period_type: Any,
        default_labels: Optional[dict[str, str]] = None,
    ) -> TableData:
        imported = self.check_limits(table_data)
        return smart_table_import(current_data, imported, period_type, default_labels)

    def replace(
        self,
        table_data: Union[ImportedTable, dict, None],
        period_type: Any,
        default_labels: Optional[dict[str, str]] = None,
    ) -> TableData:
        imported = self.check_limits(table_data)
        return replace_table_with_new(imported, period_type, default_labels)

    def report(
        self,
        current_data: Union[TableData, dict, None],
        table_data: Union[ImportedTable, dict, None],
        period_type: Any,
        default_labels: Optional[dict[str, str]] = None,
    ) -> ImportReport:
        imported = self.check_limits(table_data)
        return generate_import_report(current_data, imported, period_type, default_labels)

    def generate_preview(
        self,
        current_data: Union[TableData, dict, None],
        table_data: Union[ImportedTable, dict, None],
        period_type: Any,
        default_labels: Optional[dict[str, str]] = None,
        ttl_minutes: Optional[int] = None,
    ) -> ImportPreview:
        """
        Compute a smart import and keep it until it is applied.

        The stored preview carries both the report shown to the user and the
        merged table, so applying returns exactly what was previewed.
        """
        imported = self.check_limits(table_data)
        self.cleanup_expired_previews()
        report = generate_import_report(current_data, imported, period_type, default_labels)
        result = smart_table_import(current_data, imported, period_type, default_labels)

        preview = ImportPreview(
            period_type=str(getattr(period_type, "value", period_type) or ""),
            report=report,
            result=result,
        )
        self.preview_cache.store(preview, ttl_minutes)

        logger.info(
            f"Stored import preview {preview.preview_id}: "
            f"{report.updated_rows} row updates, {report.added_rows} new rows, "
            f"{report.new_columns} new columns"
        )
        return preview

    async def apply_preview(self, preview_id: str) -> TableData:
        """
        Return the merged table of a stored preview and discard the preview.

        Raises:
            ImportPreviewNotFoundError: If the preview is unknown or expired
        """
        preview = await self.preview_cache.take_async(preview_id)
        if preview is None:
            logger.warning(f"Apply requested for missing preview {preview_id}")
            raise ImportPreviewNotFoundError(preview_id)

        logger.info(f"Applied import preview {preview_id}")
        return preview.result

    def cleanup_expired_previews(self) -> int:
        """Drop previews that expired without being applied."""
        count = self.preview_cache.purge_expired()
        if count > 0:
            logger.info(f"Dropped {count} expired import previews")
        return count

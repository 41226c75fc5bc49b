"""API routes for planmerge."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ..merge import ImportedTable, PeriodType, TableData
from ..merge.schema import default_labels_for, initialize_table
from ..ops import ImportOpsEngine, ImportPreviewNotFoundError, ImportTooLargeError

logger = logging.getLogger(__name__)

router = APIRouter()

# Global ops engine instance
_ops_engine: Optional[ImportOpsEngine] = None


def get_ops_engine() -> ImportOpsEngine:
    """Get the global ops engine instance."""
    global _ops_engine
    if _ops_engine is None:
        _ops_engine = ImportOpsEngine()
    return _ops_engine


class ReplaceRequest(BaseModel):
    """Request to rebuild a table from an import."""

    model_config = ConfigDict(populate_by_name=True)

    table_data: ImportedTable = Field(default_factory=ImportedTable, alias="tableData")
    period_type: PeriodType = Field(default=PeriodType.WEEKLY, alias="periodType")
    default_labels: Optional[dict[str, str]] = Field(default=None, alias="defaultLabels")

    def labels(self) -> dict[str, str]:
        """Caller-supplied default labels, else the period's built-in ones."""
        if self.default_labels is not None:
            return self.default_labels
        return default_labels_for(self.period_type)


class ImportRequest(ReplaceRequest):
    """Request to merge an import into an existing table."""

    current_data: Optional[TableData] = Field(default=None, alias="currentData")


@router.get("/health")
async def health_check():
    """Health check endpoint with diagnostics."""
    from ..config import settings

    ops_engine = get_ops_engine()
    ops_engine.cleanup_expired_previews()
    return {
        "status": "ok",
        "service": "planmerge",
        "config": {
            "max_import_rows": settings.max_import_rows,
            "max_import_columns": settings.max_import_columns,
            "preview_ttl_minutes": settings.preview_ttl_minutes,
        },
        "pending_previews": ops_engine.preview_cache.size(),
    }


@router.get("/schemas/{period_type}")
async def get_period_schema(period_type: PeriodType):
    """Return the starting table for a period type."""
    return initialize_table(period_type).to_payload()


@router.post("/imports/merge")
async def merge_import(request: ImportRequest):
    """
    Merge pasted table data into the current table.

    Columns and rows are matched by fuzzy label comparison; matches are
    updated, everything else is appended.
    """
    ops_engine = get_ops_engine()
    try:
        result = ops_engine.merge(
            request.current_data,
            request.table_data,
            request.period_type,
            request.labels(),
        )
        return result.to_payload()
    except ImportTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.error(f"Smart import failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/imports/replace")
async def replace_import(request: ReplaceRequest):
    """Replace the table entirely with pasted table data."""
    ops_engine = get_ops_engine()
    try:
        result = ops_engine.replace(
            request.table_data,
            request.period_type,
            request.labels(),
        )
        return result.to_payload()
    except ImportTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.error(f"Table replace failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/imports/report")
async def import_report(request: ImportRequest):
    """Report which columns and rows a merge would match, without merging."""
    ops_engine = get_ops_engine()
    try:
        report = ops_engine.report(
            request.current_data,
            request.table_data,
            request.period_type,
            request.labels(),
        )
        return report.model_dump(by_alias=True)
    except ImportTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.error(f"Import report failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/imports/preview")
async def preview_import(request: ImportRequest):
    """
    Preview a merge and keep the result for /imports/apply.

    Returns the import report together with a preview_id.
    """
    ops_engine = get_ops_engine()
    try:
        preview = ops_engine.generate_preview(
            request.current_data,
            request.table_data,
            request.period_type,
            request.labels(),
        )
        return {
            "preview_id": preview.preview_id,
            "period_type": preview.period_type,
            "report": preview.report.model_dump(by_alias=True),
            "created_at": preview.created_at.isoformat(),
            "expires_at": preview.expires_at.isoformat(),
        }
    except ImportTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.error(f"Import preview failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/imports/apply/{preview_id}")
async def apply_import(preview_id: str):
    """Return the merged table of a previewed import."""
    ops_engine = get_ops_engine()
    try:
        result = await ops_engine.apply_preview(preview_id)
        return result.to_payload()
    except ImportPreviewNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Applying preview {preview_id} failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

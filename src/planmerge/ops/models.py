"""Data models for import previews."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from ..merge.models import ImportReport, TableData


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


class ImportPreview(BaseModel):
    """A dry-run smart import waiting to be applied."""

    preview_id: str = ""
    period_type: str
    report: ImportReport
    result: TableData  # Table that applying the preview will return
    created_at: datetime = Field(default_factory=_utc_now)
    expires_at: Optional[datetime] = None


class ImportPreviewNotFoundError(Exception):
    """Raised when a preview id is unknown or has expired."""

    def __init__(self, preview_id: str):
        self.preview_id = preview_id
        super().__init__(f"Preview '{preview_id}' not found or expired")


class ImportTooLargeError(Exception):
    """Raised when an imported table exceeds the configured size limits."""

    pass

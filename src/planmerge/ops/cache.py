"""Pending import previews, held in memory until applied or expired."""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from .models import ImportPreview


def _is_expired(preview: ImportPreview, now: datetime) -> bool:
    return preview.expires_at is not None and now > preview.expires_at


class ImportPreviewCache:
    """
    Import previews keyed by preview id.

    A preview is applied at most once: take_async hands it out and drops it
    in one step under an asyncio.Lock, so two concurrent apply requests for
    the same id cannot both receive the merged table.
    """

    def __init__(self, default_ttl_minutes: int = 30):
        self._previews: dict[str, ImportPreview] = {}
        self._default_ttl = default_ttl_minutes
        self._lock = asyncio.Lock()

    def store(self, preview: ImportPreview, ttl_minutes: Optional[int] = None) -> str:
        """Keep a preview until it is applied or its TTL runs out; returns its id."""
        if not preview.preview_id:
            preview.preview_id = str(uuid.uuid4())

        ttl = ttl_minutes or self._default_ttl
        preview.expires_at = datetime.now(timezone.utc) + timedelta(minutes=ttl)

        self._previews[preview.preview_id] = preview
        return preview.preview_id

    async def take_async(self, preview_id: str) -> Optional[ImportPreview]:
        """Remove and return a live preview, or None if it is unknown or expired."""
        async with self._lock:
            preview = self._previews.pop(preview_id, None)
            if preview is None or _is_expired(preview, datetime.now(timezone.utc)):
                return None
            return preview

    def purge_expired(self) -> int:
        """Drop every preview past its expiry and return how many were dropped."""
        now = datetime.now(timezone.utc)
        expired = [pid for pid, preview in self._previews.items() if _is_expired(preview, now)]
        for preview_id in expired:
            del self._previews[preview_id]
        return len(expired)

    def clear(self):
        self._previews.clear()

    def size(self) -> int:
        return len(self._previews)

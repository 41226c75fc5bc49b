"""Import operations with size limits and preview/apply."""

from .engine import ImportOpsEngine
from .cache import ImportPreviewCache
from .models import ImportPreview, ImportPreviewNotFoundError, ImportTooLargeError

__all__ = [
    "ImportOpsEngine",
    "ImportPreviewCache",
    "ImportPreview",
    "ImportPreviewNotFoundError",
    "ImportTooLargeError",
]

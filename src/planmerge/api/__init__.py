"""HTTP API for table imports."""

from .app import create_app

__all__ = ["create_app"]

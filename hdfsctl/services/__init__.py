"""Service layer for hdfsctl operations."""

from __future__ import annotations

from .uploads import FileUploader

__all__ = [
    "FileUploader",
]

"""Data models for hdfsctl.

Provides Pydantic models for WebHDFS response bodies.
"""

from __future__ import annotations

from .base import BaseModel
from .remote import CreateLocation, RemoteExceptionInfo

__all__ = [
    "BaseModel",
    "CreateLocation",
    "RemoteExceptionInfo",
]

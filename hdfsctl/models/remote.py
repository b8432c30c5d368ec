"""Models for WebHDFS response bodies."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, ValidationError

from .base import BaseModel

# Server-side exceptions that mean "you are not allowed to do this"
PERMISSION_EXCEPTIONS = frozenset({"AccessControlException", "SecurityException"})


class RemoteExceptionInfo(BaseModel):
    """Server-side exception carried in a WebHDFS error body."""

    exception: str = Field(..., description="Short exception class name")
    java_class_name: Optional[str] = Field(
        None, alias="javaClassName", description="Fully qualified class name"
    )
    message: str = Field("", description="Server message")

    @property
    def is_permission_denied(self) -> bool:
        """Return True if the server rejected the caller's authorization."""
        return self.exception in PERMISSION_EXCEPTIONS

    @classmethod
    def from_body(cls, body: Any) -> Optional["RemoteExceptionInfo"]:
        """Parse ``{"RemoteException": {...}}``, returning None if absent or malformed."""
        if not isinstance(body, dict):
            return None
        payload = body.get("RemoteException")
        if not isinstance(payload, dict):
            return None
        try:
            return cls.model_validate(payload)
        except ValidationError:
            return None


class CreateLocation(BaseModel):
    """Body of a ``noredirect`` CREATE answer."""

    location: str = Field(..., alias="Location", description="Datanode URL to upload to")

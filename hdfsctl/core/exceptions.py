"""Exception hierarchy for hdfsctl.

Provides typed exceptions for different failure modes with clear error messages.
"""

from __future__ import annotations

from typing import Any


class HdfsCtlError(Exception):
    """Base exception for all hdfsctl errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(HdfsCtlError):
    """Error in configuration (missing, invalid, or malformed)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = repr(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ProfileNotFoundError(ConfigurationError):
    """Requested profile does not exist."""

    def __init__(self, profile: str):
        super().__init__(f"Profile not found: {profile}", field="profile", value=profile)
        self.profile = profile


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(HdfsCtlError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = repr(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidURLError(ValidationError):
    """Invalid URL format."""

    def __init__(self, url: str, reason: str = ""):
        msg = f"Invalid URL: {url}"
        if reason:
            msg = f"{msg} - {reason}"
        super().__init__(msg, field="url", value=url)
        self.url = url
        self.reason = reason


class PathValidationError(ValidationError):
    """Path validation failed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid path: {path} - {reason}", field="path", value=path)
        self.path = path
        self.reason = reason


# =============================================================================
# Connection Errors
# =============================================================================


class ConnectionError(HdfsCtlError):
    """Remote filesystem could not be reached."""

    def __init__(self, message: str, url: str | None = None):
        details = {"url": url} if url else {}
        super().__init__(message, details)
        self.url = url


class ServerUnreachableError(ConnectionError):
    """Server refused or dropped the connection."""

    def __init__(self, url: str, cause: str | None = None):
        msg = f"Server unreachable: {url}"
        if cause:
            msg = f"{msg}: {cause}"
        super().__init__(msg, url)
        self.cause = cause


class NetworkError(HdfsCtlError):
    """Transport-level failure after the connection was established."""

    def __init__(self, url: str, cause: str | None = None):
        msg = f"Network error talking to {url}"
        if cause:
            msg = f"{msg}: {cause}"
        super().__init__(msg, {"url": url})
        self.url = url
        self.cause = cause


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(self, url: str, timeout: float):
        super().__init__(url, f"timed out after {timeout}s")
        self.timeout = timeout


# =============================================================================
# Authentication Errors
# =============================================================================


class AuthenticationError(HdfsCtlError):
    """Authentication failed."""

    def __init__(self, url: str | None = None, reason: str = ""):
        msg = "Authentication failed"
        if url:
            msg = f"{msg} for {url}"
        if reason:
            msg = f"{msg}: {reason}"
        details = {"url": url} if url else {}
        super().__init__(msg, details)
        self.url = url
        self.reason = reason


class PermissionDeniedError(AuthenticationError):
    """Remote authorization rejected the operation."""

    def __init__(self, resource: str, operation: str = "access", reason: str = ""):
        msg = f"Permission denied to {operation} {resource}"
        if reason:
            msg = f"{msg} - {reason}"
        super().__init__(reason=msg)
        self.resource = resource
        self.operation = operation


# =============================================================================
# Remote Errors
# =============================================================================


class RemoteProtocolError(HdfsCtlError):
    """The filesystem answered with an error or an unexpected response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        exception: str | None = None,
        path: str | None = None,
    ):
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if exception:
            details["exception"] = exception
        if path:
            details["path"] = path
        super().__init__(message, details)
        self.status_code = status_code
        self.exception = exception
        self.path = path


class HdfsConnectionError(HdfsCtlError):
    """Reported wrapper for a classified connection failure."""

    def __init__(self, endpoint: str):
        super().__init__(f"Failed to connect Hadoop server {endpoint}", {"endpoint": endpoint})
        self.endpoint = endpoint


# =============================================================================
# Identity Errors
# =============================================================================


class ImpersonationInterruptedError(HdfsCtlError):
    """Work running under an impersonated identity was interrupted."""

    def __init__(self, username: str, cause: str | None = None):
        msg = f"Interrupted while acting as {username}"
        if cause:
            msg = f"{msg}: {cause}"
        super().__init__(msg, {"user": username})
        self.username = username

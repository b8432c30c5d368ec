"""Input validation for hdfsctl."""

from __future__ import annotations

import posixpath
import re
from urllib.parse import urlparse

from hdfsctl.core.exceptions import InvalidURLError, PathValidationError, ValidationError

# =============================================================================
# Constants
# =============================================================================

# webhdfs:// and swebhdfs:// are the Hadoop names for the plain/TLS REST endpoints
SCHEME_ALIASES = {
    "http": "http",
    "https": "https",
    "webhdfs": "http",
    "swebhdfs": "https",
}

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.@$-]*$")


# =============================================================================
# URL Validation
# =============================================================================


def validate_endpoint_url(url: str) -> str:
    """Validate a filesystem endpoint and normalize it to an HTTP URL.

    Args:
        url: Endpoint such as ``webhdfs://namenode:9870`` or ``http://namenode:9870``.

    Returns:
        Normalized ``http``/``https`` URL without trailing slash.

    Raises:
        InvalidURLError: If the URL is empty, has an unsupported scheme or no host.
    """
    url = (url or "").strip()
    if not url:
        raise InvalidURLError(url, "URL is required")

    parsed = urlparse(url)
    scheme = SCHEME_ALIASES.get(parsed.scheme.lower())
    if scheme is None:
        raise InvalidURLError(
            url, "scheme must be one of http, https, webhdfs, swebhdfs"
        )
    if not parsed.netloc:
        raise InvalidURLError(url, "missing host")

    path = parsed.path.rstrip("/")
    return f"{scheme}://{parsed.netloc}{path}"


# =============================================================================
# Identity Validation
# =============================================================================


def validate_username(username: str) -> str:
    """Validate an impersonated username.

    Raises:
        ValidationError: If the username is empty or contains illegal characters.
    """
    username = (username or "").strip()
    if not username:
        raise ValidationError("Username is required", field="username")
    if not USERNAME_PATTERN.match(username):
        raise ValidationError(
            f"Invalid username: {username}", field="username", value=username
        )
    return username


# =============================================================================
# Path Validation
# =============================================================================


def validate_remote_path(path: str, username: str | None = None) -> str:
    """Resolve a remote path to an absolute, normalized HDFS path.

    Relative paths resolve against the user's home directory (``/user/<name>``).

    Args:
        path: Remote path.
        username: User whose home anchors relative paths.

    Returns:
        Absolute path.

    Raises:
        PathValidationError: If the path is empty, or relative with no user.
    """
    if not path or not path.strip():
        raise PathValidationError(path or "", "path is required")

    path = path.strip()
    if not path.startswith("/"):
        if not username:
            raise PathValidationError(path, "relative path needs an impersonated user")
        path = f"/user/{username}/{path}"

    normalized = posixpath.normpath(path)
    # normpath keeps a leading '//' as-is
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    if normalized == "/":
        raise PathValidationError(path, "cannot write to the filesystem root")
    return normalized


def validate_timeout(timeout: int | float) -> float:
    """Validate an HTTP timeout in seconds."""
    try:
        value = float(timeout)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid timeout: {timeout}", field="timeout", value=timeout)
    if value <= 0:
        raise ValidationError(
            f"Invalid timeout: {timeout} (must be positive)", field="timeout", value=timeout
        )
    return value

"""HTTP client for the WebHDFS REST API.

Files are written in the two WebHDFS steps: the namenode answers CREATE with
the datanode URL, and the data is then PUT to that URL.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from typing import Any, BinaryIO, NoReturn, Optional
from urllib.parse import quote

import httpx

from hdfsctl.core.exceptions import (
    AuthenticationError,
    NetworkError,
    PermissionDeniedError,
    RemoteProtocolError,
    ServerUnreachableError,
    TimeoutError,
)
from hdfsctl.core.identity import RemoteUser, current_user
from hdfsctl.core.logging import get_logger
from hdfsctl.core.streams import BUFFER_SIZE, iter_chunks
from hdfsctl.core.validation import (
    validate_endpoint_url,
    validate_remote_path,
    validate_timeout,
)
from hdfsctl.models.remote import CreateLocation, RemoteExceptionInfo

logger = get_logger(__name__)

# =============================================================================
# Constants
# =============================================================================

DEFAULT_TIMEOUT = 30
API_PREFIX = "/webhdfs/v1"
REPLICATION_FACTOR = 1
SPOOL_MAX_BYTES = 8 * 1024 * 1024
REDIRECT_STATUS_CODES = {301, 302, 303, 307, 308}


# =============================================================================
# WebHDFSClient
# =============================================================================


@dataclass
class WebHDFSClient:
    """Filesystem handle for a WebHDFS endpoint."""

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    transport: httpx.BaseTransport | None = field(default=None, repr=False)
    _client: httpx.Client | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate and normalize URL."""
        self.base_url = validate_endpoint_url(self.base_url)
        self.timeout = validate_timeout(self.timeout)

    # =========================================================================
    # Client Management
    # =========================================================================

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                verify=self.verify_ssl,
                follow_redirects=False,
                transport=self.transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> WebHDFSClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # =========================================================================
    # Requests
    # =========================================================================

    def _request(
        self,
        method: str,
        url: str,
        *,
        path: str,
        operation: str,
        params: dict[str, Any] | None = None,
        content: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and translate failures into hdfsctl errors.

        There is exactly one attempt per call.

        Raises:
            ServerUnreachableError: If the connection could not be made.
            TimeoutError: If the request timed out.
            NetworkError: On other transport failures.
            AuthenticationError: On HTTP 401.
            PermissionDeniedError: On HTTP 403 or an access-control exception.
            RemoteProtocolError: On any other error status.
        """
        client = self._get_client()
        logger.debug("%s %s (%s)", method, url, operation)

        try:
            resp = client.request(method, url, params=params, content=content, headers=headers)
        except httpx.ConnectError as e:
            raise ServerUnreachableError(self.base_url, str(e) or None) from e
        except httpx.TimeoutException as e:
            raise TimeoutError(self.base_url, self.timeout) from e
        except httpx.TransportError as e:
            raise NetworkError(self.base_url, str(e) or type(e).__name__) from e

        if resp.is_success or resp.status_code in REDIRECT_STATUS_CODES:
            return resp

        self._raise_for_status(resp, path, operation)

    def _raise_for_status(self, resp: httpx.Response, path: str, operation: str) -> NoReturn:
        try:
            info = RemoteExceptionInfo.from_body(resp.json())
        except ValueError:
            info = None

        if resp.status_code == 401:
            raise AuthenticationError(
                self.base_url, info.message if info else f"HTTP {resp.status_code}"
            )

        if resp.status_code == 403 or (info is not None and info.is_permission_denied):
            raise PermissionDeniedError(path, operation, reason=info.message if info else "")

        if info is not None:
            raise RemoteProtocolError(
                f"{info.exception}: {info.message}",
                status_code=resp.status_code,
                exception=info.exception,
                path=path,
            )
        raise RemoteProtocolError(
            f"Unexpected response to {operation}: HTTP {resp.status_code}",
            status_code=resp.status_code,
            path=path,
        )

    @staticmethod
    def _api_path(hdfs_path: str) -> str:
        return API_PREFIX + quote(hdfs_path, safe="/")

    @staticmethod
    def _user_params(user: Optional[RemoteUser]) -> dict[str, str]:
        if user is None:
            return {}
        return {"user.name": user.username}

    # =========================================================================
    # File Operations
    # =========================================================================

    def create(
        self,
        path: str,
        *,
        replication: int = REPLICATION_FACTOR,
        overwrite: bool = True,
    ) -> HdfsOutputStream:
        """Open a remote file for writing.

        The file is written as the identity of the enclosing ``do_as`` call.

        Args:
            path: Remote path; relative paths resolve under ``/user/<name>``.
            replication: Replication factor for the new file.
            overwrite: Replace an existing file.

        Returns:
            Stream whose contents are sent on ``close()``.
        """
        user = current_user()
        hdfs_path = validate_remote_path(path, user.username if user else None)

        params: dict[str, Any] = {
            "op": "CREATE",
            "overwrite": "true" if overwrite else "false",
            "replication": replication,
            **self._user_params(user),
        }
        resp = self._request(
            "PUT",
            self._api_path(hdfs_path),
            path=hdfs_path,
            operation="create",
            params=params,
        )
        location = self._datanode_location(resp, hdfs_path)
        return HdfsOutputStream(self, location, hdfs_path)

    def _datanode_location(self, resp: httpx.Response, hdfs_path: str) -> str:
        if resp.status_code in REDIRECT_STATUS_CODES:
            location = resp.headers.get("location")
            if location:
                return location
        elif resp.status_code == 200:
            try:
                return CreateLocation.model_validate(resp.json()).location
            except ValueError:
                pass

        raise RemoteProtocolError(
            "Namenode did not return a datanode location",
            status_code=resp.status_code,
            path=hdfs_path,
        )

    def write_to_datanode(self, location: str, data: BinaryIO, size: int, path: str) -> None:
        """Upload ``size`` bytes from ``data`` to a datanode URL from CREATE."""
        resp = self._request(
            "PUT",
            location,
            path=path,
            operation="write",
            content=iter_chunks(data, BUFFER_SIZE),
            headers={
                "Content-Type": "application/octet-stream",
                "Content-Length": str(size),
            },
        )
        if resp.status_code != 201:
            raise RemoteProtocolError(
                f"Unexpected response to write: HTTP {resp.status_code}",
                status_code=resp.status_code,
                path=path,
            )
        logger.debug("Wrote %d bytes to %s", size, path)


# =============================================================================
# HdfsOutputStream
# =============================================================================


class HdfsOutputStream:
    """Writable stream for one remote file.

    Bytes are spooled locally (in memory up to ``SPOOL_MAX_BYTES``, then on
    disk) and sent to the datanode when the stream is closed. Leaving a
    ``with`` block on an exception discards the data instead.
    """

    def __init__(self, client: WebHDFSClient, location: str, path: str) -> None:
        self.location = location
        self.path = path
        self.bytes_written = 0
        self._client = client
        self._buffer = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_BYTES)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def writable(self) -> bool:
        return True

    def write(self, data: bytes) -> int:
        if self._closed:
            raise ValueError("I/O operation on closed stream")
        self._buffer.write(data)
        self.bytes_written += len(data)
        return len(data)

    def flush(self) -> None:
        if not self._closed:
            self._buffer.flush()

    def close(self) -> None:
        """Send the spooled bytes to the datanode."""
        if self._closed:
            return
        self._closed = True
        try:
            self._buffer.seek(0)
            self._client.write_to_datanode(
                self.location, self._buffer, self.bytes_written, self.path
            )
        finally:
            self._buffer.close()

    def abort(self) -> None:
        """Drop the spooled bytes without writing anything."""
        if self._closed:
            return
        self._closed = True
        self._buffer.close()

    def __enter__(self) -> HdfsOutputStream:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is None:
            self.close()
        else:
            self.abort()

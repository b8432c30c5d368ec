"""Upload local files into HDFS as an impersonated user."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Optional, Union

from hdfsctl.core.client import DEFAULT_TIMEOUT, REPLICATION_FACTOR, WebHDFSClient
from hdfsctl.core.config import ConnectionConfig
from hdfsctl.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    HdfsConnectionError,
    ImpersonationInterruptedError,
    RemoteProtocolError,
)
from hdfsctl.core.identity import RemoteUser
from hdfsctl.core.logging import get_logger
from hdfsctl.core.reporting import (
    ExceptionReporter,
    ExceptionSource,
    ExceptionType,
    LoggingExceptionReporter,
)
from hdfsctl.core.streams import BUFFER_SIZE, copy_stream

logger = get_logger(__name__)

PathLike = Union[str, Path]
ClientFactory = Callable[[ConnectionConfig], WebHDFSClient]

# Failures that end an upload with False instead of an exception
CLASSIFIED_ERRORS = (ConnectionError, AuthenticationError, RemoteProtocolError)


class FileUploader:
    """Copies local files into HDFS.

    Each call authenticates as the configured user, opens the remote file with
    a replication factor of 1 and streams the local file into it.

    Example:
        uploader = FileUploader(ConnectionConfig("webhdfs://nn:9870", "etl"))
        ok = uploader.upload("/data/in.csv", "/landing/in.csv")
    """

    def __init__(
        self,
        connection: Optional[ConnectionConfig] = None,
        *,
        reporter: Optional[ExceptionReporter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        """Initialize uploader.

        Args:
            connection: Endpoint and user; may be set later with ``initialize``.
            reporter: Receives errors that are turned into a False result.
            timeout: HTTP timeout in seconds.
            verify_ssl: Verify TLS certificates.
            client_factory: Builds the filesystem client for a connection.
        """
        self.connection: Optional[ConnectionConfig] = None
        self.reporter = reporter or LoggingExceptionReporter()
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._client_factory = client_factory or self._default_client
        if connection is not None:
            self.initialize(connection)

    def initialize(self, connection: ConnectionConfig) -> None:
        """Point the uploader at an endpoint and user."""
        self.connection = connection

    def _default_client(self, connection: ConnectionConfig) -> WebHDFSClient:
        return WebHDFSClient(
            base_url=connection.filesystem_uri,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
        )

    # =========================================================================
    # Upload
    # =========================================================================

    def upload(self, source: PathLike, destination: str) -> bool:
        """Upload a local file to a path on HDFS.

        Args:
            source: Local file to read.
            destination: Remote path to create or overwrite.

        Returns:
            True if every byte was written; False if the server was unreachable,
            denied access, answered with an error, or impersonation was interrupted.

        Raises:
            ConfigurationError: If no connection has been configured.
            OSError: If the local file cannot be read.
            NetworkError: On transport failures other than a refused connection.
        """
        if self.connection is None:
            raise ConfigurationError("Uploader has no connection configured", field="connection")

        connection = self.connection
        logger.info("Moving file : %s to path : %s", source, destination)

        user = RemoteUser(connection.username)
        try:
            return user.do_as(lambda: self._copy_to_hdfs(connection, Path(source), destination))
        except ImpersonationInterruptedError as e:
            self.reporter.report(ExceptionSource.HDFS, ExceptionType.ENV_ACCESS_ERR, e)
            return False

    import_file_to_hdfs = upload

    def _copy_to_hdfs(self, connection: ConnectionConfig, source: Path, destination: str) -> bool:
        try:
            with self._client_factory(connection) as fs, open(source, "rb") as local_file, fs.create(
                destination, replication=REPLICATION_FACTOR
            ) as remote_file:
                copied = copy_stream(local_file, remote_file, BUFFER_SIZE)
        except CLASSIFIED_ERRORS as e:
            logger.critical(
                "Failed to connect Hadoop server : %s", connection.filesystem_uri, exc_info=True
            )
            error = HdfsConnectionError(connection.filesystem_uri)
            error.__cause__ = e
            self.reporter.report(ExceptionSource.HDFS, ExceptionType.HDFS_NOT_AVAILABLE, error)
            return False

        logger.debug("Copied %d bytes to %s", copied, destination)
        return True

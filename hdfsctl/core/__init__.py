"""Core modules for hdfsctl."""

from hdfsctl.core.client import HdfsOutputStream, WebHDFSClient
from hdfsctl.core.config import CONFIG_DIR, CONFIG_FILE, Config, ConnectionConfig, Profile
from hdfsctl.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    HdfsConnectionError,
    HdfsCtlError,
    ImpersonationInterruptedError,
    NetworkError,
    PermissionDeniedError,
    RemoteProtocolError,
    ServerUnreachableError,
    ValidationError,
)
from hdfsctl.core.identity import RemoteUser, current_user
from hdfsctl.core.logging import get_logger, setup_logging
from hdfsctl.core.output import OutputFormat, console, print_error, print_output, print_success
from hdfsctl.core.reporting import (
    ExceptionReporter,
    ExceptionSource,
    ExceptionType,
    LoggingExceptionReporter,
)
from hdfsctl.core.streams import BUFFER_SIZE, copy_stream, iter_chunks
from hdfsctl.core.validation import (
    validate_endpoint_url,
    validate_remote_path,
    validate_timeout,
    validate_username,
)

__all__ = [
    # Exceptions
    "HdfsCtlError",
    "AuthenticationError",
    "ConfigurationError",
    "ConnectionError",
    "HdfsConnectionError",
    "ImpersonationInterruptedError",
    "NetworkError",
    "PermissionDeniedError",
    "RemoteProtocolError",
    "ServerUnreachableError",
    "ValidationError",
    # Validation
    "validate_endpoint_url",
    "validate_remote_path",
    "validate_timeout",
    "validate_username",
    # Config
    "Config",
    "ConnectionConfig",
    "Profile",
    "CONFIG_DIR",
    "CONFIG_FILE",
    # Client
    "WebHDFSClient",
    "HdfsOutputStream",
    # Identity
    "RemoteUser",
    "current_user",
    # Streams
    "BUFFER_SIZE",
    "copy_stream",
    "iter_chunks",
    # Reporting
    "ExceptionReporter",
    "ExceptionSource",
    "ExceptionType",
    "LoggingExceptionReporter",
    # Output
    "OutputFormat",
    "console",
    "print_error",
    "print_output",
    "print_success",
    # Logging
    "get_logger",
    "setup_logging",
]

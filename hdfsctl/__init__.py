"""hdfsctl - Upload local files into HDFS as an impersonated user.

This package provides a small library and command-line interface that:
- Writes files through the WebHDFS REST API
- Acts as a configured remote user for each operation
- Reports connection and permission failures instead of raising them
"""

__version__ = "0.1.0"

from hdfsctl.core.client import WebHDFSClient
from hdfsctl.core.config import Config, ConnectionConfig, Profile
from hdfsctl.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    HdfsCtlError,
    NetworkError,
    PermissionDeniedError,
    RemoteProtocolError,
    ValidationError,
)
from hdfsctl.services.uploads import FileUploader

__all__ = [
    "__version__",
    "FileUploader",
    "WebHDFSClient",
    "Config",
    "ConnectionConfig",
    "Profile",
    "HdfsCtlError",
    "AuthenticationError",
    "ConfigurationError",
    "ConnectionError",
    "NetworkError",
    "PermissionDeniedError",
    "RemoteProtocolError",
    "ValidationError",
]

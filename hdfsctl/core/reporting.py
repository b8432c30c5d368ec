"""Exception reporting for failures that are handled rather than raised.

Errors that the uploader turns into a ``False`` result are handed to an
:class:`ExceptionReporter` so they still reach whoever monitors the system.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Protocol

from hdfsctl.core.logging import ERRORS_LOGGER_NAME


class ExceptionSource(Enum):
    """Subsystem an exception came from."""

    HDFS = "hdfs"


class ExceptionType(Enum):
    """What kind of failure was reported."""

    ENV_ACCESS_ERR = "env_access_error"
    HDFS_NOT_AVAILABLE = "hdfs_not_available"


class ExceptionReporter(Protocol):
    """Receives handled exceptions."""

    def report(self, source: ExceptionSource, kind: ExceptionType, error: BaseException) -> None: ...


class LoggingExceptionReporter:
    """Reporter that writes one structured record per exception to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize reporter.

        Args:
            logger: Logger instance, ``hdfsctl.errors`` by default.
        """
        self.logger = logger or logging.getLogger(ERRORS_LOGGER_NAME)

    def report(self, source: ExceptionSource, kind: ExceptionType, error: BaseException) -> None:
        record: dict[str, Any] = {
            "timestamp": datetime.now().isoformat(),
            "source": source.value,
            "type": kind.value,
            "error": type(error).__name__,
            "message": str(error),
        }
        details = getattr(error, "details", None)
        if details:
            record["details"] = details
        if error.__cause__ is not None:
            record["cause"] = f"{type(error.__cause__).__name__}: {error.__cause__}"

        self.logger.error("EXCEPTION: %s", record)

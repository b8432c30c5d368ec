"""Tests for hdfsctl.core.reporting module."""

from __future__ import annotations

import logging

from hdfsctl.core.exceptions import HdfsConnectionError, ServerUnreachableError
from hdfsctl.core.reporting import ExceptionSource, ExceptionType, LoggingExceptionReporter


class TestLoggingExceptionReporter:
    """Tests for the default reporter."""

    def test_writes_one_error_record(self, caplog):
        reporter = LoggingExceptionReporter()
        error = HdfsConnectionError("http://namenode:9870")

        with caplog.at_level(logging.ERROR, logger="hdfsctl.errors"):
            reporter.report(ExceptionSource.HDFS, ExceptionType.HDFS_NOT_AVAILABLE, error)

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "hdfsctl.errors"
        assert record.levelno == logging.ERROR
        message = record.getMessage()
        assert "'source': 'hdfs'" in message
        assert "'type': 'hdfs_not_available'" in message
        assert "HdfsConnectionError" in message
        assert "http://namenode:9870" in message

    def test_includes_cause(self, caplog):
        reporter = LoggingExceptionReporter()
        error = HdfsConnectionError("http://namenode:9870")
        error.__cause__ = ServerUnreachableError("http://namenode:9870", "refused")

        with caplog.at_level(logging.ERROR, logger="hdfsctl.errors"):
            reporter.report(ExceptionSource.HDFS, ExceptionType.HDFS_NOT_AVAILABLE, error)

        assert "ServerUnreachableError" in caplog.records[0].getMessage()

    def test_custom_logger(self, caplog):
        logger = logging.getLogger("tests.reporting")
        reporter = LoggingExceptionReporter(logger)

        with caplog.at_level(logging.ERROR, logger="tests.reporting"):
            reporter.report(ExceptionSource.HDFS, ExceptionType.ENV_ACCESS_ERR, RuntimeError("x"))

        assert caplog.records[0].name == "tests.reporting"
        assert "env_access_error" in caplog.records[0].getMessage()

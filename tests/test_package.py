"""Tests for hdfsctl package imports and exports."""

from __future__ import annotations


class TestPackageImports:
    """Tests for package imports."""

    def test_import_hdfsctl(self):
        import hdfsctl

        assert hasattr(hdfsctl, "__version__")
        assert hdfsctl.FileUploader is not None

    def test_import_core_modules(self):
        from hdfsctl.core import (
            client,
            config,
            exceptions,
            identity,
            logging,
            output,
            reporting,
            streams,
            validation,
        )

        assert client is not None
        assert config is not None
        assert exceptions is not None
        assert identity is not None
        assert logging is not None
        assert output is not None
        assert reporting is not None
        assert streams is not None
        assert validation is not None

    def test_import_cli(self):
        from hdfsctl.cli import common, config_cmd, main, upload

        assert main is not None
        assert common is not None
        assert config_cmd is not None
        assert upload is not None


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_error(self):
        from hdfsctl.core.exceptions import HdfsCtlError

        exc = HdfsCtlError("test error", {"key": "value"})
        assert str(exc) == "test error (key=value)"
        assert isinstance(exc, Exception)

    def test_server_unreachable_is_connection_error(self):
        from hdfsctl.core.exceptions import ConnectionError, ServerUnreachableError

        exc = ServerUnreachableError("http://namenode:9870", "refused")
        assert isinstance(exc, ConnectionError)
        assert "namenode" in str(exc)

    def test_timeout_is_not_connection_error(self):
        from hdfsctl.core.exceptions import ConnectionError, NetworkError, TimeoutError

        exc = TimeoutError("http://namenode:9870", 30)
        assert isinstance(exc, NetworkError)
        assert not isinstance(exc, ConnectionError)
        assert "30" in str(exc)

    def test_permission_denied_is_authentication_error(self):
        from hdfsctl.core.exceptions import AuthenticationError, PermissionDeniedError

        exc = PermissionDeniedError("/secure", "create", reason="user=bob")
        assert isinstance(exc, AuthenticationError)
        assert "/secure" in str(exc)
        assert "user=bob" in str(exc)

    def test_remote_protocol_error_details(self):
        from hdfsctl.core.exceptions import RemoteProtocolError

        exc = RemoteProtocolError("boom", status_code=500, exception="IOException", path="/x")
        assert exc.details == {"status_code": 500, "exception": "IOException", "path": "/x"}

    def test_validation_errors(self):
        from hdfsctl.core.exceptions import InvalidURLError, PathValidationError, ValidationError

        url_exc = InvalidURLError("bad-url", "missing scheme")
        assert "bad-url" in str(url_exc)
        assert isinstance(url_exc, ValidationError)

        path_exc = PathValidationError("/bad/path", "is root")
        assert "/bad/path" in str(path_exc)

"""Tests for hdfsctl.core.validation module."""

from __future__ import annotations

import pytest

from hdfsctl.core.exceptions import InvalidURLError, PathValidationError, ValidationError
from hdfsctl.core.validation import (
    validate_endpoint_url,
    validate_remote_path,
    validate_timeout,
    validate_username,
)

# =============================================================================
# URL Validation Tests
# =============================================================================


class TestValidateEndpointUrl:
    """Tests for validate_endpoint_url."""

    def test_http_url(self):
        assert validate_endpoint_url("http://namenode:9870") == "http://namenode:9870"

    def test_https_url(self):
        assert validate_endpoint_url("https://namenode:9871") == "https://namenode:9871"

    def test_webhdfs_maps_to_http(self):
        assert validate_endpoint_url("webhdfs://namenode:9870") == "http://namenode:9870"

    def test_swebhdfs_maps_to_https(self):
        assert validate_endpoint_url("swebhdfs://namenode:9871") == "https://namenode:9871"

    def test_keeps_gateway_path(self):
        assert (
            validate_endpoint_url("https://knox.example.org/gateway/default/")
            == "https://knox.example.org/gateway/default"
        )

    def test_strips_whitespace_and_trailing_slash(self):
        assert validate_endpoint_url("  http://namenode:9870/  ") == "http://namenode:9870"

    def test_empty_url_raises(self):
        with pytest.raises(InvalidURLError):
            validate_endpoint_url("")

    def test_unsupported_scheme_raises(self):
        with pytest.raises(InvalidURLError) as excinfo:
            validate_endpoint_url("hdfs://namenode:8020")
        assert "scheme" in str(excinfo.value)

    def test_missing_host_raises(self):
        with pytest.raises(InvalidURLError):
            validate_endpoint_url("http://")


# =============================================================================
# Username Validation Tests
# =============================================================================


class TestValidateUsername:
    """Tests for validate_username."""

    @pytest.mark.parametrize("name", ["etl", "svc_ingest", "jane.doe", "etl@EXAMPLE.ORG"])
    def test_valid_names(self, name):
        assert validate_username(name) == name

    def test_empty_raises(self):
        with pytest.raises(ValidationError):
            validate_username("")

    def test_spaces_raise(self):
        with pytest.raises(ValidationError):
            validate_username("jane doe")


# =============================================================================
# Remote Path Validation Tests
# =============================================================================


class TestValidateRemotePath:
    """Tests for validate_remote_path."""

    def test_absolute_path_unchanged(self):
        assert validate_remote_path("/landing/file.csv") == "/landing/file.csv"

    def test_relative_path_resolves_to_home(self):
        assert validate_remote_path("in/file.csv", "etl") == "/user/etl/in/file.csv"

    def test_normalizes_dots_and_slashes(self):
        assert validate_remote_path("//landing/./a/../file.csv") == "/landing/file.csv"

    def test_relative_without_user_raises(self):
        with pytest.raises(PathValidationError):
            validate_remote_path("file.csv")

    def test_empty_raises(self):
        with pytest.raises(PathValidationError):
            validate_remote_path("  ")

    def test_root_raises(self):
        with pytest.raises(PathValidationError):
            validate_remote_path("/")


# =============================================================================
# Timeout Validation Tests
# =============================================================================


class TestValidateTimeout:
    """Tests for validate_timeout."""

    def test_valid(self):
        assert validate_timeout(30) == 30.0

    @pytest.mark.parametrize("value", [0, -1, "abc", None])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            validate_timeout(value)

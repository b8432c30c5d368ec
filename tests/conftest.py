"""Pytest configuration and fixtures for hdfsctl tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional
from unittest.mock import MagicMock
from urllib.parse import urlencode

import httpx
import pytest

from hdfsctl.core.client import WebHDFSClient
from hdfsctl.core.config import ConnectionConfig
from hdfsctl.services.uploads import FileUploader

NAMENODE_URL = "http://namenode:9870"
DATANODE_URL = "http://datanode:9864"
API_PREFIX = "/webhdfs/v1"


class FakeHDFS:
    """In-memory namenode/datanode pair served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []
        self.create_params: list[dict[str, str]] = []
        self.write_headers: list[httpx.Headers] = []
        self.unreachable = False
        self.deny = False
        self.timeout = False
        self.remote_error: Optional[tuple[int, Any]] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
        if self.timeout:
            raise httpx.ReadTimeout("timed out", request=request)

        path = request.url.path[len(API_PREFIX):]
        params = dict(request.url.params)

        if request.url.host == "namenode":
            return self._namenode(path, params)

        self.write_headers.append(request.headers)
        self.files[path] = request.read()
        return httpx.Response(201, headers={"Location": f"hdfs://namenode:8020{path}"})

    def _namenode(self, path: str, params: dict[str, str]) -> httpx.Response:
        if self.deny:
            user = params.get("user.name", "dr.who")
            return httpx.Response(
                403,
                json={
                    "RemoteException": {
                        "exception": "AccessControlException",
                        "javaClassName": "org.apache.hadoop.security.AccessControlException",
                        "message": f'Permission denied: user={user}, access=WRITE, inode="{path}"',
                    }
                },
            )
        if self.remote_error is not None:
            status, body = self.remote_error
            if isinstance(body, dict):
                return httpx.Response(status, json=body)
            return httpx.Response(status, text=body)

        self.create_params.append(params)
        query = urlencode({**params, "namenoderpcaddress": "namenode:8020", "createparent": "true"})
        return httpx.Response(
            307, headers={"Location": f"{DATANODE_URL}{API_PREFIX}{path}?{query}"}
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self, base_url: str = NAMENODE_URL) -> WebHDFSClient:
        return WebHDFSClient(base_url=base_url, transport=self.transport())


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HDFS_* variables from the calling shell out of the tests."""
    for name in ("HDFS_URL", "HDFS_USER", "HDFS_PROFILE", "HDFS_VERIFY_SSL", "HDFS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_hdfs() -> FakeHDFS:
    """Fake WebHDFS cluster."""
    return FakeHDFS()


@pytest.fixture
def reporter() -> MagicMock:
    """Exception reporter double."""
    return MagicMock()


@pytest.fixture
def connection() -> ConnectionConfig:
    return ConnectionConfig(filesystem_uri=NAMENODE_URL, username="etl")


@pytest.fixture
def uploader(
    fake_hdfs: FakeHDFS, reporter: MagicMock, connection: ConnectionConfig
) -> FileUploader:
    """Uploader wired to the fake cluster."""
    return FileUploader(
        connection,
        reporter=reporter,
        client_factory=lambda conn: fake_hdfs.client(conn.filesystem_uri),
    )


@pytest.fixture
def sample_config_yaml() -> str:
    """Sample config YAML content."""
    return """
default_profile: test

profiles:
  test:
    url: http://namenode-test.example.org:9870
    user: etl
    verify_ssl: false
    timeout: 10

  production:
    url: https://namenode.example.org:9871
    user: ingest
    verify_ssl: true
    timeout: 60
"""


@pytest.fixture
def make_source(tmp_path: Path) -> Callable[..., Path]:
    """Write bytes to a local source file and return its path."""

    def _make(data: bytes, name: str = "source.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make

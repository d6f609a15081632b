"""
Pytest configuration and fixtures for xldc tests.
"""

from __future__ import annotations

import copy
from typing import Any

import httpx
import pytest

from xldc.api.client import XLDeployClient
from xldc.config import ENV_PREFIX
from xldc.models.config import ConnectionProfile

HOST_TYPE: dict[str, Any] = {
    "type": "overthere.SshHost",
    "description": "Machine that can be connected to using SSH",
    "virtual": False,
    "properties": [
        {"name": "address", "kind": "STRING", "required": True},
        {"name": "os", "kind": "ENUM", "required": True, "default": "UNIX"},
        {"name": "tags", "kind": "SET_OF_STRING", "required": False},
    ],
}

ENVIRONMENT_TYPE: dict[str, Any] = {
    "type": "udm.Environment",
    "description": "A Deployment Environment",
    "properties": [
        {"name": "members", "kind": "SET_OF_CI", "required": False},
    ],
}

HOST_CI: dict[str, Any] = {
    "id": "Infrastructure/host1",
    "type": "overthere.SshHost",
    "address": "10.0.0.1",
    "os": "UNIX",
    "$token": "f3d1a2",
}


class FakeServer:
    """
    In-memory XL Deploy server for httpx.MockTransport.

    Routes are keyed by (method, path). Unknown routes answer 404.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.add("GET", "/deployit/server/info", json={"version": "9.0.0"})

    def add(self, method: str, path: str, status: int = 200, json: Any = None) -> None:
        self.routes[(method, path)] = (status, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": f"{request.url.path} not found"})
        status, body = route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def api_requests(self) -> list[httpx.Request]:
        """Requests other than the connectivity probe."""
        return [r for r in self.requests if r.url.path != "/deployit/server/info"]


@pytest.fixture
def server() -> FakeServer:
    """Provide a fake server with a working server info endpoint."""
    return FakeServer()


@pytest.fixture
def profile() -> ConnectionProfile:
    """Provide a resolved connection profile."""
    return ConnectionProfile(
        user="admin",
        password="secret",
        host="xld.local",
        port=4516,
        context_path="/",
        scheme="http",
    )


@pytest.fixture
def client(profile: ConnectionProfile, server: FakeServer) -> XLDeployClient:
    """Provide a client talking to the fake server."""
    xld = XLDeployClient(profile, transport=server.transport)
    yield xld
    xld.close()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove XLDC_* variables and run from an empty directory."""
    import os

    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_env(clean_env: None, monkeypatch: pytest.MonkeyPatch, server: FakeServer) -> FakeServer:
    """
    Configure the CLI through the environment and route it to the fake server.
    """
    monkeypatch.setenv("XLDC_USERNAME", "admin")
    monkeypatch.setenv("XLDC_PASSWORD", "secret")
    monkeypatch.setenv("XLDC_HOST", "xld.local")
    monkeypatch.setenv("XLDC_PORT", "4516")
    monkeypatch.setenv("XLDC_CONTEXT", "/")

    def make_client(profile: ConnectionProfile) -> XLDeployClient:
        return XLDeployClient(profile, transport=server.transport)

    monkeypatch.setattr("xldc.cli.XLDeployClient", make_client)
    return server


@pytest.fixture
def host_type() -> dict[str, Any]:
    """Type descriptor payload for overthere.SshHost."""
    return copy.deepcopy(HOST_TYPE)


@pytest.fixture
def environment_type() -> dict[str, Any]:
    """Type descriptor payload for udm.Environment."""
    return copy.deepcopy(ENVIRONMENT_TYPE)


@pytest.fixture
def host_ci() -> dict[str, Any]:
    """CI payload as the repository returns it."""
    return copy.deepcopy(HOST_CI)

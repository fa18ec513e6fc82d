"""Shared pytest fixtures for fastapi-request-context tests."""

from __future__ import annotations

import io
from collections.abc import Mapping
from typing import Any

import pytest
from starlette.requests import Request

from fastapi_request_context.settings import RequestSettings


class FakeTransport:
    """In-memory TransportSource with call counting."""

    def __init__(
        self,
        method: str | None = "GET",
        uri: str | None = "/",
        parameters: dict[Any, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        body: bytes | str | None = b"",
    ) -> None:
        self._method = method
        self._uri = uri
        self._parameters = parameters or {}
        self._headers = headers or {}
        self._body = body
        self.calls: list[str] = []

    def method(self) -> str | None:
        self.calls.append("method")
        return self._method

    def uri(self) -> str | None:
        self.calls.append("uri")
        return self._uri

    def parameters(self) -> dict[Any, Any]:
        self.calls.append("parameters")
        return dict(self._parameters)

    def headers(self) -> Mapping[str, Any]:
        self.calls.append("headers")
        return self._headers

    def body(self) -> bytes | str | None:
        self.calls.append("body")
        return self._body


@pytest.fixture
def fake_transport() -> Any:
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def make_environ() -> Any:
    """Factory for minimal WSGI environ dicts."""

    def _make(
        method: str = "GET",
        path: str = "/",
        query_string: str = "",
        headers: dict[str, str] | None = None,
        body: bytes = b"",
        content_type: str | None = None,
        **extra: Any,
    ) -> dict[str, Any]:
        environ: dict[str, Any] = {
            "REQUEST_METHOD": method,
            "SCRIPT_NAME": "",
            "PATH_INFO": path,
            "QUERY_STRING": query_string,
            "SERVER_NAME": "testserver",
            "SERVER_PORT": "80",
            "wsgi.input": io.BytesIO(body),
        }
        if body:
            environ["CONTENT_LENGTH"] = str(len(body))
        if content_type is not None:
            environ["CONTENT_TYPE"] = content_type
        for name, value in (headers or {}).items():
            environ["HTTP_" + name.upper().replace("-", "_")] = value
        environ.update(extra)
        return environ

    return _make


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects with an optional body."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
        body: bytes = b"",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
            "scheme": "http",
            "server": ("testserver", 80),
        }

        async def receive() -> dict[str, Any]:
            return {"type": "http.request", "body": body, "more_body": False}

        return Request(scope, receive)

    return _make


@pytest.fixture
def isolated_settings() -> RequestSettings:
    """Settings isolated from the process environment."""
    return RequestSettings(
        allowed_methods=("GET", "POST"),
        default_format="xml",
        base_url=None,
        _env_file=None,
    )

"""TransportSource protocol and adapters over real request transports."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable
from urllib.parse import parse_qsl

from starlette.requests import Request, cookie_parser

from fastapi_request_context._types import ParameterMap
from fastapi_request_context.headers import CONTENT_HEADERS, HEADER_PREFIX

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_ENVIRON_CONTENT_KEYS = {
    name.lower(): key for key, name in CONTENT_HEADERS.items()
}


@runtime_checkable
class TransportSource(Protocol):
    """Supplies the ambient request facts a RequestContext falls back to."""

    def method(self) -> str | None: ...
    def uri(self) -> str | None: ...
    def parameters(self) -> ParameterMap: ...
    def headers(self) -> Mapping[str, Any]: ...
    def body(self) -> bytes | str | None: ...


def _merge_missing(target: ParameterMap, source: Mapping[Any, Any]) -> None:
    for key, value in source.items():
        target.setdefault(key, value)


def _form_parameters(content_type: str | None, body: bytes) -> dict[str, str]:
    if not body or not content_type:
        return {}
    if content_type.split(";", 1)[0].strip().lower() != FORM_CONTENT_TYPE:
        return {}
    return dict(parse_qsl(body.decode("latin-1"), keep_blank_values=True))


def _wsgi_to_text(value: str) -> str:
    # PEP 3333 native strings carry the raw bytes decoded as latin-1
    try:
        raw = value.encode("latin-1")
    except UnicodeEncodeError:
        return value
    return raw.decode("utf-8", errors="replace")


def environ_key(header_name: str) -> str:
    """Map a header name back to its environ key.

    ``accept-encoding`` becomes ``HTTP_ACCEPT_ENCODING``.
    """
    lowered = header_name.lower()
    if lowered in _ENVIRON_CONTENT_KEYS:
        return _ENVIRON_CONTENT_KEYS[lowered]
    return HEADER_PREFIX + lowered.upper().replace("-", "_")


class EnvironTransport:
    """Adapter over a WSGI environ.

    Parameters combine the query string, an url-encoded form body and
    cookies, in that order of precedence.
    """

    def __init__(self, environ: Mapping[str, Any]) -> None:
        self._environ = environ
        self._body: bytes | None = None

    def method(self) -> str | None:
        return self._environ.get("REQUEST_METHOD")

    def uri(self) -> str | None:
        request_uri = self._environ.get("REQUEST_URI")
        if request_uri:
            return str(request_uri)
        path = _wsgi_to_text(
            self._environ.get("SCRIPT_NAME", "") + self._environ.get("PATH_INFO", "")
        )
        query = self._environ.get("QUERY_STRING", "")
        if query:
            return f"{path}?{query}"
        return path or None

    def parameters(self) -> ParameterMap:
        params: ParameterMap = dict(
            parse_qsl(self._environ.get("QUERY_STRING", ""), keep_blank_values=True)
        )
        _merge_missing(
            params, _form_parameters(self._environ.get("CONTENT_TYPE"), self.body())
        )
        _merge_missing(params, cookie_parser(self._environ.get("HTTP_COOKIE", "")))
        return params

    def headers(self) -> Mapping[str, Any]:
        return self._environ

    def body(self) -> bytes:
        if self._body is None:
            self._body = self._read_body()
        return self._body

    def _read_body(self) -> bytes:
        stream = self._environ.get("wsgi.input")
        if stream is None:
            return b""
        try:
            length = int(self._environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        if length <= 0:
            return b""
        data: bytes = stream.read(length)
        logger.debug("Read %d body bytes from wsgi.input", len(data))
        return data


class StarletteTransport:
    """Adapter over a Starlette request whose body has already been awaited."""

    def __init__(self, request: Request, body: bytes = b"") -> None:
        self._request = request
        self._body = body

    @classmethod
    async def from_request(cls, request: Request) -> StarletteTransport:
        body = await request.body()
        logger.debug("Read %d body bytes from ASGI receive channel", len(body))
        return cls(request, body)

    def method(self) -> str | None:
        return self._request.method

    def uri(self) -> str | None:
        url = self._request.url
        if url.query:
            return f"{url.path}?{url.query}"
        return url.path

    def parameters(self) -> ParameterMap:
        params: ParameterMap = dict(
            parse_qsl(self._request.url.query, keep_blank_values=True)
        )
        _merge_missing(
            params,
            _form_parameters(self._request.headers.get("content-type"), self._body),
        )
        _merge_missing(params, self._request.cookies)
        return params

    def headers(self) -> Mapping[str, Any]:
        return {
            environ_key(name): value for name, value in self._request.headers.items()
        }

    def body(self) -> bytes:
        return self._body

"""RequestContext — normalized, queryable model of one inbound transaction."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from fastapi_request_context._types import (
    BodyDecoder,
    HeaderMap,
    ParameterMap,
    StructuredValue,
)
from fastapi_request_context.decoding import DEFAULT_DECODERS, string_to_object
from fastapi_request_context.exceptions import InvalidArgument
from fastapi_request_context.headers import parse_headers
from fastapi_request_context.settings import Method, RequestSettings
from fastapi_request_context.settings import settings as default_settings
from fastapi_request_context.transport import TransportSource
from fastapi_request_context.uri import derive_format, derive_request_chain

logger = logging.getLogger(__name__)

_SCALARS = (str, bytes, int, float, bool)


def _iter_fields(source: Any) -> Iterator[tuple[Any, Any]]:
    if isinstance(source, Mapping):
        yield from source.items()
    elif isinstance(source, Sequence):
        yield from enumerate(source)
    else:
        try:
            fields = vars(source)
        except TypeError:
            raise InvalidArgument(
                f"Add parameters: can not read fields of {type(source).__name__}",
                argument="source",
            ) from None
        yield from fields.items()


class RequestContext:
    """Normalized view of one inbound HTTP transaction.

    Any argument left unset falls back to ``transport``, and failing that to
    an empty value (``GET`` for the method). Parameters are merged from the
    source parameters, then the headers, then the body fields, each later
    source overwriting the earlier ones.
    """

    def __init__(
        self,
        method: str | None = None,
        uri: str | None = None,
        parameters: Mapping[Any, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        body: str | bytes | None = None,
        base_url: str | None = None,
        *,
        transport: TransportSource | None = None,
        settings: RequestSettings | None = None,
        decoders: Sequence[BodyDecoder] | None = None,
    ) -> None:
        self._settings = settings if settings is not None else default_settings
        self._request_chain: tuple[str, ...] | None = None
        self._format: str | None = None
        self._parameters: ParameterMap = {}

        if base_url is None:
            base_url = self._settings.base_url
        self._set_base_url(base_url)

        if not method and transport is not None:
            method = transport.method()
        self._method: str = method or Method.GET.value

        if not uri and transport is not None:
            uri = transport.uri()
        self._uri: str = uri or ""

        if parameters is None:
            parameters = transport.parameters() if transport is not None else {}
        self._source_parameters: ParameterMap = dict(parameters)

        if headers is None:
            headers = transport.headers() if transport is not None else {}
        self._headers: HeaderMap = parse_headers(headers)

        if body is None and transport is not None:
            body = transport.body()
        self._body: StructuredValue = string_to_object(
            body, DEFAULT_DECODERS if decoders is None else decoders
        )

        self.add_parameters(self._source_parameters)
        self.add_parameters(self._headers)
        if isinstance(self._body, (Mapping, list)):
            self.add_parameters(self._body)

        logger.debug(
            "Built request context %s %s with %d parameters",
            self._method,
            self._uri,
            len(self._parameters),
        )

    @classmethod
    def from_transport(
        cls, transport: TransportSource, **overrides: Any
    ) -> RequestContext:
        return cls(transport=transport, **overrides)

    def _set_base_url(self, base_url: Any) -> None:
        if base_url is not None and not isinstance(base_url, str):
            raise InvalidArgument("baseUrl must be a string", argument="base_url")
        self._base_url: str | None = base_url

    @property
    def method(self) -> str:
        """HTTP verb token as received, not validated."""
        return self._method

    @property
    def method_allowed(self) -> bool:
        return self._method in self._settings.allowed_methods

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def base_url(self) -> str | None:
        return self._base_url

    @property
    def headers(self) -> HeaderMap:
        return dict(self._headers)

    @property
    def source_parameters(self) -> ParameterMap:
        return dict(self._source_parameters)

    @property
    def body(self) -> StructuredValue:
        return self._body

    @property
    def parameters(self) -> ParameterMap:
        """Copy of the merged parameter map."""
        return dict(self._parameters)

    def get_parameter(self, key: Any, default: Any = None) -> Any:
        """Merged parameter ``key``, or ``default`` when absent."""
        return self._parameters.get(key, default)

    @property
    def request_chain(self) -> tuple[str, ...]:
        """The requested route as path segments, without base url or format."""
        if self._request_chain is None:
            self._request_chain = derive_request_chain(self._uri, self._base_url)
        return self._request_chain

    @property
    def format(self) -> str:
        """The expected response format, ``settings.default_format`` if unspecified."""
        if self._format is None:
            self._format = derive_format(self._uri) or self._settings.default_format
        return self._format

    def add_parameters(self, source: Any, overwrite: bool = True) -> RequestContext:
        """Add every field of a mapping, sequence or object as a parameter."""
        if source is None or isinstance(source, _SCALARS):
            raise InvalidArgument(
                "Add parameters: source can not be scalar", argument="source"
            )
        for name, value in _iter_fields(source):
            self.add_parameter(name, value, overwrite)
        return self

    def add_parameter(self, name: Any, value: Any, overwrite: bool = True) -> bool:
        """Add a parameter. Returns False if it existed and overwrite is off."""
        if not isinstance(name, (str, int, float)):
            raise InvalidArgument(
                "Add parameter: parameter name must be scalar", argument="name"
            )
        if not overwrite and name in self._parameters:
            return False
        self._parameters[name] = value
        return True

    def to_dict(self) -> dict[str, Any]:
        """Summary for logging and debugging."""
        return {
            "method": self.method,
            "requestedUri": self._uri,
            "parameters": self.parameters,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(method={self._method!r}, uri={self._uri!r})"

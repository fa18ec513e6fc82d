"""FastAPI Request Context - normalized request facts for routing and dispatch."""

from fastapi_request_context.context import RequestContext
from fastapi_request_context.decoding import (
    DEFAULT_DECODERS,
    DecodeResult,
    decode_json,
    decode_literal,
    decode_xml,
    string_to_object,
)
from fastapi_request_context.dependency import request_context_dependency
from fastapi_request_context.exceptions import InvalidArgument, RequestContextError
from fastapi_request_context.headers import parse_headers
from fastapi_request_context.settings import Method, RequestSettings, settings
from fastapi_request_context.status import HasStatus, Status, StatusHolder
from fastapi_request_context.transport import (
    EnvironTransport,
    StarletteTransport,
    TransportSource,
)
from fastapi_request_context.uri import (
    derive_format,
    derive_request_chain,
    remove_base_url,
)

__all__ = [
    "DEFAULT_DECODERS",
    "DecodeResult",
    "EnvironTransport",
    "HasStatus",
    "InvalidArgument",
    "Method",
    "RequestContext",
    "RequestContextError",
    "RequestSettings",
    "StarletteTransport",
    "Status",
    "StatusHolder",
    "TransportSource",
    "decode_json",
    "decode_literal",
    "decode_xml",
    "derive_format",
    "derive_request_chain",
    "parse_headers",
    "remove_base_url",
    "request_context_dependency",
    "settings",
    "string_to_object",
]

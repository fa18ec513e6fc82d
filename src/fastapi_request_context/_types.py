"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fastapi_request_context.decoding import DecodeResult

# A decoded body: nested dicts/lists of scalars
StructuredValue = Any
HeaderMap = dict[str, str]
ParameterMap = dict[Any, Any]
BodyDecoder = Callable[[str], "DecodeResult"]

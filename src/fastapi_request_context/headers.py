"""Header normalization from environ-style keys to canonical HTTP names."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi_request_context._types import HeaderMap

HEADER_PREFIX = "HTTP_"

# Environ keys that carry real headers without the HTTP_ marker
CONTENT_HEADERS = {
    "CONTENT_TYPE": "Content-Type",
    "CONTENT_LENGTH": "Content-Length",
}


def canonical_header_name(key: str) -> str:
    """Turn ``ACCEPT_ENCODING`` into ``Accept-Encoding``."""
    words = key.replace("_", " ").lower().split(" ")
    return "-".join(word[:1].upper() + word[1:] for word in words)


def parse_headers(raw: Mapping[str, Any] | None = None) -> HeaderMap:
    """Pick the HTTP headers out of an environ-style mapping.

    Anything that is neither ``HTTP_``-prefixed nor a content header is
    server or CGI metadata and is dropped.
    """
    headers: HeaderMap = {}
    if not raw:
        return headers

    for key, value in raw.items():
        if not isinstance(key, str):
            continue
        if key.startswith(HEADER_PREFIX):
            headers[canonical_header_name(key[len(HEADER_PREFIX) :])] = value
        elif key in CONTENT_HEADERS:
            headers[CONTENT_HEADERS[key]] = value
    return headers

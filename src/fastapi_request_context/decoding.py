"""Body decoding: an ordered chain of best-effort decoders."""

from __future__ import annotations

import ast
import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any
from xml.etree import ElementTree

from fastapi_request_context._types import BodyDecoder, StructuredValue

logger = logging.getLogger(__name__)

TEXT_FIELD = "text"
XML_ATTRIBUTES = "@attributes"


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a single decode attempt."""

    ok: bool
    value: StructuredValue = None


FAILED = DecodeResult(ok=False)


def decode_json(text: str) -> DecodeResult:
    try:
        value = json.loads(text)
    except (ValueError, RecursionError):
        return FAILED
    if value is None:
        # "null" is valid JSON but the body must never be None
        return DecodeResult(ok=True, value={})
    return DecodeResult(ok=True, value=value)


def _element_to_tree(element: ElementTree.Element) -> StructuredValue:
    children = list(element)
    if not children and not element.attrib:
        return (element.text or "").strip()

    tree: dict[str, Any] = {}
    if element.attrib:
        tree[XML_ATTRIBUTES] = dict(element.attrib)
    for child in children:
        value = _element_to_tree(child)
        if child.tag in tree:
            existing = tree[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                tree[child.tag] = [existing, value]
        else:
            tree[child.tag] = value
    if not children:
        text = (element.text or "").strip()
        if text:
            tree[TEXT_FIELD] = text
    return tree


def decode_xml(text: str) -> DecodeResult:
    """Decode an XML document into a dict keyed by the root's children."""
    try:
        root = ElementTree.fromstring(text)
    except (ElementTree.ParseError, ValueError):
        return FAILED
    try:
        tree = _element_to_tree(root)
    except RecursionError:
        # expat accepts nesting deeper than the interpreter stack
        return FAILED
    if not isinstance(tree, dict):
        tree = {TEXT_FIELD: tree} if tree else {}
    return DecodeResult(ok=True, value=tree)


_LITERAL_TYPES = (dict, list, str, int, float, bool)


def decode_literal(text: str) -> DecodeResult:
    """Decode Python literal syntax, e.g. ``{'a': 1}`` or ``(1, 2)``.

    Only values that can become request parameters succeed: containers,
    strings and real numbers, with dict keys limited to ``str`` and ``int``.
    """
    try:
        value = ast.literal_eval(text.strip())
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError):
        return FAILED
    if isinstance(value, (tuple, set, frozenset)):
        value = list(value)
    if not isinstance(value, _LITERAL_TYPES):
        return FAILED
    if isinstance(value, dict) and not all(
        isinstance(key, (str, int)) for key in value
    ):
        return FAILED
    return DecodeResult(ok=True, value=value)


DEFAULT_DECODERS: tuple[BodyDecoder, ...] = (decode_json, decode_xml, decode_literal)


def string_to_object(
    text: str | bytes | None,
    decoders: Sequence[BodyDecoder] = DEFAULT_DECODERS,
) -> StructuredValue:
    """Turn raw body text into a structured value.

    The first decoder that succeeds wins. If none does, the original string
    is returned under the ``text`` field, so ``string_to_object("fail")``
    gives ``{"text": "fail"}``. Empty input gives ``{}``.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    if not text:
        return {}

    for decoder in decoders:
        result = decoder(text)
        if result.ok:
            logger.debug(
                "Request body decoded by %s",
                getattr(decoder, "__name__", type(decoder).__name__),
            )
            return result.value

    logger.debug("Request body kept as plain text (%d chars)", len(text))
    return {TEXT_FIELD: text}

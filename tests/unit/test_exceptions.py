"""Tests for RequestContextError hierarchy."""

from __future__ import annotations

from fastapi_request_context.exceptions import InvalidArgument, RequestContextError


class TestRequestContextError:
    def test_is_base_exception(self) -> None:
        exc = RequestContextError("test")
        assert isinstance(exc, Exception)
        assert str(exc) == "test"


class TestInvalidArgument:
    def test_detail(self) -> None:
        exc = InvalidArgument("baseUrl must be a string")
        assert exc.detail == "baseUrl must be a string"
        assert str(exc) == "baseUrl must be a string"

    def test_argument_is_optional(self) -> None:
        assert InvalidArgument("bad").argument is None

    def test_argument(self) -> None:
        assert InvalidArgument("bad", argument="source").argument == "source"

    def test_is_request_context_error(self) -> None:
        assert issubclass(InvalidArgument, RequestContextError)

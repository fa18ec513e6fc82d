"""RequestContextError hierarchy for caller misuse."""

from __future__ import annotations


class RequestContextError(Exception):
    """Base for all request context exceptions."""


class InvalidArgument(RequestContextError):
    """An argument of the wrong shape was handed to the request context."""

    def __init__(self, detail: str, *, argument: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.argument = argument

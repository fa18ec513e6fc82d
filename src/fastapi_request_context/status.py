"""Status value, HasStatus capability and StatusHolder composition."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Protocol, runtime_checkable

from fastapi_request_context.exceptions import InvalidArgument


@dataclass(frozen=True)
class Status:
    """HTTP status code with its reason phrase. Defaults to 200 OK."""

    code: int = HTTPStatus.OK.value

    def __post_init__(self) -> None:
        try:
            HTTPStatus(self.code)
        except ValueError:
            raise InvalidArgument(
                f"Unknown HTTP status code: {self.code}", argument="code"
            ) from None

    @property
    def message(self) -> str:
        return HTTPStatus(self.code).phrase

    def to_dict(self) -> dict[str, int | str]:
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return f"{self.code} {self.message}"


@runtime_checkable
class HasStatus(Protocol):
    """Anything that carries a replaceable response status."""

    @property
    def status(self) -> Status: ...

    @status.setter
    def status(self, value: Status) -> None: ...


class StatusHolder:
    """Owns a Status, creating the default 200 OK on first access."""

    def __init__(self, status: Status | None = None) -> None:
        self._status = status

    @property
    def status(self) -> Status:
        if self._status is None:
            self._status = Status()
        return self._status

    @status.setter
    def status(self, value: Status) -> None:
        if not isinstance(value, Status):
            raise InvalidArgument("status must be a Status", argument="status")
        self._status = value

"""Shared test helpers for Encore tests."""

from typing import Any


class FakeResponse:
    """Attribute-style HTTP response, as carried by HTTP client exceptions."""

    def __init__(
        self,
        status: int,
        status_text: str = "",
        headers: dict[str, str] | None = None,
        data: Any = None,
    ) -> None:
        self.status = status
        self.statusText = status_text
        self.headers = headers or {}
        self.data = data


class FakeHTTPError(Exception):
    """Exception carrying a ``response`` attribute."""

    def __init__(self, message: str, response: FakeResponse) -> None:
        super().__init__(message)
        self.response = response


def response_failure(
    status: int,
    status_text: str = "",
    headers: dict[str, str] | None = None,
    data: Any = None,
) -> dict[str, Any]:
    """Mapping-style failure wrapping a response."""
    response: dict[str, Any] = {"status": status, "statusText": status_text}
    if headers is not None:
        response["headers"] = headers
    if data is not None:
        response["data"] = data
    return {"response": response}


def raised(exc: BaseException) -> BaseException:
    """Raise and catch ``exc`` so it carries a traceback."""
    try:
        raise exc
    except BaseException as caught:
        return caught


class Unprintable(Exception):
    """Exception whose ``__str__`` raises."""

    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class BrokenHeaders:
    """Headers object whose lookups raise."""

    def get(self, name: str) -> str:
        raise KeyError(name)

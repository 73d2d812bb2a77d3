"""Errors returned by cloud API calls and helpers to classify them."""

from __future__ import annotations


class DetailedError(Exception):
    """An API error carrying the HTTP status code of the response."""

    def __init__(self, status_code: int = 0, message: str = "") -> None:
        super().__init__(message or f"request failed with status code {status_code}")
        self.status_code = status_code
        self.message = message


def _chain(err: BaseException | None):
    seen = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if err.__cause__ is not None:
            err = err.__cause__
        elif not err.__suppress_context__:
            err = err.__context__
        else:
            err = None


def resource_not_found(err: BaseException | None) -> bool:
    """True if the error itself is a DetailedError with status 404."""
    return isinstance(err, DetailedError) and err.status_code == 404


def invalid_credentials(err: BaseException | None) -> bool:
    """True if the error, or any error it was raised from, has status 401."""
    for item in _chain(err):
        if isinstance(item, DetailedError):
            return item.status_code == 401
    return False
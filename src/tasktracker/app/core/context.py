"""Request correlation state shared by logging, middleware and error handlers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

REQUEST_ID_HEADER = "X-Request-ID"
_UNBOUND = "-"

_request_id: ContextVar[str] = ContextVar("tasktracker_request_id", default=_UNBOUND)


def get_request_id() -> str:
    """Return the request identifier bound to the running task, or ``"-"``."""

    return _request_id.get()


@contextmanager
def bound_request_id(request_id: str | None) -> Iterator[str]:
    """Bind ``request_id`` for the duration of the ``with`` block.

    ``None`` leaves whatever is currently bound untouched.
    """

    if not request_id:
        yield get_request_id()
        return
    token = _request_id.set(request_id)
    try:
        yield request_id
    finally:
        _request_id.reset(token)


__all__ = ["REQUEST_ID_HEADER", "bound_request_id", "get_request_id"]

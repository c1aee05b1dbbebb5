"""Propagate the current request ID through the call stack using contextvars."""

from contextlib import contextmanager
from contextvars import ContextVar
from uuid import uuid4

_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def get_current_request_id() -> str:
    """
    Request ID of the request being served.

    Outside a request (tests, scripts) a fresh ID is returned so response
    metadata is always populated.
    """
    return _current_request_id.get() or str(uuid4())


def set_current_request_id(request_id: str) -> None:
    """Set request ID in context. Called by RequestIDMiddleware."""
    _current_request_id.set(request_id)


def clear_current_request_id() -> None:
    """
    Clear request context.

    Must be called in finally block to prevent context leakage.
    """
    _current_request_id.set(None)


@contextmanager
def request_context(request_id: str):
    """Temporarily run code as part of the given request."""
    previous = _current_request_id.get()
    set_current_request_id(request_id)
    try:
        yield
    finally:
        if previous is None:
            clear_current_request_id()
        else:
            set_current_request_id(previous)

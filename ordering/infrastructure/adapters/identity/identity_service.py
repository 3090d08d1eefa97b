"""
Identity service implementations.

The transport layer authenticates the request; these adapters only hand the
resulting subject to the application layer.
"""
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from ordering.application.interfaces import IdentityService


_caller_identity: ContextVar[Optional[str]] = ContextVar("caller_identity", default=None)


@contextmanager
def caller_identity(identity: Optional[str]) -> Iterator[None]:
    """
    Bind the caller identity for the current task.

    Usage:
        with caller_identity("b6a1..."):
            await handler.handle(command)
    """
    token = _caller_identity.set(identity)
    try:
        yield
    finally:
        _caller_identity.reset(token)


class ContextIdentityService(IdentityService):
    """Reads the identity bound with caller_identity()."""

    def get_caller_identity(self) -> Optional[str]:
        return _caller_identity.get()


class StaticIdentityService(IdentityService):
    """Always returns the same identity (scripts, single-user tools)."""

    def __init__(self, identity: Optional[str]):
        self._identity = identity

    def get_caller_identity(self) -> Optional[str]:
        return self._identity

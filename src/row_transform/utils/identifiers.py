"""
Identifier generation for the generate-identifier transformation.

Handlers never call :mod:`uuid` directly; they draw from an
``IdentifierProvider`` carried on the transform context, so a deterministic
provider can stand in for tests.
"""

from __future__ import annotations

import uuid
from threading import Lock
from typing import Protocol


class IdentifierProvider(Protocol):
    """Source of fresh identifier strings."""

    def time_ordered(self) -> str:
        """Return a new time-ordered identifier (UUID version 1)."""
        ...

    def random(self) -> str:
        """Return a new random identifier (UUID version 4)."""
        ...


class UuidIdentifierProvider:
    """Thread-safe provider backed by :func:`uuid.uuid1` and :func:`uuid.uuid4`."""

    def __init__(self) -> None:
        self._lock = Lock()

    def time_ordered(self) -> str:
        # uuid1 clock-sequence bookkeeping is module-global
        with self._lock:
            return str(uuid.uuid1())

    def random(self) -> str:
        return str(uuid.uuid4())


_default_provider = UuidIdentifierProvider()


def get_identifier_provider() -> UuidIdentifierProvider:
    """Return the process-wide identifier provider."""
    return _default_provider


__all__ = ["IdentifierProvider", "UuidIdentifierProvider", "get_identifier_provider"]

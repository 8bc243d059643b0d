"""Invariant helpers for structural preconditions."""

from __future__ import annotations

from typing import TypeVar

from mp_auth.kernel.errors.domain import InvariantViolationError

T = TypeVar("T")


class Invariant:
    """Namespace for invariant assertions."""

    @staticmethod
    def require(condition: bool, message: str) -> None:
        """Raise ``InvariantViolationError`` when *condition* is False."""
        if not condition:
            raise InvariantViolationError(message)

    @staticmethod
    def not_none(value: T | None, name: str = "value") -> T:
        """Assert *value* is not None, returning it typed."""
        if value is None:
            raise InvariantViolationError(f"{name} cannot be None", detail={"argument": name})
        return value


__all__ = ["Invariant"]

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mp_auth.security.hashing.hash_string import HashString

__all__ = ["HashingAlgorithm"]


class HashingAlgorithm(Protocol):
    """A password derivation function selectable by its ``id()``."""

    def id(self) -> str:
        """Tag embedded in persisted hash strings."""
        ...

    def params(self) -> frozenset[str]:
        """Parameter keys this algorithm understands."""
        ...

    def hash(self, hash_string: HashString, password: str | bytes) -> str:
        """Derive the hash for *password* using the record's salt and params."""
        ...

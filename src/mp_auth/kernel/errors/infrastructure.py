"""Infrastructure errors — a broken runtime environment, not bad input."""

from __future__ import annotations

from typing import Any

from mp_auth.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Runtime / environment failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class CryptoProviderError(InfrastructureError):
    """A required cryptographic primitive is unavailable or failed.

    Not recoverable per call; raised during startup it should abort the
    process.
    """

    default_code = "crypto_provider_error"

    def __init__(
        self,
        primitive: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"{primitive} is not available", **kwargs)
        self.primitive = primitive


__all__ = ["CryptoProviderError", "InfrastructureError"]

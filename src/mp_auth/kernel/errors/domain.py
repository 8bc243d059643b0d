"""Domain errors — bad caller data and trust decisions."""

from __future__ import annotations

from typing import Any

from mp_auth.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A structural precondition (e.g. a required document) was not met."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``field`` names the offending input when one can be singled out.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.field is not None:
            base["field"] = self.field
        return base


class MetadataError(DomainError):
    """An authenticator's metadata is not trustworthy right now.

    ``reason`` is the text to surface in audit logs when a ceremony is
    refused.
    """

    default_code = "metadata_error"

    INTEGRITY = "metadata_integrity"
    STATUS_INVALID = "metadata_status_invalid"
    STATUS_MISSING = "metadata_status_missing"
    NOT_FOUND = "metadata_not_found"

    @property
    def reason(self) -> str:
        return self.message


__all__ = [
    "DomainError",
    "InvariantViolationError",
    "MetadataError",
    "ValidationError",
]

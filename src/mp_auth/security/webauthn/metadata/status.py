"""Metadata status reports and their trust tiers.

Status tags follow the FIDO Metadata Service v3 ``AuthenticatorStatus``
enumeration.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from mp_auth.kernel.errors import ValidationError
from mp_auth.kernel.time import start_of_day_utc

__all__ = ["AuthenticatorStatus", "StatusReport", "StatusTier", "classify"]

# ISO calendar date with an optional, ignored, zone offset
_ISO_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})(?:Z|[+-]\d{2}:\d{2})?$")


class AuthenticatorStatus(str, Enum):
    NOT_FIDO_CERTIFIED = "NOT_FIDO_CERTIFIED"
    FIDO_CERTIFIED = "FIDO_CERTIFIED"
    FIDO_CERTIFIED_L1 = "FIDO_CERTIFIED_L1"
    FIDO_CERTIFIED_L1_PLUS = "FIDO_CERTIFIED_L1plus"
    FIDO_CERTIFIED_L2 = "FIDO_CERTIFIED_L2"
    FIDO_CERTIFIED_L2_PLUS = "FIDO_CERTIFIED_L2plus"
    FIDO_CERTIFIED_L3 = "FIDO_CERTIFIED_L3"
    FIDO_CERTIFIED_L3_PLUS = "FIDO_CERTIFIED_L3plus"
    SELF_ASSERTION_SUBMITTED = "SELF_ASSERTION_SUBMITTED"
    UPDATE_AVAILABLE = "UPDATE_AVAILABLE"
    USER_VERIFICATION_BYPASS = "USER_VERIFICATION_BYPASS"
    ATTESTATION_KEY_COMPROMISE = "ATTESTATION_KEY_COMPROMISE"
    USER_KEY_REMOTE_COMPROMISE = "USER_KEY_REMOTE_COMPROMISE"
    USER_KEY_PHYSICAL_COMPROMISE = "USER_KEY_PHYSICAL_COMPROMISE"
    REVOKED = "REVOKED"


class StatusTier(str, Enum):
    """How a status tag affects trust once it is in effect."""

    INFO = "info"
    INVALID = "invalid"
    NEUTRAL = "neutral"


_INVALID = frozenset({
    AuthenticatorStatus.USER_VERIFICATION_BYPASS.value,
    AuthenticatorStatus.ATTESTATION_KEY_COMPROMISE.value,
    AuthenticatorStatus.USER_KEY_REMOTE_COMPROMISE.value,
    AuthenticatorStatus.USER_KEY_PHYSICAL_COMPROMISE.value,
    AuthenticatorStatus.REVOKED.value,
})
_INFO = frozenset({AuthenticatorStatus.UPDATE_AVAILABLE.value})


def classify(status: str) -> StatusTier:
    """Map a raw status tag to its tier; unknown tags are neutral."""
    if status in _INVALID:
        return StatusTier.INVALID
    if status in _INFO:
        return StatusTier.INFO
    return StatusTier.NEUTRAL


def _parse_effective_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return start_of_day_utc(value.date())
    if isinstance(value, date):
        return start_of_day_utc(value)
    match = _ISO_DATE_RE.match(value) if isinstance(value, str) else None
    if match is None:
        raise ValidationError(
            f"status report effectiveDate is not an ISO date: {value!r}", field="effectiveDate"
        )
    try:
        return start_of_day_utc(date.fromisoformat(match.group(1)))
    except ValueError as exc:
        raise ValidationError(
            f"status report effectiveDate is not a calendar date: {value!r}",
            field="effectiveDate",
            cause=exc,
        ) from exc


@dataclass(frozen=True)
class StatusReport:
    """A dated status assertion, anchored at UTC midnight of its date."""

    status: str
    effective_date: datetime

    @property
    def tier(self) -> StatusTier:
        return classify(self.status)

    def is_effective(self, now: datetime) -> bool:
        return self.effective_date <= now

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> StatusReport:
        if not isinstance(doc, Mapping):
            raise ValidationError("status report must be an object", field="statusReports")
        status = doc.get("status")
        if not isinstance(status, str):
            raise ValidationError("status report has no status", field="status")
        return cls(status=status, effective_date=_parse_effective_date(doc.get("effectiveDate")))

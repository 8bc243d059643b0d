"""Observability – AuditLogger.

A dedicated structured-log sink for credential checks and authenticator
trust decisions.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from mp_auth.observability.logging.processors import get_logger


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    SUCCESS = "success"
    FAILURE = "failure"
    DENIED = "denied"
    ERROR = "error"


class AuditLogger:
    """Dedicated structured-log sink for security-sensitive decisions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger.  Defaults to ``get_logger("audit")``.
    """

    def __init__(
        self,
        service: str = "unknown",
        logger: Any = None,
    ) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def log_trust_decision(
        self,
        authenticator: str,
        outcome: AuditOutcome | str,
        reason: str | None = None,
        **extra: Any,
    ) -> None:
        """Record whether an authenticator model was trusted for a ceremony.

        Parameters
        ----------
        authenticator:
            Identifier the ceremony named (AAGUID, AAID or key identifier).
        outcome:
            :class:`AuditOutcome` or plain string.
        reason:
            Failure reason or advisory text, if any.
        """
        entry: dict[str, Any] = {
            "event": "audit.authenticator_trust",
            "authenticator": authenticator,
            "outcome": _outcome(outcome),
            **extra,
        }
        if reason is not None:
            entry["reason"] = reason
        self._emit(entry)

    def log_credential_check(
        self,
        algorithm: str,
        outcome: AuditOutcome | str,
        **extra: Any,
    ) -> None:
        """Record a password verification attempt (never the secret itself)."""
        self._emit({
            "event": "audit.credential_check",
            "algorithm": algorithm,
            "outcome": _outcome(outcome),
            **extra,
        })

    def _emit(self, entry: dict[str, Any]) -> None:
        event = entry.pop("event", "audit")
        entry["service"] = self._service
        entry["timestamp"] = datetime.datetime.now(datetime.timezone.utc).isoformat()
        self._log.warning(event, **entry)


def _outcome(outcome: AuditOutcome | str) -> str:
    return outcome.value if isinstance(outcome, AuditOutcome) else str(outcome)


__all__ = ["AuditLogger", "AuditOutcome"]

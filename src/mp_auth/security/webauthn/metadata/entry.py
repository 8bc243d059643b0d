"""MetadataEntry — an authenticator's metadata statement plus its trust timeline.

An entry is built once per catalog refresh and read by many concurrent
ceremonies. Integrity problems found while building it are recorded, not
raised, so one bad catalog item does not abort ingestion of the rest; the
recorded failure is reported by every later :meth:`MetadataEntry.check_valid`.
"""
from __future__ import annotations

import binascii
import hashlib
import hmac
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from mp_auth.kernel.ddd import Invariant
from mp_auth.kernel.errors import MetadataError, ValidationError
from mp_auth.kernel.time import Clock, SystemClock
from mp_auth.kernel.types import Err, Ok, Result
from mp_auth.observability.logging import get_logger
from mp_auth.security.codec import b64decode, b64url_decode
from mp_auth.security.webauthn.metadata.status import StatusReport, StatusTier

__all__ = ["MetadataEntry", "TrustVerdict"]

_log = get_logger(__name__)

DEFAULT_SCHEMA_VERSION = 2
HASH_MISMATCH = "MDS entry hash did not match corresponding hash in MDS TOC"
HASH_MISSING = "MDS TOC entry has no usable hash"
NO_APPLICABLE_STATUS = "Invalid MDS statusReports"

_SYSTEM_CLOCK = SystemClock()


def _freeze(value: Any) -> Any:
    """Deep-copy *value* into read-only containers."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _document(value: Any, name: str) -> Mapping[str, Any]:
    Invariant.not_none(value, name)
    if not isinstance(value, Mapping):
        raise ValidationError(f"{name} must be a key-value document", field=name)
    return value


def _schema_version(statement: Mapping[str, Any]) -> int:
    raw = statement.get("schema", DEFAULT_SCHEMA_VERSION)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValidationError(f"statement schema must be an integer, got {raw!r}", field="schema")
    return raw


def _status_reports(toc_entry: Mapping[str, Any]) -> tuple[StatusReport, ...]:
    reports = toc_entry.get("statusReports", ())
    if isinstance(reports, (str, bytes)) or not isinstance(reports, Sequence):
        raise ValidationError("TOC statusReports must be a list", field="statusReports")
    return tuple(StatusReport.from_dict(r) for r in reports)


def _integrity_error(reason: str) -> Err[MetadataError]:
    return Err(MetadataError(reason, code=MetadataError.INTEGRITY))


@dataclass(frozen=True)
class TrustVerdict:
    """An accepted trust decision.

    ``status`` is the tag of the report that decided it (``None`` for
    bare-statement entries). ``advisory`` carries informational text that
    must not block the ceremony.
    """

    status: str | None = None
    advisory: str | None = None


@dataclass(frozen=True, eq=False)
class MetadataEntry:
    """Immutable metadata statement with an optional catalog (TOC) entry.

    Build instances with :meth:`from_statement`, :meth:`from_toc` or
    :meth:`from_blob`. The documents are copied into read-only containers
    whichever way the entry is built.
    """

    statement: Mapping[str, Any]
    toc_entry: Mapping[str, Any] | None
    status_reports: tuple[StatusReport, ...]
    version: int
    integrity: Result[None, MetadataError]

    def __post_init__(self) -> None:
        object.__setattr__(self, "statement", _freeze(self.statement))
        if self.toc_entry is not None:
            object.__setattr__(self, "toc_entry", _freeze(self.toc_entry))
        object.__setattr__(self, "status_reports", tuple(self.status_reports))

    # -- construction -------------------------------------------------------

    @classmethod
    def from_statement(cls, statement: Mapping[str, Any]) -> MetadataEntry:
        """A statement trusted on its own, without a catalog timeline."""
        statement = _document(statement, "statement")
        return cls(
            statement=statement,
            toc_entry=None,
            status_reports=(),
            version=_schema_version(statement),
            integrity=Ok(None),
        )

    @classmethod
    def from_toc(
        cls,
        toc_entry: Mapping[str, Any],
        statement: Mapping[str, Any],
        error: str | None = None,
    ) -> MetadataEntry:
        """A catalog entry whose statement was already checked upstream."""
        toc_entry = _document(toc_entry, "toc_entry")
        statement = _document(statement, "statement")
        return cls(
            statement=statement,
            toc_entry=toc_entry,
            status_reports=_status_reports(toc_entry),
            version=_schema_version(statement),
            integrity=Ok(None) if error is None else _integrity_error(error),
        )

    @classmethod
    def from_blob(
        cls,
        toc_entry: Mapping[str, Any],
        raw_statement: bytes | str,
        error: str | None = None,
    ) -> MetadataEntry:
        """A catalog entry plus the raw base64 statement it references.

        Unless *error* is given, the SHA-256 of *raw_statement* is compared
        with the TOC entry's URL-safe base64 ``hash``. The digest is checked
        before the blob is decoded: an entry that already failed integrity
        keeps that failure even when the blob no longer decodes, and gets an
        empty statement.
        """
        toc_entry = _document(toc_entry, "toc_entry")
        Invariant.not_none(raw_statement, "raw_statement")
        raw = raw_statement.encode("ascii") if isinstance(raw_statement, str) else bytes(raw_statement)

        if error is not None:
            integrity: Result[None, MetadataError] = _integrity_error(error)
        else:
            integrity = cls._verify_digest(toc_entry, raw)

        try:
            statement = cls._decode_statement(raw)
            version = _schema_version(statement)
        except ValidationError:
            if integrity.is_ok():
                raise
            statement, version = {}, DEFAULT_SCHEMA_VERSION

        return cls(
            statement=statement,
            toc_entry=toc_entry,
            status_reports=_status_reports(toc_entry),
            version=version,
            integrity=integrity,
        )

    @staticmethod
    def _decode_statement(raw: bytes) -> Mapping[str, Any]:
        try:
            statement = json.loads(b64decode(raw))
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(
                "metadata statement blob is not base64 encoded JSON", field="raw_statement", cause=exc
            ) from exc
        if not isinstance(statement, Mapping):
            raise ValidationError("metadata statement must be a JSON object", field="raw_statement")
        return statement

    @staticmethod
    def _verify_digest(toc_entry: Mapping[str, Any], raw: bytes) -> Result[None, MetadataError]:
        reference = toc_entry.get("hash")
        if not isinstance(reference, str) or not reference:
            return _integrity_error(HASH_MISSING)
        try:
            expected = b64url_decode(reference)
        except (binascii.Error, ValueError):
            return _integrity_error(HASH_MISSING)
        if hmac.compare_digest(hashlib.sha256(raw).digest(), expected):
            return Ok(None)
        return _integrity_error(HASH_MISMATCH)

    # -- accessors ----------------------------------------------------------

    @property
    def error(self) -> str | None:
        if self.integrity.is_err():
            return self.integrity.error.reason
        return None

    @property
    def description(self) -> str | None:
        return self.statement.get("description")

    def identifiers(self) -> tuple[str, ...]:
        """AAGUID, AAID and attestation key identifiers naming this model."""
        found: list[str] = []
        for source in (self.statement, self.toc_entry or {}):
            candidates = [source.get("aaguid"), source.get("aaid")]
            key_ids = source.get("attestationCertificateKeyIdentifiers")
            if isinstance(key_ids, tuple):
                candidates.extend(key_ids)
            for value in candidates:
                if isinstance(value, str) and value and value not in found:
                    found.append(value)
        return tuple(found)

    # -- trust decision -----------------------------------------------------

    def evaluate(self, clock: Clock | None = None) -> Result[TrustVerdict, MetadataError]:
        """Decide whether this authenticator model is trusted right now.

        The newest status report already in effect decides; older reports
        are ignored once one applies.
        """
        if self.integrity.is_err():
            return _integrity_error(self.integrity.error.reason)

        if self.toc_entry is None:
            return Ok(TrustVerdict())

        now = (clock or _SYSTEM_CLOCK).now()
        for report in reversed(self.status_reports):
            if not report.is_effective(now):
                continue
            tier = report.tier
            if tier is StatusTier.INVALID:
                return Err(MetadataError(
                    f"Invalid MDS status: {report.status}",
                    code=MetadataError.STATUS_INVALID,
                    detail={"status": report.status, "effective_date": report.effective_date.isoformat()},
                ))
            if tier is StatusTier.INFO:
                _log.info("metadata.update_available", description=self.description, status=report.status)
                return Ok(TrustVerdict(
                    status=report.status,
                    advisory=f"Software Update is available: {self.description}",
                ))
            return Ok(TrustVerdict(status=report.status))

        return Err(MetadataError(NO_APPLICABLE_STATUS, code=MetadataError.STATUS_MISSING))

    def check_valid(self, clock: Clock | None = None) -> TrustVerdict:
        """Like :meth:`evaluate` but raises :class:`MetadataError` on rejection."""
        return self.evaluate(clock).unwrap()

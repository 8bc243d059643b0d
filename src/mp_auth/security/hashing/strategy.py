"""HashingStrategy — algorithm registry, hashing and verification."""
from __future__ import annotations

import hmac
import secrets
from collections.abc import Iterable, Mapping

from mp_auth.config.settings import HashingSettings
from mp_auth.kernel.errors import ValidationError
from mp_auth.observability.logging import AuditLogger, AuditOutcome, get_logger
from mp_auth.security.codec import b64encode_nopad
from mp_auth.security.hashing.algorithm import HashingAlgorithm
from mp_auth.security.hashing.hash_string import HashString
from mp_auth.security.hashing.pbkdf2 import ITERATIONS_PARAM, PBKDF2

__all__ = ["HashingStrategy"]

_log = get_logger(__name__)


class HashingStrategy:
    """Select a :class:`HashingAlgorithm` by id to hash or verify passwords.

    The registry is filled at construction and only read afterwards, so
    one instance can be shared across threads.

    Parameters
    ----------
    algorithms:
        Algorithms to register. Defaults to ``[PBKDF2()]``.
    settings:
        Governs :meth:`create`. Defaults to :class:`HashingSettings`.
    audit:
        Sink for verification outcomes. ``None`` disables auditing.
    """

    def __init__(
        self,
        algorithms: Iterable[HashingAlgorithm] | None = None,
        settings: HashingSettings | None = None,
        audit: AuditLogger | None = None,
    ) -> None:
        self._algorithms: dict[str, HashingAlgorithm] = {}
        for algorithm in algorithms if algorithms is not None else [PBKDF2()]:
            self.put(algorithm)
        self._settings = settings or HashingSettings()
        self._audit = audit

    @classmethod
    def from_settings(cls, settings: HashingSettings, audit: AuditLogger | None = None) -> HashingStrategy:
        strategy = cls(settings=settings, audit=audit)
        strategy.get(settings.algorithm)
        return strategy

    def put(self, algorithm: HashingAlgorithm) -> None:
        self._algorithms[algorithm.id()] = algorithm

    def get(self, id: str) -> HashingAlgorithm:  # noqa: A002
        try:
            return self._algorithms[id]
        except KeyError:
            raise ValidationError(f"{id}: hash algorithm not available", field="id") from None

    def hash(
        self,
        id: str,  # noqa: A002
        params: Mapping[str, str] | None,
        salt: str,
        password: str | bytes,
    ) -> str:
        """Hash *password* and return the full compact hash string."""
        algorithm = self.get(id)
        record = HashString(id=id, params=params, salt=salt)
        return HashString.encode(algorithm, params, salt, algorithm.hash(record, password))

    def create(self, password: str | bytes) -> str:
        """Hash a new password with a fresh random salt and configured cost."""
        settings = self._settings
        salt = b64encode_nopad(secrets.token_bytes(settings.salt_length))
        params = {ITERATIONS_PARAM: str(settings.iterations)}
        return self.hash(settings.algorithm, params, salt, password)

    def verify(self, encoded: str, password: str | bytes) -> bool:
        """Check *password* against a stored compact hash string."""
        record = HashString.parse(encoded)
        algorithm = self.get(record.id)
        if record.hash is None:
            raise ValidationError("hash string has no hash segment", field="hash")

        computed = algorithm.hash(record, password)
        matched = hmac.compare_digest(computed.encode("utf-8"), record.hash.rstrip("=").encode("utf-8"))
        _log.debug("hashing.verified", algorithm=record.id, matched=matched)
        if self._audit is not None:
            self._audit.log_credential_check(
                record.id, AuditOutcome.SUCCESS if matched else AuditOutcome.FAILURE
            )
        return matched

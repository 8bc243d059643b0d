"""MetadataCatalog — the current set of metadata entries, replaced wholesale."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from mp_auth.kernel.errors import MetadataError
from mp_auth.kernel.time import Clock
from mp_auth.observability.logging import AuditLogger, AuditOutcome, get_logger
from mp_auth.security.webauthn.metadata.entry import MetadataEntry, TrustVerdict

__all__ = ["MetadataCatalog"]

_log = get_logger(__name__)


def _key(identifier: str) -> str:
    return identifier.strip().lower()


class MetadataCatalog:
    """Lookup of :class:`MetadataEntry` by authenticator identifier.

    :meth:`publish` builds a complete new index and swaps it in with a
    single assignment; readers see either the old set or the new one.
    """

    def __init__(
        self,
        entries: Iterable[MetadataEntry] = (),
        audit: AuditLogger | None = None,
    ) -> None:
        self._index: Mapping[str, MetadataEntry] = MappingProxyType({})
        self._audit = audit or AuditLogger(service="mp-auth")
        self.publish(entries)

    def publish(self, entries: Iterable[MetadataEntry]) -> int:
        """Replace the whole catalog; returns the number of indexed entries."""
        index: dict[str, MetadataEntry] = {}
        count = 0
        for entry in entries:
            identifiers = entry.identifiers()
            if not identifiers:
                _log.warning("metadata.entry_unidentified", description=entry.description)
                continue
            for identifier in identifiers:
                index[_key(identifier)] = entry
            count += 1
        self._index = MappingProxyType(index)
        _log.info("metadata.catalog_published", entries=count, identifiers=len(index))
        return count

    def get(self, identifier: str) -> MetadataEntry | None:
        return self._index.get(_key(identifier))

    def __len__(self) -> int:
        return len(set(map(id, self._index.values())))

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and _key(identifier) in self._index

    def verify(self, identifier: str, clock: Clock | None = None) -> TrustVerdict:
        """Trust check for a ceremony naming *identifier*; every decision is audited.

        Raises
        ------
        MetadataError
            When the authenticator is unknown or its entry is rejected.
        """
        entry = self.get(identifier)
        if entry is None:
            reason = f"No metadata for authenticator {identifier}"
            self._audit.log_trust_decision(identifier, AuditOutcome.DENIED, reason)
            raise MetadataError(reason, code=MetadataError.NOT_FOUND)

        result = entry.evaluate(clock)
        if result.is_err():
            self._audit.log_trust_decision(
                identifier, AuditOutcome.DENIED, result.error.reason, code=result.error.code
            )
            raise result.error

        verdict = result.value
        self._audit.log_trust_decision(
            identifier, AuditOutcome.SUCCESS, verdict.advisory, status=verdict.status
        )
        return verdict

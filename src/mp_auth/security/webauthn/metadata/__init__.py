"""WebAuthn – authenticator metadata trust."""
from mp_auth.security.webauthn.metadata.catalog import MetadataCatalog
from mp_auth.security.webauthn.metadata.entry import MetadataEntry, TrustVerdict
from mp_auth.security.webauthn.metadata.status import (
    AuthenticatorStatus,
    StatusReport,
    StatusTier,
    classify,
)

__all__ = [
    "AuthenticatorStatus",
    "MetadataCatalog",
    "MetadataEntry",
    "StatusReport",
    "StatusTier",
    "TrustVerdict",
    "classify",
]

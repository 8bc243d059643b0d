"""Security — credential hashing and authenticator trust."""
from mp_auth.security.hashing import HashingStrategy, HashString, PBKDF2
from mp_auth.security.webauthn.metadata import MetadataCatalog, MetadataEntry, TrustVerdict

__all__ = [
    "HashString",
    "HashingStrategy",
    "MetadataCatalog",
    "MetadataEntry",
    "PBKDF2",
    "TrustVerdict",
]

"""
mp_auth – Credential hashing and authenticator trust primitives.

Import path convention::

    from mp_auth.security.hashing import HashingStrategy, PBKDF2
    from mp_auth.security.webauthn.metadata import MetadataEntry, MetadataCatalog
    from mp_auth.kernel.errors import MetadataError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

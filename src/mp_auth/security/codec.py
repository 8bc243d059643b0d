"""Base64 helpers shared by the hashing and metadata code.

Decoders accept input with or without ``=`` padding.
"""
from __future__ import annotations

import base64
import binascii

__all__ = ["b64decode", "b64encode_nopad", "b64url_decode"]


def _pad(data: str | bytes) -> bytes:
    raw = data.encode("ascii") if isinstance(data, str) else data
    raw = raw.strip()
    return raw + b"=" * (-len(raw) % 4)


def b64encode_nopad(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(data: str | bytes) -> bytes:
    """Decode standard base64; raises ``binascii.Error`` on bad input."""
    return base64.b64decode(_pad(data), validate=True)


def b64url_decode(data: str | bytes) -> bytes:
    """Decode URL-safe base64; raises ``binascii.Error`` on bad input."""
    raw = _pad(data)
    if not set(raw) <= _URLSAFE_ALPHABET:
        raise binascii.Error("Non URL-safe base64 character found")
    return base64.urlsafe_b64decode(raw)


_URLSAFE_ALPHABET = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_="
)

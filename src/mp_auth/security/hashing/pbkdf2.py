"""PBKDF2-HMAC-SHA-512 credential hashing (``cryptography``-backed)."""
from __future__ import annotations

import binascii

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from mp_auth.kernel.errors import CryptoProviderError, ValidationError
from mp_auth.observability.logging import get_logger
from mp_auth.security.codec import b64decode, b64encode_nopad
from mp_auth.security.hashing.hash_string import HashString

__all__ = ["PBKDF2"]

_log = get_logger(__name__)

DEFAULT_ITERATIONS = 10000
KEY_LENGTH = 64
MAX_ITERATIONS = 2**31 - 1
ITERATIONS_PARAM = "it"


class PBKDF2:
    """PBKDF2 with HMAC-SHA-512, 512-bit output, unpadded base64 encoding.

    The instance holds no per-call state and is safe to share between
    threads. Construction probes the primitive once so a broken crypto
    backend fails at startup rather than on the first login.
    """

    _PARAMS = frozenset({ITERATIONS_PARAM})

    def __init__(self) -> None:
        self._prf = hashes.SHA512()
        try:
            PBKDF2HMAC(algorithm=self._prf, length=KEY_LENGTH, salt=b"\x00" * 16, iterations=1)
        except UnsupportedAlgorithm as exc:
            raise CryptoProviderError("PBKDF2WithHmacSHA512", cause=exc) from exc

    def id(self) -> str:
        return "pbkdf2"

    def params(self) -> frozenset[str]:
        return self._PARAMS

    def hash(self, hash_string: HashString, password: str | bytes) -> str:
        iterations = self._iterations(hash_string)

        if hash_string.salt is None:
            raise ValidationError("hash string salt is missing", field="salt")
        try:
            salt = b64decode(hash_string.salt)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError("hash string salt is not valid base64", field="salt", cause=exc) from exc

        secret = password.encode("utf-8") if isinstance(password, str) else password
        try:
            kdf = PBKDF2HMAC(algorithm=self._prf, length=KEY_LENGTH, salt=salt, iterations=iterations)
            return b64encode_nopad(kdf.derive(secret))
        except UnsupportedAlgorithm as exc:
            raise CryptoProviderError("PBKDF2WithHmacSHA512", "PBKDF2 derivation failed", cause=exc) from exc

    @staticmethod
    def _iterations(hash_string: HashString) -> int:
        """Resolve the ``it`` param, falling back to the default.

        A fallback on a record that did carry ``it`` means the stored hash
        was probably made with a different count, so it is logged.
        """
        if hash_string.params is None or ITERATIONS_PARAM not in hash_string.params:
            return DEFAULT_ITERATIONS
        raw = hash_string.params[ITERATIONS_PARAM]
        # ASCII decimal with an optional sign; int() alone also takes "1_000" and non-ASCII digits
        digits = raw[1:] if isinstance(raw, str) and raw[:1] in ("+", "-") else raw
        if isinstance(digits, str) and digits.isascii() and digits.isdigit():
            iterations = int(raw)
        else:
            iterations = 0
        if not 1 <= iterations <= MAX_ITERATIONS:
            _log.warning(
                "pbkdf2.iterations_fallback",
                algorithm="pbkdf2",
                value=raw,
                default=DEFAULT_ITERATIONS,
            )
            return DEFAULT_ITERATIONS
        return iterations

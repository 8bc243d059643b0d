"""Config settings – Settings base class and the hashing settings."""
from __future__ import annotations

import dataclasses

from mp_auth.config.validation.errors import InvalidSettingValueError

MIN_SALT_LENGTH = 16


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class HashingSettings(Settings):
    """How new credential hashes are produced.

    Existing records always carry their own algorithm id and parameters;
    these values only apply to :meth:`HashingStrategy.create`.
    """

    _prefix: dataclasses.ClassVar[str] = "MP_AUTH"

    algorithm: str = "pbkdf2"
    iterations: int = 10000
    salt_length: int = 32

    def _validate(self) -> None:
        if not self.algorithm:
            raise InvalidSettingValueError("algorithm", self.algorithm, "must not be empty")
        if self.iterations < 1:
            raise InvalidSettingValueError("iterations", self.iterations, "must be >= 1")
        if self.salt_length < MIN_SALT_LENGTH:
            raise InvalidSettingValueError(
                "salt_length", self.salt_length, f"must be >= {MIN_SALT_LENGTH} bytes"
            )


__all__ = ["HashingSettings", "Settings"]

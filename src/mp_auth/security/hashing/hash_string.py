"""Compact persisted-hash representation.

Format::

    $<id>$<key>=<value>,...$<salt>$<hash>

The leading ``$`` is optional on input. Shorter forms drop segments from
the left of ``salt``: ``$id$salt$hash``, ``$id$hash`` and ``$id``.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from mp_auth.kernel.errors import ValidationError

if TYPE_CHECKING:
    from mp_auth.security.hashing.algorithm import HashingAlgorithm

__all__ = ["HashString"]

_SEP = "$"


def _parse_params(segment: str) -> Mapping[str, str]:
    params: dict[str, str] = {}
    for pair in segment.split(","):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        params[key.strip()] = value.strip()
    return MappingProxyType(params)


@dataclass(frozen=True)
class HashString:
    """A persisted credential hash record.

    ``params`` is ``None`` when the record carries no parameter segment at
    all, which algorithms treat the same as an empty one.
    """

    id: str
    params: Mapping[str, str] | None = None
    salt: str | None = field(default=None, repr=False)
    hash: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.params is not None:
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @classmethod
    def parse(cls, encoded: str) -> HashString:
        if not encoded or encoded == _SEP:
            raise ValidationError("Not a valid hash string", field="hash_string")
        body = encoded[1:] if encoded.startswith(_SEP) else encoded
        parts = body.split(_SEP)
        if not parts[0]:
            raise ValidationError("Hash string has no algorithm id", field="hash_string")

        match len(parts):
            case 1:
                return cls(id=parts[0])
            case 2:
                return cls(id=parts[0], hash=parts[1])
            case 3:
                return cls(id=parts[0], salt=parts[1], hash=parts[2])
            case 4:
                return cls(
                    id=parts[0],
                    params=_parse_params(parts[1]),
                    salt=parts[2],
                    hash=parts[3],
                )
            case _:
                raise ValidationError(
                    f"Not a valid hash string: expected at most 4 segments, got {len(parts)}",
                    field="hash_string",
                )

    @staticmethod
    def encode(
        algorithm: HashingAlgorithm,
        params: Mapping[str, str] | None,
        salt: str | None,
        hash: str | None,  # noqa: A002
    ) -> str:
        """Render a record, keeping only the params *algorithm* advertises."""
        if params is not None and salt is None:
            # "$id$params$hash" would parse back with the params as the salt
            raise ValidationError("Hash string with params must carry a salt", field="salt")
        out = [_SEP, algorithm.id(), _SEP]
        if params is not None:
            # frozenset has no order; sort so output is stable
            recognized = [k for k in sorted(algorithm.params()) if k in params]
            out.append(",".join(f"{k}={params[k]}" for k in recognized))
            out.append(_SEP)
        if salt is not None:
            out.append(salt)
            out.append(_SEP)
        if hash is not None:
            out.append(hash)
        return "".join(out)

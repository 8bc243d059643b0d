"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_auth.kernel.ddd import Invariant
from mp_auth.kernel.errors import (
    BaseError,
    CryptoProviderError,
    DomainError,
    InfrastructureError,
    InvariantViolationError,
    MetadataError,
    ValidationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r and "hello" in r


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (InvariantViolationError, DomainError),
            (ValidationError, DomainError),
            (MetadataError, DomainError),
            (CryptoProviderError, InfrastructureError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)
        assert issubclass(cls, BaseError)

    def test_validation_error_field_in_dict(self) -> None:
        err = ValidationError("bad salt", field="salt")
        assert err.to_dict()["field"] == "salt"

    def test_validation_error_without_field(self) -> None:
        assert "field" not in ValidationError("bad").to_dict()

    def test_metadata_error_reason_is_message(self) -> None:
        err = MetadataError("Invalid MDS status: REVOKED", code=MetadataError.STATUS_INVALID)
        assert err.reason == "Invalid MDS status: REVOKED"
        assert err.code == "metadata_status_invalid"

    def test_crypto_provider_error_default_message(self) -> None:
        err = CryptoProviderError("PBKDF2WithHmacSHA512")
        assert err.message == "PBKDF2WithHmacSHA512 is not available"
        assert err.primitive == "PBKDF2WithHmacSHA512"


class TestInvariant:
    def test_require_passes(self) -> None:
        Invariant.require(True, "never raised")

    def test_require_raises(self) -> None:
        with pytest.raises(InvariantViolationError, match="broken"):
            Invariant.require(False, "broken")

    def test_not_none_returns_value(self) -> None:
        doc = {"a": 1}
        assert Invariant.not_none(doc, "doc") is doc

    def test_not_none_raises_with_name(self) -> None:
        with pytest.raises(InvariantViolationError, match="statement cannot be None"):
            Invariant.not_none(None, "statement")

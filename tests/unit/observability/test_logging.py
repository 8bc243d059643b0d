"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from mp_auth.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    AuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_password_and_salt(self) -> None:
        result = SensitiveFieldsFilter().redact({"password": "s3cr3t", "salt": "abc", "id": "pbkdf2"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["salt"] == SensitiveFieldsFilter.REDACTED
        assert result["id"] == "pbkdf2"

    def test_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"PASSWORD": "x"})["PASSWORD"] == "[REDACTED]"

    def test_redact_deep(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"record": {"hash": "abc", "id": "pbkdf2"}})
        assert result["record"]["hash"] == "[REDACTED]"
        assert result["record"]["id"] == "pbkdf2"

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"pin"}))
        assert f.redact({"pin": "1234", "password": "x"}) == {"pin": "[REDACTED]", "password": "x"}

    def test_defaults_cover_plaintext(self) -> None:
        assert {"password", "plaintext", "salt"} <= DEFAULT_SENSITIVE_FIELDS

    def test_is_a_structlog_processor(self) -> None:
        out = SensitiveFieldsFilter()(None, "info", {"event": "login", "password": "x"})
        assert out == {"event": "login", "password": "[REDACTED]"}


# ---------------------------------------------------------------------------
# JsonLoggerFactory / get_logger
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_emits_redacted_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO, cache_logger_on_first_use=False)
        get_logger("mp_auth.test").info("login.attempt", password="hunter2", user="alice")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "login.attempt"
        assert payload["password"] == "[REDACTED]"
        assert payload["user"] == "alice"
        assert payload["level"] == "info"

    def test_level_applied_to_root(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING, cache_logger_on_first_use=False)
        assert logging.getLogger().level == logging.WARNING


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", component="hashing").info("ready")
        assert logs == [{"event": "ready", "log_level": "info", "component": "hashing"}]


# ---------------------------------------------------------------------------
# AuditLogger
# ---------------------------------------------------------------------------


class TestAuditLogger:
    def test_trust_decision_denied(self) -> None:
        with capture_logs() as logs:
            AuditLogger(service="auth").log_trust_decision(
                "aaguid-1", AuditOutcome.DENIED, "Invalid MDS status: REVOKED"
            )
        (entry,) = logs
        assert entry["event"] == "audit.authenticator_trust"
        assert entry["log_level"] == "warning"
        assert entry["outcome"] == "denied"
        assert entry["reason"] == "Invalid MDS status: REVOKED"
        assert entry["service"] == "auth"
        assert "timestamp" in entry

    def test_trust_decision_without_reason(self) -> None:
        with capture_logs() as logs:
            AuditLogger().log_trust_decision("aaguid-1", "success")
        assert "reason" not in logs[0]
        assert logs[0]["outcome"] == "success"

    def test_credential_check(self) -> None:
        with capture_logs() as logs:
            AuditLogger().log_credential_check("pbkdf2", AuditOutcome.FAILURE)
        assert logs[0]["event"] == "audit.credential_check"
        assert logs[0]["algorithm"] == "pbkdf2"
        assert logs[0]["outcome"] == "failure"

    def test_custom_logger(self) -> None:
        with capture_logs() as logs:
            AuditLogger(logger=structlog.get_logger("custom")).log_credential_check("pbkdf2", "success")
        assert len(logs) == 1

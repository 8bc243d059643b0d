"""Unit tests for config settings & validation."""

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

import pytest

from mp_auth.config import (
    ConfigError,
    EnvSettingsLoader,
    HashingSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    endpoint: str
    retries: int = 3
    strict: bool = False
    origins: list[str] = dataclasses.field(default_factory=list)


_HASHING_KEYS = ("MP_AUTH_ALGORITHM", "MP_AUTH_ITERATIONS", "MP_AUTH_SALT_LENGTH")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in _HASHING_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# HashingSettings
# ---------------------------------------------------------------------------


class TestHashingSettings:
    def test_defaults(self) -> None:
        s = HashingSettings()
        assert s.algorithm == "pbkdf2"
        assert s.iterations == 10000
        assert s.salt_length == 32

    def test_zero_iterations_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            HashingSettings(iterations=0)
        assert exc_info.value.setting_name == "iterations"

    def test_short_salt_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HashingSettings(salt_length=8)

    def test_empty_algorithm_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HashingSettings(algorithm="")

    def test_invalid_setting_is_config_error(self) -> None:
        assert issubclass(InvalidSettingValueError, ConfigError)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self, clean_env: pytest.MonkeyPatch) -> None:
        s = EnvSettingsLoader().load(HashingSettings)
        assert s == HashingSettings()

    def test_loads_int(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MP_AUTH_ITERATIONS", "120000")
        assert EnvSettingsLoader().load(HashingSettings).iterations == 120000

    def test_loads_string(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MP_AUTH_ALGORITHM", "custom")
        assert EnvSettingsLoader().load(HashingSettings).algorithm == "custom"

    def test_non_numeric_int_raises(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MP_AUTH_ITERATIONS", "lots")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(HashingSettings)
        assert exc_info.value.setting_name == "MP_AUTH_ITERATIONS"

    def test_validation_failure_propagates(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MP_AUTH_SALT_LENGTH", "4")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(HashingSettings)

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_ENDPOINT", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_ENDPOINT"

    def test_bool_and_list_coercion(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_ENDPOINT", "https://mds.example")
        monkeypatch.setenv("REQ_STRICT", "yes")
        monkeypatch.setenv("REQ_ORIGINS", "a.example, b.example,")
        s = EnvSettingsLoader().load(RequiredSettings)
        assert s.strict is True
        assert s.origins == ["a.example", "b.example"]

"""Tests for CoerceSettings — env vars and keyword overrides."""

import pytest
from pydantic import ValidationError

from attrcoerce.config.settings import CoerceSettings

_ENV_VARS = (
    "ATTRCOERCE_VERBOSE",
    "ATTRCOERCE_LOG_JSON",
    "ATTRCOERCE_COERCION",
    "ATTRCOERCE_COERCION__METHOD_PREFIX",
    "ATTRCOERCE_COERCION__LOG_PASSTHROUGH",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestCoerceSettingsDefaults:
    def test_all_defaults(self) -> None:
        settings = CoerceSettings.load()
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.coercion.method_prefix == "to_"
        assert settings.coercion.log_passthrough is True

    def test_frozen(self) -> None:
        settings = CoerceSettings.load()
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestEnvSource:
    def test_top_level_flags(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATTRCOERCE_VERBOSE", "true")
        monkeypatch.setenv("ATTRCOERCE_LOG_JSON", "1")
        settings = CoerceSettings.load()
        assert settings.verbose is True
        assert settings.log_json is True

    def test_nested_coercion_section(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATTRCOERCE_COERCION__METHOD_PREFIX", "as_")
        settings = CoerceSettings.load()
        assert settings.coercion.method_prefix == "as_"
        assert settings.coercion.log_passthrough is True  # default preserved

    def test_overrides_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATTRCOERCE_VERBOSE", "true")
        settings = CoerceSettings.load(verbose=False)
        assert settings.verbose is False

"""Tests for the error hierarchy and environment configuration."""

import pytest

from atomring.config import env_flag, get_config
from atomring.errors import (
    AtomRingError,
    CatalogError,
    ConfigurationError,
    FieldIndexError,
    InvalidArgumentError,
    InvalidStateError,
)


class TestErrors:
    """Tests for codes, context and builtin compatibility."""

    def test_str_without_context(self) -> None:
        assert str(InvalidStateError("nope")) == "[INVALID_STATE] nope"

    def test_str_with_context(self) -> None:
        error = FieldIndexError("index 9 out of range", index=9, bounds="[0, 3]")
        assert str(error) == "[INDEX_OUT_OF_RANGE] index 9 out of range (index=9, bounds=[0, 3])"
        assert error.index == 9

    def test_to_dict(self) -> None:
        error = CatalogError("too big", atomic_number=200)
        assert error.to_dict() == {
            "code": "CATALOG_ERROR",
            "message": "too big",
            "context": {"atomic_number": 200},
        }

    def test_code_override(self) -> None:
        assert AtomRingError("x", code="CUSTOM").code == "CUSTOM"

    @pytest.mark.parametrize(
        "error, builtin",
        [
            (InvalidArgumentError("x"), ValueError),
            (FieldIndexError("x"), IndexError),
            (InvalidStateError("x"), RuntimeError),
            (CatalogError("x"), IndexError),
        ],
    )
    def test_builtin_bases(self, error, builtin) -> None:
        assert isinstance(error, builtin)
        assert isinstance(error, AtomRingError)


class TestConfig:
    """Tests for environment parsing."""

    def test_defaults(self, monkeypatch, reset_caches) -> None:
        for name in (
            "ATOMRING_PERIODIC_TABLE_PATH",
            "ATOMRING_DEBUG_ENGINE",
            "ATOMRING_LOG_LEVEL",
            "ATOMRING_MAX_ACTIONS",
            "CORS_ORIGINS",
            "PORT",
        ):
            monkeypatch.delenv(name, raising=False)

        config = get_config()
        assert config.periodic_table_path is None
        assert config.debug_engine is False
        assert config.log_level == "INFO"
        assert config.max_actions == 256
        assert config.cors_origins == ("*",)
        assert config.port == 8010

    def test_overrides(self, monkeypatch, reset_caches) -> None:
        monkeypatch.setenv("ATOMRING_DEBUG_ENGINE", "yes")
        monkeypatch.setenv("ATOMRING_LOG_LEVEL", "debug")
        monkeypatch.setenv("ATOMRING_MAX_ACTIONS", "8")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

        config = get_config()
        assert config.debug_engine is True
        assert config.log_level == "DEBUG"
        assert config.max_actions == 8
        assert config.cors_origins == ("http://a.test", "http://b.test")

    def test_config_is_cached(self, reset_caches) -> None:
        assert get_config() is get_config()

    def test_bad_integer(self, monkeypatch, reset_caches) -> None:
        monkeypatch.setenv("ATOMRING_MAX_ACTIONS", "lots")
        with pytest.raises(ConfigurationError) as excinfo:
            get_config()
        assert excinfo.value.context["variable"] == "ATOMRING_MAX_ACTIONS"

    def test_non_positive_max_actions(self, monkeypatch, reset_caches) -> None:
        monkeypatch.setenv("ATOMRING_MAX_ACTIONS", "0")
        with pytest.raises(ConfigurationError):
            get_config()

    @pytest.mark.parametrize("value, expected", [("1", True), ("ON", True), ("0", False), ("nope", False)])
    def test_env_flag(self, monkeypatch, value, expected) -> None:
        monkeypatch.setenv("ATOMRING_TEST_FLAG", value)
        assert env_flag("ATOMRING_TEST_FLAG") is expected

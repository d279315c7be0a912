"""
Tests for Settings and ConfigValidator.
"""
import pytest

from iconseek.core.exceptions import ConfigurationError
from iconseek.core.settings import ConfigValidator, Settings


@pytest.fixture
def write_config(isolated_config):
    def _write(text):
        path = isolated_config / ".iconseek"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


class TestSettingsLoading:
    def test_defaults_without_file(self):
        settings = Settings()

        assert settings.get("version") == "1.0"
        assert settings.get("search.max_results") == 50
        assert settings.get("search.include_hidden") is False
        assert settings.get("logging.level") == "WARNING"
        assert settings.get("logging.file") is None

    def test_file_is_deep_merged(self, write_config):
        write_config("search:\n  max_results: 5\nlogging:\n  level: INFO\n")

        settings = Settings()

        assert settings.get("search.max_results") == 5
        assert settings.get("search.include_hidden") is False
        assert settings.get("logging.level") == "INFO"
        assert settings.get("logging.rotation_size_mb") == 10

    def test_empty_file_uses_defaults(self, write_config):
        write_config("")

        assert Settings().get("search.max_results") == 50

    def test_env_overrides_file(self, write_config, monkeypatch):
        write_config("search:\n  max_results: 5\n")
        monkeypatch.setenv("ICONSEEK_MAX_RESULTS", "7")
        monkeypatch.setenv("ICONSEEK_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.get("search.max_results") == 7
        assert settings.get("logging.level") == "DEBUG"

    def test_invalid_section_replaced_with_default(self, write_config):
        write_config("search: 5\n")

        settings = Settings()

        assert settings.get("search.max_results") == 50

    def test_invalid_yaml(self, write_config):
        write_config("search: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            Settings()

        assert exc_info.value.cause is not None

    def test_file_must_be_mapping(self, write_config):
        write_config("- just\n- a list\n")

        with pytest.raises(ConfigurationError):
            Settings()


class TestSettingsAccess:
    def test_get_missing_returns_default(self):
        settings = Settings()

        assert settings.get("search.nothing", "fallback") == "fallback"
        assert settings.get("nothing") is None

    def test_get_through_non_mapping(self):
        assert Settings().get("version.major", "x") == "x"

    def test_require(self):
        settings = Settings()

        assert settings.require("search.max_results") == 50
        with pytest.raises(ConfigurationError):
            settings.require("search.missing")


class TestConfigValidator:
    @pytest.fixture
    def config(self):
        return Settings()._get_default_config()

    def test_defaults_are_valid(self, config):
        ConfigValidator().validate_config(config)

    def test_unknown_log_level(self, config):
        config["logging"]["level"] = "LOUD"

        with pytest.raises(ConfigurationError):
            ConfigValidator().validate_config(config)

    def test_log_level_case_insensitive(self, config):
        config["logging"]["level"] = "info"

        ConfigValidator().validate_config(config)

    @pytest.mark.parametrize("value", [0, -3, "10", True, 2.5, None])
    def test_invalid_max_results(self, config, value):
        config["search"]["max_results"] = value

        with pytest.raises(ConfigurationError):
            ConfigValidator().validate_config(config)

    def test_invalid_include_hidden(self, config):
        config["search"]["include_hidden"] = "yes"

        with pytest.raises(ConfigurationError):
            ConfigValidator().validate_config(config)

    def test_invalid_rotation(self, config):
        config["logging"]["rotation_size_mb"] = 0

        with pytest.raises(ConfigurationError):
            ConfigValidator().validate_config(config)

    def test_non_numeric_env_value_rejected(self, monkeypatch):
        monkeypatch.setenv("ICONSEEK_MAX_RESULTS", "many")

        with pytest.raises(ConfigurationError):
            Settings()

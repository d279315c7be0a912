"""
Configuration for iconseek.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, cast

from iconseek.core.exceptions import ConfigurationError
from iconseek.core.logging import logger, LOG_LEVELS

CONFIG_FILE_NAME = ".iconseek"


class ConfigValidator:
    """
    Configuration validator with rules.

    Validations:
    1. Log level is one loguru knows
    2. Result limit is a positive integer
    3. Flags are booleans
    """

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate complete configuration.

        Raises:
            ConfigurationError: On the first invalid value found
        """
        logging_config = config.get("logging", {})
        level = str(logging_config.get("level", "")).upper()
        if level not in LOG_LEVELS:
            logger.error("Invalid log level", level=logging_config.get("level"))
            raise ConfigurationError(
                f"Invalid log level: {logging_config.get('level')}",
                context={"allowed": list(LOG_LEVELS)},
            )

        rotation = logging_config.get("rotation_size_mb", 10)
        if isinstance(rotation, bool) or not isinstance(rotation, int) or rotation < 1:
            raise ConfigurationError(f"Invalid logging.rotation_size_mb: {rotation}")

        search = config.get("search", {})
        max_results = search.get("max_results")
        # bool is an int subclass; reject it explicitly
        if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
            logger.error("Invalid max_results", max_results=max_results)
            raise ConfigurationError(f"Invalid search.max_results: {max_results}")

        if not isinstance(search.get("include_hidden", False), bool):
            raise ConfigurationError(
                f"Invalid search.include_hidden: {search.get('include_hidden')}"
            )


class Settings:
    """
    Main system configuration.

    Resolution order:
    1. Default values
    2. .iconseek file in the working directory
    3. Environment variables
    """

    def __init__(self) -> None:
        self.config = self._load_config()
        self._validate_config()  # Fill missing sections
        self.validator = ConfigValidator()
        self.validator.validate_config(self.config)
        logger.debug(
            "Settings initialized",
            config_source=CONFIG_FILE_NAME if self._find_config_file() else "defaults",
        )

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration.

        Returns:
            Dict[str, Any]: Default configuration
        """
        return {
            "version": "1.0",
            "logging": {
                "level": "WARNING",
                "file": None,
                "rotation_size_mb": 10,
                "debug_mode": False,
            },
            "search": {
                "max_results": 50,
                "include_hidden": False,
            },
        }

    def _find_config_file(self) -> Path | None:
        """Find the .iconseek file in the current directory."""
        local_config = Path.cwd() / CONFIG_FILE_NAME
        if local_config.is_file():
            return local_config
        return None

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration in priority order.

        1. Defaults
        2. .iconseek file
        3. Environment variables
        """
        defaults = self._get_default_config()

        config_path = self._find_config_file()
        if config_path is not None:
            try:
                with open(config_path, encoding="utf-8") as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.error(
                    "Error reading configuration file", file=str(config_path), error=str(e)
                )
                raise ConfigurationError(
                    f"Error reading configuration file: {e}",
                    context={"file": str(config_path)},
                    cause=e,
                )

            if file_config:
                if not isinstance(file_config, dict):
                    raise ConfigurationError(
                        "Configuration file must contain a mapping",
                        context={"file": str(config_path)},
                    )
                self._deep_merge(defaults, file_config)
                logger.debug("Config loaded from file", keys=list(file_config.keys()))

        env_overrides = {
            "ICONSEEK_LOG_LEVEL": ("logging", "level"),
            "ICONSEEK_LOG_FILE": ("logging", "file"),
            "ICONSEEK_MAX_RESULTS": ("search", "max_results"),
        }

        for env_key, path_tuple in env_overrides.items():
            env_value = os.getenv(env_key)
            if env_value:
                value_to_set: Any = env_value
                if env_key == "ICONSEEK_MAX_RESULTS":
                    try:
                        value_to_set = int(env_value)
                    except ValueError:
                        pass  # The validator rejects the raw string
                self._set_nested(defaults, path_tuple, value_to_set)

        return defaults

    def _deep_merge(self, base: Dict[str, Any], update: Dict[str, Any]) -> None:
        """Deep merge of dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(cast(Dict[str, Any], base[key]), cast(Dict[str, Any], value))
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], path: tuple[str, ...], value: Any) -> None:
        """Set value at nested path."""
        current = data
        for key in path[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]
        current[path[-1]] = value

    def _validate_config(self) -> None:
        """Make sure every required section exists and is a mapping."""
        required_sections = ["version", "logging", "search"]
        defaults = self._get_default_config()

        missing_sections = []
        for section in required_sections:
            value = self.config.get(section)
            expects_mapping = isinstance(defaults[section], dict)
            if value is None or (expects_mapping and not isinstance(value, dict)):
                missing_sections.append(section)

        if missing_sections:
            logger.warning(
                "Configuration missing required sections, using defaults",
                missing=missing_sections,
            )
            for section in missing_sections:
                self.config[section] = defaults[section]

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with support for dotted paths ("search.max_results")."""
        if "." in key:
            parts = key.split(".")
            current = self.config
            for part in parts:
                if isinstance(current, dict) and part in current:
                    current = current[part]
                else:
                    return default
            return current
        return self.config.get(key, default)

    def require(self, key: str) -> Any:
        """
        Get required value or raise exception.

        Useful for settings that must exist.
        """
        value = self.get(key)
        if value is None:
            logger.error("Required config missing", key=key)
            raise ConfigurationError(f"Missing required config: {key}")
        return value

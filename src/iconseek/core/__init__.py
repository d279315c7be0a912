"""
iconseek core module.

Exports configuration, exceptions and logging.
"""

# Configuration
from iconseek.core.settings import Settings, ConfigValidator

# Exceptions
from iconseek.core.exceptions import (
    IconseekError,
    ConfigurationError,
    ValidationError,
    NotFoundError,
    CatalogReadError,
)

# Logging
from iconseek.core.logging import (
    AsyncLogger,
    PerformanceLogger,
    logger,  # Pre-configured global logger
)

__all__ = [
    # Configuration
    "Settings",
    "ConfigValidator",
    # Exceptions
    "IconseekError",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "CatalogReadError",
    # Logging
    "AsyncLogger",
    "PerformanceLogger",
    "logger",
]

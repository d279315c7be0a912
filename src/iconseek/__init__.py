"""
iconseek - fuzzy search for icon catalogs.

Synonym-aware fuzzy ranking of icon names and icon collections.
"""

from iconseek._version import __version__, __version_info__

__author__ = "iconseek contributors"
__license__ = "MIT"

# Core components
from iconseek.core import (
    logger,
    Settings,
    IconseekError,
    ConfigurationError,
    ValidationError,
    NotFoundError,
    CatalogReadError,
)

# Search engine
from iconseek.search import (
    ALIAS_GROUPS,
    RankedResult,
    expand_aliases,
    expand_query,
    fuzzy_score,
    fuzzy_score_multi,
    rank_collections,
    rank_icons,
    search_collections,
    search_icons,
)

# Models
from iconseek.models import (
    Author,
    License,
    CollectionInfo,
    CollectionResponse,
    IconifyResponse,
    ResolvedIcon,
)

# Catalog files
from iconseek.catalog import load_collection, load_collection_icons, load_collections

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",
    # Core
    "logger",
    "Settings",
    # Exceptions
    "IconseekError",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "CatalogReadError",
    # Search
    "ALIAS_GROUPS",
    "RankedResult",
    "expand_aliases",
    "expand_query",
    "fuzzy_score",
    "fuzzy_score_multi",
    "rank_collections",
    "rank_icons",
    "search_collections",
    "search_icons",
    # Models
    "Author",
    "License",
    "CollectionInfo",
    "CollectionResponse",
    "IconifyResponse",
    "ResolvedIcon",
    # Catalog files
    "load_collection",
    "load_collection_icons",
    "load_collections",
]


def get_config():
    """
    Get the current iconseek configuration.

    Example:
        >>> config = get_config()
        >>> config.get("search.max_results")
        50

    Returns:
        Settings: Configuration instance
    """
    return Settings()

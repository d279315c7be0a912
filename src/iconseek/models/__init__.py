"""
iconseek data models.
"""

from iconseek.models.base import IconseekBaseModel
from iconseek.models.catalog import (
    Author,
    License,
    CollectionInfoRaw,
    CollectionInfo,
    CollectionResponse,
    IconData,
    IconifyResponse,
    ResolvedIcon,
)

__all__ = [
    "IconseekBaseModel",
    "Author",
    "License",
    "CollectionInfoRaw",
    "CollectionInfo",
    "CollectionResponse",
    "IconData",
    "IconifyResponse",
    "ResolvedIcon",
]

"""
Catalog models for Iconify icon sets.

Raw models mirror the JSON the Iconify API returns; ``CollectionInfo``
and ``ResolvedIcon`` are the processed forms the UI and the search
engine work with.
"""

from typing import Dict, List, Optional, Union

from pydantic import Field

from iconseek.models.base import IconseekBaseModel

DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_ICON_SIZE = 24


class Author(IconseekBaseModel):
    """Icon set author."""

    name: str
    url: Optional[str] = None


class License(IconseekBaseModel):
    """Icon set license."""

    title: str
    url: Optional[str] = None
    spdx: Optional[str] = None


class CollectionInfoRaw(IconseekBaseModel):
    """One entry of the ``/collections`` response, keyed by prefix there."""

    name: str
    total: Optional[int] = None
    author: Optional[Author] = None
    license: Optional[License] = None
    samples: Optional[List[str]] = None
    category: Optional[str] = None
    palette: Optional[bool] = None
    hidden: Optional[bool] = None
    # Either a single grid height or several
    height: Optional[Union[int, List[int]]] = None


class CollectionInfo(IconseekBaseModel):
    """
    Processed collection info.

    ``name``, ``id`` and ``category`` are the fields collection search
    matches against.
    """

    id: str
    name: str
    total: int = 0
    author: Optional[Author] = None
    license: Optional[License] = None
    samples: List[str] = Field(default_factory=list)
    category: str = DEFAULT_CATEGORY
    palette: bool = False
    hidden: bool = False

    @classmethod
    def from_raw(cls, id: str, raw: CollectionInfoRaw) -> "CollectionInfo":
        """Build from a raw API entry, filling in defaults for missing values."""
        return cls(
            id=id,
            name=raw.name,
            total=raw.total if raw.total is not None else 0,
            author=raw.author,
            license=raw.license,
            samples=raw.samples or [],
            category=raw.category or DEFAULT_CATEGORY,
            palette=bool(raw.palette),
            hidden=bool(raw.hidden),
        )


class CollectionResponse(IconseekBaseModel):
    """Response of ``/collection?prefix={prefix}``: the icon names of one set."""

    prefix: str
    total: int
    title: Optional[str] = None
    uncategorized: List[str] = Field(default_factory=list)
    categories: Dict[str, List[str]] = Field(default_factory=dict)
    hidden: List[str] = Field(default_factory=list)
    aliases: Dict[str, str] = Field(default_factory=dict)

    def all_icon_names(self) -> List[str]:
        """Visible icon names (uncategorized and categorized), deduplicated and sorted."""
        names = set(self.uncategorized)
        for icons in self.categories.values():
            names.update(icons)
        return sorted(names)


class IconData(IconseekBaseModel):
    """SVG body of a single icon, with optional own dimensions."""

    body: str
    width: Optional[int] = None
    height: Optional[int] = None


class IconifyResponse(IconseekBaseModel):
    """Response of ``/{prefix}.json?icons=...``: icon bodies of one set."""

    prefix: str
    icons: Dict[str, IconData]
    width: Optional[int] = None
    height: Optional[int] = None
    categories: Optional[Dict[str, List[str]]] = None


class ResolvedIcon(IconseekBaseModel):
    """An icon with every field filled in, ready to render."""

    prefix: str
    name: str
    body: str
    width: int
    height: int

    @classmethod
    def from_response(cls, resp: IconifyResponse, name: str) -> Optional["ResolvedIcon"]:
        """
        Resolve ``name`` from an icon set response.

        Dimensions fall back from the icon to the set, then to 24.
        Returns None when the set has no such icon.
        """
        data = resp.icons.get(name)
        if data is None:
            return None

        width = data.width if data.width is not None else resp.width
        height = data.height if data.height is not None else resp.height
        return cls(
            prefix=resp.prefix,
            name=name,
            body=data.body,
            width=width if width is not None else DEFAULT_ICON_SIZE,
            height=height if height is not None else DEFAULT_ICON_SIZE,
        )

"""
Loading of locally saved Iconify catalog payloads.

Fetching from the API is left to the caller; these helpers turn the
saved JSON into the lists the search functions take.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError as PydanticValidationError

from iconseek.core.exceptions import CatalogReadError, NotFoundError, ValidationError
from iconseek.core.logging import logger
from iconseek.models.catalog import CollectionInfo, CollectionInfoRaw, CollectionResponse

PathLike = Union[str, Path]


def _read_json(path: PathLike) -> Any:
    """Read a JSON file, mapping failures to iconseek errors."""
    file_path = Path(path)
    if not file_path.is_file():
        error = NotFoundError(
            f"Catalog file not found: {file_path}", context={"path": str(file_path)}
        )
        error.add_suggestion("Save the Iconify API response to a local JSON file first")
        raise error

    try:
        with open(file_path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Invalid catalog JSON", path=str(file_path), error=str(e))
        raise ValidationError(
            f"Invalid JSON in {file_path}: {e}", context={"path": str(file_path)}, cause=e
        )
    except OSError as e:
        logger.error("Cannot read catalog file", path=str(file_path), error=str(e))
        error = CatalogReadError(
            f"Cannot read catalog file {file_path}: {e}",
            context={"path": str(file_path)},
            cause=e,
        )
        error.add_suggestion("Check that the file is readable by the current user")
        raise error


def load_collections(path: PathLike, include_hidden: bool = False) -> List[CollectionInfo]:
    """
    Load a ``/collections`` payload (``{prefix: info}``).

    Args:
        path: JSON file
        include_hidden: Keep collections flagged as hidden

    Returns:
        CollectionInfo records in file order
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ValidationError(
            "Collections payload must be an object keyed by prefix",
            context={"path": str(path), "type": type(data).__name__},
        )

    collections: List[CollectionInfo] = []
    for prefix, raw_entry in data.items():
        try:
            raw = CollectionInfoRaw.model_validate(raw_entry)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid collection entry '{prefix}'",
                context={"path": str(path), "prefix": prefix, "errors": e.errors()},
                cause=e,
            )
        info = CollectionInfo.from_raw(prefix, raw)
        if info.hidden and not include_hidden:
            continue
        collections.append(info)

    logger.debug(
        "Collections loaded", path=str(path), count=len(collections), total=len(data)
    )
    return collections


def load_collection(path: PathLike) -> CollectionResponse:
    """Load a ``/collection?prefix=`` payload."""
    data: Dict[str, Any] = _read_json(path)
    try:
        response = CollectionResponse.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid collection payload",
            context={"path": str(path), "errors": e.errors()},
            cause=e,
        )

    logger.debug("Collection loaded", prefix=response.prefix, total=response.total)
    return response


def load_collection_icons(path: PathLike) -> List[str]:
    """
    Load a ``/collection?prefix=`` payload and return its visible icon names.

    Names are deduplicated and sorted, which is also the tie order for search.
    """
    return load_collection(path).all_icon_names()

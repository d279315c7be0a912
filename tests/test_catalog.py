"""
Tests for loading saved catalog payloads.
"""
import json

import pytest

from iconseek import catalog
from iconseek.catalog import load_collection, load_collection_icons, load_collections
from iconseek.core.exceptions import CatalogReadError, NotFoundError, ValidationError
from iconseek.search import search_collections, search_icons


class TestLoadCollections:
    def test_file_order_and_hidden_skipped(self, write_json, collections_payload):
        path = write_json("collections.json", collections_payload)

        infos = load_collections(path)

        assert [c.id for c in infos] == ["mdi", "fa-brands", "misc"]

    def test_include_hidden(self, write_json, collections_payload):
        path = write_json("collections.json", collections_payload)

        infos = load_collections(str(path), include_hidden=True)

        assert [c.id for c in infos] == ["mdi", "fa-brands", "old-set", "misc"]
        assert infos[2].hidden is True

    def test_defaults_applied(self, write_json, collections_payload):
        infos = load_collections(write_json("collections.json", collections_payload))

        misc = infos[-1]
        assert misc.category == "Uncategorized"
        assert misc.total == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(NotFoundError) as exc_info:
            load_collections(tmp_path / "nope.json")

        assert exc_info.value.suggestions
        assert exc_info.value.context["path"].endswith("nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            load_collections(path)

        assert isinstance(exc_info.value.cause, json.JSONDecodeError)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"mdi": {"name": "\xff\xfe"}}')

        with pytest.raises(ValidationError) as exc_info:
            load_collections(path)

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)
        assert exc_info.value.context == {"path": str(path)}

    def test_unreadable_file(self, write_json, collections_payload, monkeypatch):
        path = write_json("collections.json", collections_payload)

        def denied(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(catalog, "open", denied, raising=False)

        with pytest.raises(CatalogReadError) as exc_info:
            load_collections(path)

        assert isinstance(exc_info.value.cause, PermissionError)
        assert exc_info.value.suggestions

    def test_payload_must_be_object(self, write_json):
        with pytest.raises(ValidationError):
            load_collections(write_json("list.json", ["mdi", "fa"]))

    def test_invalid_entry(self, write_json):
        path = write_json("bad.json", {"mdi": {"total": 5}})

        with pytest.raises(ValidationError) as exc_info:
            load_collections(path)

        assert exc_info.value.context["prefix"] == "mdi"

    def test_loaded_collections_are_searchable(self, write_json, collections_payload):
        infos = load_collections(write_json("collections.json", collections_payload))

        assert [c.id for c in search_collections(infos, "mtrl")] == ["mdi"]


class TestLoadCollection:
    def test_load_collection(self, write_json, collection_payload):
        response = load_collection(write_json("mdi.json", collection_payload))

        assert response.prefix == "mdi"
        assert response.title == "Material Design Icons"

    def test_load_collection_icons(self, write_json, collection_payload):
        names = load_collection_icons(write_json("mdi.json", collection_payload))

        assert names == ["arrow", "arrow-up", "delete", "star", "trash-bin", "x-arrow-yz"]
        assert search_icons(names, "arrow")[0] == "arrow"

    def test_invalid_shape(self, write_json):
        with pytest.raises(ValidationError):
            load_collection(write_json("bad.json", {"title": "No prefix"}))

    def test_missing_file(self, tmp_path):
        with pytest.raises(NotFoundError):
            load_collection_icons(tmp_path / "missing.json")

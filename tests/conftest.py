import json

import pytest

from iconseek.models import CollectionInfo

ICONSEEK_ENV = ("ICONSEEK_LOG_LEVEL", "ICONSEEK_LOG_FILE", "ICONSEEK_MAX_RESULTS", "ICONSEEK_DEBUG")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test in an empty directory with no iconseek env overrides."""
    for key in ICONSEEK_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_collection():
    def _make(id, name, category="General", **kwargs):
        return CollectionInfo(id=id, name=name, category=category, **kwargs)

    return _make


@pytest.fixture
def collections(make_collection):
    return [
        make_collection("mdi", "Material Design Icons", total=7000),
        make_collection("fa", "Font Awesome", category="Brands / Social", total=1500),
        make_collection("tabler", "Tabler Icons", total=4000),
    ]


@pytest.fixture
def collections_payload():
    return {
        "mdi": {
            "name": "Material Design Icons",
            "total": 7000,
            "author": {"name": "Pictogrammers", "url": "https://pictogrammers.com"},
            "license": {"title": "Apache 2.0", "spdx": "Apache-2.0"},
            "samples": ["account-check", "bell-alert-outline"],
            "height": 24,
            "category": "General",
            "palette": False,
        },
        "fa-brands": {
            "name": "Font Awesome Brands",
            "total": 457,
            "category": "Brands / Social",
            "height": [16, 24],
        },
        "old-set": {
            "name": "Old Material Set",
            "hidden": True,
        },
        "misc": {
            "name": "Misc",
        },
    }


@pytest.fixture
def collection_payload():
    return {
        "prefix": "mdi",
        "total": 6,
        "title": "Material Design Icons",
        "uncategorized": ["star", "arrow"],
        "categories": {
            "Arrows": ["arrow-up", "arrow", "x-arrow-yz"],
            "Actions": ["delete", "trash-bin"],
        },
        "hidden": ["arrow-old"],
        "aliases": {"trash": "delete"},
    }


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write

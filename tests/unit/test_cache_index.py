"""Tests for CacheIndex (JSON contract, malformed blobs load as absent)."""

import pytest

from vcache.domain.entities import CacheIndex


def test_blob_roundtrip_preserves_entries() -> None:
    index = CacheIndex({"widget": "1.0.0", "menu": "2.3.1"})
    assert CacheIndex.from_blob(index.to_blob()) == index


def test_empty_object_is_valid_empty_index() -> None:
    index = CacheIndex.from_blob("{}")
    assert index is not None
    assert len(index) == 0


@pytest.mark.parametrize("blob", [None, ""])
def test_missing_blob_is_absent(blob: str | None) -> None:
    assert CacheIndex.from_blob(blob) is None


@pytest.mark.parametrize(
    "blob",
    [
        "not json",
        "[]",
        '["widget"]',
        '"widget"',
        '{"widget": 1}',
        '{"widget": null}',
        'a:1:{s:6:"widget";s:5:"1.0.0";}',
    ],
)
def test_malformed_blob_is_absent(blob: str) -> None:
    assert CacheIndex.from_blob(blob) is None


def test_single_and_record() -> None:
    index = CacheIndex.single("widget", "1.0.0")
    assert index.get("widget") == "1.0.0"
    assert "widget" in index
    assert index.get("menu") is None
    index.record("widget", "1.1.0")
    index.record("menu", "0.1.0")
    assert index.as_dict() == {"widget": "1.1.0", "menu": "0.1.0"}
    assert sorted(index) == ["menu", "widget"]


def test_as_dict_is_a_copy() -> None:
    index = CacheIndex({"widget": "1.0.0"})
    index.as_dict()["widget"] = "9.9.9"
    assert index.get("widget") == "1.0.0"

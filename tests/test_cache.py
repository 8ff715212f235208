"""Document cache keyed by location."""

from __future__ import annotations

import pytest

from serie_a_api import cache


def test_same_file_spelled_differently_shares_one_entry(tmp_path):
    doc = {"teams": ["Inter"]}
    cache.put_document(str(tmp_path / "2024-2025" / ".." / "data.json"), doc, 60)

    assert cache.get_document(str(tmp_path / "data.json")) == doc
    assert cache.get_document(f"  {tmp_path / 'data.json'}  ") == doc
    assert cache.get_document(str(tmp_path / "other.json")) is None


def test_urls_are_kept_as_given():
    cache.put_document("https://example.org/JS/seasons-data.json", {"seasons": []}, 60)

    assert cache.get_document("https://example.org/JS/seasons-data.json") == {"seasons": []}
    assert cache.get_document("https://example.org/JS/other.json") is None


def test_expired_documents_are_dropped(monkeypatch, tmp_path):
    location = str(tmp_path / "data.json")
    now = [1000.0]
    monkeypatch.setattr(cache.time, "time", lambda: now[0])

    cache.put_document(location, {"teams": []}, 30)
    assert cache.get_document(location) == {"teams": []}

    now[0] += 31
    assert cache.get_document(location) is None


def test_zero_ttl_is_not_stored(tmp_path):
    location = str(tmp_path / "data.json")
    cache.put_document(location, {"teams": []}, 0)
    assert cache.get_document(location) is None


def test_blank_location_is_rejected():
    with pytest.raises(ValueError):
        cache.document_key("   ")

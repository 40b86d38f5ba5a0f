"""Tests for catalog loading from files and URLs."""
import json
import logging

import httpx
import pytest

from question_bank.catalog.loading import loader
from question_bank.catalog.loading.loader import (
    LoaderError,
    load_records,
    parse_records,
    read_catalog_document,
)


def _entry(record_id, **overrides):
    data = {
        "id": record_id,
        "topic": "Algebra",
        "subtopic": "Linear",
        "difficulty": "easy",
        "question_text": f"Q{record_id}",
        "solution_text": f"S{record_id}",
        "tags": [],
    }
    data.update(overrides)
    return data


class TestLoadFromFile:

    def test_loads_in_document_order(self, catalog_file):
        path = catalog_file([_entry("3"), _entry("1"), _entry("2")])
        records = load_records(path)
        assert [r.id for r in records] == ["3", "1", "2"]

    def test_accepts_string_path(self, catalog_file):
        path = catalog_file([_entry("1")])
        assert len(load_records(str(path))) == 1

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(LoaderError, match="does not exist"):
            load_records(tmp_path / "nope.json")

    def test_invalid_json_is_fatal(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(LoaderError, match="not valid JSON"):
            load_records(path)

    def test_undecodable_file_is_fatal(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_bytes(b'[{"id": "\xff"}]')
        with pytest.raises(LoaderError, match="not valid UTF-8"):
            load_records(path)

    def test_non_array_is_fatal(self, catalog_file):
        path = catalog_file({"questions": []})
        with pytest.raises(LoaderError, match="JSON array"):
            load_records(path)

    def test_empty_array_loads_nothing(self, catalog_file):
        assert load_records(catalog_file([])) == []


class TestParseRecords:

    def test_skips_malformed_entries(self, caplog):
        document = [_entry("1"), _entry("2", difficulty="extreme"), "junk", _entry("3")]
        with caplog.at_level(logging.WARNING):
            records = parse_records(document)
        assert [r.id for r in records] == ["1", "3"]
        assert "Skipping malformed record" in caplog.text

    def test_drops_later_duplicate_ids(self, caplog):
        document = [_entry("1", topic="First"), _entry("1", topic="Second")]
        with caplog.at_level(logging.WARNING):
            records = parse_records(document)
        assert len(records) == 1
        assert records[0].topic == "First"
        assert "duplicate record id" in caplog.text


class TestLoadFromUrl:
    URL = "https://example.org/data/questions.json"

    def _fake_get(self, response_factory, calls=None):
        def fake_get(url, **kwargs):
            if calls is not None:
                calls.append((url, kwargs))
            return response_factory(httpx.Request("GET", url))
        return fake_get

    def test_fetches_and_parses(self, monkeypatch):
        calls = []
        monkeypatch.setattr(loader.httpx, "get", self._fake_get(
            lambda req: httpx.Response(200, text=json.dumps([_entry("1")]), request=req), calls
        ))
        records = load_records(self.URL, timeout=3.0)
        assert [r.id for r in records] == ["1"]
        assert calls[0][0] == self.URL
        assert calls[0][1]["timeout"] == 3.0

    def test_error_status_is_fatal(self, monkeypatch):
        monkeypatch.setattr(loader.httpx, "get", self._fake_get(
            lambda req: httpx.Response(404, text="missing", request=req)
        ))
        with pytest.raises(LoaderError, match="Status: 404"):
            read_catalog_document(self.URL)

    def test_transport_error_is_fatal(self, monkeypatch):
        def boom(url, **kwargs):
            raise httpx.ConnectError("connection refused")
        monkeypatch.setattr(loader.httpx, "get", boom)
        with pytest.raises(LoaderError, match="Failed to fetch"):
            read_catalog_document(self.URL)

    def test_bad_json_body_is_fatal(self, monkeypatch):
        monkeypatch.setattr(loader.httpx, "get", self._fake_get(
            lambda req: httpx.Response(200, text="<html>", request=req)
        ))
        with pytest.raises(LoaderError, match="not valid JSON"):
            read_catalog_document(self.URL)

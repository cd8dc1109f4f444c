"""Tests for document stores."""

import json

import pytest

from metagen.core import MetadataError
from metagen.store import JSONFileStore, MemoryStore, StoreError


class TestJSONFileStore:
    """Tests for the JSON file store."""

    @pytest.mark.integration
    def test_write_then_read(self, tmp_path):
        """Written document reads back equal."""
        store = JSONFileStore()
        target = tmp_path / "doc.json"
        store.write(str(target), {"className": "TextBox", "events": []})
        assert store.read(str(target)) == {"className": "TextBox", "events": []}

    @pytest.mark.integration
    def test_written_with_four_space_indent(self, tmp_path):
        """Documents are indented with four spaces."""
        target = tmp_path / "doc.json"
        JSONFileStore().write(str(target), {"a": [1]})
        assert target.read_text(encoding="utf-8") == json.dumps({"a": [1]}, indent=4)

    @pytest.mark.integration
    def test_write_overwrites(self, tmp_path):
        """Writing again replaces the document."""
        store = JSONFileStore()
        target = str(tmp_path / "doc.json")
        store.write(target, {"v": 1})
        store.write(target, {"v": 2})
        assert store.read(target) == {"v": 2}

    @pytest.mark.integration
    def test_read_missing_file(self, tmp_path):
        """Missing file raises StoreError."""
        missing = str(tmp_path / "missing.json")
        with pytest.raises(StoreError) as exc_info:
            JSONFileStore().read(missing)
        assert exc_info.value.identifier == missing

    @pytest.mark.integration
    def test_read_malformed_json(self, tmp_path):
        """Malformed JSON raises StoreError."""
        target = tmp_path / "bad.json"
        target.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError, match="Malformed JSON"):
            JSONFileStore().read(str(target))

    @pytest.mark.integration
    def test_write_into_missing_directory_fails(self, tmp_path):
        """Writing into a missing directory raises StoreError."""
        with pytest.raises(StoreError):
            JSONFileStore().write(str(tmp_path / "nope" / "doc.json"), {})

    @pytest.mark.integration
    def test_prepare_creates_nested_directories(self, tmp_path):
        """Prepare creates every missing directory."""
        location = tmp_path / "out" / "nested" / "base"
        store = JSONFileStore()
        store.prepare(str(location))
        store.prepare(str(location))
        assert location.is_dir()

    @pytest.mark.unit
    def test_store_error_is_metadata_error(self):
        """StoreError derives from MetadataError."""
        assert issubclass(StoreError, MetadataError)


class TestMemoryStore:
    """Tests for the in-memory store."""

    @pytest.mark.unit
    def test_initial_documents(self):
        """Initial documents are readable."""
        store = MemoryStore({"meta.json": {"Widgets": {}}})
        assert store.read("meta.json") == {"Widgets": {}}

    @pytest.mark.unit
    def test_missing_document(self):
        """Missing document raises StoreError."""
        with pytest.raises(StoreError):
            MemoryStore().read("missing.json")

    @pytest.mark.unit
    def test_paths_normalized(self):
        """Identifiers are normalized to posix paths."""
        store = MemoryStore()
        store.write("out/./nested/label.json", {"path": "label"})
        assert "out/nested/label.json" in store.documents

    @pytest.mark.unit
    def test_documents_are_copied(self):
        """Later mutation of written data does not leak into the store."""
        store = MemoryStore()
        data = {"properties": []}
        store.write("a.json", data)
        data["properties"].append({"name": "x"})
        assert store.read("a.json") == {"properties": []}

    @pytest.mark.unit
    def test_prepare_records_location(self):
        """Prepared locations are recorded."""
        store = MemoryStore()
        store.prepare("out/nested")
        assert store.locations == {"out/nested"}

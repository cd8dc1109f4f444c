"""Tests for the generation pipeline."""

import json

import pytest

from metagen.config import GeneratorConfig
from metagen.generator import MetadataGenerator, generate
from metagen.schema import SchemaError
from metagen.store import JSONFileStore, MemoryStore, StoreError


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig(
        source_metadata_file_path="meta.json",
        output_folder_path="out",
        nested_path_part="nested",
        base_path_part="base",
    )


@pytest.fixture
def store(metadata_document) -> MemoryStore:
    return MemoryStore({"meta.json": metadata_document})


class FailingWriteStore(MemoryStore):
    """Memory store whose writes fail after a number of documents."""

    def __init__(self, documents, fail_after: int):
        super().__init__(documents)
        self.fail_after = fail_after
        self.writes = 0

    def write(self, identifier, data):
        if self.writes >= self.fail_after:
            raise StoreError(f"disk full: {identifier}", identifier)
        self.writes += 1
        super().write(identifier, data)


class TestGenerate:
    """Pipeline behavior against an in-memory store."""

    @pytest.mark.unit
    def test_prepares_locations(self, store, config):
        """Output, nested and base locations are prepared."""
        MetadataGenerator(store).generate(config)
        assert store.locations == {"out", "out/nested", "out/nested/base"}

    @pytest.mark.unit
    def test_written_documents(self, store, config):
        """Every descriptor is written to its expected location."""
        result = MetadataGenerator(store).generate(config)

        assert result.widgets == [
            "out/text-box.json",
            "out/list.json",
            "out/chart.json",
            "out/pie-chart.json",
        ]
        assert result.bases == ["out/nested/base/label.json"]
        assert sorted(result.nested) == [
            "out/nested/font.json",
            "out/nested/items.json",
            "out/nested/label.json",
        ]
        assert result.total == 8
        written = set(store.documents) - {"meta.json"}
        assert written == set(result.widgets + result.bases + result.nested)

    @pytest.mark.unit
    def test_widget_without_module_not_written(self, store, config):
        """Widgets without a module are not written."""
        MetadataGenerator(store).generate(config)
        assert not any("hidden" in key for key in store.documents)

    @pytest.mark.unit
    def test_text_box_document(self, store, config):
        """Text box descriptor has events, properties and editor flag."""
        MetadataGenerator(store).generate(config)
        doc = store.read("out/text-box.json")
        assert doc == {
            "className": "TextBox",
            "widgetName": "dxTextBox",
            "selector": "dx-text-box",
            "module": "devextreme/ui/text_box",
            "isExtension": False,
            "isEditor": True,
            "events": [
                {"emit": "onValueChanged", "subscribe": "valueChanged"},
                {"emit": "valueChange"},
            ],
            "properties": [{"name": "value", "type": "any"}],
            "nestedComponents": [],
        }

    @pytest.mark.unit
    def test_list_document_references_items(self, store, config):
        """List descriptor references its item component."""
        MetadataGenerator(store).generate(config)
        doc = store.read("out/list.json")
        assert doc["isTranscludedContent"] is True
        assert doc["nestedComponents"] == [
            {
                "path": "items",
                "propertyName": "items",
                "className": "DxcItem",
                "isCollection": True,
                "hasTemplate": True,
            }
        ]

    @pytest.mark.unit
    def test_base_and_derived_documents(self, store, config):
        """Shared label is written as a base plus a derived component."""
        MetadataGenerator(store).generate(config)

        base = store.read("out/nested/base/label.json")
        assert base == {
            "className": "DxoLabel",
            "path": "label",
            "properties": [{"name": "text"}, {"name": "font"}],
        }

        label = store.read("out/nested/label.json")
        assert "properties" not in label
        assert label["baseClass"] == "DxoLabel"
        assert label["basePath"] == "./base/label"
        assert "hasSimpleBaseClass" not in label

    @pytest.mark.unit
    def test_simple_base_documents(self, store, config):
        """Components without a base get the generic nested option base."""
        MetadataGenerator(store).generate(config)

        items = store.read("out/nested/items.json")
        assert items["baseClass"] == "CollectionNestedOption"
        assert items["basePath"] == "../../core/nested-option"
        assert items["hasSimpleBaseClass"] is True
        assert items["properties"] == [{"name": "text"}]

        font = store.read("out/nested/font.json")
        assert font["baseClass"] == "NestedOption"
        assert font["properties"] == [{"name": "size"}, {"name": "color"}]

    @pytest.mark.unit
    def test_custom_layout(self, store):
        """Layout parts and module prefix come from config."""
        config = GeneratorConfig(
            source_metadata_file_path="meta.json",
            output_folder_path="gen",
            nested_path_part="options",
            base_path_part="shared",
            module_prefix="dx/",
        )
        result = generate(config, store)
        assert result.bases == ["gen/options/shared/label.json"]
        assert store.read("gen/options/label.json")["basePath"] == "./shared/label"
        assert store.read("gen/chart.json")["module"] == "dx/viz/chart"


class TestFailures:
    """Fatal errors abort the run."""

    @pytest.mark.unit
    def test_missing_source(self, config):
        """Missing source document raises StoreError."""
        with pytest.raises(StoreError):
            MetadataGenerator(MemoryStore()).generate(config)

    @pytest.mark.unit
    def test_malformed_source(self, config):
        """Malformed source document raises SchemaError."""
        store = MemoryStore({"meta.json": {"Widgets": []}})
        with pytest.raises(SchemaError):
            MetadataGenerator(store).generate(config)

    @pytest.mark.unit
    def test_write_failure_keeps_earlier_writes(self, metadata_document, config):
        """Documents written before a failure stay in place."""
        store = FailingWriteStore({"meta.json": metadata_document}, fail_after=2)
        with pytest.raises(StoreError, match="disk full"):
            MetadataGenerator(store).generate(config)
        assert "out/text-box.json" in store.documents
        assert "out/list.json" in store.documents
        assert "out/chart.json" not in store.documents

    @pytest.mark.unit
    def test_missing_complex_type_is_not_fatal(self, config):
        """Unknown complex type is skipped, not fatal."""
        store = MemoryStore(
            {
                "meta.json": {
                    "Widgets": {
                        "dxGauge": {
                            "Module": "viz/gauge",
                            "Options": {"scale": {"ComplexTypes": ["Missing"]}},
                        }
                    }
                }
            }
        )
        result = MetadataGenerator(store).generate(config)
        assert result.widgets == ["out/gauge.json"]
        assert result.nested == []
        assert store.read("out/gauge.json")["properties"] == [
            {"name": "scale", "type": "any"}
        ]


class TestFileSystem:
    """Pipeline against real files."""

    @pytest.mark.integration
    def test_generate_to_disk(self, tmp_path, metadata_document):
        """Full run writes JSON files to disk."""
        source = tmp_path / "metadata.json"
        source.write_text(json.dumps(metadata_document), encoding="utf-8")
        output = tmp_path / "out"
        config = GeneratorConfig(
            source_metadata_file_path=source, output_folder_path=output
        )

        result = MetadataGenerator(JSONFileStore()).generate(config)

        assert (output / "nested" / "base").is_dir()
        assert result.total == 8
        chart = json.loads((output / "chart.json").read_text(encoding="utf-8"))
        assert chart["nestedComponents"][0]["className"] == "DxoLabel"
        base = json.loads(
            (output / "nested" / "base" / "label.json").read_text(encoding="utf-8")
        )
        assert base["className"] == "DxoLabel"

    @pytest.mark.integration
    def test_default_store_is_file_store(self):
        """Generator defaults to the JSON file store."""
        assert isinstance(MetadataGenerator().store, JSONFileStore)

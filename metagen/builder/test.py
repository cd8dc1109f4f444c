"""Unit tests for the widget descriptor builder."""

import pytest

from metagen.builder import (
    WidgetBuild,
    build_widget_descriptor,
    build_widget_descriptors,
)
from metagen.ir import Event, to_document
from metagen.schema import parse_metadata


def build(widgets: dict, extra_objects: dict | None = None) -> list[WidgetBuild]:
    metadata = parse_metadata(
        {"Widgets": widgets, "ExtraObjects": extra_objects or {}}
    )
    return list(build_widget_descriptors(metadata))


class TestWidgetSelection:
    """Which widgets are generated."""

    @pytest.mark.unit
    def test_widget_without_module_skipped(self, metadata):
        """Widgets without a module produce no descriptor."""
        names = [b.name for b in build_widget_descriptors(metadata)]
        assert "dxHidden" not in names
        assert names == ["dxTextBox", "dxList", "dxChart", "dxPieChart"]

    @pytest.mark.unit
    def test_empty_module_skipped(self):
        """An empty module string counts as missing."""
        assert build({"dxEmpty": {"Module": ""}}) == []


class TestWidgetDescriptor:
    """Top-level descriptor attributes."""

    @pytest.mark.unit
    def test_text_box_without_options(self):
        """A widget with no options still gets a complete descriptor."""
        [result] = build({"dxTextBox": {"Module": "textBox"}})
        doc = to_document(result.descriptor)

        assert doc["className"] == "TextBox"
        assert doc["widgetName"] == "dxTextBox"
        assert doc["selector"] == "dx-text-box"
        assert doc["module"] == "devextreme/textBox"
        assert doc["events"] == []
        assert doc["properties"] == []
        assert doc["nestedComponents"] == []
        assert doc["isEditor"] is False
        assert doc["isExtension"] is False
        assert result.output_name == "text-box"

    @pytest.mark.unit
    def test_flags(self):
        """Transcluded content and extension flags are copied over."""
        [result] = build(
            {
                "dxValidator": {
                    "Module": "ui/validator",
                    "IsExtensionComponent": True,
                    "IsTranscludedContent": False,
                }
            }
        )
        assert result.descriptor.is_extension is True
        assert result.descriptor.is_transcluded_content is False

    @pytest.mark.unit
    def test_custom_module_prefix(self, metadata):
        """Module path uses the configured prefix."""
        result = build_widget_descriptor(
            "dxTextBox", metadata.widgets["dxTextBox"], metadata, module_prefix="dx/"
        )
        assert result.descriptor.module == "dx/ui/text_box"


class TestEventsAndProperties:
    """Classification of widget options."""

    @pytest.mark.unit
    def test_event_option(self):
        """Event options become emit/subscribe pairs."""
        [result] = build(
            {"dxButton": {"Module": "ui/button", "Options": {"onClick": {"IsEvent": True}}}}
        )
        assert result.descriptor.events == [Event(emit="onClick", subscribe="click")]
        assert result.descriptor.properties == []

    @pytest.mark.unit
    def test_non_event_option_has_property_and_change_event(self):
        """Plain options add a property and a change event."""
        [result] = build(
            {"dxButton": {"Module": "ui/button", "Options": {"text": {}}}}
        )
        assert [p.name for p in result.descriptor.properties] == ["text"]
        assert result.descriptor.events == [Event(emit="textChange")]

    @pytest.mark.unit
    def test_events_before_change_events(self):
        """Declared events come before generated change events."""
        [result] = build(
            {
                "dxButton": {
                    "Module": "ui/button",
                    "Options": {
                        "text": {},
                        "onClick": {"IsEvent": True},
                        "icon": {},
                        "onContentReady": {"IsEvent": True},
                    },
                }
            }
        )
        assert [e.emit for e in result.descriptor.events] == [
            "onClick",
            "onContentReady",
            "textChange",
            "iconChange",
        ]
        assert [e.subscribe for e in result.descriptor.events[:2]] == [
            "click",
            "contentReady",
        ]

    @pytest.mark.unit
    def test_value_option_makes_editor(self, metadata):
        """A value option marks the widget as an editor."""
        result = build_widget_descriptor(
            "dxTextBox", metadata.widgets["dxTextBox"], metadata
        )
        descriptor = result.descriptor
        assert descriptor.is_editor is True
        assert Event(emit="valueChange") in descriptor.events
        assert Event(emit="onValueChanged", subscribe="valueChanged") in descriptor.events
        assert [p.name for p in descriptor.properties] == ["value"]

    @pytest.mark.unit
    def test_collection_and_data_source_properties(self, metadata):
        """Collection and data source options are flagged as collections."""
        result = build_widget_descriptor("dxList", metadata.widgets["dxList"], metadata)
        docs = [to_document(p) for p in result.descriptor.properties]
        assert docs == [
            {"name": "dataSource", "type": "any", "isCollection": True},
            {"name": "items", "type": "any", "isCollection": True},
        ]

    @pytest.mark.unit
    def test_every_option_accounted_for_once(self, metadata):
        """Each option is either one event or one property plus one change event."""
        for result in build_widget_descriptors(metadata):
            options = metadata.widgets[result.name].options
            emits = [e.emit for e in result.descriptor.events]
            props = [p.name for p in result.descriptor.properties]
            for name, opt in options.items():
                if opt.is_event:
                    assert emits.count(name) == 1
                    assert name not in props
                else:
                    assert props.count(name) == 1
                    assert emits.count(f"{name}Change") == 1


class TestNestedComponents:
    """Nested components discovered under widget options."""

    @pytest.mark.unit
    def test_collection_items(self, metadata):
        """Collection options produce item components."""
        result = build_widget_descriptor("dxList", metadata.widgets["dxList"], metadata)
        [ref] = result.descriptor.nested_components
        assert ref.class_name == "DxcItem"
        assert ref.property_name == "items"
        assert ref.path == "items"
        assert ref.is_collection is True
        assert ref.has_template is True
        [component] = result.nested_components
        assert component.property_names == ["text"]

    @pytest.mark.unit
    def test_complex_type_components(self, metadata):
        """Complex type options produce tagged components."""
        result = build_widget_descriptor("dxChart", metadata.widgets["dxChart"], metadata)
        assert [c.class_name for c in result.nested_components] == [
            "DxoLabel",
            "DxoFont",
        ]
        assert result.nested_components[0].base_class == "DxoLabel"

    @pytest.mark.unit
    def test_references_unique_by_class_name(self):
        """Nested references are unique by class name."""
        [result] = build(
            {
                "dxChart": {
                    "Module": "viz/chart",
                    "Options": {
                        "title": {"Options": {"font": {"Options": {"size": {}}}}},
                        "legend": {"Options": {"font": {"Options": {"color": {}}}}},
                    },
                }
            }
        )
        assert [c.class_name for c in result.nested_components] == [
            "DxoTitle",
            "DxoFont",
            "DxoLegend",
            "DxoFont",
        ]
        assert [r.class_name for r in result.descriptor.nested_components] == [
            "DxoTitle",
            "DxoFont",
            "DxoLegend",
        ]

    @pytest.mark.unit
    def test_event_options_not_resolved(self):
        """Event options never produce nested components."""
        [result] = build(
            {
                "dxButton": {
                    "Module": "ui/button",
                    "Options": {
                        "onClick": {"IsEvent": True, "Options": {"x": {}}},
                    },
                }
            }
        )
        assert result.nested_components == []

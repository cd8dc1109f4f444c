"""Root pytest configuration and fixtures.

This module provides:
- Test tier markers (unit, integration)
- Shared metadata documents for builder, normalizer and generator tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from metagen.schema import Metadata


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register test tier markers."""
    config.addinivalue_line("markers", "unit: fast tests with no I/O")
    config.addinivalue_line(
        "markers", "integration: tests touching the file system"
    )


# =============================================================================
# Metadata Fixtures
# =============================================================================


@pytest.fixture
def metadata_document() -> dict[str, Any]:
    """A small metadata document exercising every option shape.

    Contains:
        - dxTextBox: editor with an event and a value option
        - dxList: inline collection items with a template
        - dxChart / dxPieChart: both reference the shared Label type
        - dxHidden: no module, never generated
    """
    return {
        "Widgets": {
            "dxTextBox": {
                "Module": "ui/text_box",
                "Options": {
                    "value": {},
                    "onValueChanged": {"IsEvent": True},
                },
            },
            "dxList": {
                "Module": "ui/list",
                "IsTranscludedContent": True,
                "Options": {
                    "dataSource": {"IsDataSource": True},
                    "items": {
                        "IsCollection": True,
                        "SingularName": "item",
                        "Options": {
                            "text": {},
                            "template": {"IsTemplate": True},
                        },
                    },
                },
            },
            "dxChart": {
                "Module": "viz/chart",
                "Options": {
                    "label": {"ComplexTypes": ["Label"]},
                },
            },
            "dxPieChart": {
                "Module": "viz/pie_chart",
                "Options": {
                    "label": {"ComplexTypes": ["Label"]},
                },
            },
            "dxHidden": {
                "Options": {"visible": {}},
            },
        },
        "ExtraObjects": {
            "Label": {
                "Options": {
                    "text": {},
                    "font": {"Options": {"size": {}, "color": {}}},
                },
            },
        },
    }


@pytest.fixture
def metadata(metadata_document: dict[str, Any]) -> Metadata:
    """The shared document parsed into models."""
    from metagen.schema import parse_metadata

    return parse_metadata(metadata_document)

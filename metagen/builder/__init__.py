"""Widget descriptor assembly."""

from metagen.builder.lib import (
    DEFAULT_MODULE_PREFIX,
    WidgetBuild,
    build_widget_descriptor,
    build_widget_descriptors,
)

__all__ = [
    "DEFAULT_MODULE_PREFIX",
    "WidgetBuild",
    "build_widget_descriptor",
    "build_widget_descriptors",
]

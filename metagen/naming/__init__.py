"""Name formatting helpers for selectors, class names and paths."""

from metagen.naming.lib import (
    camelize,
    dasherize,
    lower_first,
    selector_part,
    trim_prefix,
    underscore,
)

__all__ = [
    "camelize",
    "dasherize",
    "lower_first",
    "selector_part",
    "trim_prefix",
    "underscore",
]

"""Recursive expansion of structured options into nested components."""

from metagen.resolver.lib import expand_options, resolve_complex_option

__all__ = ["expand_options", "resolve_complex_option"]

"""String casing conversions used to derive component names.

Widget and option names arrive in camelCase (``dxTextBox``, ``valueChanged``)
and are turned into:

- class names (``DxoLabel``) via ``camelize``
- selectors and file paths (``dx-text-box``) via ``dasherize(underscore(...))``
"""

import re

_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")
_LOWER_UPPER = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: str) -> str:
    """Convert a camelCase or dashed name to snake_case.

    Example:
        >>> underscore("dxTextBox")
        'dx_text_box'
        >>> underscore("HTMLEditor")
        'html_editor'
    """
    result = _UPPER_RUN.sub(r"\1_\2", name)
    result = _LOWER_UPPER.sub(r"\1_\2", result)
    return result.replace("-", "_").lower()


def dasherize(name: str) -> str:
    """Replace underscores and spaces with dashes."""
    return re.sub(r"[ _]", "-", name)


def camelize(name: str, lower_first_letter: bool = False) -> str:
    """Join underscore separated words, upper-casing each first letter.

    Only the first character of every word is touched, the rest is kept
    as-is so ``camelize("TextBox")`` stays ``"TextBox"``.

    Args:
        name: Name to convert, typically snake_case.
        lower_first_letter: Lower-case the very first character.

    Example:
        >>> camelize("dxo_label")
        'DxoLabel'
        >>> camelize("ValueChanged", lower_first_letter=True)
        'valueChanged'
    """
    result = "".join(word[:1].upper() + word[1:] for word in name.split("_"))
    return lower_first(result) if lower_first_letter else result


def lower_first(name: str) -> str:
    """Lower-case the first character only."""
    return name[:1].lower() + name[1:]


def trim_prefix(prefix: str, name: str) -> str:
    """Drop ``prefix`` from the start of ``name`` when present."""
    return name[len(prefix) :] if name.startswith(prefix) else name


def selector_part(name: str) -> str:
    """Underscore a name and flatten dotted segments.

    Example:
        >>> selector_part("series.label")
        'series_label'
    """
    return underscore(name).replace(".", "_")


__all__ = [
    "camelize",
    "dasherize",
    "lower_first",
    "selector_part",
    "trim_prefix",
    "underscore",
]

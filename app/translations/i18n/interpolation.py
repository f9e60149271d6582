"""Placeholder interpolation over strings and object trees.

Placeholders look like ``{{ name }}`` with configurable delimiters. Only names
present in the query are replaced; anything else is left verbatim.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from translations.i18n.models import InterpolationDelimiters, Query


def stringify(value: Any) -> str:
    """Render a query value the way it is displayed in translated text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _placeholder_pattern(name: str, delimiters: InterpolationDelimiters):
    return re.compile(
        rf"{re.escape(delimiters.prefix)}\s*{re.escape(name)}\s*{re.escape(delimiters.suffix)}",
        re.MULTILINE,
    )


def interpolate(
    text: Optional[str],
    query: Optional[Query] = None,
    delimiters: Optional[InterpolationDelimiters] = None,
) -> str:
    """Replace ``{{name}}`` placeholders with query values.

    Keys are applied one after another in query order, so a later key sees
    the text produced by earlier substitutions.

    Args:
        text: Template string.
        query: Mapping of placeholder name to value.
        delimiters: Placeholder delimiters (default ``{{`` / ``}}``).

    Returns:
        Interpolated text, ``""`` when text is empty.
    """
    if not text or not query:
        return text or ""

    delimiters = delimiters or InterpolationDelimiters()
    for name, value in query.items():
        replacement = stringify(value)
        text = _placeholder_pattern(str(name), delimiters).sub(
            lambda _match, r=replacement: r, text
        )
    return text


def interpolate_object(
    obj: Any,
    query: Optional[Query] = None,
    delimiters: Optional[InterpolationDelimiters] = None,
) -> Any:
    """Interpolate every string leaf of a mapping/list tree in place.

    Returns:
        The same ``obj``, mutated. Untouched when the query is empty.
    """
    if not query:
        return obj

    if isinstance(obj, Mapping):
        items = list(obj.items())
    elif isinstance(obj, list):
        items = list(enumerate(obj))
    else:
        return obj

    for key, value in items:
        if isinstance(value, (Mapping, list)):
            interpolate_object(value, query, delimiters)
        elif isinstance(value, str):
            obj[key] = interpolate(value, query, delimiters)

    return obj

"""Dictionary navigation for dotted leaf keys."""

from collections.abc import Mapping
from typing import Any, Optional

from translations.i18n.models import Dictionary


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(segment)
    if isinstance(node, list) and segment.isdecimal() and int(segment) < len(node):
        return node[int(segment)]
    return None


def get_dictionary_value(
    dictionary: Dictionary,
    key: Optional[str] = "",
    return_objects: bool = False,
) -> Any:
    """Walk a dotted key ("parent.child") through a dictionary tree.

    Numeric segments index into lists ("links.0"). Missing, falsy or
    non-container intermediate nodes become an empty mapping, so traversal
    never raises and a miss ends on ``{}``.

    Args:
        dictionary: Namespace dictionary to read from.
        key: Dotted leaf key.
        return_objects: Accept mapping/list values as results.

    Returns:
        The string at ``key``, the object at ``key`` when ``return_objects``
        is set, otherwise None.
    """
    value: Any = dictionary
    for segment in (key or "").split("."):
        value = _child(value, segment) or {}

    if isinstance(value, str):
        return value
    if return_objects and isinstance(value, (Mapping, list)):
        return value
    return None


def is_empty_value(value: Any) -> bool:
    """Classify a navigator result as empty: None or an object with no entries."""
    if value is None:
        return True
    return isinstance(value, (Mapping, list)) and not value


def clone_tree(value: Any) -> Any:
    """Copy mapping/list nodes into plain dicts and lists; other leaves are shared."""
    if isinstance(value, Mapping):
        return {key: clone_tree(item) for key, item in value.items()}
    if isinstance(value, list):
        return [clone_tree(item) for item in value]
    return value

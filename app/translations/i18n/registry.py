"""Namespace registry composed from parent and local dictionaries."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional

from translations.i18n.models import Dictionary

_EMPTY: Dictionary = MappingProxyType({})


class NamespaceRegistry(Mapping):
    """Read-only mapping of namespace name to dictionary.

    Nested scopes combine registries with ``merged_with``; the local side
    wins on name collisions. Dictionaries themselves are shared, not copied.
    """

    def __init__(self, namespaces: Optional[Mapping[str, Dictionary]] = None):
        self._namespaces: Dict[str, Dictionary] = dict(namespaces or {})

    def __getitem__(self, namespace: str) -> Dictionary:
        return self._namespaces[namespace]

    def __iter__(self) -> Iterator[str]:
        return iter(self._namespaces)

    def __len__(self) -> int:
        return len(self._namespaces)

    def __repr__(self) -> str:
        return f"NamespaceRegistry({sorted(self._namespaces)!r})"

    def get_dictionary(self, namespace: str) -> Dictionary:
        """Return the namespace dictionary, or an empty one when unknown."""
        return self._namespaces.get(namespace) or _EMPTY

    def merged_with(
        self, local: Optional[Mapping[str, Dictionary]] = None
    ) -> "NamespaceRegistry":
        """Shallow-merge ``local`` over this registry into a new registry."""
        merged = dict(self._namespaces)
        merged.update(local or {})
        return NamespaceRegistry(merged)

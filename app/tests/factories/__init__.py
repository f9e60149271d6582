"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_common_dictionary,
    make_namespaces,
    make_resolve_options,
    make_resolver,
    make_translation_key,
)

__all__ = [
    "make_common_dictionary",
    "make_namespaces",
    "make_resolve_options",
    "make_resolver",
    "make_translation_key",
]

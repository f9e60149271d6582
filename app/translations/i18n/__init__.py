"""i18n system - namespace-qualified translation key resolution.

Resolves "namespace:key" strings against in-memory dictionaries with
plural key selection, placeholder interpolation and fallback chains.

Main components:
- models: TranslationKey, ResolveOptions, I18nConfig, InterpolationDelimiters, MissingKeyInfo
- navigator: dotted-key dictionary lookup
- plurals: PluralRules and plural key selection
- interpolation: string and object placeholder substitution
- reporter: MissingKeyReporter
- registry: NamespaceRegistry
- resolver: Resolver
- scope: TranslationScope
- factory: create_scope, create_resolver
"""

from translations.i18n.factory import create_resolver, create_scope
from translations.i18n.interpolation import interpolate, interpolate_object
from translations.i18n.models import (
    I18nConfig,
    InterpolationDelimiters,
    MissingKeyInfo,
    ResolveOptions,
    TranslationKey,
)
from translations.i18n.navigator import get_dictionary_value
from translations.i18n.plurals import PluralRules, select_plural_key
from translations.i18n.registry import NamespaceRegistry
from translations.i18n.reporter import MissingKeyReporter
from translations.i18n.resolver import Resolver
from translations.i18n.scope import TranslationScope

__all__ = [
    "I18nConfig",
    "InterpolationDelimiters",
    "MissingKeyInfo",
    "ResolveOptions",
    "TranslationKey",
    "get_dictionary_value",
    "PluralRules",
    "select_plural_key",
    "interpolate",
    "interpolate_object",
    "MissingKeyReporter",
    "NamespaceRegistry",
    "Resolver",
    "TranslationScope",
    "create_scope",
    "create_resolver",
]

"""Translation key resolver.

Runs split -> plural key selection -> lookup -> fallback -> interpolation for
one language scope.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from translations.i18n.interpolation import interpolate, interpolate_object
from translations.i18n.models import (
    Dictionary,
    I18nConfig,
    MissingKeyInfo,
    MissingKeyLogger,
    Query,
    ResolveOptions,
    TranslationKey,
    raw_key_string,
)
from translations.i18n.navigator import (
    clone_tree,
    get_dictionary_value,
    is_empty_value,
)
from translations.i18n.plurals import PluralRules, select_plural_key
from translations.i18n.registry import NamespaceRegistry
from translations.i18n.reporter import MissingKeyReporter
from translations.logging import get_module_logger

logger = get_module_logger()

Key = Union[str, Sequence[str], None]
Options = Union[ResolveOptions, Mapping[str, Any], None]


class Resolver:
    """Resolves ``namespace:key`` strings against a namespace registry.

    Attributes:
        namespaces: Registry of namespace dictionaries.
        plural_rules: Plural category provider for the scope language.
        config: Interpolation delimiters and missing-key reporter.
        report_missing: Invoke the reporter for empty resolutions.
    """

    def __init__(
        self,
        namespaces: Union[NamespaceRegistry, Mapping[str, Dictionary], None] = None,
        plural_rules: Optional[PluralRules] = None,
        config: Optional[I18nConfig] = None,
        report_missing: bool = True,
    ):
        if not isinstance(namespaces, NamespaceRegistry):
            namespaces = NamespaceRegistry(namespaces)
        self.namespaces = namespaces
        self.plural_rules = plural_rules or PluralRules()
        self.config = config or I18nConfig()
        self.report_missing = report_missing

    @property
    def reporter(self) -> MissingKeyLogger:
        return self.config.logger or MissingKeyReporter()

    def resolve(
        self,
        key: Key = "",
        query: Optional[Query] = None,
        options: Options = None,
    ) -> Any:
        """Resolve a key to its translated string or object.

        Args:
            key: Composite key ("common:greeting"); a list resolves its first item.
            query: Placeholder values, optionally with a numeric ``count``.
            options: ResolveOptions or a mapping with ``returnObjects``/``fallback``.

        Returns:
            Interpolated string, a copy of an object leaf when ``return_objects``
            is set, a fallback key's result, or the raw key itself.
        """
        raw_key = raw_key_string(key)
        return self._resolve(raw_key, query, ResolveOptions.coerce(options), raw_key)

    def _resolve(
        self,
        raw_key: str,
        query: Optional[Query],
        options: ResolveOptions,
        original_key: str,
    ) -> Any:
        translation_key = TranslationKey.from_string(raw_key)
        dictionary = self.namespaces.get_dictionary(translation_key.namespace)

        candidate = select_plural_key(
            self.plural_rules, dictionary, translation_key.i18n_key, query
        )
        value = get_dictionary_value(dictionary, candidate, options.return_objects)
        empty = is_empty_value(value)

        if empty and self.report_missing:
            self.reporter(
                MissingKeyInfo(
                    namespace=translation_key.namespace,
                    i18n_key=translation_key.i18n_key,
                )
            )

        fallbacks = options.fallback_chain()
        if empty and fallbacks and isinstance(fallbacks[0], str):
            first, rest = fallbacks[0], fallbacks[1:]
            logger.debug(
                "resolving_fallback_key",
                key=raw_key,
                fallback=first,
                remaining=len(rest),
            )
            return self._resolve(
                first, query, options.with_fallback(rest), original_key
            )

        if empty:
            return original_key

        if isinstance(value, (Mapping, list)):
            return interpolate_object(
                clone_tree(value), query, self.config.delimiters
            )

        return interpolate(value, query, self.config.delimiters) or original_key

    __call__ = resolve
    t = resolve

"""Nestable translation scopes.

A scope fixes the language, namespace registry and config for a part of the
host application. Child scopes inherit from their parent explicitly:

    root = TranslationScope(lang="en", namespaces={"common": common_en})
    page = root.child(namespaces={"home": home_en})
    page.t("home:title")
    page.t("common:greeting", {"name": "Ana"})
"""

from typing import Mapping, Optional

from translations.i18n.models import Dictionary, I18nConfig
from translations.i18n.plurals import PluralRules
from translations.i18n.registry import NamespaceRegistry
from translations.i18n.resolver import Resolver


class TranslationScope:
    """Language, namespaces and config for one level of the host application.

    Attributes:
        lang: Resolved language tag.
        namespaces: Parent namespaces merged with local ones (local wins).
        config: Parent config merged with local config (local wins).
        parent: Enclosing scope, if any.
        t: Resolver bound to this scope.
    """

    def __init__(
        self,
        lang: Optional[str] = None,
        namespaces: Optional[Mapping[str, Dictionary]] = None,
        config: Optional[I18nConfig] = None,
        parent: Optional["TranslationScope"] = None,
        locale: Optional[str] = None,
        default_locale: Optional[str] = None,
        report_missing: Optional[bool] = None,
    ):
        """Initialize a scope.

        Args:
            lang: Explicit language for this scope.
            namespaces: Namespace dictionaries supplied at this level.
            config: Config overrides for this level.
            parent: Enclosing scope to inherit language, namespaces and config from.
            locale: Host-supplied current locale (e.g., from routing).
            default_locale: Host default locale.
            report_missing: Report empty resolutions; inherited when None.
        """
        self.parent = parent
        self.lang = self.resolve_language(
            lang,
            parent.lang if parent else None,
            locale,
            default_locale,
        )

        inherited = parent.namespaces if parent else NamespaceRegistry()
        self.namespaces = inherited.merged_with(namespaces)

        base_config = parent.config if parent else I18nConfig()
        self.config = base_config.merged_with(config)

        if report_missing is None:
            report_missing = parent.report_missing if parent else True
        self.report_missing = report_missing

        self.plural_rules = PluralRules(self.lang)
        self.t = Resolver(
            namespaces=self.namespaces,
            plural_rules=self.plural_rules,
            config=self.config,
            report_missing=self.report_missing,
        )

    @staticmethod
    def resolve_language(*candidates: Optional[str]) -> str:
        """Return the first non-empty language tag, or ``""``."""
        for candidate in candidates:
            if candidate:
                return candidate
        return ""

    def child(
        self,
        lang: Optional[str] = None,
        namespaces: Optional[Mapping[str, Dictionary]] = None,
        config: Optional[I18nConfig] = None,
        report_missing: Optional[bool] = None,
    ) -> "TranslationScope":
        """Create a nested scope inheriting from this one."""
        return TranslationScope(
            lang=lang,
            namespaces=namespaces,
            config=config,
            parent=self,
            report_missing=report_missing,
        )

    def __repr__(self) -> str:
        return f"TranslationScope(lang={self.lang!r}, namespaces={sorted(self.namespaces)!r})"

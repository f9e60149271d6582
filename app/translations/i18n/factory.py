"""Factory functions for creating i18n components.

Builds root scopes and resolvers with settings-driven defaults.
"""

from typing import List, Mapping, Optional

from translations.configuration import Settings, get_settings
from translations.i18n.models import Dictionary, I18nConfig, InterpolationDelimiters
from translations.i18n.plurals import PluralRules
from translations.i18n.reporter import MissingKeyReporter
from translations.i18n.resolver import Resolver
from translations.i18n.scope import TranslationScope
from translations.logging import get_module_logger

logger = get_module_logger()


def config_from_settings(settings: Settings) -> I18nConfig:
    """Build an I18nConfig from settings (delimiters and reporter)."""
    return I18nConfig(
        interpolation=InterpolationDelimiters(
            prefix=settings.i18n.interpolation_prefix,
            suffix=settings.i18n.interpolation_suffix,
        ),
        logger=MissingKeyReporter(is_production=settings.is_production),
    )


def is_configured_locale(lang: str, locales: List[str]) -> bool:
    """True when lang, or its base language, is one of the configured locales."""
    base = PluralRules.base_language(lang)
    configured = {PluralRules.base_language(locale) for locale in locales}
    return lang in locales or base in configured


def create_scope(
    namespaces: Optional[Mapping[str, Dictionary]] = None,
    lang: Optional[str] = None,
    locale: Optional[str] = None,
    settings: Optional[Settings] = None,
    config: Optional[I18nConfig] = None,
) -> TranslationScope:
    """Create a root TranslationScope.

    Args:
        namespaces: Namespace dictionaries for the active language.
        lang: Explicit language tag.
        locale: Host-supplied current locale, used when lang is not given.
        settings: Settings instance (default: get_settings()).
        config: Config overrides applied over settings-derived config.

    Returns:
        TranslationScope: Root scope

    Usage:
        scope = create_scope({"common": {"greeting": "Hello {{name}}"}}, lang="en")
        scope.t("common:greeting", {"name": "Ana"})
    """
    settings = settings or get_settings()

    scope = TranslationScope(
        lang=lang,
        namespaces=namespaces,
        config=config_from_settings(settings).merged_with(config),
        locale=locale,
        default_locale=settings.i18n.default_locale,
        report_missing=settings.i18n.report_missing_keys,
    )
    logger.info(
        "translation_scope_created",
        lang=scope.lang,
        namespace_count=len(scope.namespaces),
    )
    if scope.lang and not is_configured_locale(scope.lang, settings.i18n.locales):
        logger.warning(
            "unsupported_locale",
            lang=scope.lang,
            locales=settings.i18n.locales,
        )
    return scope


def create_resolver(
    namespaces: Optional[Mapping[str, Dictionary]] = None,
    lang: Optional[str] = None,
    locale: Optional[str] = None,
    settings: Optional[Settings] = None,
    config: Optional[I18nConfig] = None,
) -> Resolver:
    """Create a root scope and return its resolver."""
    return create_scope(
        namespaces=namespaces,
        lang=lang,
        locale=locale,
        settings=settings,
        config=config,
    ).t

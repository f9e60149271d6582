"""Tests for translations.i18n.scope module."""

from unittest.mock import Mock

import pytest

from translations.i18n import (
    I18nConfig,
    InterpolationDelimiters,
    MissingKeyInfo,
    Resolver,
    TranslationScope,
)


@pytest.fixture
def root_scope(yaml_namespaces, reporter):
    return TranslationScope(
        lang="en",
        namespaces=yaml_namespaces,
        config=I18nConfig(logger=reporter),
    )


class TestLanguageResolution:
    """Tests for scope language resolution order."""

    def test_explicit_lang_wins(self):
        parent = TranslationScope(lang="fr")
        scope = TranslationScope(
            lang="de", parent=parent, locale="es", default_locale="en"
        )
        assert scope.lang == "de"

    def test_parent_lang(self):
        parent = TranslationScope(lang="fr")
        scope = TranslationScope(parent=parent, locale="es", default_locale="en")
        assert scope.lang == "fr"

    def test_host_locale(self):
        assert TranslationScope(locale="es", default_locale="en").lang == "es"

    def test_default_locale(self):
        assert TranslationScope(default_locale="en").lang == "en"

    def test_no_language(self):
        assert TranslationScope().lang == ""


class TestTranslationScope:
    """Tests for TranslationScope composition."""

    def test_t_is_a_resolver(self, root_scope):
        assert isinstance(root_scope.t, Resolver)
        assert root_scope.t("common:greeting", {"name": "Ana"}) == "Hello Ana"

    def test_plural_rules_follow_language(self):
        scope = TranslationScope(
            lang="ru",
            namespaces={"cart": {"apples_few": "{{count}} яблока"}},
        )
        assert scope.plural_rules.language == "ru"
        assert scope.t("cart:apples", {"count": 2}) == "2 яблока"

    def test_child_inherits_language_and_namespaces(self, root_scope):
        child = root_scope.child(namespaces={"home": {"title": "Home"}})

        assert child.parent is root_scope
        assert child.lang == "en"
        assert child.t("home:title") == "Home"
        assert child.t("common:title") == "Title"

    def test_child_namespaces_do_not_leak_to_parent(self, root_scope):
        root_scope.child(namespaces={"home": {"title": "Home"}})
        assert "home" not in root_scope.namespaces
        assert root_scope.t("home:title") == "home:title"

    def test_child_namespace_replaces_parent_namespace(self, root_scope):
        child = root_scope.child(namespaces={"common": {"title": "Local title"}})
        assert child.t("common:title") == "Local title"
        assert child.t("common:greeting") == "common:greeting"

    def test_child_language_override(self, root_scope):
        child = root_scope.child(lang="pl")
        assert child.lang == "pl"
        assert child.plural_rules.language == "pl"
        assert root_scope.lang == "en"

    def test_child_inherits_reporter(self, root_scope, reporter):
        child = root_scope.child(
            config=I18nConfig(interpolation=InterpolationDelimiters("[[", "]]"))
        )
        child.t("common:missing")
        reporter.assert_called_once_with(MissingKeyInfo("common", "missing"))

    def test_child_config_overrides_delimiters(self, root_scope):
        child = root_scope.child(
            namespaces={"home": {"welcome": "Hi [[name]]"}},
            config=I18nConfig(interpolation=InterpolationDelimiters("[[", "]]")),
        )
        assert child.t("home:welcome", {"name": "Ana"}) == "Hi Ana"
        assert child.config.logger is root_scope.config.logger

    def test_child_reporter_override(self, root_scope, reporter):
        child_reporter = Mock()
        child = root_scope.child(config=I18nConfig(logger=child_reporter))
        child.t("common:missing")
        child_reporter.assert_called_once()
        reporter.assert_not_called()

    def test_report_missing_is_inherited(self, reporter):
        parent = TranslationScope(
            lang="en", config=I18nConfig(logger=reporter), report_missing=False
        )
        child = parent.child()
        assert child.report_missing is False
        child.t("common:missing")
        reporter.assert_not_called()

    def test_repr(self, root_scope):
        assert "lang='en'" in repr(root_scope)

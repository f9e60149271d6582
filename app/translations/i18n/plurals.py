"""Pluralization rules and plural key selection.

Category names follow CLDR cardinal plural rules (zero, one, two, few, many,
other). Dictionaries address them with suffixed keys:

    apples_0: "no apples"       # exact count
    apples_one: "one apple"     # category
    apples_other: "{{count}} apples"
"""

import math
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Union

from translations.i18n.interpolation import stringify
from translations.i18n.models import Dictionary, Query
from translations.i18n.navigator import get_dictionary_value

Number = Union[int, float]

LEGACY_PLURAL_SUFFIX = "plural"


def _operands(count: Number) -> tuple:
    """Return CLDR operands (n, i, v): absolute value, integer part, visible fraction digits."""
    n = abs(count)
    i = int(n)
    if isinstance(n, float) and not n.is_integer():
        v = max(0, -Decimal(repr(n)).as_tuple().exponent)
    else:
        v = 0
    return n, i, v


def _one_other(count: Number) -> str:
    n, i, v = _operands(count)
    return "one" if i == 1 and v == 0 else "other"


def _one_if_n_is_one(count: Number) -> str:
    n, _, _ = _operands(count)
    return "one" if n == 1 else "other"


def _one_for_zero_and_one(count: Number) -> str:
    _, i, _ = _operands(count)
    return "one" if i in (0, 1) else "other"


def _no_plural(count: Number) -> str:
    return "other"


def _east_slavic(count: Number) -> str:
    _, i, v = _operands(count)
    if v != 0:
        return "other"
    if i % 10 == 1 and i % 100 != 11:
        return "one"
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return "few"
    return "many"


def _polish(count: Number) -> str:
    _, i, v = _operands(count)
    if v != 0:
        return "other"
    if i == 1:
        return "one"
    if 2 <= i % 10 <= 4 and not 12 <= i % 100 <= 14:
        return "few"
    return "many"


def _west_slavic(count: Number) -> str:
    _, i, v = _operands(count)
    if v != 0:
        return "many"
    if i == 1:
        return "one"
    if 2 <= i <= 4:
        return "few"
    return "other"


def _arabic(count: Number) -> str:
    n, _, v = _operands(count)
    if n == 0:
        return "zero"
    if n == 1:
        return "one"
    if n == 2:
        return "two"
    if v == 0:
        if 3 <= n % 100 <= 10:
            return "few"
        if 11 <= n % 100 <= 99:
            return "many"
    return "other"


def _hebrew(count: Number) -> str:
    _, i, v = _operands(count)
    if (i == 1 and v == 0) or (i == 0 and v != 0):
        return "one"
    if i == 2 and v == 0:
        return "two"
    return "other"


class PluralRules:
    """CLDR cardinal plural-category provider for one language.

    Region subtags are ignored when picking rules ("pt-BR" uses "pt").
    Unknown languages use the English rule.

    Example:
        >>> PluralRules("en").select(1)
        'one'
        >>> PluralRules("ru-RU").select(5)
        'many'
    """

    RULES: Dict[str, Callable[[Number], str]] = {
        "en": _one_other,
        "de": _one_other,
        "nl": _one_other,
        "sv": _one_other,
        "da": _one_if_n_is_one,
        "no": _one_if_n_is_one,
        "nb": _one_if_n_is_one,
        "it": _one_other,
        "es": _one_if_n_is_one,
        "tr": _one_if_n_is_one,
        "pt": _one_for_zero_and_one,
        "fr": _one_for_zero_and_one,
        "ru": _east_slavic,
        "uk": _east_slavic,
        "be": _east_slavic,
        "pl": _polish,
        "cs": _west_slavic,
        "sk": _west_slavic,
        "ar": _arabic,
        "he": _hebrew,
        "ja": _no_plural,
        "zh": _no_plural,
        "ko": _no_plural,
        "vi": _no_plural,
        "th": _no_plural,
        "id": _no_plural,
    }
    DEFAULT_LANGUAGE = "en"

    def __init__(self, lang: Optional[str] = ""):
        self.lang = lang or ""
        self.language = self.base_language(self.lang)
        self._rule = self.RULES.get(self.language, self.RULES[self.DEFAULT_LANGUAGE])

    @staticmethod
    def base_language(lang: str) -> str:
        """Get the language part of a tag ("pt" from "pt-BR" or "pt_BR")."""
        return lang.replace("_", "-").split("-")[0].lower()

    @classmethod
    def supports_language(cls, lang: str) -> bool:
        return cls.base_language(lang) in cls.RULES

    def select(self, count: Number) -> str:
        """Return the plural category name for ``count``."""
        if isinstance(count, float) and (math.isnan(count) or math.isinf(count)):
            return "other"
        return self._rule(count)

    select_category = select


def is_count(value: Any) -> bool:
    """True for int/float counts; booleans are not counts."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def select_plural_key(
    plural_rules: PluralRules,
    dictionary: Dictionary,
    key: Optional[str],
    query: Optional[Query] = None,
) -> Optional[str]:
    """Pick the dictionary key to read for a ``count`` query.

    Order: exact count (``key_2``), then for counts above one the category
    (``key_other``) and the legacy catch-all (``key_plural``), then ``key``.

    Args:
        plural_rules: Category provider for the active language.
        dictionary: Namespace dictionary.
        key: Base leaf key.
        query: Query that may carry a numeric ``count``.

    Returns:
        The key to look up. The dictionary is not modified.
    """
    if not query or key is None:
        return key

    count = query.get("count")
    if not is_count(count):
        return key

    exact_key = f"{key}_{stringify(count)}"
    if get_dictionary_value(dictionary, exact_key) is not None:
        return exact_key

    if count > 1:
        category_key = f"{key}_{plural_rules.select(count)}"
        if get_dictionary_value(dictionary, category_key) is not None:
            return category_key

        legacy_key = f"{key}_{LEGACY_PLURAL_SUFFIX}"
        if get_dictionary_value(dictionary, legacy_key) is not None:
            return legacy_key

    return key

"""Translation models for the i18n resolver.

Defines the value objects passed between the key splitter, navigator,
plural selector, interpolator and resolver.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

Dictionary = Mapping[str, Any]
Query = Mapping[str, Any]
Fallback = Union[str, Sequence[str], None]

DEFAULT_PREFIX = "{{"
DEFAULT_SUFFIX = "}}"


@dataclass(frozen=True)
class TranslationKey:
    """A composite ``namespace:leaf`` translation key.

    The leaf may address nested dictionary nodes with dots
    (e.g., "common:buttons.save").

    Attributes:
        namespace: Dictionary partition named before the first colon.
        i18n_key: Dotted leaf path, or None when the raw key had no colon.
    """

    namespace: str
    i18n_key: Optional[str] = None

    def __str__(self) -> str:
        if self.i18n_key is None:
            return self.namespace
        return f"{self.namespace}:{self.i18n_key}"

    @classmethod
    def from_string(cls, raw: Union[str, Sequence[str], None]) -> "TranslationKey":
        """Split a raw key on its first colon.

        Later colons belong to the leaf ("ns:a:b" -> ("ns", "a:b")). A trailing
        colon leaves no leaf ("ns:" -> ("ns", None)), so the key is reported as
        lacking a namespace separator under namespace "ns". A list or tuple
        resolves through its first element.

        Args:
            raw: Composite key string.

        Returns:
            TranslationKey instance. Never raises.
        """
        raw = raw_key_string(raw)
        namespace, _, i18n_key = raw.partition(":")
        return cls(namespace=namespace, i18n_key=i18n_key or None)


def raw_key_string(raw: Union[str, Sequence[str], None]) -> str:
    """Normalize a key argument to the string that is displayed as last resort."""
    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else ""
    return raw or ""


@dataclass(frozen=True)
class InterpolationDelimiters:
    """Placeholder delimiters, ``{{name}}`` by default."""

    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX


@dataclass(frozen=True)
class MissingKeyInfo:
    """Payload handed to missing-key reporters.

    Attributes:
        namespace: Namespace of the key that resolved empty.
        i18n_key: Leaf key, or None when the key had no namespace separator.
    """

    namespace: str
    i18n_key: Optional[str] = None


MissingKeyLogger = Callable[[MissingKeyInfo], None]


@dataclass(frozen=True)
class I18nConfig:
    """Configuration consumed by the resolver for one language scope.

    Attributes:
        interpolation: Placeholder delimiters, defaults when unset.
        logger: Missing-key reporter, the built-in reporter when unset.
    """

    interpolation: Optional[InterpolationDelimiters] = None
    logger: Optional[MissingKeyLogger] = None

    @property
    def delimiters(self) -> InterpolationDelimiters:
        return self.interpolation or InterpolationDelimiters()

    def merged_with(self, other: Optional["I18nConfig"]) -> "I18nConfig":
        """Return a new config where values set on ``other`` win."""
        if other is None:
            return self
        overrides: Dict[str, Any] = {}
        if other.interpolation is not None:
            overrides["interpolation"] = other.interpolation
        if other.logger is not None:
            overrides["logger"] = other.logger
        return replace(self, **overrides)


@dataclass(frozen=True)
class ResolveOptions:
    """Per-call resolution options.

    Attributes:
        return_objects: Accept object-valued leaves as results.
        fallback: Alternate key, or ordered keys, tried when resolution is empty.
    """

    return_objects: bool = False
    fallback: Fallback = None

    def fallback_chain(self) -> List[Any]:
        """Return the fallback keys as a list (a single string becomes one entry)."""
        if isinstance(self.fallback, str):
            return [self.fallback]
        return list(self.fallback or [])

    def with_fallback(self, fallback: Sequence[Any]) -> "ResolveOptions":
        return replace(self, fallback=list(fallback))

    @classmethod
    def coerce(
        cls, options: Union["ResolveOptions", Mapping[str, Any], None]
    ) -> "ResolveOptions":
        """Build options from None, an instance, or a plain mapping.

        Mappings may use either ``returnObjects`` or ``return_objects``.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return_objects = options.get(
            "return_objects", options.get("returnObjects", False)
        )
        return cls(
            return_objects=bool(return_objects),
            fallback=options.get("fallback"),
        )


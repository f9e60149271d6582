"""i18n feature settings."""

from pydantic import Field, field_validator

from translations.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation resolution configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Language used when no scope supplies one (default: en)
        I18N_LOCALES: JSON list of languages the host application serves
        I18N_INTERPOLATION_PREFIX: Placeholder opening delimiter (default: {{)
        I18N_INTERPOLATION_SUFFIX: Placeholder closing delimiter (default: }})
        I18N_REPORT_MISSING_KEYS: Invoke the missing-key reporter (default: True)

    Example:
        ```python
        from translations.configuration import get_settings

        settings = get_settings()
        prefix = settings.i18n.interpolation_prefix
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Fallback language tag when no scope or host locale is set",
    )
    locales: list[str] = Field(
        default_factory=lambda: ["en"],
        alias="I18N_LOCALES",
        description="Language tags served by the host application",
    )
    interpolation_prefix: str = Field(
        default="{{",
        alias="I18N_INTERPOLATION_PREFIX",
        description="Opening delimiter for placeholders",
    )
    interpolation_suffix: str = Field(
        default="}}",
        alias="I18N_INTERPOLATION_SUFFIX",
        description="Closing delimiter for placeholders",
    )
    report_missing_keys: bool = Field(
        default=True,
        alias="I18N_REPORT_MISSING_KEYS",
        description="Report keys that resolve to nothing",
    )

    @field_validator("interpolation_prefix", "interpolation_suffix")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Reject empty interpolation delimiters."""
        if not v:
            raise ValueError("Interpolation delimiters must not be empty")
        return v

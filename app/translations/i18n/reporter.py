"""Default missing-key reporter."""

from translations.i18n.models import MissingKeyInfo
from translations.logging import get_module_logger

logger = get_module_logger()


class MissingKeyReporter:
    """Logs keys that resolved to nothing.

    Silent when ``is_production`` is set. Distinguishes a key written without
    a namespace ("value" instead of "ns:value") from a key missing in its
    namespace dictionary.

    Attributes:
        is_production: Suppress all reports.
    """

    def __init__(self, is_production: bool = False):
        self.is_production = is_production

    def __call__(self, info: MissingKeyInfo) -> None:
        if self.is_production:
            return

        if not info.i18n_key:
            logger.warning(
                "translation_key_without_namespace",
                text=info.namespace,
                message=f'The text "{info.namespace}" has no namespace in front of it.',
            )
            return

        logger.warning(
            "missing_translation_key",
            namespace=info.namespace,
            i18n_key=info.i18n_key,
            message=(
                f'"{info.namespace}:{info.i18n_key}" is missing in current namespace '
                f'configuration. Try adding "{info.i18n_key}" to the namespace '
                f'"{info.namespace}".'
            ),
        )

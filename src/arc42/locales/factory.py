"""
Language factory.

Mirrors :class:`~arc42.formats.factory.OutputFormatFactory` for locales,
with one deliberate difference in target: the lenient path falls back to
the *default locale* strategy (EN), never to whatever happens to be
registered.
"""

from __future__ import annotations

from arc42.core.errors import DefaultNotRegisteredError, StrategyNotRegisteredError
from arc42.core.logging import get_logger
from arc42.locales.registry import LanguageRegistry
from arc42.locales.strategy import DEFAULT_LANGUAGE, LanguageStrategy

logger = get_logger(__name__)


class LanguageFactory:
    """Normalization and fallback policy over a :class:`LanguageRegistry`."""

    def __init__(self, registry: LanguageRegistry):
        self._registry = registry

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry

    def normalize_code(self, code: str) -> str:
        return code.strip().upper()

    def create(self, code: str) -> LanguageStrategy:
        return self._registry.get_or_raise(self.normalize_code(code))

    def create_with_fallback(self, code: str) -> LanguageStrategy:
        """Strategy for *code*, else the default locale with a warning."""
        normalized = self.normalize_code(code)
        strategy = self._registry.get(normalized)
        if strategy is not None:
            return strategy

        default = self._registry.get(self.get_default_code())
        if default is None:
            raise DefaultNotRegisteredError(
                self._registry.kind,
                self.get_default_code(),
                self._registry.get_available_codes(),
                requested=code,
            )

        logger.warning(
            "unknown_language_code",
            requested=code,
            fallback=default.code,
            message=f'Unknown language code "{code}". Falling back to "{default.code}".',
        )
        return default

    def is_supported(self, code: str) -> bool:
        return self._registry.is_supported(code)

    def get_available_codes(self) -> list[str]:
        return self._registry.get_available_codes()

    def get_default(self) -> LanguageStrategy:
        """The default-locale strategy. Raises if it is not registered."""
        default = self._registry.get(self.get_default_code())
        if default is None:
            raise StrategyNotRegisteredError(
                self._registry.kind, self.get_default_code(), self._registry.get_available_codes()
            )
        return default

    def get_default_code(self) -> str:
        return DEFAULT_LANGUAGE.value


__all__ = ["LanguageFactory"]

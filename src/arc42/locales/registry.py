"""Language registry: language strategies keyed by uppercase code."""

from __future__ import annotations

from arc42.core.registry import StrategyRegistry
from arc42.locales.strategy import DEFAULT_LANGUAGE, LanguageStrategy


class LanguageRegistry(StrategyRegistry[LanguageStrategy]):
    """Registry of language strategies. Lookups trim and uppercase the code."""

    kind = "language"
    default_code = DEFAULT_LANGUAGE.value

    def normalize_code(self, code: str) -> str:
        return code.strip().upper()


__all__ = ["LanguageRegistry"]

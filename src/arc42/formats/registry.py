"""Output format registry: format strategies keyed by lowercase code."""

from __future__ import annotations

from arc42.core.registry import StrategyRegistry
from arc42.formats.strategy import DEFAULT_OUTPUT_FORMAT, OutputFormatStrategy


class OutputFormatRegistry(StrategyRegistry[OutputFormatStrategy]):
    """
    Registry of output format strategies.

    Lookups trim and lowercase the code. Aliases are *not* resolved here;
    that is the factory's job, so ``get_available_codes()`` only ever lists
    canonical codes.

    Examples:
        >>> registry = OutputFormatRegistry().register(MarkdownFormatStrategy())
        >>> registry.get("  MARKDOWN ") is registry.get("markdown")
        True
    """

    kind = "output format"
    default_code = DEFAULT_OUTPUT_FORMAT.value

    def normalize_code(self, code: str) -> str:
        return code.strip().lower()


__all__ = ["OutputFormatRegistry"]

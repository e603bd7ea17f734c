"""
Output format factory.

Resolves free-form user input (``"MD"``, ``" adoc "``, ``"markdown"``) to a
registered :class:`OutputFormatStrategy`.

Two resolution paths:

``create(code)``
    Strict. Raises ``StrategyNotRegisteredError`` naming every registered
    code when the format is unknown.

``create_with_fallback(code)``
    Lenient. An unknown format degrades to the *system default format*
    with a logged warning. Raises only when the default itself is not
    registered, which is a deployment error rather than a user error.

Tags:
    factory-pattern, fallback, aliases, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from arc42.core.errors import DefaultNotRegisteredError, StrategyNotRegisteredError
from arc42.core.logging import get_logger
from arc42.formats.registry import OutputFormatRegistry
from arc42.formats.strategy import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMAT_ALIASES, OutputFormatStrategy

logger = get_logger(__name__)


class OutputFormatFactory:
    """Alias normalization and fallback policy over an :class:`OutputFormatRegistry`."""

    def __init__(self, registry: OutputFormatRegistry):
        self._registry = registry

    @property
    def registry(self) -> OutputFormatRegistry:
        return self._registry

    def normalize_code(self, code: str) -> str:
        """Canonical code for *code*; unknown input comes back lowercased, never rejected."""
        lowered = code.strip().lower()
        return OUTPUT_FORMAT_ALIASES.get(lowered, lowered)

    def create(self, code: str) -> OutputFormatStrategy:
        return self._registry.get_or_raise(self.normalize_code(code))

    def create_with_fallback(self, code: str) -> OutputFormatStrategy:
        normalized = self.normalize_code(code)
        strategy = self._registry.get(normalized)
        if strategy is not None:
            return strategy

        default = self._registry.get_default()
        if default is None:
            raise DefaultNotRegisteredError(
                self._registry.kind,
                self.get_default_code(),
                self._registry.get_available_codes(),
                requested=code,
            )

        logger.warning(
            "unknown_output_format",
            requested=code,
            fallback=default.code.value,
            message=f'Unknown output format "{code}". Falling back to "{default.code.value}".',
        )
        return default

    def is_supported(self, code: str) -> bool:
        return self._registry.is_supported(self.normalize_code(code))

    def get_available_codes(self) -> list[str]:
        return self._registry.get_available_codes()

    def get_default(self) -> OutputFormatStrategy:
        """The default format strategy. Raises if it is not registered."""
        default = self._registry.get_default()
        if default is None:
            raise StrategyNotRegisteredError(
                self._registry.kind, self.get_default_code(), self._registry.get_available_codes()
            )
        return default

    def get_default_code(self) -> str:
        return DEFAULT_OUTPUT_FORMAT.value

    def get_all_aliases(self) -> list[str]:
        return list(OUTPUT_FORMAT_ALIASES.keys())

    def resolve_alias(self, code: str) -> str | None:
        """Canonical code for a known alias, else ``None``."""
        return OUTPUT_FORMAT_ALIASES.get(code.strip().lower())


__all__ = ["OutputFormatFactory"]

"""
Code-keyed strategy registry.

Manifesto:
    Consumers should never hard-code strategy classes. A registry maps a
    normalized code (``"markdown"``, ``"DE"``) to one shared, immutable
    strategy object, and factories layered on top add aliasing and fallback
    policy. Registries are plain objects built once at startup and passed by
    reference; tests build fresh ones instead of touching a global.

Design notes:
    - **Last registration wins.** ``register()`` silently overwrites an
      existing code. Overrides and test doubles rely on this; use
      ``register_if_absent()`` where a first registration must stick.
    - Lookups normalize the code (trim + case fold) and never raise, except
      ``get_or_raise()``, whose error lists the codes currently registered.

Tags:
    registry-pattern, strategy-pattern, arc42

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Protocol, TypeVar

from arc42.core.errors import StrategyNotRegisteredError


class CodedStrategy(Protocol):
    """Anything registered by code."""

    @property
    def code(self) -> str: ...


S = TypeVar("S", bound=CodedStrategy)


class StrategyRegistry(Generic[S]):
    """
    Registry for strategies keyed by normalized code.

    Subclasses provide :meth:`normalize_code`, the ``kind`` label used in
    error messages, and ``default_code``.
    """

    kind: str = "strategy"
    default_code: str = ""

    def __init__(self) -> None:
        self._strategies: dict[str, S] = {}

    def normalize_code(self, code: str) -> str:
        return code.strip()

    def register(self, strategy: S) -> StrategyRegistry[S]:
        """Register *strategy* under its normalized code (last registration wins)."""
        self._strategies[self.normalize_code(str(strategy.code))] = strategy
        return self

    def register_if_absent(self, strategy: S) -> bool:
        """Register only when the code is free. Returns whether it was stored."""
        key = self.normalize_code(str(strategy.code))
        if key in self._strategies:
            return False
        self._strategies[key] = strategy
        return True

    def get(self, code: str) -> S | None:
        return self._strategies.get(self.normalize_code(code))

    def get_or_raise(self, code: str) -> S:
        """Like :meth:`get` but raise ``StrategyNotRegisteredError`` when absent."""
        strategy = self.get(code)
        if strategy is None:
            raise StrategyNotRegisteredError(self.kind, self.normalize_code(code), self.get_available_codes())
        return strategy

    def get_all(self) -> list[S]:
        """Snapshot of all registered strategies."""
        return list(self._strategies.values())

    def is_supported(self, code: str) -> bool:
        return self.normalize_code(code) in self._strategies

    def get_available_codes(self) -> list[str]:
        return list(self._strategies.keys())

    def get_default(self) -> S | None:
        """The strategy registered under ``default_code``, or ``None``."""
        return self.get(self.default_code)

    @property
    def size(self) -> int:
        return len(self._strategies)

    def clear(self) -> StrategyRegistry[S]:
        self._strategies.clear()
        return self

    def __len__(self) -> int:
        return len(self._strategies)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.is_supported(code)

    def __iter__(self) -> Iterator[S]:
        return iter(self.get_all())


__all__ = ["CodedStrategy", "StrategyRegistry"]

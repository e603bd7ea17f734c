"""
Operation result envelope.

Provides :class:`OperationResult`, the success/failure envelope every tool
operation returns. Besides the payload it carries a human-readable
*message* and a list of suggested *next_steps*, which MCP clients surface
to the user verbatim.

Operations never raise to their callers. An :class:`~arc42.core.errors.Arc42Error`
raised on a strict path is folded into a failed result via
:meth:`OperationResult.from_error`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from arc42.core.errors import Arc42Error, ErrorCategory

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class OperationError:
    """Structured error detail for failed operations.

    Attributes:
        code: Machine-readable code (``NOT_INITIALIZED``, ``VALIDATION``, ...).
        message: Human-readable description of the error.
        category: Optional :class:`ErrorCategory` for routing.
        details: Extra key/value context (offending code, accepted codes).
    """

    code: str
    message: str
    category: ErrorCategory | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class OperationResult(Generic[T]):
    """Envelope returned by every operation function.

    Use the :meth:`ok`, :meth:`fail` and :meth:`from_error` factories
    instead of the constructor.
    """

    success: bool
    message: str = ""
    data: T | None = None
    error: OperationError | None = None
    next_steps: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

    # ------------------------------------------------------------------ #
    # Factory helpers
    # ------------------------------------------------------------------ #

    @classmethod
    def ok(
        cls,
        data: T,
        *,
        message: str = "",
        next_steps: list[str] | None = None,
        warnings: list[str] | None = None,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        """Create a successful result."""
        return cls(
            success=True,
            message=message,
            data=data,
            next_steps=next_steps or [],
            warnings=warnings or [],
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        *,
        category: ErrorCategory | None = None,
        details: dict[str, Any] | None = None,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        """Create a failed result."""
        return cls(
            success=False,
            message=message,
            error=OperationError(code=code, message=message, category=category, details=details or {}),
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def from_error(cls, exc: Arc42Error, *, elapsed_ms: float = 0.0) -> OperationResult[T]:
        """Fold a typed error into a failed result, keeping its context."""
        return cls.fail(
            exc.category.value,
            exc.message,
            category=exc.category,
            details=exc.context.to_dict(),
            elapsed_ms=elapsed_ms,
        )

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error else None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (for MCP and ``--json`` output)."""
        d: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            d["data"] = self.data
        if self.next_steps:
            d["next_steps"] = self.next_steps
        if self.error is not None:
            d["error"] = {"code": self.error.code, "message": self.error.message}
            if self.error.details:
                d["error"]["details"] = self.error.details
        if self.warnings:
            d["warnings"] = self.warnings
        if self.elapsed_ms:
            d["elapsed_ms"] = round(self.elapsed_ms, 2)
        return d


# ------------------------------------------------------------------ #
# Timing helper
# ------------------------------------------------------------------ #


class _Timer:
    """Minimal stopwatch for timing operations."""

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._start) * 1000


def start_timer() -> _Timer:
    """Return a lightweight timer. Use ``timer.elapsed_ms`` when done."""
    return _Timer()


__all__ = ["OperationError", "OperationResult", "start_timer"]

"""
Structured error types for the arc42 documentation server.

Provides a small hierarchy of typed errors carrying a category, structured
context, and an optional chained cause. Errors are reserved for
configuration and programming mistakes (a strict lookup for an unregistered
code, a missing default strategy, an invalid argument on a strict tool path).
Irregular *user input* on lenient paths never raises: it degrades to a
default with a logged warning.

Manifesto:
    - **Typed Error Hierarchy:** Different error types for different domains
    - **Rich Context:** Errors carry the offending code and what was available
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌────────────────────────────────────────────────────────────┐
        │                        Arc42Error                           │
        │              (category, context, cause)                     │
        ├────────────────────────────────────────────────────────────┤
        │  ConfigError                  ValidationError               │
        │  (CONFIG)                     (VALIDATION)                  │
        │     │                            │                          │
        │  StrategyNotRegisteredError   InvalidLanguageError          │
        │  DefaultNotRegisteredError    InvalidFormatError            │
        │                               InvalidSectionError           │
        │                                                             │
        │  StorageError                                               │
        │  (STORAGE)                                                  │
        └────────────────────────────────────────────────────────────┘

Examples:
    >>> err = StrategyNotRegisteredError("output format", "xml", ["markdown", "asciidoc"])
    >>> str(err)
    'Output format "xml" is not registered. Available: markdown, asciidoc'
    >>> err.category
    <ErrorCategory.CONFIG: 'CONFIG'>

Tags:
    error-handling, exception-hierarchy, error-context, arc42

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    STORAGE = "STORAGE"  # Workspace directories, section files
    PARSE = "PARSE"  # Unreadable config or content data
    VALIDATION = "VALIDATION"  # Bad tool arguments on strict paths
    CONFIG = "CONFIG"  # Missing registrations, missing defaults
    INTERNAL = "INTERNAL"  # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """Structured metadata attached to an error.

    Attributes:
        code: The language/format/section code involved, if any.
        available: Codes that would have been accepted.
        path: Filesystem path involved, if any.
        metadata: Additional key/value pairs.
    """

    code: str | None = None
    available: list[str] | None = None
    path: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        for key in ("code", "available", "path"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class Arc42Error(Exception):
    """Base exception for all arc42 errors.

    Subclasses set ``default_category`` to classify themselves.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> Arc42Error:
        """Add context fields and return self for chaining."""
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and tool responses."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context = self.context.to_dict()
        if context:
            result["context"] = context
        if self.cause is not None:
            result["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(Arc42Error):
    """Missing or inconsistent registrations and settings."""

    default_category = ErrorCategory.CONFIG


def _join_codes(codes: Iterable[str]) -> str:
    return ", ".join(codes) or "none"


class StrategyNotRegisteredError(ConfigError):
    """A strict lookup asked for a code with no registered strategy."""

    def __init__(self, kind: str, code: str, available: Iterable[str]):
        available = list(available)
        super().__init__(
            f'{kind[:1].upper()}{kind[1:]} "{code}" is not registered. Available: {_join_codes(available)}',
            context=ErrorContext(code=code, available=available),
        )
        self.kind = kind
        self.code = code
        self.available = available


class DefaultNotRegisteredError(ConfigError):
    """Fallback was requested but the default strategy itself is missing."""

    def __init__(self, kind: str, default_code: str, available: Iterable[str], *, requested: str | None = None):
        available = list(available)
        prefix = f'{kind[:1].upper()}{kind[1:]} "{requested}" is not supported and n' if requested else "N"
        super().__init__(
            f'{prefix}o default {kind} is registered (default "{default_code}"). '
            f"Available: {_join_codes(available)}",
            context=ErrorContext(code=requested, available=available, metadata={"default": default_code}),
        )
        self.kind = kind
        self.default_code = default_code
        self.requested = requested
        self.available = available


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(Arc42Error):
    """Invalid argument on a strict path."""

    default_category = ErrorCategory.VALIDATION


class InvalidLanguageError(ValidationError):
    """Language code not in the supported set."""

    def __init__(self, code: str, supported: Iterable[str]):
        supported = list(supported)
        super().__init__(
            f'Invalid language code: "{code}". Supported codes: {_join_codes(supported)}',
            context=ErrorContext(code=code, available=supported),
        )
        self.code = code
        self.supported = supported


class InvalidFormatError(ValidationError):
    """Output format not recognized, even through aliases."""

    def __init__(self, code: str, supported: Iterable[str]):
        supported = list(supported)
        super().__init__(
            f'Invalid output format: "{code}". Supported formats: {_join_codes(supported)}',
            context=ErrorContext(code=code, available=supported),
        )
        self.code = code
        self.supported = supported


class InvalidSectionError(ValidationError):
    """Section identifier is not one of the 12 arc42 sections."""

    def __init__(self, section: str, supported: Iterable[str]):
        supported = list(supported)
        super().__init__(
            f'Invalid section: "{section}". Supported sections: {_join_codes(supported)}',
            context=ErrorContext(code=section, available=supported),
        )
        self.section = section


# =============================================================================
# STORAGE ERRORS
# =============================================================================


class StorageError(Arc42Error):
    """Filesystem problems in the documentation workspace."""

    default_category = ErrorCategory.STORAGE


__all__ = [
    "Arc42Error",
    "ConfigError",
    "DefaultNotRegisteredError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidFormatError",
    "InvalidLanguageError",
    "InvalidSectionError",
    "StorageError",
    "StrategyNotRegisteredError",
    "ValidationError",
]

"""arc42 core primitives -- errors, logging, settings, sections, project config.

Modules
-------
errors          Typed error hierarchy (Arc42Error and subclasses)
logging         structlog configuration (stderr only)
settings        Arc42Settings (pydantic-settings, ARC42_* env vars)
sections        The 12 arc42 section identifiers and canonical metadata
registry        Generic code-keyed StrategyRegistry
reference       Upstream arc42 template release information
project_config  Workspace config.yaml read/write

Tags:
    arc42, core, package-overview

Doc-Types:
    package-overview, module-index
"""

from arc42.core.errors import (
    Arc42Error,
    ConfigError,
    DefaultNotRegisteredError,
    ErrorCategory,
    InvalidFormatError,
    InvalidLanguageError,
    InvalidSectionError,
    StrategyNotRegisteredError,
    ValidationError,
)
from arc42.core.sections import ARC42_SECTIONS, SECTION_METADATA, Arc42Section, SectionMetadata

__all__ = [
    "ARC42_SECTIONS",
    "Arc42Error",
    "Arc42Section",
    "ConfigError",
    "DefaultNotRegisteredError",
    "ErrorCategory",
    "InvalidFormatError",
    "InvalidLanguageError",
    "InvalidSectionError",
    "SECTION_METADATA",
    "SectionMetadata",
    "StrategyNotRegisteredError",
    "ValidationError",
]

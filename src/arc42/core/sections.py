"""
The twelve arc42 sections.

Each section identifier carries a canonical English title and description.
Localized strategies supply their own titles, but this table stays the
naming source of truth (file names, ordering, tool schemas).

Tags:
    arc42, sections, constants

Doc-Types:
    api-reference
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from arc42.core.errors import InvalidSectionError


class Arc42Section(str, Enum):
    """Section identifiers, in document order."""

    INTRODUCTION_AND_GOALS = "01_introduction_and_goals"
    ARCHITECTURE_CONSTRAINTS = "02_architecture_constraints"
    CONTEXT_AND_SCOPE = "03_context_and_scope"
    SOLUTION_STRATEGY = "04_solution_strategy"
    BUILDING_BLOCK_VIEW = "05_building_block_view"
    RUNTIME_VIEW = "06_runtime_view"
    DEPLOYMENT_VIEW = "07_deployment_view"
    CONCEPTS = "08_concepts"
    ARCHITECTURE_DECISIONS = "09_architecture_decisions"
    QUALITY_REQUIREMENTS = "10_quality_requirements"
    TECHNICAL_RISKS = "11_technical_risks"
    GLOSSARY = "12_glossary"

    def __str__(self) -> str:
        return self.value

    @property
    def order(self) -> int:
        return int(self.value[:2])


ARC42_SECTIONS: tuple[str, ...] = tuple(s.value for s in Arc42Section)


@dataclass(frozen=True, slots=True)
class SectionMetadata:
    """Canonical English metadata for one section."""

    name: str
    title: str
    description: str
    order: int


SECTION_METADATA: dict[str, SectionMetadata] = {
    meta.name: meta
    for meta in (
        SectionMetadata(
            "01_introduction_and_goals",
            "Introduction and Goals",
            "Requirements overview, quality goals, and stakeholders",
            1,
        ),
        SectionMetadata(
            "02_architecture_constraints",
            "Architecture Constraints",
            "Technical and organizational constraints",
            2,
        ),
        SectionMetadata(
            "03_context_and_scope",
            "Context and Scope",
            "Business and technical context, external interfaces",
            3,
        ),
        SectionMetadata(
            "04_solution_strategy",
            "Solution Strategy",
            "Fundamental solution decisions and strategies",
            4,
        ),
        SectionMetadata(
            "05_building_block_view",
            "Building Block View",
            "Static decomposition of the system",
            5,
        ),
        SectionMetadata(
            "06_runtime_view",
            "Runtime View",
            "Dynamic behavior and key scenarios",
            6,
        ),
        SectionMetadata(
            "07_deployment_view",
            "Deployment View",
            "Infrastructure and deployment",
            7,
        ),
        SectionMetadata(
            "08_concepts",
            "Cross-cutting Concepts",
            "Overall, principal regulations and solution approaches",
            8,
        ),
        SectionMetadata(
            "09_architecture_decisions",
            "Architecture Decisions",
            "Important, expensive, critical, or risky decisions",
            9,
        ),
        SectionMetadata(
            "10_quality_requirements",
            "Quality Requirements",
            "Quality tree and quality scenarios",
            10,
        ),
        SectionMetadata(
            "11_technical_risks",
            "Risks and Technical Debt",
            "Known problems, risks, and technical debt",
            11,
        ),
        SectionMetadata(
            "12_glossary",
            "Glossary",
            "Important domain and technical terms",
            12,
        ),
    )
}


def is_arc42_section(value: object) -> bool:
    """True when *value* is one of the 12 section identifiers."""
    return isinstance(value, str) and value in SECTION_METADATA


def parse_section(value: str) -> Arc42Section:
    """Return the :class:`Arc42Section` for *value* or raise ``InvalidSectionError``."""
    if isinstance(value, Arc42Section):
        return value
    try:
        return Arc42Section(value)
    except ValueError as exc:
        raise InvalidSectionError(value, ARC42_SECTIONS) from exc


__all__ = [
    "ARC42_SECTIONS",
    "Arc42Section",
    "SECTION_METADATA",
    "SectionMetadata",
    "is_arc42_section",
    "parse_section",
]

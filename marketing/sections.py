"""
Section registry for the marketing plan document.

The set of sections is closed: an identifier outside `MarketingPlanSection`
is invalid input, never a new section.  Views and services call
`validate_section` before touching storage.
"""
from django.db import models

from .exceptions import InvalidSection


class MarketingPlanSection(models.TextChoices):
    EXECUTIVE_SUMMARY = "executive-summary", "Executive Summary"
    MISSION_STATEMENT = "mission-statement", "Mission Statement"
    MARKETING_OBJECTIVES = "marketing-objectives", "Marketing Objectives"
    KEY_PERFORMANCE = "key-performance", "Key Performance Areas"
    SWOT_ANALYSIS = "swot-analysis", "SWOT Analysis"
    MARKET_RESEARCH = "market-research", "Market Research"
    MARKETING_STRATEGY = "marketing-strategy", "Marketing Strategy"
    CHALLENGES_SOLUTIONS = "challenges-solutions", "Challenges & Solutions"
    EXECUTION = "execution", "Execution"
    BUDGET = "budget", "Budget"
    CONCLUSION = "conclusion", "Conclusion"
    FEEDBACK = "feedback", "Feedback"


SECTION_IDS = frozenset(MarketingPlanSection.values)


def is_valid(section) -> bool:
    return isinstance(section, str) and section in SECTION_IDS


def validate_section(section) -> str:
    """Return `section` unchanged, or raise `InvalidSection`."""
    if not is_valid(section):
        raise InvalidSection(section)
    return section


def section_title(section: str) -> str:
    return MarketingPlanSection(validate_section(section)).label


def table_of_contents() -> list[dict]:
    """Sections in document order, as shown in the plan's navigation."""
    return [
        {"id": value, "title": label, "position": index}
        for index, (value, label) in enumerate(MarketingPlanSection.choices, start=1)
    ]

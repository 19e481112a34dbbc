"""
Domain models for localized analysis reports.

Output of LocalizationResolver, ready for the presentation layer.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from kalorify.domain.analysis.models import AnalysisItem, AnalysisResult, Totals


class FieldCategory(str, Enum):
    """Free-text field categories, one lookup table each."""

    FOOD_NAME = "food_name"
    DIET_FIT = "diet_fit"
    NOTE = "note"
    TIP = "tip"
    SUMMARY = "summary"  # Tip vocabulary plus summary sentences


class DietColor(str, Enum):
    """Presentation color class of a diet-fit tag."""

    GREEN = "green"
    EMERALD = "emerald"
    BLUE = "blue"
    PURPLE = "purple"
    INDIGO = "indigo"
    YELLOW = "yellow"
    ORANGE = "orange"
    PINK = "pink"
    GRAY = "gray"  # Unclassified


class LocalizedTag(BaseModel):
    """
    Diet-fit tag ready for display.

    Attributes:
        source: Tag as sent by the analyzer
        label: Translated label (source when unmapped)
        color: Color class (GRAY when unmapped)
    """

    model_config = ConfigDict(frozen=True)

    source: str
    label: str
    color: DietColor = DietColor.GRAY


class LocalizedItem(BaseModel):
    """
    Food item with every free-text field localized.

    Numeric values stay on `item`. `note` and `tip` are None when the
    analyzer sent nothing to show.
    """

    model_config = ConfigDict(frozen=True)

    item: AnalysisItem
    name: str
    tags: tuple[LocalizedTag, ...] = Field(default_factory=tuple)
    note: Optional[str] = None
    tip: Optional[str] = None


class SummaryLines(BaseModel):
    """
    Two-tier meal assessment.

    Attributes:
        primary: Overall judgment, always present (placeholder fallback)
        secondary: Actionable tip, None when the analyzer sent none
    """

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: Optional[str] = None


class LocalizedReport(BaseModel):
    """
    Fully resolved analysis report.

    Example:
        >>> report = resolver.resolve_result(result)
        >>> print(report.summary.primary)
        >>> for entry in report.items:
        ...     print(entry.name, [tag.label for tag in entry.tags])
    """

    model_config = ConfigDict(frozen=True)

    result: AnalysisResult
    items: tuple[LocalizedItem, ...]
    summary: SummaryLines

    @property
    def totals(self) -> Totals:
        """Totals as sent by the analyzer."""
        return self.result.totals

"""
Localization resolver.

Translates every free-text field of an analysis result for display.
Lookups are exact-match with pass-through fallback, so the resolver is
total: any input yields an output, unmapped strings stay in the source
language.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from kalorify.domain.analysis.models import AnalysisItem, AnalysisResult, Summary
from kalorify.domain.localization.catalog import LocalizationCatalog
from kalorify.domain.localization.models import (
    DietColor,
    FieldCategory,
    LocalizedItem,
    LocalizedReport,
    LocalizedTag,
    SummaryLines,
)

# Keyed by the analyzer's tag, independent of the display language
DIET_FIT_COLORS: Mapping[str, DietColor] = MappingProxyType(
    {
        "vegetarian": DietColor.GREEN,
        "vegan": DietColor.EMERALD,
        "high-protein": DietColor.BLUE,
        "low-carb": DietColor.PURPLE,
        "keto": DietColor.INDIGO,
        "gluten-free": DietColor.YELLOW,
        "dairy-free": DietColor.ORANGE,
        "low-calorie": DietColor.PINK,
    }
)


class LocalizationResolver:
    """
    Resolver from analyzer vocabulary to display language.

    Tables are read-only and injected, so one resolver can be shared
    freely across requests.

    Example:
        >>> resolver = LocalizationResolver(load_catalog("tr"))
        >>> resolver.resolve(FieldCategory.FOOD_NAME, "Rice")
        'Pilav'
        >>> resolver.resolve(FieldCategory.FOOD_NAME, "Sushi")
        'Sushi'
    """

    def __init__(
        self,
        catalog: LocalizationCatalog,
        diet_colors: Mapping[str, DietColor] = DIET_FIT_COLORS,
        default_color: DietColor = DietColor.GRAY,
    ):
        """
        Initialize resolver.

        Args:
            catalog: Translation tables and messages of one language
            diet_colors: Tag -> color class lookup
            default_color: Color for tags absent from diet_colors
        """
        self.catalog = catalog
        self.diet_colors = diet_colors
        self.default_color = default_color

    @property
    def language(self) -> str:
        """Display language of the catalog."""
        return self.catalog.language

    def resolve(self, category: FieldCategory, text: str) -> str:
        """
        Translate one string.

        Exact, case-sensitive, whole-string match. No trimming or
        case folding: a string not present verbatim is returned as is.

        Args:
            category: Table to look in
            text: Source string

        Returns:
            Translated string, or text unchanged when unmapped or mapped
            to an empty string
        """
        translated = self.catalog.lookup(category, text)
        return translated or text

    def resolve_tag(self, tag: str) -> LocalizedTag:
        """
        Resolve a diet-fit tag to label and color.

        Label and color are independent lookups: a tag may be translated
        and still get the default color.
        """
        return LocalizedTag(
            source=tag,
            label=self.resolve(FieldCategory.DIET_FIT, tag),
            color=self.diet_colors.get(tag, self.default_color),
        )

    def _optional(self, category: FieldCategory, text: Optional[str]) -> Optional[str]:
        # Empty notes and tips are not displayed
        if not text:
            return None
        return self.resolve(category, text)

    def resolve_item(self, item: AnalysisItem) -> LocalizedItem:
        """Localize name, tags, note and tip of one item."""
        return LocalizedItem(
            item=item,
            name=self.resolve(FieldCategory.FOOD_NAME, item.name),
            tags=tuple(self.resolve_tag(tag) for tag in item.diet_fit),
            note=self._optional(FieldCategory.NOTE, item.note),
            tip=self._optional(FieldCategory.TIP, item.tip),
        )

    def resolve_summary(self, summary: Summary) -> SummaryLines:
        """
        Resolve the two summary lines.

        Priority:
        1. primary: quality, else balance, else "analysis complete"
        2. secondary: overallTip, else general_tip, else omitted

        Both lines go through the summary table.

        Example:
            >>> lines = resolver.resolve_summary(Summary(balance="High in carbs and fats, moderate protein."))
            >>> lines.primary
            'Yüksek karbonhidrat ve yağ, orta düzeyde protein.'
            >>> lines.secondary is None
            True
        """
        primary = (
            summary.quality
            or summary.balance
            or self.catalog.message("analysis_complete")
        )
        secondary = summary.overall_tip or summary.general_tip

        return SummaryLines(
            primary=self.resolve(FieldCategory.SUMMARY, primary),
            secondary=(
                self.resolve(FieldCategory.SUMMARY, secondary) if secondary else None
            ),
        )

    def resolve_result(self, result: AnalysisResult) -> LocalizedReport:
        """Localize a whole analysis result, preserving item order."""
        return LocalizedReport(
            result=result,
            items=tuple(self.resolve_item(item) for item in result.items),
            summary=self.resolve_summary(result.summary),
        )

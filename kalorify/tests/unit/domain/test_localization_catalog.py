"""Unit tests for localization catalogs.

Tests focus on:
- Shipped catalogs (tr, en)
- YAML validation errors
- Summary table built from tip + summary sections
- Chained entry detection
- Read-only tables and per-language caching
"""

import pytest

from kalorify.domain.localization.catalog import (
    REQUIRED_MESSAGES,
    available_languages,
    load_catalog,
    load_catalog_from_yaml_text,
)
from kalorify.domain.localization.models import FieldCategory

MESSAGES_YAML = """
messages:
  analysis_complete: "Done"
  analysis_failed: "Failed"
  transport_failed: "Unreachable"
  malformed_response: "Unexpected"
  no_result: "Nothing"
"""


class TestShippedCatalogs:
    """Test catalogs bundled with the package."""

    def test_available_languages(self) -> None:
        """Test bundled languages are listed."""
        languages = available_languages()
        assert "tr" in languages
        assert "en" in languages
        assert languages == sorted(languages)

    def test_turkish_entries(self) -> None:
        """Test a sample of Turkish entries per table."""
        catalog = load_catalog("tr")

        assert catalog.language == "tr"
        assert catalog.lookup(FieldCategory.FOOD_NAME, "Rice") == "Pilav"
        assert catalog.lookup(FieldCategory.FOOD_NAME, "Cheeseburger") == "Hamburger"
        assert catalog.lookup(FieldCategory.DIET_FIT, "gluten-free") == "Glütensiz"
        assert catalog.lookup(FieldCategory.NOTE, "Rich in vitamins, minerals, and fiber") == (
            "Vitamin, mineral ve lif açısından zengin"
        )
        assert catalog.lookup(FieldCategory.TIP, "Enjoy in moderation or share a portion.") == (
            "Ölçülü tüketin veya porsiyonu paylaşın."
        )

    def test_turkish_messages(self) -> None:
        """Test every required message is present."""
        catalog = load_catalog("tr")
        for key in REQUIRED_MESSAGES:
            assert catalog.message(key)
        assert catalog.message("analysis_complete") == "Analiz tamamlandı"
        assert catalog.message("analysis_failed") == (
            "Analiz sırasında bir hata oluştu. Lütfen tekrar deneyin."
        )

    def test_summary_includes_tip_vocabulary(self) -> None:
        """Test summary table contains tip entries and its own."""
        catalog = load_catalog("tr")

        assert catalog.lookup(FieldCategory.SUMMARY, "Enjoy in moderation or share a portion.") == (
            "Ölçülü tüketin veya porsiyonu paylaşın."
        )
        assert catalog.lookup(
            FieldCategory.SUMMARY, "High in carbs and fats, moderate protein."
        ) == "Yüksek karbonhidrat ve yağ, orta düzeyde protein."
        # Summary sentences do not leak into the tip table
        assert catalog.lookup(FieldCategory.TIP, "High in carbs and fats, moderate protein.") is None

    def test_english_passes_through(self) -> None:
        """Test English catalog has empty tables."""
        catalog = load_catalog("en")

        for category in FieldCategory:
            assert len(catalog.tables[category]) == 0
        assert catalog.message("analysis_complete") == "Analysis complete"

    def test_cached_per_language(self) -> None:
        """Test catalog is loaded once per language."""
        assert load_catalog("tr") is load_catalog("tr")
        assert load_catalog("tr") is not load_catalog("en")

    def test_default_language(self) -> None:
        """Test default language is Turkish."""
        assert load_catalog().language == "tr"

    def test_tables_read_only(self) -> None:
        """Test tables cannot be mutated."""
        catalog = load_catalog("tr")
        with pytest.raises(TypeError):
            catalog.tables[FieldCategory.FOOD_NAME]["Rice"] = "Pirinç"  # type: ignore[index]
        with pytest.raises(TypeError):
            catalog.messages["no_result"] = "x"  # type: ignore[index]

    def test_lookup_is_exact(self) -> None:
        """Test lookups do not fold case or trim."""
        catalog = load_catalog("tr")
        assert catalog.lookup(FieldCategory.FOOD_NAME, "rice") is None
        assert catalog.lookup(FieldCategory.FOOD_NAME, "Rice ") is None
        assert catalog.lookup(FieldCategory.DIET_FIT, "Vegan") is None


class TestLoadCatalogErrors:
    """Test language code validation."""

    @pytest.mark.parametrize("language", ["xx", "de"])
    def test_unsupported_language(self, language: str) -> None:
        """Test unknown languages are rejected."""
        with pytest.raises(ValueError, match="Unsupported language"):
            load_catalog(language)

    @pytest.mark.parametrize("language", ["", "TR", "tur", "../tr", "t1"])
    def test_invalid_language_code(self, language: str) -> None:
        """Test malformed language codes are rejected."""
        with pytest.raises(ValueError, match="Invalid language code"):
            load_catalog(language)


class TestLoadCatalogFromYamlText:
    """Test YAML parsing and validation."""

    def test_minimal_catalog(self) -> None:
        """Test catalog with messages only."""
        catalog = load_catalog_from_yaml_text(MESSAGES_YAML, "xx")

        assert catalog.language == "xx"
        assert catalog.lookup(FieldCategory.FOOD_NAME, "Rice") is None
        assert catalog.message("no_result") == "Nothing"

    def test_summary_entry_wins_over_tip(self) -> None:
        """Test summary section overrides tip entries on conflict."""
        text = (
            'tip:\n  "Eat more greens": "Tip version"\n'
            'summary:\n  "Eat more greens": "Summary version"\n' + MESSAGES_YAML
        )
        catalog = load_catalog_from_yaml_text(text, "xx")

        assert catalog.lookup(FieldCategory.TIP, "Eat more greens") == "Tip version"
        assert catalog.lookup(FieldCategory.SUMMARY, "Eat more greens") == "Summary version"

    def test_identity_entry_allowed(self) -> None:
        """Test entry mapping to itself is valid."""
        text = 'food_name:\n  "Pizza": "Pizza"\n' + MESSAGES_YAML
        catalog = load_catalog_from_yaml_text(text, "xx")
        assert catalog.lookup(FieldCategory.FOOD_NAME, "Pizza") == "Pizza"

    def test_chained_entry_rejected(self) -> None:
        """Test translation that is itself a key of the same table."""
        text = 'food_name:\n  "Rice": "Pilav"\n  "Pilav": "Rice pilaf"\n' + MESSAGES_YAML
        with pytest.raises(ValueError, match="Chained translation"):
            load_catalog_from_yaml_text(text, "xx")

    def test_chain_through_merged_summary_rejected(self) -> None:
        """Test chains across tip and summary sections are detected."""
        text = 'tip:\n  "A": "B"\nsummary:\n  "B": "C"\n' + MESSAGES_YAML
        with pytest.raises(ValueError, match="Chained translation"):
            load_catalog_from_yaml_text(text, "xx")

    def test_same_string_in_different_tables_allowed(self) -> None:
        """Test tables are independent for chaining."""
        text = 'food_name:\n  "A": "B"\nnote:\n  "B": "C"\n' + MESSAGES_YAML
        catalog = load_catalog_from_yaml_text(text, "xx")
        assert catalog.lookup(FieldCategory.NOTE, "B") == "C"

    def test_missing_message(self) -> None:
        """Test missing required message."""
        text = 'messages:\n  analysis_complete: "Done"\n'
        with pytest.raises(ValueError, match="missing messages"):
            load_catalog_from_yaml_text(text, "xx")

    def test_non_string_value(self) -> None:
        """Test non-string translation."""
        text = 'food_name:\n  "Pizza": 3\n' + MESSAGES_YAML
        with pytest.raises(ValueError, match="string to string"):
            load_catalog_from_yaml_text(text, "xx")

    def test_empty_translation_rejected(self) -> None:
        """Test empty target string."""
        text = 'food_name:\n  "Pizza": ""\n' + MESSAGES_YAML
        with pytest.raises(ValueError, match="empty value"):
            load_catalog_from_yaml_text(text, "xx")

    def test_empty_message_rejected(self) -> None:
        """Test empty UI message."""
        text = MESSAGES_YAML.replace('no_result: "Nothing"', 'no_result: ""')
        with pytest.raises(ValueError, match="empty value"):
            load_catalog_from_yaml_text(text, "xx")

    def test_section_not_mapping(self) -> None:
        """Test section given as list."""
        text = "diet_fit:\n  - vegan\n" + MESSAGES_YAML
        with pytest.raises(ValueError, match="must be a mapping"):
            load_catalog_from_yaml_text(text, "xx")

    def test_root_not_mapping(self) -> None:
        """Test document root given as list."""
        with pytest.raises(ValueError, match="root must be a mapping"):
            load_catalog_from_yaml_text("- a\n- b\n", "xx")

    def test_empty_document(self) -> None:
        """Test empty document lacks messages."""
        with pytest.raises(ValueError, match="missing messages"):
            load_catalog_from_yaml_text("", "xx")

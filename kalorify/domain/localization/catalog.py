"""Localization catalog.

Loads the translation tables of a display language from
``locales/<language>.yaml``. A catalog holds:

* one exact-match table per FieldCategory, keyed by the analyzer's
  (English) source string
* UI messages (placeholder summary line, failure messages)

The summary table is the tip table extended with the ``summary`` section;
summary entries win on conflict.

Validations:
- every section is a mapping of string -> non-empty string
- every required message is present
- no chained entries: a target string that is also a key of the same
  table must map to itself, so resolving twice equals resolving once

Catalogs are read-only and cached per language for the whole process.
"""
from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import structlog
import yaml

from kalorify.domain.localization.models import FieldCategory

logger = structlog.get_logger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"

DEFAULT_LANGUAGE = "tr"

REQUIRED_MESSAGES = (
    "analysis_complete",
    "analysis_failed",
    "transport_failed",
    "malformed_response",
    "no_result",
)

_LANGUAGE_RE = re.compile(r"^[a-z]{2}$")


@dataclass(frozen=True)
class LocalizationCatalog:
    language: str
    tables: Mapping[FieldCategory, Mapping[str, str]]
    messages: Mapping[str, str]

    def lookup(self, category: FieldCategory, source: str) -> Optional[str]:
        """Exact-match lookup, None when the source string is not a key."""
        return self.tables[category].get(source)

    def message(self, key: str) -> str:
        return self.messages[key]


def _build_section(name: str, raw: Any) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Section '{name}' must be a mapping")
    section: Dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(
                f"Section '{name}' entries must map string to string: {key!r}"
            )
        if not value:
            raise ValueError(f"Section '{name}' has an empty value for {key!r}")
        section[key] = value
    return section


def _check_not_chained(category: FieldCategory, table: Mapping[str, str]) -> None:
    for source, target in table.items():
        again = table.get(target)
        if again is not None and again != target:
            raise ValueError(
                f"Chained translation in '{category.value}': "
                f"{source!r} -> {target!r} -> {again!r}"
            )


def load_catalog_from_yaml_text(yaml_text: str, language: str) -> LocalizationCatalog:
    """Parse YAML text into the catalog of one language."""
    data = yaml.safe_load(yaml_text) or {}
    if not isinstance(data, dict):
        raise ValueError("Catalog root must be a mapping")

    sections = {
        category: _build_section(category.value, data.get(category.value))
        for category in FieldCategory
    }
    # Summary sentences reuse the tip vocabulary
    summary = dict(sections[FieldCategory.TIP])
    summary.update(sections[FieldCategory.SUMMARY])
    sections[FieldCategory.SUMMARY] = summary

    for category, table in sections.items():
        _check_not_chained(category, table)

    messages = _build_section("messages", data.get("messages"))
    missing = [key for key in REQUIRED_MESSAGES if key not in messages]
    if missing:
        raise ValueError(f"Catalog missing messages: {', '.join(missing)}")

    return LocalizationCatalog(
        language=language,
        tables=MappingProxyType(
            {category: MappingProxyType(table) for category, table in sections.items()}
        ),
        messages=MappingProxyType(messages),
    )


def available_languages() -> List[str]:
    """Languages with a catalog file, sorted."""
    return sorted(path.stem for path in LOCALES_DIR.glob("*.yaml"))


@functools.lru_cache(maxsize=None)
def load_catalog(language: str = DEFAULT_LANGUAGE) -> LocalizationCatalog:
    """Load the catalog of a language (once per process)."""
    if not _LANGUAGE_RE.match(language):
        raise ValueError(f"Invalid language code: {language!r}")
    path = LOCALES_DIR / f"{language}.yaml"
    if not path.is_file():
        raise ValueError(
            f"Unsupported language: {language!r} "
            f"(available: {', '.join(available_languages())})"
        )
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    catalog = load_catalog_from_yaml_text(content, language)
    logger.debug(
        "Loaded localization catalog",
        language=language,
        entries={c.value: len(t) for c, t in catalog.tables.items()},
    )
    return catalog


__all__ = [
    "DEFAULT_LANGUAGE",
    "LocalizationCatalog",
    "REQUIRED_MESSAGES",
    "available_languages",
    "load_catalog",
    "load_catalog_from_yaml_text",
]

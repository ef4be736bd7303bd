"""
Search Service - Business logic for playbook search and filtering.

This module narrows the nested playbook structure by a free-text term:
- Pattern id, name and description matching
- Quote matching across every theme of a pattern
- Pruning of themes and phases left without patterns
"""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from utils.playbook_models import Catalog, Pattern, PlaybookStructure, QuotesMap
from utils.search_filters import matches_pattern, normalize_search_term


def filter_playbook(
    structure: PlaybookStructure,
    pattern_index: Mapping[str, Pattern],
    quotes_map: QuotesMap,
    term: str | None,
) -> PlaybookStructure:
    """
    Filter a playbook structure down to the patterns matching ``term``.

    Args:
        structure: Phase -> theme label -> pattern ids
        pattern_index: Pattern records by id
        quotes_map: Quote strings by pattern id and theme code
        term: Raw search term as typed

    Returns:
        The same ``structure`` object when the term is blank, otherwise a new
        structure holding only matching ids, with empty themes and phases
        removed and the original order kept. Nothing matching gives ``{}``.
    """
    normalized = normalize_search_term(term)
    if not normalized:
        return structure

    filtered: PlaybookStructure = {}
    for phase_name, themes in structure.items():
        filtered_themes: dict[str, list[str]] = {}
        for theme_label, pattern_ids in themes.items():
            kept = [
                pattern_id
                for pattern_id in pattern_ids
                if matches_pattern(
                    pattern_index.get(pattern_id), quotes_map.get(pattern_id), normalized
                )
            ]
            if kept:
                filtered_themes[theme_label] = kept
        if filtered_themes:
            filtered[phase_name] = filtered_themes
    return filtered


class SearchService:
    """Service for searching a loaded playbook catalog."""

    def __init__(self, catalog: Catalog):
        """
        Initialize the search service.

        Args:
            catalog: The loaded playbook catalog
        """
        self.catalog = catalog

    def filter(
        self, term: str | None, structure: PlaybookStructure | None = None
    ) -> PlaybookStructure:
        """Filter ``structure`` (the full catalog structure by default) by ``term``."""
        source = self.catalog.structure if structure is None else structure
        result = filter_playbook(
            source, self.catalog.pattern_index, self.catalog.quotes, term
        )
        if result is not source:
            logger.debug(
                f"Search {term!r}: {count_pattern_entries(result)} of "
                f"{count_pattern_entries(source)} entries kept"
            )
        return result

    def matches(self, pattern_id: str, term: str | None) -> bool:
        """Check whether a single pattern id would survive filtering by ``term``."""
        return matches_pattern(
            self.catalog.get_pattern(pattern_id),
            self.catalog.quotes.get(pattern_id),
            normalize_search_term(term),
        )


def count_pattern_entries(structure: PlaybookStructure) -> int:
    """Count (theme, pattern id) entries; a pattern listed under two themes counts twice."""
    return sum(len(ids) for themes in structure.values() for ids in themes.values())


__all__ = ["SearchService", "count_pattern_entries", "filter_playbook"]

"""
Projection Service - Builds the display tree for a (possibly filtered) playbook.

The display tree is plain data (phase -> theme -> cards) so any presentation
layer can render it; highlighting of the active search term happens here.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from utils.highlight import highlight_text
from utils.playbook_models import (
    CardView,
    Catalog,
    EmptyState,
    Pattern,
    PhaseView,
    PlaybookStructure,
    PlaybookView,
    ThemeView,
)
from utils.text_parsing import pattern_sort_key, split_theme_label


def build_card_view(pattern: Pattern, theme_code: str, term: str | None) -> CardView:
    return CardView(
        pattern_id=pattern.id,
        theme_code=theme_code,
        name=pattern.name,
        description=pattern.description,
        highlighted_name=highlight_text(pattern.name, term),
        highlighted_description=highlight_text(pattern.description, term),
    )


def build_theme_view(
    theme_label: str, pattern_ids: Iterable[str], catalog: Catalog, term: str | None
) -> ThemeView:
    """Project one theme; ids unknown to the catalog are skipped."""
    code, name = split_theme_label(theme_label)
    cards: list[CardView] = []
    for pattern_id in pattern_ids:
        pattern = catalog.get_pattern(pattern_id)
        if pattern is None:
            logger.debug(f"Skipping unknown pattern {pattern_id} in theme {theme_label!r}")
            continue
        cards.append(build_card_view(pattern, code, term))
    return ThemeView(
        label=theme_label,
        code=code,
        name=name,
        description=catalog.themes.get(code, ""),
        cards=tuple(cards),
    )


def project_playbook(
    structure: PlaybookStructure, catalog: Catalog, term: str | None = ""
) -> PlaybookView:
    """
    Project a playbook structure into a display tree.

    Args:
        structure: Structure to display, usually the output of filter_playbook
        catalog: Catalog supplying pattern records and theme descriptions
        term: Active search term, used for highlighting and the empty state

    Returns:
        PlaybookView whose ``empty_state`` is set when the structure has no phases
    """
    raw_term = term or ""
    if not structure:
        return PlaybookView(term=raw_term, phases=(), empty_state=EmptyState(term=raw_term))

    phases = tuple(
        PhaseView(
            name=phase_name,
            themes=tuple(
                build_theme_view(theme_label, pattern_ids, catalog, raw_term)
                for theme_label, pattern_ids in themes.items()
            ),
        )
        for phase_name, themes in structure.items()
    )
    return PlaybookView(term=raw_term, phases=phases)


def summarize_patterns(patterns: Iterable[Pattern]) -> list[Pattern]:
    """Return every pattern ordered by the number in its id (AP2 before AP10)."""
    return sorted(patterns, key=lambda pattern: pattern_sort_key(pattern.id))


class ProjectionService:
    """Service turning catalog structures into display trees."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def project(self, structure: PlaybookStructure, term: str | None = "") -> PlaybookView:
        return project_playbook(structure, self.catalog, term)

    def summary(self) -> list[Pattern]:
        return summarize_patterns(self.catalog.patterns)


__all__ = [
    "ProjectionService",
    "build_card_view",
    "build_theme_view",
    "project_playbook",
    "summarize_patterns",
]

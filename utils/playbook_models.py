"""Immutable playbook records and the display tree built from them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from utils.constants import NO_RESULTS_HINT, NO_RESULTS_TITLE

# phase name -> theme label -> pattern ids
PlaybookStructure = dict[str, dict[str, list[str]]]
# pattern id -> theme code -> quote strings
QuotesMap = dict[str, dict[str, list[str]]]
# theme code -> description
ThemesMap = dict[str, str]


@dataclass(frozen=True)
class Pattern:
    """A cataloged anti-pattern."""

    id: str
    name: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Pattern:
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description") or "",
        )


def build_pattern_index(patterns: Iterable[Pattern]) -> dict[str, Pattern]:
    """Map pattern id to record in one pass; later duplicates replace earlier ones."""
    index: dict[str, Pattern] = {}
    for pattern in patterns:
        if pattern.id in index:
            logger.warning(f"Duplicate pattern id {pattern.id}; keeping the last definition")
        index[pattern.id] = pattern
    return index


@dataclass(frozen=True)
class Catalog:
    """
    The four playbook datasets plus the derived pattern index.

    Built once after loading and shared read-only by search, projection and
    detail lookups. Nothing in the application mutates the contained mappings.
    """

    structure: PlaybookStructure
    patterns: tuple[Pattern, ...]
    quotes: QuotesMap
    themes: ThemesMap
    pattern_index: Mapping[str, Pattern] = field(repr=False)

    @classmethod
    def from_datasets(
        cls,
        structure: PlaybookStructure,
        patterns: Iterable[Pattern],
        quotes: QuotesMap,
        themes: ThemesMap,
    ) -> Catalog:
        pattern_tuple = tuple(patterns)
        return cls(
            structure=structure,
            patterns=pattern_tuple,
            quotes=quotes,
            themes=themes,
            pattern_index=build_pattern_index(pattern_tuple),
        )

    def get_pattern(self, pattern_id: str) -> Pattern | None:
        return self.pattern_index.get(pattern_id)


@dataclass(frozen=True)
class Quote:
    quote_text: str
    author: str


@dataclass(frozen=True)
class HighlightedQuote:
    quote_text: str
    author: str
    highlighted_text: str


@dataclass(frozen=True)
class CardView:
    pattern_id: str
    theme_code: str
    name: str
    description: str
    highlighted_name: str
    highlighted_description: str


@dataclass(frozen=True)
class ThemeView:
    label: str
    code: str
    name: str
    description: str
    cards: tuple[CardView, ...]


@dataclass(frozen=True)
class PhaseView:
    name: str
    themes: tuple[ThemeView, ...]


@dataclass(frozen=True)
class EmptyState:
    """Signals that a search produced nothing; carries the term exactly as typed."""

    term: str

    @property
    def title(self) -> str:
        return NO_RESULTS_TITLE.format(term=self.term)

    @property
    def hint(self) -> str:
        return NO_RESULTS_HINT


@dataclass(frozen=True)
class PlaybookView:
    term: str
    phases: tuple[PhaseView, ...]
    empty_state: EmptyState | None = None

    @property
    def is_empty(self) -> bool:
        return self.empty_state is not None

    @property
    def card_count(self) -> int:
        return sum(len(theme.cards) for phase in self.phases for theme in phase.themes)


@dataclass(frozen=True)
class PatternDetail:
    pattern: Pattern
    theme_code: str
    theme_description: str
    quotes: tuple[HighlightedQuote, ...]

    @property
    def has_quotes(self) -> bool:
        return bool(self.quotes)


__all__ = [
    "Catalog",
    "CardView",
    "EmptyState",
    "HighlightedQuote",
    "Pattern",
    "PatternDetail",
    "PhaseView",
    "PlaybookStructure",
    "PlaybookView",
    "Quote",
    "QuotesMap",
    "ThemeView",
    "ThemesMap",
    "build_pattern_index",
]

"""
Detail Service - Resolves the supporting quotes shown for a pattern in a theme.
"""

from __future__ import annotations

from loguru import logger

from utils.highlight import highlight_text
from utils.playbook_models import Catalog, HighlightedQuote, PatternDetail, Quote, QuotesMap
from utils.text_parsing import split_quote


def resolve_quotes(pattern_id: str, theme_code: str, quotes_map: QuotesMap) -> list[Quote]:
    """
    Resolve the quotes recorded for a (pattern, theme) pair.

    Args:
        pattern_id: Pattern id, e.g. "AP3"
        theme_code: Theme code, e.g. "T1"
        quotes_map: Quote strings by pattern id and theme code

    Returns:
        Quotes in their recorded order; empty when either level is missing
    """
    raw_quotes = quotes_map.get(pattern_id, {}).get(theme_code, [])
    quotes = []
    for raw in raw_quotes:
        text, author = split_quote(raw)
        quotes.append(Quote(quote_text=text, author=author))
    return quotes


def build_pattern_detail(
    catalog: Catalog, pattern_id: str, theme_code: str, term: str | None = ""
) -> PatternDetail | None:
    """Build the detail view for a card, or None when the pattern is unknown."""
    pattern = catalog.get_pattern(pattern_id)
    if pattern is None:
        logger.debug(f"No detail available for unknown pattern {pattern_id}")
        return None

    quotes = tuple(
        HighlightedQuote(
            quote_text=quote.quote_text,
            author=quote.author,
            highlighted_text=highlight_text(quote.quote_text, term),
        )
        for quote in resolve_quotes(pattern_id, theme_code, catalog.quotes)
    )
    return PatternDetail(
        pattern=pattern,
        theme_code=theme_code,
        theme_description=catalog.themes.get(theme_code, ""),
        quotes=quotes,
    )


__all__ = ["build_pattern_detail", "resolve_quotes"]

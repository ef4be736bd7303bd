from collections.abc import Iterable, Mapping

from utils.playbook_models import Pattern


def normalize_search_term(term: str | None) -> str:
    return (term or "").strip().lower()


def matches_pattern_text(pattern: Pattern, term: str) -> bool:
    """Match a normalized term against the id, name and description of a pattern."""
    content = f"{pattern.id} {pattern.name} {pattern.description}".lower()
    return term in content


def matches_any_quote(quotes_by_theme: Mapping[str, Iterable[str]] | None, term: str) -> bool:
    """Match a normalized term against every quote of a pattern, whatever the theme."""
    if not quotes_by_theme:
        return False
    for quotes in quotes_by_theme.values():
        for quote in quotes:
            if term in quote.lower():
                return True
    return False


def matches_pattern(
    pattern: Pattern | None,
    quotes_by_theme: Mapping[str, Iterable[str]] | None,
    term: str,
) -> bool:
    if pattern is None:
        return False
    if not term:
        return True
    return matches_pattern_text(pattern, term) or matches_any_quote(quotes_by_theme, term)

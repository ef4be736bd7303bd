"""Splitting helpers for theme labels, quote strings and pattern ids."""

from __future__ import annotations

from utils.constants import PATTERN_ID_PREFIX, QUOTE_SEPARATOR, THEME_LABEL_SEPARATOR


def split_theme_label(label: str) -> tuple[str, str]:
    """
    Split a ``"<code>. <name>"`` theme label on its first separator.

    Labels without a separator yield the whole label as the code and an empty name.
    """
    code, sep, name = label.partition(THEME_LABEL_SEPARATOR)
    if not sep:
        return label, ""
    return code, name


def split_quote(quote: str) -> tuple[str, str]:
    """
    Split a ``"<text> - <author>"`` quote on its last separator.

    Separators inside the quote text stay with the text. Quotes without any
    separator are all text with an empty author.
    """
    text, sep, author = quote.rpartition(QUOTE_SEPARATOR)
    if not sep:
        return quote, ""
    return text, author


def pattern_sort_key(pattern_id: str) -> tuple[int, int, str]:
    # "AP2" < "AP10"; ids without a numeric suffix go last, by id
    suffix = pattern_id[len(PATTERN_ID_PREFIX):] if pattern_id.startswith(PATTERN_ID_PREFIX) else ""
    if suffix.isdigit():
        return (0, int(suffix), pattern_id)
    return (1, 0, pattern_id)


__all__ = ["pattern_sort_key", "split_quote", "split_theme_label"]

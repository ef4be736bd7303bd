"""Case-insensitive, literal search-term highlighting."""

from __future__ import annotations

import re

from utils.constants import HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN


def _term_pattern(term: str | None) -> re.Pattern[str] | None:
    term = (term or "").strip()
    if not term:
        return None
    return re.compile(re.escape(term), re.IGNORECASE)


def highlight_segments(text: str, term: str | None) -> list[tuple[str, bool]]:
    """
    Split text into ``(chunk, is_match)`` pairs.

    Joining the chunks gives back the original text exactly. Empty text yields
    an empty list.
    """
    pattern = _term_pattern(term)
    if pattern is None:
        return [(text, False)] if text else []

    segments: list[tuple[str, bool]] = []
    position = 0
    for match in pattern.finditer(text):
        if match.start() > position:
            segments.append((text[position:match.start()], False))
        segments.append((match.group(0), True))
        position = match.end()
    if position < len(text):
        segments.append((text[position:], False))
    return segments


def highlight_text(
    text: str,
    term: str | None,
    open_marker: str = HIGHLIGHT_OPEN,
    close_marker: str = HIGHLIGHT_CLOSE,
) -> str:
    """Wrap every occurrence of ``term`` in ``text`` with the emphasis markers."""
    if _term_pattern(term) is None:
        return text
    return "".join(
        f"{open_marker}{chunk}{close_marker}" if is_match else chunk
        for chunk, is_match in highlight_segments(text, term)
    )


__all__ = ["highlight_segments", "highlight_text"]

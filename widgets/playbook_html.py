"""HTML rendering of playbook display trees for wx.html windows."""

from __future__ import annotations

import html
from collections.abc import Iterable
from urllib.parse import quote, unquote

from utils.constants import (
    ACCENT,
    DARK_BG,
    DARK_PANEL,
    LIGHT_TEXT,
    NO_QUOTES_MESSAGE,
    SUBDUED_TEXT,
)
from utils.highlight import highlight_segments
from utils.playbook_models import CardView, Pattern, PatternDetail, PlaybookView

CARD_LINK_SCHEME = "pattern:"
MARK_COLOUR = "#7f1d1d"


def _hex(colour: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*colour)


def render_highlighted(text: str, term: str | None) -> str:
    """Escape text for HTML, emphasising each match of ``term``."""
    parts = []
    for chunk, is_match in highlight_segments(text, term):
        escaped = html.escape(chunk)
        if is_match:
            parts.append(f'<font bgcolor="{MARK_COLOUR}" color="{_hex(LIGHT_TEXT)}"><b>{escaped}</b></font>')
        else:
            parts.append(escaped)
    return "".join(parts)


def card_link(pattern_id: str, theme_code: str) -> str:
    return f"{CARD_LINK_SCHEME}{quote(pattern_id, safe='')}/{quote(theme_code, safe='')}"


def parse_card_link(href: str) -> tuple[str, str] | None:
    """Inverse of card_link; returns None for any other link."""
    if not href.startswith(CARD_LINK_SCHEME):
        return None
    pattern_id, sep, theme_code = href[len(CARD_LINK_SCHEME):].partition("/")
    if not sep or not pattern_id:
        return None
    return unquote(pattern_id), unquote(theme_code)


def _render_card(card: CardView, term: str) -> str:
    return (
        f'<td valign="top" width="33%" bgcolor="{_hex(DARK_PANEL)}">'
        f'<a href="{html.escape(card_link(card.pattern_id, card.theme_code))}">'
        f'<font color="{_hex(ACCENT)}" size="2"><b>{html.escape(card.pattern_id)}</b></font></a><br>'
        f'<font color="{_hex(LIGHT_TEXT)}" size="4"><b>{render_highlighted(card.name, term)}</b></font><br>'
        f'<font color="{_hex(SUBDUED_TEXT)}" size="2">{render_highlighted(card.description, term)}</font>'
        "</td>"
    )


def _render_card_grid(cards: tuple[CardView, ...], term: str, columns: int = 3) -> str:
    if not cards:
        return ""
    rows = []
    for start in range(0, len(cards), columns):
        cells = "".join(_render_card(card, term) for card in cards[start:start + columns])
        rows.append(f"<tr>{cells}</tr>")
    return f'<table width="100%" cellspacing="8" cellpadding="10">{"".join(rows)}</table>'


def render_playbook_html(view: PlaybookView) -> str:
    """Render the full results pane, or the no-results message."""
    body: list[str] = []
    if view.empty_state is not None:
        body.append(
            "<center><br><br>"
            f'<font color="{_hex(LIGHT_TEXT)}" size="5">{html.escape(view.empty_state.title)}</font><br>'
            f'<font color="{_hex(SUBDUED_TEXT)}">{html.escape(view.empty_state.hint)}</font>'
            "</center>"
        )
    for phase in view.phases:
        body.append(f'<h2><font color="{_hex(ACCENT)}">{html.escape(phase.name)}</font></h2><hr>')
        for theme in phase.themes:
            body.append(f'<h3><font color="{_hex(LIGHT_TEXT)}">{html.escape(theme.name)}</font></h3>')
            if theme.description:
                body.append(
                    f'<p><font color="{_hex(SUBDUED_TEXT)}"><i>{html.escape(theme.description)}</i></font></p>'
                )
            body.append(_render_card_grid(theme.cards, view.term))
    return _page("".join(body))


def render_summary_html(patterns: Iterable[Pattern]) -> str:
    entries = [
        f'<p><font color="{_hex(ACCENT)}"><b>{html.escape(p.id)}:</b></font> '
        f'<font color="{_hex(LIGHT_TEXT)}"><b>{html.escape(p.name)}</b></font><br>'
        f'<font color="{_hex(SUBDUED_TEXT)}" size="2">{html.escape(p.description)}</font></p>'
        for p in patterns
    ]
    return _page("".join(entries))


def render_detail_html(detail: PatternDetail, term: str | None = "") -> str:
    """Render the pattern header and its supporting quotes for one theme."""
    pattern = detail.pattern
    parts = [
        f'<h2><font color="{_hex(ACCENT)}">{html.escape(pattern.id)}: {html.escape(pattern.name)}</font></h2>',
        f'<p><font color="{_hex(SUBDUED_TEXT)}">{html.escape(pattern.description)}</font></p>',
        f'<h3><font color="{_hex(LIGHT_TEXT)}">Supporting Quotes</font></h3><hr>',
    ]
    if not detail.has_quotes:
        parts.append(f'<p><font color="{_hex(SUBDUED_TEXT)}">{html.escape(NO_QUOTES_MESSAGE)}</font></p>')
    for item in detail.quotes:
        author = ""
        if item.author:
            author = (
                f'<div align="right"><font color="{_hex(SUBDUED_TEXT)}" size="2">'
                f"- {html.escape(item.author)}</font></div>"
            )
        parts.append(
            f'<blockquote><font color="{_hex(LIGHT_TEXT)}"><i>&ldquo;{render_highlighted(item.quote_text, term)}&rdquo;</i></font>'
            f"{author}</blockquote>"
        )
    return _page("".join(parts))


def _page(body: str) -> str:
    return f'<html><body bgcolor="{_hex(DARK_BG)}" text="{_hex(LIGHT_TEXT)}">{body}</body></html>'


__all__ = [
    "card_link",
    "parse_card_link",
    "render_detail_html",
    "render_highlighted",
    "render_playbook_html",
    "render_summary_html",
]

"""Tests for the wx.html rendering of playbook views."""

from services.detail_service import build_pattern_detail
from services.projection_service import ProjectionService
from services.search_service import SearchService
from utils.constants import NO_QUOTES_MESSAGE
from utils.playbook_models import Pattern
from widgets.playbook_html import (
    MARK_COLOUR,
    card_link,
    parse_card_link,
    render_detail_html,
    render_highlighted,
    render_playbook_html,
    render_summary_html,
)


def _view(catalog, term):
    return ProjectionService(catalog).project(SearchService(catalog).filter(term), term)


def test_render_highlighted_escapes_markup():
    """Test that text is escaped and matches are emphasised."""
    rendered = render_highlighted("<script> & rush", "rush")

    assert rendered.startswith("&lt;script&gt; &amp; ")
    assert f'bgcolor="{MARK_COLOUR}"' in rendered
    assert "<b>rush</b>" in rendered


def test_render_highlighted_without_term():
    """Test that a blank term only escapes the text."""
    assert render_highlighted("A < B", "") == "A &lt; B"


def test_card_link_round_trip():
    """Test that card links survive ids with reserved characters."""
    href = card_link("AP 1", "T/2")

    assert href.startswith("pattern:")
    assert parse_card_link(href) == ("AP 1", "T/2")


def test_parse_card_link_ignores_other_links():
    """Test that non-card links are not parsed."""
    assert parse_card_link("https://example.org") is None
    assert parse_card_link("pattern:AP1") is None


def test_render_playbook_lists_phases_and_cards(sample_catalog):
    """Test that the results page lists phases, themes and card links."""
    page = render_playbook_html(_view(sample_catalog, ""))

    assert "Delivery" in page
    assert "Discovery" in page
    assert "Fake Agility" in page
    assert "Rituals without the underlying values." in page
    assert 'href="pattern:AP4/T3"' in page


def test_render_playbook_highlights_matches(sample_catalog):
    """Test that matched text is emphasised and other cards are absent."""
    page = render_playbook_html(_view(sample_catalog, "hero"))

    assert "<b>Hero</b>" in page
    assert "Feature Factory" not in page


def test_render_playbook_empty_state(sample_catalog):
    """Test that the no-results message is rendered with the escaped term."""
    page = render_playbook_html(_view(sample_catalog, "<zzz>"))

    assert "No results found for &quot;&lt;zzz&gt;&quot;" in page
    assert "Try searching for another keyword." in page


def test_render_summary():
    """Test that the summary page escapes pattern names."""
    page = render_summary_html([Pattern(id="AP1", name="Rush & Ship", description="Fast.")])

    assert "AP1:" in page
    assert "Rush &amp; Ship" in page


def test_render_detail_with_quotes(sample_catalog):
    """Test that the detail page shows highlighted quotes with authors."""
    detail = build_pattern_detail(sample_catalog, "AP1", "T3", "users")
    page = render_detail_html(detail, "users")

    assert "AP1: Rush to Ship" in page
    assert "<b>users</b>" in page
    assert "- Product Owner" in page
    assert NO_QUOTES_MESSAGE not in page


def test_render_detail_without_quotes(sample_catalog):
    """Test that the detail page explains when no quotes exist."""
    detail = build_pattern_detail(sample_catalog, "AP2", "T1")
    page = render_detail_html(detail)

    assert NO_QUOTES_MESSAGE in page

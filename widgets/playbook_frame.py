"""
Playbook Frame - Main window of the playbook browser.

A search box on top, the phase/theme/card results on the left and the full
pattern summary on the right. Every keystroke re-runs the search; clicking a
card opens its supporting quotes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import wx
import wx.html
from loguru import logger

from utils.constants import APP_NAME, DARK_ALT, DARK_BG, DARK_PANEL, LIGHT_TEXT
from widgets.dialogs.pattern_detail_dialog import show_pattern_detail_dialog
from widgets.playbook_html import (
    parse_card_link,
    render_playbook_html,
    render_summary_html,
)

if TYPE_CHECKING:
    from controllers.playbook_controller import PlaybookController


class PlaybookFrame(wx.Frame):
    """Top-level window rendering the controller's display trees."""

    def __init__(self, controller: PlaybookController) -> None:
        super().__init__(None, title=APP_NAME, size=(1280, 860))
        self.controller = controller
        self.SetBackgroundColour(DARK_BG)
        self._build_ui()
        self.Centre(wx.BOTH)

    def _build_ui(self) -> None:
        panel = wx.Panel(self)
        panel.SetBackgroundColour(DARK_PANEL)
        outer = wx.BoxSizer(wx.VERTICAL)
        panel.SetSizer(outer)

        self.search_input = wx.SearchCtrl(panel, style=wx.TE_PROCESS_ENTER)
        self.search_input.SetDescriptiveText("Search anti-patterns, descriptions and quotes")
        self.search_input.SetBackgroundColour(DARK_ALT)
        self.search_input.SetForegroundColour(LIGHT_TEXT)
        self.search_input.ShowCancelButton(True)
        self.search_input.Bind(wx.EVT_TEXT, self._on_search_changed)
        self.search_input.Bind(wx.EVT_SEARCHCTRL_CANCEL_BTN, self._on_search_cancelled)
        self.search_input.Disable()
        outer.Add(self.search_input, 0, wx.EXPAND | wx.ALL, 10)

        panes = wx.BoxSizer(wx.HORIZONTAL)
        outer.Add(panes, 1, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 10)

        self.results_view = wx.html.HtmlWindow(panel, style=wx.html.HW_SCROLLBAR_AUTO)
        self.results_view.Bind(wx.html.EVT_HTML_LINK_CLICKED, self._on_link_clicked)
        panes.Add(self.results_view, 3, wx.EXPAND | wx.RIGHT, 10)

        self.summary_view = wx.html.HtmlWindow(panel, style=wx.html.HW_SCROLLBAR_AUTO)
        panes.Add(self.summary_view, 1, wx.EXPAND)

        self.status_bar = self.CreateStatusBar()
        self.status_bar.SetStatusText("Loading playbook...")

    # ============= Public API =============

    def show_catalog(self, _catalog=None) -> None:
        """Render the unfiltered playbook once the catalog has loaded."""
        self.summary_view.SetPage(render_summary_html(self.controller.summary()))
        self.search_input.Enable()
        self.search_input.SetFocus()
        self.refresh_results(self.search_input.GetValue())

    def show_load_error(self, error: Exception) -> None:
        """Startup failures are terminal: report and leave the window empty."""
        logger.error(f"Playbook could not be loaded: {error}")
        self.status_bar.SetStatusText("Playbook could not be loaded.")
        wx.MessageBox(
            f"The playbook data could not be loaded:\n\n{error}\n\nCheck the log file for details.",
            "Load Error",
            wx.OK | wx.ICON_ERROR,
        )

    def refresh_results(self, term: str) -> None:
        view = self.controller.search(term)
        self.results_view.SetPage(render_playbook_html(view))
        if view.is_empty:
            self.status_bar.SetStatusText(view.empty_state.title)
        else:
            self.status_bar.SetStatusText(f"{view.card_count} cards")

    # ============= Event Handlers =============

    def _on_search_changed(self, _event: wx.CommandEvent) -> None:
        if self.controller.is_loaded:
            self.refresh_results(self.search_input.GetValue())

    def _on_search_cancelled(self, _event: wx.CommandEvent) -> None:
        self.search_input.SetValue("")

    def _on_link_clicked(self, event: wx.html.HtmlLinkEvent) -> None:
        target = parse_card_link(event.GetLinkInfo().GetHref())
        if target is None:
            event.Skip()
            return
        pattern_id, theme_code = target
        detail = self.controller.open_detail(pattern_id, theme_code)
        if detail is None:
            return
        show_pattern_detail_dialog(self, detail, self.controller.current_term)


__all__ = ["PlaybookFrame"]

from __future__ import annotations

import wx
import wx.html

from utils.constants import DARK_BG
from utils.playbook_models import PatternDetail
from widgets.playbook_html import render_detail_html


def show_pattern_detail_dialog(
    parent: wx.Window | None, detail: PatternDetail, term: str | None = ""
) -> None:
    """Display one pattern with the quotes supporting it in the clicked theme."""
    dialog = wx.Dialog(
        parent,
        title=f"{detail.pattern.id}: {detail.pattern.name}",
        size=(760, 620),
        style=wx.DEFAULT_DIALOG_STYLE | wx.RESIZE_BORDER,
    )
    dialog.SetBackgroundColour(DARK_BG)

    sizer = wx.BoxSizer(wx.VERTICAL)
    dialog.SetSizer(sizer)

    body = wx.html.HtmlWindow(dialog, style=wx.html.HW_SCROLLBAR_AUTO)
    body.SetPage(render_detail_html(detail, term))
    sizer.Add(body, 1, wx.EXPAND | wx.ALL, 10)

    btn_row = wx.BoxSizer(wx.HORIZONTAL)
    sizer.Add(btn_row, 0, wx.ALIGN_RIGHT | wx.ALL, 10)

    close_btn = wx.Button(dialog, wx.ID_CLOSE, label="Close")
    close_btn.Bind(wx.EVT_BUTTON, lambda _evt: dialog.EndModal(wx.ID_CLOSE))
    btn_row.Add(close_btn, 0)
    dialog.SetEscapeId(wx.ID_CLOSE)

    dialog.ShowModal()
    dialog.Destroy()


__all__ = ["show_pattern_detail_dialog"]

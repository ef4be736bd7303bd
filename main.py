#!/usr/bin/env python3
"""wxPython entry point that launches the playbook browser."""

from __future__ import annotations

import sys
import traceback

import wx
from loguru import logger

from controllers.playbook_controller import get_playbook_controller
from utils.constants import LOGS_DIR
from utils.logging_config import configure_logging
from widgets.playbook_frame import PlaybookFrame


def _log_exception(banner: str, exc_type, exc_value, exc_traceback) -> None:
    logger.error(f"=== {banner} ===")
    logger.error(f"Exception type: {exc_type.__name__}")
    logger.error(f"Exception value: {exc_value}")
    logger.error("Traceback:")
    for line in traceback.format_tb(exc_traceback):
        logger.error(line.rstrip())
    logger.error(f"=== END {banner} ===")


class PlaybookWxApp(wx.App):
    """Bootstrap the playbook browser: show the window, then load data off the UI thread."""

    def OnInit(self) -> bool:  # noqa: N802 - wx override
        logger.info("Starting Anti-Pattern Playbook")
        self.controller = get_playbook_controller()
        self.frame = PlaybookFrame(self.controller)
        self.SetTopWindow(self.frame)
        self.frame.Show()
        self.controller.load_in_background(
            on_success=self.frame.show_catalog,
            on_error=self.frame.show_load_error,
            call_after=wx.CallAfter,
        )
        return True

    def OnExceptionInMainLoop(self) -> bool:  # noqa: N802 - wx override
        """Handle exceptions in the main event loop."""
        exc_type, exc_value, exc_traceback = sys.exc_info()
        _log_exception("UNHANDLED EXCEPTION IN MAIN LOOP", exc_type, exc_value, exc_traceback)

        error_msg = f"An unexpected error occurred:\n\n{exc_type.__name__}: {exc_value}\n\nCheck the log file for details."
        wx.MessageBox(error_msg, "Application Error", wx.OK | wx.ICON_ERROR)

        # Return True to continue running, False to exit
        return True


def main() -> None:
    configure_logging(LOGS_DIR)

    def global_exception_handler(exc_type, exc_value, exc_traceback):
        _log_exception("UNCAUGHT EXCEPTION (GLOBAL)", exc_type, exc_value, exc_traceback)
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    sys.excepthook = global_exception_handler

    app = PlaybookWxApp(False)
    app.MainLoop()


if __name__ == "__main__":
    main()

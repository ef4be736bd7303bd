"""Dialog windows for the playbook browser."""

from widgets.dialogs.pattern_detail_dialog import show_pattern_detail_dialog

__all__ = ["show_pattern_detail_dialog"]

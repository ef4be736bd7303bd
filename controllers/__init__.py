"""Controllers module - Application-level controllers for coordinating business logic."""

from controllers.playbook_controller import (
    PlaybookController,
    get_playbook_controller,
    reset_playbook_controller,
)

__all__ = ["PlaybookController", "get_playbook_controller", "reset_playbook_controller"]

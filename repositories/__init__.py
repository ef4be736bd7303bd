"""
Repositories package - Data access layer.

This package contains repository classes that load the playbook datasets,
isolating the UI and business logic from where the data lives.
"""

from repositories.playbook_repository import (
    CatalogLoadError,
    PlaybookRepository,
    get_playbook_repository,
    reset_playbook_repository,
)

__all__ = [
    "CatalogLoadError",
    "PlaybookRepository",
    "get_playbook_repository",
    "reset_playbook_repository",
]

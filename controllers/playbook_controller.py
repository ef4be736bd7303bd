"""
Playbook Controller - Application logic for the playbook browser window.

This controller keeps the loaded catalog and the active search term, and gives
the UI layer one call per user action: load, search, open a card.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from loguru import logger

from repositories.playbook_repository import (
    CatalogLoadError,
    PlaybookRepository,
    get_playbook_repository,
)
from services.detail_service import build_pattern_detail
from services.projection_service import ProjectionService
from services.search_service import SearchService
from utils.playbook_models import Catalog, Pattern, PatternDetail, PlaybookView


class BackgroundWorker:
    def __init__(
        self,
        func: Callable,
        *args,
        on_success: Callable | None = None,
        on_error: Callable | None = None,
    ) -> None:
        self.func = func
        self.args = args
        self.on_success = on_success
        self.on_error = on_error

    def start(self) -> threading.Thread:
        thread = threading.Thread(target=self._run, name="playbook-load", daemon=True)
        thread.start()
        return thread

    def _run(self) -> None:
        try:
            result = self.func(*self.args)
        except Exception as exc:
            logger.debug(f"Background task failed: {exc}")
            if self.on_error:
                self.on_error(exc)
            return
        if self.on_success:
            self.on_success(result)


class PlaybookController:
    """Coordinates repository, search, projection and detail lookups."""

    def __init__(self, repository: PlaybookRepository | None = None) -> None:
        self.repository = repository or get_playbook_repository()
        self.current_term = ""
        self._catalog: Catalog | None = None
        self._search: SearchService | None = None
        self._projection: ProjectionService | None = None

    @property
    def catalog(self) -> Catalog:
        if self._catalog is None:
            raise RuntimeError("Playbook not loaded; call load() first")
        return self._catalog

    @property
    def is_loaded(self) -> bool:
        return self._catalog is not None

    def load(self) -> Catalog:
        """Load the catalog; a failure is terminal and propagates as CatalogLoadError."""
        try:
            catalog = self.repository.load_catalog()
        except CatalogLoadError:
            logger.exception("Playbook startup aborted")
            raise
        self._set_catalog(catalog)
        return catalog

    def load_in_background(
        self,
        on_success: Callable[[Catalog], None],
        on_error: Callable[[Exception], None],
        call_after: Callable[..., Any] | None = None,
    ) -> threading.Thread:
        """
        Load the catalog on a worker thread.

        Args:
            on_success: Called with the catalog once loaded
            on_error: Called with the exception if loading fails
            call_after: Marshals callbacks onto the UI thread (e.g. wx.CallAfter);
                callbacks run on the worker thread when omitted
        """
        dispatch = call_after or (lambda callback, *args: callback(*args))

        def success_handler(catalog: Catalog):
            dispatch(on_success, catalog)

        def error_handler(error: Exception):
            dispatch(on_error, error)

        return BackgroundWorker(self.load, on_success=success_handler, on_error=error_handler).start()

    def search(self, term: str | None) -> PlaybookView:
        """Run one filter + projection cycle for the term as typed."""
        self.current_term = term or ""
        if self._search is None or self._projection is None:
            raise RuntimeError("Playbook not loaded; call load() first")
        filtered = self._search.filter(self.current_term)
        return self._projection.project(filtered, self.current_term)

    def summary(self) -> list[Pattern]:
        if self._projection is None:
            raise RuntimeError("Playbook not loaded; call load() first")
        return self._projection.summary()

    def open_detail(self, pattern_id: str, theme_code: str) -> PatternDetail | None:
        """Resolve the detail view for a card, highlighted with the current term."""
        return build_pattern_detail(self.catalog, pattern_id, theme_code, self.current_term)

    def _set_catalog(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._search = SearchService(catalog)
        self._projection = ProjectionService(catalog)


_controller: PlaybookController | None = None


def get_playbook_controller() -> PlaybookController:
    global _controller
    if _controller is None:
        _controller = PlaybookController()
    return _controller


def reset_playbook_controller() -> None:
    """Reset the global controller instance (used by tests)."""
    global _controller
    _controller = None


__all__ = [
    "BackgroundWorker",
    "PlaybookController",
    "get_playbook_controller",
    "reset_playbook_controller",
]

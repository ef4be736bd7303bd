"""
Playbook Repository - Data access layer for the playbook datasets.

This module handles loading the four playbook datasets:
- Catalog structure (phase -> theme label -> pattern ids)
- Pattern list
- Quotes by pattern and theme
- Theme descriptions

The datasets are fetched concurrently from a local directory or an HTTP base
URL, validated, and merged into a single immutable Catalog. Any failure aborts
the whole load.
"""

from __future__ import annotations

import json
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Any

from curl_cffi import requests
from loguru import logger

from utils.constants import (
    DATASET_FILES,
    FETCH_TIMEOUT_SECONDS,
    PATTERNS_DATASET,
    QUOTES_DATASET,
    STRUCTURE_DATASET,
    THEMES_DATASET,
    resolve_data_source,
)
from utils.playbook_models import Catalog, Pattern, PlaybookStructure, QuotesMap, ThemesMap


class CatalogLoadError(RuntimeError):
    """Raised when any playbook dataset cannot be retrieved or parsed."""

    def __init__(self, dataset: str, message: str) -> None:
        super().__init__(f"Failed to load {dataset} dataset: {message}")
        self.dataset = dataset


# ============= Dataset Validation =============


def _require_str_list(value: Any, where: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{where} must be a list of strings")
    return list(value)


def parse_structure(data: Any) -> PlaybookStructure:
    if not isinstance(data, dict):
        raise ValueError("structure must map phase names to themes")
    structure: PlaybookStructure = {}
    for phase_name, themes in data.items():
        if not isinstance(themes, dict):
            raise ValueError(f"phase {phase_name!r} must map theme labels to pattern ids")
        structure[phase_name] = {
            theme_label: _require_str_list(ids, f"theme {theme_label!r}")
            for theme_label, ids in themes.items()
        }
    return structure


def parse_patterns(data: Any) -> list[Pattern]:
    if not isinstance(data, list):
        raise ValueError("patterns must be a list")
    patterns: list[Pattern] = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"pattern #{position} must be an object")
        for key in ("id", "name"):
            if not isinstance(entry.get(key), str):
                raise ValueError(f"pattern #{position} is missing string field {key!r}")
        description = entry.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError(f"pattern {entry['id']} has a non-string description")
        patterns.append(Pattern.from_dict(entry))
    return patterns


def parse_quotes(data: Any) -> QuotesMap:
    if not isinstance(data, dict):
        raise ValueError("quotes must map pattern ids to themes")
    quotes: QuotesMap = {}
    for pattern_id, by_theme in data.items():
        if not isinstance(by_theme, dict):
            raise ValueError(f"quotes for {pattern_id} must map theme codes to quote lists")
        quotes[pattern_id] = {
            theme_code: _require_str_list(items, f"quotes for {pattern_id}/{theme_code}")
            for theme_code, items in by_theme.items()
        }
    return quotes


def parse_themes(data: Any) -> ThemesMap:
    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        raise ValueError("themes must map theme codes to descriptions")
    return dict(data)


_PARSERS = {
    STRUCTURE_DATASET: parse_structure,
    PATTERNS_DATASET: parse_patterns,
    QUOTES_DATASET: parse_quotes,
    THEMES_DATASET: parse_themes,
}


# ============= Repository =============


class PlaybookRepository:
    """Repository for loading the playbook catalog."""

    def __init__(self, source: str | Path | None = None, timeout: float = FETCH_TIMEOUT_SECONDS):
        """
        Initialize the playbook repository.

        Args:
            source: Directory or http(s) base URL holding the four JSON datasets.
                Defaults to the environment override or the bundled data directory.
            timeout: Per-request timeout for remote sources, in seconds
        """
        self.source = resolve_data_source(source)
        self.timeout = timeout
        self._catalog: Catalog | None = None

    @property
    def is_remote(self) -> bool:
        return isinstance(self.source, str) and self.source.lower().startswith(
            ("http://", "https://")
        )

    def is_catalog_loaded(self) -> bool:
        return self._catalog is not None

    def get_catalog(self) -> Catalog:
        """Return the loaded catalog, loading it on first use."""
        if self._catalog is None:
            self._catalog = self.load_catalog()
        return self._catalog

    def load_catalog(self) -> Catalog:
        """
        Fetch all four datasets in parallel and build the catalog.

        Returns:
            The immutable Catalog

        Raises:
            CatalogLoadError: If any dataset fails to load; the remaining fetches
                are cancelled and no partial catalog is produced
        """
        logger.info(f"Loading playbook datasets from {self.source}")
        results: dict[str, Any] = {}
        executor = ThreadPoolExecutor(max_workers=len(DATASET_FILES), thread_name_prefix="playbook")
        try:
            futures = {
                executor.submit(self.fetch_dataset, name): name for name in DATASET_FILES
            }
            done, _pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future, name in futures.items():
                exc = future.exception() if future in done else None
                if exc is not None:
                    logger.error(f"Failed to load {name} dataset: {exc}")
                    if isinstance(exc, CatalogLoadError):
                        raise exc
                    raise CatalogLoadError(name, str(exc)) from exc
            for future, name in futures.items():
                results[name] = future.result()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        catalog = Catalog.from_datasets(
            structure=results[STRUCTURE_DATASET],
            patterns=results[PATTERNS_DATASET],
            quotes=results[QUOTES_DATASET],
            themes=results[THEMES_DATASET],
        )
        self._catalog = catalog
        logger.info(
            f"Loaded playbook: {len(catalog.structure)} phases, "
            f"{len(catalog.patterns)} patterns, {len(catalog.themes)} themes"
        )
        return catalog

    def fetch_dataset(self, name: str) -> Any:
        """
        Retrieve and validate a single dataset.

        Args:
            name: Dataset slot (structure, patterns, quotes or themes)

        Returns:
            The parsed dataset

        Raises:
            CatalogLoadError: If the dataset is unreachable, not JSON, or has the wrong shape
        """
        if name not in DATASET_FILES:
            raise CatalogLoadError(name, "unknown dataset")
        raw = self._read_remote(name) if self.is_remote else self._read_local(name)
        try:
            return _PARSERS[name](raw)
        except ValueError as exc:
            raise CatalogLoadError(name, str(exc)) from exc

    def _read_local(self, name: str) -> Any:
        path = Path(self.source) / DATASET_FILES[name]
        logger.debug(f"Reading {name} dataset from {path}")
        try:
            with path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(name, str(exc)) from exc

    def _read_remote(self, name: str) -> Any:
        url = f"{str(self.source).rstrip('/')}/{DATASET_FILES[name]}"
        logger.debug(f"Fetching {name} dataset from {url}")
        try:
            response = requests.get(url, impersonate="chrome", timeout=self.timeout)
            response.raise_for_status()
            return json.loads(response.text)
        except Exception as exc:
            raise CatalogLoadError(name, str(exc)) from exc


# Global instance shared by the UI layer
_default_repository: PlaybookRepository | None = None


def get_playbook_repository() -> PlaybookRepository:
    """Get the default playbook repository instance."""
    global _default_repository
    if _default_repository is None:
        _default_repository = PlaybookRepository()
    return _default_repository


def reset_playbook_repository() -> None:
    """
    Reset the global playbook repository instance.

    This is primarily useful for testing to ensure test isolation.
    """
    global _default_repository
    _default_repository = None


__all__ = [
    "CatalogLoadError",
    "PlaybookRepository",
    "get_playbook_repository",
    "parse_patterns",
    "parse_quotes",
    "parse_structure",
    "parse_themes",
    "reset_playbook_repository",
]

"""Constants file."""

import os
import sys
from pathlib import Path

APP_NAME = "Anti-Pattern Playbook"
DATA_SOURCE_ENV_VAR = "PLAYBOOK_DATA_SOURCE"


def _default_base_dir() -> Path:
    """Return the writable base directory for data/logging."""
    if getattr(sys, "frozen", False):
        local_appdata = os.getenv("LOCALAPPDATA")
        if local_appdata:
            return Path(local_appdata) / APP_NAME
        return Path.home() / ".antipattern_playbook"
    return Path(__file__).resolve().parent.parent


SUBDUED_TEXT = (148, 163, 184)
DARK_BG = (9, 9, 11)
DARK_PANEL = (24, 24, 27)
DARK_ALT = (39, 39, 42)
ACCENT = (239, 68, 68)
LIGHT_TEXT = (241, 245, 249)

BASE_DATA_DIR = _default_base_dir()
DEFAULT_DATA_DIR = BASE_DATA_DIR / "data"
LOGS_DIR = BASE_DATA_DIR / "logs"


def ensure_base_dirs() -> None:
    """Ensure the log directory exists without importing side effects."""
    BASE_DATA_DIR.mkdir(parents=True, exist_ok=True)
    LOGS_DIR.mkdir(parents=True, exist_ok=True)


def resolve_data_source(explicit: str | Path | None = None) -> str | Path:
    """Pick the dataset location: explicit argument, then environment, then bundled data."""
    if explicit:
        return explicit
    from_env = os.getenv(DATA_SOURCE_ENV_VAR, "").strip()
    if from_env:
        return from_env
    return DEFAULT_DATA_DIR


# Dataset slot -> file name, in load order
STRUCTURE_DATASET = "structure"
PATTERNS_DATASET = "patterns"
QUOTES_DATASET = "quotes"
THEMES_DATASET = "themes"
DATASET_FILES = {
    STRUCTURE_DATASET: "structure.json",
    PATTERNS_DATASET: "patterns.json",
    QUOTES_DATASET: "quotes.json",
    THEMES_DATASET: "themes.json",
}

FETCH_TIMEOUT_SECONDS = 30

HIGHLIGHT_OPEN = "<mark>"
HIGHLIGHT_CLOSE = "</mark>"
PATTERN_ID_PREFIX = "AP"
QUOTE_SEPARATOR = " - "
THEME_LABEL_SEPARATOR = ". "

NO_RESULTS_TITLE = 'No results found for "{term}"'
NO_RESULTS_HINT = "Try searching for another keyword."
NO_QUOTES_MESSAGE = "No supporting quotes found for this specific context."

__all__ = [
    "APP_NAME",
    "DATA_SOURCE_ENV_VAR",
    "SUBDUED_TEXT",
    "DARK_BG",
    "DARK_PANEL",
    "DARK_ALT",
    "ACCENT",
    "LIGHT_TEXT",
    "BASE_DATA_DIR",
    "DEFAULT_DATA_DIR",
    "LOGS_DIR",
    "ensure_base_dirs",
    "resolve_data_source",
    "STRUCTURE_DATASET",
    "PATTERNS_DATASET",
    "QUOTES_DATASET",
    "THEMES_DATASET",
    "DATASET_FILES",
    "FETCH_TIMEOUT_SECONDS",
    "HIGHLIGHT_OPEN",
    "HIGHLIGHT_CLOSE",
    "PATTERN_ID_PREFIX",
    "QUOTE_SEPARATOR",
    "THEME_LABEL_SEPARATOR",
    "NO_RESULTS_TITLE",
    "NO_RESULTS_HINT",
    "NO_QUOTES_MESSAGE",
]

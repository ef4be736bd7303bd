"""Root-level pytest fixtures for all tests.

This module provides fixtures that are available to all tests in the project.
"""

import json
import sys
from unittest import mock

# Mock wx before any imports that might need it (for Linux/headless environments)
if "wx" not in sys.modules:
    wx_mock = mock.MagicMock()
    wx_mock.OK = 1
    wx_mock.ICON_ERROR = 2
    wx_mock.ALL = 4
    wx_mock.EXPAND = 8
    wx_mock.LEFT = 16
    wx_mock.RIGHT = 32
    wx_mock.BOTTOM = 64
    wx_mock.BOTH = 128
    wx_mock.ALIGN_RIGHT = 256
    wx_mock.TE_PROCESS_ENTER = 512
    sys.modules["wx"] = wx_mock
    sys.modules["wx.html"] = wx_mock.html

import pytest
from test_helpers import reset_all_globals

from utils.playbook_models import Catalog, Pattern

SAMPLE_STRUCTURE = {
    "Delivery": {
        "T1. Fake Agility": ["AP1", "AP2"],
        "T2. Release Pressure": ["AP3"],
    },
    "Discovery": {
        "T3. Solution First": ["AP4", "AP1"],
    },
}

SAMPLE_PATTERNS = [
    {"id": "AP1", "name": "Rush to Ship", "description": "Deadlines override testing."},
    {"id": "AP2", "name": "Stand-up Theatre", "description": "Daily meetings with no decisions."},
    {"id": "AP3", "name": "Hero Culture", "description": "One person carries every release."},
    {"id": "AP4", "name": "Feature Factory", "description": "Output is measured, outcomes are not."},
]

SAMPLE_QUOTES = {
    "AP1": {
        "T1": ["Move fast and break things - J. Smith"],
        "T3": ["We never asked users what they needed - Product Owner"],
    },
    "AP3": {
        "T2": ["Only Dana knows how to deploy - Team Lead"],
    },
}

SAMPLE_THEMES = {
    "T1": "Rituals without the underlying values.",
    "T2": "Shipping under constant deadline stress.",
}


@pytest.fixture(autouse=True)
def reset_global_state():
    """Automatically reset all global service and repository instances after each test.

    This fixture ensures test isolation by resetting all singleton instances
    to None after each test completes, preventing state leakage between tests.
    """
    yield
    reset_all_globals()


@pytest.fixture
def sample_catalog():
    """Catalog built from the in-memory sample datasets."""
    return Catalog.from_datasets(
        structure=SAMPLE_STRUCTURE,
        patterns=[Pattern.from_dict(p) for p in SAMPLE_PATTERNS],
        quotes=SAMPLE_QUOTES,
        themes=SAMPLE_THEMES,
    )


@pytest.fixture
def dataset_dir(tmp_path):
    """Directory holding the four sample datasets as JSON files."""
    payloads = {
        "structure.json": SAMPLE_STRUCTURE,
        "patterns.json": SAMPLE_PATTERNS,
        "quotes.json": SAMPLE_QUOTES,
        "themes.json": SAMPLE_THEMES,
    }
    for filename, payload in payloads.items():
        (tmp_path / filename).write_text(json.dumps(payload), encoding="utf-8")
    return tmp_path

"""
Services package - Business logic layer.

This package exposes the search, projection and detail services while avoiding
import cycles at module load time.
"""

from importlib import import_module
from typing import Any

__all__ = [
    "ProjectionService",
    "SearchService",
    "build_pattern_detail",
    "filter_playbook",
    "project_playbook",
    "resolve_quotes",
    "summarize_patterns",
]

_LAZY_MODULES = {
    "SearchService": "services.search_service",
    "filter_playbook": "services.search_service",
    "ProjectionService": "services.projection_service",
    "project_playbook": "services.projection_service",
    "summarize_patterns": "services.projection_service",
    "build_pattern_detail": "services.detail_service",
    "resolve_quotes": "services.detail_service",
}


def __getattr__(name: str) -> Any:
    if name in _LAZY_MODULES:
        module = import_module(_LAZY_MODULES[name])
        value = getattr(module, name)
        globals()[name] = value
        return value

    raise AttributeError(f"module 'services' has no attribute '{name}'")

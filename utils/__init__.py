"""Shared helpers: constants, models, matching, highlighting and logging."""

"""
Shared constants for dictkit.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Rendering defaults
DEFAULT_NULL_REPR = "NULL"
"""Text shown for None values in rendered dicts."""

DEFAULT_SEPARATOR = " : "
"""Text between the right-aligned key and its value."""

EMPTY_DICT_TITLE = "<empty dict>"
"""Caption used by the table renderer for a dict without entries."""

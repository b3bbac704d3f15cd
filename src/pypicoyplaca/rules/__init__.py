"""Packaged restriction rules."""

from .loader import build_restriction_table, clear_restriction_table_cache, load_restriction_table

__all__ = [
    "build_restriction_table",
    "clear_restriction_table_cache",
    "load_restriction_table",
]

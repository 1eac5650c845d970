"""Input processing library for loading dictionary entries."""

from dictsite.input.entries import (
    Entry,
    parse_entry,
    parse_entries,
    load_entries,
    find_duplicate_keys,
)

__all__ = [
    "Entry",
    "parse_entry",
    "parse_entries",
    "load_entries",
    "find_duplicate_keys",
]

"""Common utility functions shared across the library."""

import re
from pathlib import Path
from typing import Dict, Iterable, List

from hanziconv import HanziConv


# Keys that cannot be used as a page filename stem
RESERVED_KEYS = frozenset({".", "..", "index"})

_UNSAFE_KEY_CHARS = re.compile(r'[/\\]')


def _clean_value(text: str) -> str:
    """Strip control characters that can render as odd glyphs."""
    if not isinstance(text, str):
        return text
    return "".join(ch for ch in text if (ch == "\n" or ch == "\t" or ord(ch) >= 32))


def unsafe_key_reason(key: str) -> str:
    """Return why a key can't be used as a filename stem, or "" if it can."""
    if not key:
        return "empty key"
    if _UNSAFE_KEY_CHARS.search(key):
        return "key contains a path separator"
    if key != key.strip():
        return "key has leading or trailing whitespace"
    if key in RESERVED_KEYS:
        return f"key '{key}' is reserved"
    return ""


def count_occurrences(items: Iterable[str]) -> Dict[str, int]:
    """Count items, keeping first-seen order."""
    counts: Dict[str, int] = {}
    for item in items:
        counts[item] = counts.get(item, 0) + 1
    return counts


def html_files(folder: Path) -> List[Path]:
    """List the .html files directly inside a folder."""
    return sorted(p for p in folder.glob("*.html") if p.is_file())


def ensure_dir(path: Path) -> None:
    """Create directory if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)


def simplified_to_traditional(text: str) -> str:
    """Convert simplified Chinese text to traditional Chinese.

    Uses the hanziconv library for character-level conversion.
    """
    if not text:
        return text
    return HanziConv.toTraditional(text)

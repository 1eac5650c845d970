"""Per-entry page writing."""

import os
import tempfile
from pathlib import Path
from typing import List

from dictsite.common.config import PAGE_SUFFIX
from dictsite.common.errors import WriteError
from dictsite.input.entries import Entry


def page_filename(entry: Entry) -> str:
    """Get the page filename for an entry (e.g. 你好.html)."""
    return f"{entry.primary_key}{PAGE_SUFFIX}"


def render_entry_html(entry: Entry) -> str:
    """Render the page body for an entry.

    Field values are written as-is, without HTML escaping.
    """
    parts: List[str] = [
        f"<h1>{entry.simplified}</h1>\n",
        f"<p>Simplified: {entry.simplified}</p>\n",
        f"<p>Traditional: {entry.traditional}</p>\n",
        f"<p>Pinyin: {entry.pinyin}</p>\n",
    ]
    for definition in entry.definitions:
        parts.append(f"<p>{definition}</p>\n")
    return "".join(parts)


def write_text_replace(path: Path, content: str) -> None:
    """Write content to a sibling temp file, then move it over path.

    Concurrent writers to the same path leave exactly one complete file.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def render_entry_page(entry: Entry, out_dir: Path) -> Path:
    """Write an entry's page into out_dir, replacing any existing file.

    Raises WriteError if the page can't be written.
    """
    page_path = Path(out_dir) / page_filename(entry)
    try:
        write_text_replace(page_path, render_entry_html(entry))
    except (OSError, UnicodeError) as e:
        raise WriteError(page_path, getattr(e, "strerror", None) or str(e)) from e
    return page_path

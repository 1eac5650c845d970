"""Check a generated site for index links whose page is missing."""

from pathlib import Path
from typing import List

from bs4 import BeautifulSoup  # type: ignore

from dictsite.common.config import INDEX_FILENAME


def index_links(index_html: str) -> List[str]:
    """Get the href of every grid link in an index page, in page order."""
    soup = BeautifulSoup(index_html, "html.parser")
    return [a.get("href", "") for a in soup.find_all("a", class_="grid-item")]


def find_dangling_links(out_dir: Path) -> List[str]:
    """List index links whose target file doesn't exist in out_dir.

    Returns an empty list when there is no index page.
    """
    out_dir = Path(out_dir)
    index_path = out_dir / INDEX_FILENAME
    if not index_path.exists():
        return []
    hrefs = index_links(index_path.read_text(encoding="utf-8"))
    return [href for href in hrefs if not (out_dir / href).is_file()]

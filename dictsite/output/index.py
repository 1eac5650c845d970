"""Index page: a responsive grid of links to every entry page."""

from pathlib import Path
from typing import List

from dictsite.common.config import INDEX_FILENAME
from dictsite.common.errors import WriteError
from dictsite.input.entries import Entry
from dictsite.output.pages import page_filename, write_text_replace


INDEX_HEADER = """<!DOCTYPE html>
<html>
<head>
	<meta charset="utf-8">
	<meta name="viewport" content="width=device-width, initial-scale=1">
	<style>
		.grid-container {
			display: flex;
			flex-wrap: wrap;
		}
		.grid-item {
			width: 100px;
			height: 100px;
			display: flex;
			align-items: center;
			justify-content: center;
			border: 1px solid black;
			flex-grow: 1;
			text-align: center;
		}
		@media (max-width: 600px) {
			.grid-item {
				width: 50px;
				height: 50px;
			}
		}
	</style>
</head>
<body>
	<div class="grid-container">
"""

INDEX_FOOTER = """
	</div>
</body>
</html>
"""


class IndexBuilder:
    """Collects one link per entry, in the order they are appended."""

    def __init__(self) -> None:
        self._links: List[str] = []

    def __len__(self) -> int:
        return len(self._links)

    @staticmethod
    def begin_page() -> str:
        return INDEX_HEADER

    @staticmethod
    def end_page() -> str:
        return INDEX_FOOTER

    def append_link(self, entry: Entry) -> str:
        """Add the grid link for an entry and return the fragment."""
        fragment = (
            f'<a class="grid-item" href="{page_filename(entry)}">{entry.primary_key}</a>\n'
        )
        self._links.append(fragment)
        return fragment

    def render(self) -> str:
        return self.begin_page() + "".join(self._links) + self.end_page()

    def write(self, out_dir: Path) -> Path:
        """Write index.html into out_dir."""
        index_path = Path(out_dir) / INDEX_FILENAME
        try:
            write_text_replace(index_path, self.render())
        except (OSError, UnicodeError) as e:
            raise WriteError(index_path, getattr(e, "strerror", None) or str(e)) from e
        return index_path

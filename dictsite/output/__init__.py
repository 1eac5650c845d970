"""Output generation library for the static site.

Pages are rendered on a bounded thread pool (dictsite.output.dispatch) while
the index is built in entry order (dictsite.output.index).
"""

from dictsite.output.pages import (
    page_filename,
    render_entry_html,
    render_entry_page,
)
from dictsite.output.index import IndexBuilder
from dictsite.output.dispatch import BoundedDispatcher
from dictsite.output.progress import ProgressReporter, format_bar
from dictsite.output.audit import index_links, find_dangling_links
from dictsite.output.processing import (
    BuildResult,
    RenderFailure,
    prepare_output_dir,
    build_site,
    run,
)

__all__ = [
    # pages
    "page_filename",
    "render_entry_html",
    "render_entry_page",
    # index
    "IndexBuilder",
    # dispatch
    "BoundedDispatcher",
    # progress
    "ProgressReporter",
    "format_bar",
    # audit
    "index_links",
    "find_dangling_links",
    # processing
    "BuildResult",
    "RenderFailure",
    "prepare_output_dir",
    "build_site",
    "run",
]

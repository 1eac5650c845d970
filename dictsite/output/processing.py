"""Main processing logic for site generation."""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from dictsite.common.config import SiteConfig
from dictsite.common.errors import SetupError, WriteError
from dictsite.common.logging import (
    DEFAULT_PARALLEL_WORKERS,
    log_debug,
    set_thread_log_context,
)
from dictsite.common.utils import ensure_dir, html_files
from dictsite.input.entries import Entry, find_duplicate_keys, load_entries
from dictsite.output.dispatch import BoundedDispatcher
from dictsite.output.index import IndexBuilder
from dictsite.output.pages import page_filename, render_entry_page
from dictsite.output.progress import ProgressReporter


@dataclass(frozen=True)
class RenderFailure:
    """A page that could not be written."""
    key: str
    reason: str


@dataclass
class BuildResult:
    """Summary of one generation run."""
    total: int
    index_path: Path
    failures: List[RenderFailure] = field(default_factory=list)

    @property
    def written(self) -> int:
        return self.total - len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


def prepare_output_dir(out_dir: Path, verbose: bool = False) -> int:
    """Create out_dir if needed and delete the .html files already in it.

    Returns the number of files removed. Raises SetupError on failure.
    """
    try:
        ensure_dir(out_dir)
    except OSError as e:
        raise SetupError(f"cannot create output folder {out_dir}: {e}") from e

    cleared = 0
    for old_file in html_files(out_dir):
        try:
            old_file.unlink()
        except OSError as e:
            raise SetupError(f"cannot delete {old_file}: {e}") from e
        cleared += 1
    if verbose:
        print(f"[setup] [delete] Cleared {cleared} .html files from {out_dir}")
    return cleared


def _render_task(
    entry: Entry,
    out_dir: Path,
    reporter: ProgressReporter,
    total: int,
    debug: bool,
) -> Optional[RenderFailure]:
    """Render one entry page. Returns a RenderFailure if it couldn't be written.

    The reporter is always advanced, even when the page fails.
    """
    set_thread_log_context(page_filename(entry))
    try:
        page_path = render_entry_page(entry, out_dir)
        log_debug(debug, f"wrote {page_path.name} ({len(entry.definitions)} definitions)", emit=reporter.log)
        return None
    except WriteError as e:
        reporter.log(f"[render] [error] {e}")
        return RenderFailure(entry.primary_key, e.reason)
    finally:
        reporter.record_completion(total)
        set_thread_log_context("")


def build_site(
    entries: Sequence[Entry],
    out_dir: Path,
    workers: int = DEFAULT_PARALLEL_WORKERS,
    reporter: Optional[ProgressReporter] = None,
    verbose: bool = False,
    debug: bool = False,
) -> BuildResult:
    """Render one page per entry plus index.html into out_dir.

    Pages render on at most `workers` threads. Index links are appended in
    entry order as each page is dispatched; index.html is written once every
    link is in, then this waits for all pages to finish.
    """
    out_dir = Path(out_dir)
    reporter = reporter or ProgressReporter()
    total = len(entries)
    index = IndexBuilder()

    if verbose:
        print(f"[render] [info] Rendering {total} pages into {out_dir}/")
        print(f"[render] [info] Parallel workers: {workers}")

    with BoundedDispatcher(workers) as dispatcher:
        for entry in entries:
            dispatcher.dispatch(_render_task, entry, out_dir, reporter, total, debug)
            index.append_link(entry)
        index_path = index.write(out_dir)
        if verbose:
            reporter.log(f"[index] [file] Wrote {index_path.name} with {len(index)} links")
        results = dispatcher.await_all()

    failures = [r for r in results if r is not None]
    return BuildResult(total=total, index_path=index_path, failures=failures)


def run(config: SiteConfig, verbose: bool = False, debug: bool = False) -> BuildResult:
    """Load the input, clear the output folder and build the site.

    The input is parsed before the output folder is touched, so a bad input
    leaves the previous site in place.
    """
    entries = load_entries(config.input_path)
    if verbose:
        print(f"[input] [info] Loaded {len(entries)} entries from {config.input_path.name}")
        dupes = find_duplicate_keys(entries)
        for key, count in dupes.items():
            print(f"[input] [warn] '{key}' appears {count} times; only one page will be kept",
                  file=sys.stderr)

    prepare_output_dir(config.output_dir, verbose=verbose)
    return build_site(
        entries,
        config.output_dir,
        workers=config.workers,
        verbose=verbose,
        debug=debug,
    )

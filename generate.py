#!/usr/bin/env python3
"""Static dictionary site generation.

Reads cedict.json from the working directory and writes:
    build/              (or docs/ with --docs)
        index.html      grid of links to every entry
        你好.html        one page per entry, named by its simplified form
        ...

Existing .html files in the output folder are deleted first.

Exit codes:
    0  every page was written
    1  some pages could not be written (listed at the end)
    2  the input or output folder could not be used; nothing was generated

Usage:
    python generate.py [--docs] [--verbose] [--debug]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dictsite.common.config import config_for_mode
from dictsite.common.errors import SiteError
from dictsite.output import find_dangling_links, run


def main(argv: Optional[List[str]] = None, root: Optional[Path] = None) -> int:
    """Main entry point for site generation."""
    parser = argparse.ArgumentParser(
        description="Generate a static site from cedict.json: one page per entry plus index.html"
    )
    parser.add_argument(
        "--docs",
        action="store_true",
        help="Write into docs/ instead of build/",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    config = config_for_mode(args.docs, root=root)

    if args.verbose:
        print(f"\n{'=' * 60}")
        print("🚀 Site Generation")
        print(f"{'=' * 60}")
        print(f"📂 Input file: {config.input_path}")
        print(f"📁 Output folder: {config.output_dir}")

    try:
        result = run(config, verbose=args.verbose, debug=args.debug)
    except SiteError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    if result.failures:
        print(f"[error] {len(result.failures)} of {result.total} pages could not be written:",
              file=sys.stderr)
        for failure in result.failures:
            print(f"[error]   {failure.key}: {failure.reason}", file=sys.stderr)
        dangling = find_dangling_links(config.output_dir)
        if dangling:
            print(f"[warn] index.html has {len(dangling)} links to missing pages", file=sys.stderr)

    if args.verbose:
        print(f"\n{'=' * 60}")
        print("✅ Complete!" if result.ok else "⚠️ Completed with errors")
        print(f"   Entries: {result.total}")
        print(f"   Pages written: {result.written}")
        print(f"   Index: {result.index_path}")
        print(f"{'=' * 60}\n")

    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

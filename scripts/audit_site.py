#!/usr/bin/env python3
"""Audit a generated site for index links to missing pages.

A page that failed to render is still linked from index.html, so this lists
the dangling links left by a run.

Usage:
    python scripts/audit_site.py [--docs]

    --docs: Audit docs/ instead of build/
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dictsite.common.config import config_for_mode
from dictsite.output.audit import find_dangling_links


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="List index links to missing pages")
    parser.add_argument("--docs", action="store_true", help="Audit docs/ instead of build/")
    args = parser.parse_args(argv)

    out_dir = config_for_mode(args.docs).output_dir
    if not out_dir.exists():
        print(f"[error] Output folder does not exist: {out_dir}", file=sys.stderr)
        return 2

    dangling = find_dangling_links(out_dir)
    for href in dangling:
        print(f"[missing] {href}")
    print(f"Checked {out_dir}: {len(dangling)} dangling links")
    return 1 if dangling else 0


if __name__ == "__main__":
    raise SystemExit(main())

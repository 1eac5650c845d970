"""Run configuration for site generation.

Everything here is a fixed default. The only choice a run makes is its mode:
- build (default): pages go to build/
- docs: pages go to docs/ (for publishing from the repository)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dictsite.common.logging import DEFAULT_PARALLEL_WORKERS


INPUT_FILENAME = "cedict.json"
INDEX_FILENAME = "index.html"
PAGE_SUFFIX = ".html"

OUTPUT_DIRS = {
    "build": "build",
    "docs": "docs",
}


@dataclass(frozen=True)
class SiteConfig:
    """Configuration for one generation run."""
    mode: str = "build"  # "build" or "docs"
    input_file: str = INPUT_FILENAME
    workers: int = DEFAULT_PARALLEL_WORKERS
    root: Optional[Path] = None  # Paths resolve against this (default: cwd)

    def __post_init__(self):
        if self.mode not in OUTPUT_DIRS:
            raise ValueError(f"mode must be one of {sorted(OUTPUT_DIRS)}, got '{self.mode}'")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def base_dir(self) -> Path:
        return self.root if self.root is not None else Path.cwd()

    @property
    def input_path(self) -> Path:
        return self.base_dir / self.input_file

    @property
    def output_dir(self) -> Path:
        return self.base_dir / OUTPUT_DIRS[self.mode]


def config_for_mode(docs: bool, root: Optional[Path] = None) -> SiteConfig:
    """Get the configuration for a run mode."""
    return SiteConfig(mode="docs" if docs else "build", root=root)

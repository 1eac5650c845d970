"""Single-line console progress bar shared by render workers."""

import sys
import threading
from typing import Optional, TextIO


BAR_SEGMENTS = 50  # one segment per 2%


def format_bar(count: int, total: int) -> str:
    """Format the bar line for count/total (without the leading \\r)."""
    percent = 100 * count // total if total > 0 else 100
    filled = percent * BAR_SEGMENTS // 100
    return "[" + "=" * filled + " " * (BAR_SEGMENTS - filled) + f"] {percent:3d}%"


class ProgressReporter:
    """Counts completed tasks and redraws the bar.

    The counter and the output stream are guarded by one lock, so workers
    can call record_completion() and log() concurrently.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()
        self._count = 0
        self._line_open = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def record_completion(self, total: int) -> int:
        """Count one finished task and redraw the bar. Returns the new count."""
        with self._lock:
            self._count += 1
            out = self.stream
            out.write("\r" + format_bar(self._count, total))
            if self._count == total:
                out.write("\n")
                self._line_open = False
            else:
                self._line_open = True
            out.flush()
            return self._count

    def log(self, message: str) -> None:
        """Print a diagnostic line without tearing the bar."""
        with self._lock:
            out = self.stream
            if self._line_open:
                out.write("\n")
                self._line_open = False
            out.write(message + "\n")
            out.flush()

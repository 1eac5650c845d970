"""Logging utilities for site generation."""

import threading
from typing import Callable, Dict, Optional


# Hardcoded number of parallel render workers
DEFAULT_PARALLEL_WORKERS = 8

# Module-level state
_THREAD_IDX_LOCK = threading.Lock()
_THREAD_IDX_MAP: Dict[int, int] = {}
_THREAD_IDX_NEXT = 0

# Thread-local log context (the page being rendered)
_LOG_CTX = threading.local()


def set_thread_log_context(current_file: str = "") -> None:
    """Set the logging context for the current thread."""
    _LOG_CTX.current_file = current_file


def get_thread_log_context() -> str:
    """Get the logging context for the current thread."""
    return getattr(_LOG_CTX, "current_file", "")


def _short_thread_id() -> str:
    """Map the OS thread id to a small stable index t00..t99."""
    global _THREAD_IDX_NEXT
    tid = threading.get_ident()
    with _THREAD_IDX_LOCK:
        idx = _THREAD_IDX_MAP.get(tid)
        if idx is None:
            idx = _THREAD_IDX_NEXT
            _THREAD_IDX_MAP[tid] = idx
            _THREAD_IDX_NEXT = (_THREAD_IDX_NEXT + 1) % 100
    return f"t{idx:02d}"


def context_prefix() -> str:
    """Build the [tNN] [file] tags for the current thread."""
    tags = f"[{_short_thread_id()}]"
    current_file = get_thread_log_context()
    if current_file:
        tags += f" [{current_file}]"
    else:
        tags += " [main]"
    return tags


def log_debug(enabled: bool, message: str, emit: Optional[Callable[[str], None]] = None) -> None:
    """Print a debug message if debugging is enabled.

    `emit` replaces print, e.g. to route the line through a progress reporter.
    """
    if enabled:
        line = f"[debug] {context_prefix()} {message}"
        if emit is not None:
            emit(line)
        else:
            print(line)

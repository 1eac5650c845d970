"""Common utilities shared across input and output processing."""

from dictsite.common.utils import (
    unsafe_key_reason,
    count_occurrences,
    html_files,
    simplified_to_traditional,
    _clean_value,
    ensure_dir,
)
from dictsite.common.logging import (
    log_debug,
    set_thread_log_context,
    DEFAULT_PARALLEL_WORKERS,
)
from dictsite.common.errors import (
    SiteError,
    SetupError,
    DataSourceError,
    ParseError,
    WriteError,
)
from dictsite.common.config import SiteConfig, config_for_mode

__all__ = [
    # utils
    "unsafe_key_reason",
    "count_occurrences",
    "html_files",
    "simplified_to_traditional",
    "_clean_value",
    "ensure_dir",
    # logging
    "log_debug",
    "set_thread_log_context",
    "DEFAULT_PARALLEL_WORKERS",
    # errors
    "SiteError",
    "SetupError",
    "DataSourceError",
    "ParseError",
    "WriteError",
    # config
    "SiteConfig",
    "config_for_mode",
]

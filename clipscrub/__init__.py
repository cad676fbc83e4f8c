from .clipboard import ClipboardError, NoTextAvailable, read_text, write_text
from .config import (
    ClipscrubConfig,
    ConfigError,
    NotificationPolicy,
    PolicyConfig,
    load_config,
)
from .classify import UNICODE_VERSION, classify
from .pipeline import scrub
from .report import format_report
from .types import DELETE, KEEP, REPLACE_WITH_SPACE, ScrubResult
from .cli import main

__all__ = [
    "ClipboardError",
    "ClipscrubConfig",
    "ConfigError",
    "DELETE",
    "KEEP",
    "NoTextAvailable",
    "NotificationPolicy",
    "PolicyConfig",
    "REPLACE_WITH_SPACE",
    "ScrubResult",
    "UNICODE_VERSION",
    "classify",
    "format_report",
    "load_config",
    "main",
    "read_text",
    "scrub",
    "write_text",
]

"""Shared data types for scrub results."""

from dataclasses import dataclass
from typing import Dict

KEEP = "KEEP"
REPLACE_WITH_SPACE = "REPLACE_WITH_SPACE"
DELETE = "DELETE"


@dataclass(frozen=True)
class ScrubResult:
    """Cleaned text plus the accounting of what changed."""

    cleaned_text: str
    original_length: int
    cleaned_length: int
    removed_count: int
    nbsp_normalized: bool
    histogram: Dict[str, int]
    nbsp_count: int = 0
    unicode_version: str = ""

    @property
    def changed(self) -> bool:
        """True when anything was removed or normalized."""

        return self.removed_count > 0 or self.nbsp_normalized

"""Core scrub pipeline: pair surrogates, normalize no-break spaces, delete."""

from typing import Dict, Iterable, List, Optional, Tuple

from .classify import (
    SPACE,
    UNICODE_VERSION,
    category_name,
    classify,
    iter_code_points,
)
from .config import PolicyConfig
from .types import DELETE, REPLACE_WITH_SPACE, ScrubResult

DEFAULT_POLICY = PolicyConfig()


def normalize_no_break_spaces(
    chars: Iterable[str], policy: PolicyConfig
) -> Tuple[List[str], int]:
    """Replace U+00A0 and U+202F with U+0020 unless the policy keeps them."""

    normalized = []
    replaced = 0
    for ch in chars:
        if classify(ch, policy) == REPLACE_WITH_SPACE:
            normalized.append(SPACE)
            replaced += 1
        else:
            normalized.append(ch)
    return normalized, replaced


def delete_invisible(
    chars: Iterable[str], policy: PolicyConfig
) -> Tuple[List[str], Dict[str, int]]:
    """Drop characters in the deletion set and count them by category."""

    kept = []
    counts: Dict[str, int] = {}
    for ch in chars:
        if classify(ch, policy) == DELETE:
            name = category_name(ch)
            counts[name] = counts.get(name, 0) + 1
            continue
        kept.append(ch)
    histogram = {name: counts[name] for name in sorted(counts)}
    return kept, histogram


def scrub(raw_text: str, config: Optional[PolicyConfig] = None) -> ScrubResult:
    """Run the scrub pipeline and return a ScrubResult."""

    policy = config or DEFAULT_POLICY
    chars = list(iter_code_points(raw_text))
    normalized, nbsp_count = normalize_no_break_spaces(chars, policy)
    kept, histogram = delete_invisible(normalized, policy)

    return ScrubResult(
        cleaned_text="".join(kept),
        original_length=len(chars),
        cleaned_length=len(kept),
        removed_count=len(chars) - len(kept),
        nbsp_normalized=nbsp_count > 0,
        histogram=histogram,
        nbsp_count=nbsp_count,
        unicode_version=UNICODE_VERSION,
    )

"""Deterministic text and JSON renderings of a ScrubResult."""

from typing import Dict, List

from .types import ScrubResult


def format_report(result: ScrubResult) -> str:
    """Render the multi-line human-readable summary."""

    lines: List[str] = [
        f"{result.original_length} -> {result.cleaned_length} chars, "
        f"stripped {result.removed_count}"
    ]
    if result.nbsp_normalized:
        lines.append(f"NBSP normalized: {result.nbsp_count}")
    if result.histogram:
        lines.append("Category breakdown:")
        for name in sorted(result.histogram):
            lines.append(f"  {name}: {result.histogram[name]}")
    return "\n".join(lines)


def format_summary(result: ScrubResult) -> str:
    """Render the one-line message used for notifications and log entries."""

    nbsp = "yes" if result.nbsp_normalized else "no"
    return f"Removed {result.removed_count} invisible character(s); NBSP normalized: {nbsp}"


def result_to_dict(result: ScrubResult, include_text: bool = False) -> Dict[str, object]:
    """Convert a ScrubResult to a JSON-ready dict with sorted histogram keys."""

    payload: Dict[str, object] = {
        "original_length": result.original_length,
        "cleaned_length": result.cleaned_length,
        "removed_count": result.removed_count,
        "nbsp_normalized": result.nbsp_normalized,
        "nbsp_count": result.nbsp_count,
        "histogram": {name: result.histogram[name] for name in sorted(result.histogram)},
        "unicode_version": result.unicode_version,
    }
    if include_text:
        payload["cleaned_text"] = result.cleaned_text
    return payload

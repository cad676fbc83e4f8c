#!/usr/bin/env python3
"""Simple performance baseline for clipscrub."""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Dict, List

from clipscrub.config import PolicyConfig
from clipscrub.pipeline import scrub


_PLAIN_WORDS = ["clipboard", "text", "pasted", "from", "a", "web", "page", "\U0001f600", "\u4e2d\u6587"]

_INVISIBLE_SNIPPETS = ["\u200b", "\u200d", "\ufeff", "\u00a0", "\u202f", "\x07", "\ue000", "\ud800"]

_POLICIES = {
    "default": PolicyConfig(),
    "keep_format": PolicyConfig(keep_format_marks=True),
    "keep_all": PolicyConfig(keep_format_marks=True, keep_no_break_space=True),
}


def _build_text(target_chars: int, inject_every: int) -> str:
    chunks: List[str] = []
    total = 0
    i = 0
    while total < target_chars:
        if inject_every and i % inject_every == 0:
            chunk = random.choice(_INVISIBLE_SNIPPETS)
        else:
            chunk = random.choice(_PLAIN_WORDS) + " "
        chunks.append(chunk)
        total += len(chunk)
        i += 1
    return "".join(chunks)


def _run_case(text: str, policy: PolicyConfig, runs: int) -> Dict[str, float]:
    durations: List[float] = []
    for _ in range(runs):
        start = time.perf_counter()
        scrub(text, policy)
        durations.append(time.perf_counter() - start)
    durations.sort()
    return {
        "min_ms": durations[0] * 1000.0,
        "p50_ms": durations[len(durations) // 2] * 1000.0,
        "max_ms": durations[-1] * 1000.0,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="clipscrub scrub perf baseline.")
    parser.add_argument("--sizes", nargs="+", type=int, default=[10_000, 100_000, 1_000_000])
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--inject-every", type=int, default=10)
    parser.add_argument(
        "--output",
        type=str,
        default="",
        help="Optional path to write results as JSON.",
    )
    args = parser.parse_args()

    print("clipscrub perf baseline")
    print(f"sizes={args.sizes} chars, runs={args.runs}, inject_every={args.inject_every}")

    results: Dict[str, Dict[str, Dict[str, float]]] = {}
    for size in args.sizes:
        text = _build_text(size, args.inject_every)
        print(f"\nsize={size} chars")
        size_key = str(size)
        results[size_key] = {}
        for name, policy in _POLICIES.items():
            stats = _run_case(text, policy, args.runs)
            results[size_key][name] = stats
            print(
                f"  policy={name} min={stats['min_ms']:.2f}ms "
                f"p50={stats['p50_ms']:.2f}ms max={stats['max_ms']:.2f}ms"
            )
    if args.output:
        output_path = args.output
        with open(output_path, "w", encoding="utf-8") as handle:
            json.dump(
                {
                    "sizes": args.sizes,
                    "runs": args.runs,
                    "inject_every": args.inject_every,
                    "results": results,
                },
                handle,
                indent=2,
                sort_keys=True,
            )
        print(f"\nWrote results to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

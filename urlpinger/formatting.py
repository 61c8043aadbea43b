from __future__ import annotations

from typing import Sequence

from urlpinger.checks.results import PingResult


def format_result(result: PingResult) -> str:
    line = f"{result.status_code:>3}  {result.duration_ms:>10.1f} ms  {result.url}"
    if result.failure is not None:
        line += f"  (unreachable: {result.failure.value})"
    return line


def format_summary(results: Sequence[PingResult], elapsed_s: float) -> str:
    reachable = sum(1 for r in results if r.reachable)
    return (
        f"{len(results)} URL(s) pinged, {reachable} reachable, "
        f"{elapsed_s:.3f}s total"
    )

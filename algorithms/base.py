from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from algorithms.steps import StepRecord


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one (algorithm, pattern) run."""

    matches: Tuple[int, ...] = ()
    steps: Tuple[StepRecord, ...] = ()
    comparisons: int = 0
    pattern: Optional[str] = None
    elapsed_ms: Optional[float] = None
    algorithm_id: Optional[str] = None

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def found_positions(self) -> Tuple[int, ...]:
        return tuple(s.position for s in self.steps if s.kind == "found")

    def with_run_info(self, **changes: Any) -> "MatchResult":
        return replace(self, **changes)

    def to_dict(self, include_steps: bool = True) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "pattern": self.pattern,
            "algorithm_id": self.algorithm_id,
            "matches": list(self.matches),
            "comparisons": self.comparisons,
            "elapsed_ms": self.elapsed_ms,
        }
        if include_steps:
            d["steps"] = [s.to_dict() for s in self.steps]
        return d


def empty_result() -> MatchResult:
    return MatchResult()


def fold_case(s: str) -> str:
    # per-character so offsets still line up with the original text
    # ("İ".lower() is two code points)
    return "".join(ch.lower()[:1] for ch in s)


def prepare(text: str, pattern: str, case_insensitive: bool) -> Tuple[str, str]:
    if case_insensitive:
        return fold_case(text), fold_case(pattern)
    return text, pattern

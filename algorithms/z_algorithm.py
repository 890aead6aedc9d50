from typing import Any, List, Sequence

from algorithms.base import MatchResult, empty_result, prepare
from algorithms.steps import ExtendStep, FoundStep, StepRecord, UpdateBoxStep, ZBoxStep


class _Separator:
    """Sentinel between pattern and text; unequal to every character."""

    def __repr__(self) -> str:
        return "<SEP>"


SEPARATOR = _Separator()


def z_array(s: Sequence[Any]) -> List[int]:
    """Plain Z-array, z[0] left at 0."""
    n = len(s)
    z = [0] * n
    l = r = 0
    for i in range(1, n):
        if i <= r:
            z[i] = min(r - i + 1, z[i - l])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > r:
            l, r = i, i + z[i] - 1
    return z


def z_algorithm_match(text: str, pattern: str, case_insensitive: bool = False) -> MatchResult:
    if not pattern:
        return empty_result()
    t, p = prepare(text, pattern, case_insensitive)
    m = len(p)
    combined: List[Any] = [*p, SEPARATOR, *t]
    n = len(combined)

    z = [0] * n
    matches: List[int] = []
    steps: List[StepRecord] = []
    comparisons = 0
    l = r = 0
    for i in range(1, n):
        if i <= r:
            z[i] = min(r - i + 1, z[i - l])
            steps.append(ZBoxStep(
                i,
                f"inside box [{l}, {r}], seed z[{i}] = {z[i]} from z[{i - l}]",
                l,
                r,
                z[i],
            ))
        while i + z[i] < n and combined[z[i]] == combined[i + z[i]]:
            z[i] += 1
            comparisons += 1
            steps.append(ExtendStep(i, f"extend z[{i}] to {z[i]}", z[i]))
        if z[i] and i + z[i] - 1 > r:
            l, r = i, i + z[i] - 1
            steps.append(UpdateBoxStep(i, f"box moves to [{l}, {r}]", l, r))
        if z[i] == m and i > m:
            start = i - m - 1
            matches.append(start)
            steps.append(FoundStep(start, f"pattern found at {start}"))

    return MatchResult(matches=tuple(matches), steps=tuple(steps), comparisons=comparisons)

from typing import List, Tuple

from algorithms.base import MatchResult, empty_result, prepare
from algorithms.steps import FoundStep, MatchStep, MismatchStep, StepRecord


def kmp_build_failure(p: str) -> Tuple[List[int], int]:
    """Failure function of ``p`` plus the comparisons spent building it.

    Every character comparison and every fallback counts as one.
    """
    failure, j, comparisons = [0] * len(p), 0, 0
    for i in range(1, len(p)):
        while True:
            comparisons += 1
            if p[i] == p[j]:
                j += 1
                break
            if j == 0:
                break
            j = failure[j - 1]
            comparisons += 1
        failure[i] = j
    return failure, comparisons


def kmp_match(text: str, pattern: str, case_insensitive: bool = False) -> MatchResult:
    if not pattern:
        return empty_result()
    t, p = prepare(text, pattern, case_insensitive)
    m = len(p)
    failure, comparisons = kmp_build_failure(p)

    matches: List[int] = []
    steps: List[StepRecord] = []
    j = 0
    for i, ch in enumerate(t):
        while True:
            comparisons += 1
            if ch == p[j]:
                steps.append(MatchStep(i, f"text[{i}] == pattern[{j}] ('{ch}')", j))
                j += 1
                break
            if j == 0:
                steps.append(MismatchStep(i, f"text[{i}] != pattern[0], slide by 1", 0, 1))
                break
            fallback = failure[j - 1]
            comparisons += 1
            steps.append(MismatchStep(
                i,
                f"text[{i}] != pattern[{j}], fall back to j={fallback}",
                j,
                j - fallback,
            ))
            j = fallback
        if j == m:
            start = i - m + 1
            matches.append(start)
            steps.append(FoundStep(start, f"pattern found at {start}"))
            j = failure[j - 1]

    return MatchResult(matches=tuple(matches), steps=tuple(steps), comparisons=comparisons)

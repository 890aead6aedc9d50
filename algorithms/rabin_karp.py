"""Rabin-Karp with a deliberately small modulus.

101 keeps hash collisions frequent enough to show up in the trace as
spurious hits. A real search would use a large prime or double hashing.
"""

from typing import List

from algorithms.base import MatchResult, empty_result, prepare
from algorithms.steps import CompareStep, FoundStep, HashCompareStep, SpuriousStep, StepRecord

RADIX = 256
MODULUS = 101


def window_hash(s: str, base: int = RADIX, mod: int = MODULUS) -> int:
    h = 0
    for ch in s:
        h = (h * base + ord(ch)) % mod
    return h


def rabin_karp_match(text: str, pattern: str, case_insensitive: bool = False) -> MatchResult:
    if not pattern:
        return empty_result()
    t, p = prepare(text, pattern, case_insensitive)
    n, m = len(t), len(p)

    hp = window_hash(p)
    if m > n:
        return MatchResult()

    power = 1
    for _ in range(m - 1):
        power = (power * RADIX) % MODULUS
    h = window_hash(t[:m])

    matches: List[int] = []
    steps: List[StepRecord] = []
    comparisons = 0
    for i in range(n - m + 1):
        steps.append(HashCompareStep(i, f"window hash {h} vs pattern hash {hp}", h, hp))
        if h == hp:
            mismatch_at = -1
            for j in range(m):
                comparisons += 1
                equal = t[i + j] == p[j]
                steps.append(CompareStep(
                    i + j,
                    f"text[{i + j}] {'==' if equal else '!='} pattern[{j}]",
                    j,
                    equal,
                ))
                if not equal:
                    mismatch_at = j
                    break
            if mismatch_at >= 0:
                steps.append(SpuriousStep(
                    i,
                    f"hash collision at {i}, characters differ at offset {mismatch_at}",
                    h,
                    mismatch_at,
                ))
            else:
                matches.append(i)
                steps.append(FoundStep(i, f"pattern found at {i}"))
        if i < n - m:
            # int % MODULUS is already in [0, MODULUS)
            h = ((h - ord(t[i]) * power) * RADIX + ord(t[i + m])) % MODULUS

    return MatchResult(matches=tuple(matches), steps=tuple(steps), comparisons=comparisons)

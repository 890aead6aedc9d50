# services/runner.py
"""
Run orchestration.

- Parses the comma-separated pattern list
- Validates everything before any matcher runs
- Single mode    -> one MatchResult per pattern, keyed by pattern index
- Benchmark mode -> one aggregated MatchResult per algorithm (no steps),
                    keyed by algorithm id
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from algorithms.base import MatchResult
from algorithms.errors import InputError
from algorithms.registry import ALGORITHMS, BENCHMARK, AlgorithmId, get_algorithm

logger = logging.getLogger(__name__)

PATTERN_DELIMITER = ","

RunKey = Union[int, str]


class RunResultSet(Mapping[RunKey, MatchResult]):
    """Read-only result set of a single orchestrator invocation."""

    def __init__(
        self,
        results: Dict[RunKey, MatchResult],
        *,
        text: str,
        patterns: Tuple[str, ...],
        algorithm: str,
        case_insensitive: bool,
    ) -> None:
        self._results = dict(results)
        self.text = text
        self.patterns = patterns
        self.algorithm = algorithm
        self.case_insensitive = case_insensitive

    @property
    def benchmark(self) -> bool:
        return self.algorithm == BENCHMARK

    def __getitem__(self, key: RunKey) -> MatchResult:
        return self._results[key]

    def __iter__(self) -> Iterator[RunKey]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:
        return f"RunResultSet(algorithm={self.algorithm!r}, keys={list(self._results)!r})"


def parse_patterns(raw: str, delimiter: str = PATTERN_DELIMITER) -> List[str]:
    if not raw:
        return []
    return [s.strip() for s in raw.split(delimiter) if s.strip()]


def _timed(matcher, text: str, pattern: str, case_insensitive: bool) -> Tuple[MatchResult, float]:
    t0 = time.perf_counter()
    result = matcher(text, pattern, case_insensitive)
    return result, (time.perf_counter() - t0) * 1000.0


def run_matching(
    text: str,
    patterns: str,
    algorithm: Union[AlgorithmId, str],
    case_insensitive: bool = False,
    max_text_length: Optional[int] = None,
) -> RunResultSet:
    """Run one algorithm (or all of them, with ``algorithm="all"``) over every pattern."""
    if not text:
        logger.warning("run rejected: empty text")
        raise InputError("Please enter the text to search in.")
    if max_text_length is not None and len(text) > max_text_length:
        logger.warning("run rejected: text length %d > %d", len(text), max_text_length)
        raise InputError(
            f"Text is too long ({len(text)} characters, limit {max_text_length}).",
            context={"length": len(text), "limit": max_text_length},
        )
    pats = parse_patterns(patterns)
    if not pats:
        logger.warning("run rejected: no patterns in %r", patterns)
        raise InputError("Please enter at least one pattern.")

    algo_key = algorithm.value if isinstance(algorithm, AlgorithmId) else algorithm
    if algo_key == BENCHMARK:
        descriptors = list(ALGORITHMS.values())
    else:
        descriptors = [get_algorithm(algo_key)]

    logger.info(
        "run: algorithm=%s patterns=%d text_len=%d case_insensitive=%s",
        algo_key, len(pats), len(text), case_insensitive,
    )

    results: Dict[RunKey, MatchResult] = {}
    if algo_key == BENCHMARK:
        for desc in descriptors:
            matches: List[int] = []
            comparisons = 0
            total_ms = 0.0
            for p in pats:
                res, ms = _timed(desc.matcher, text, p, case_insensitive)
                matches.extend(res.matches)
                comparisons += res.comparisons
                total_ms += ms
            results[desc.id.value] = MatchResult(
                matches=tuple(matches),
                comparisons=comparisons,
                elapsed_ms=total_ms,
                algorithm_id=desc.id.value,
            )
            logger.debug("%s: %d matches, %d comparisons, %.3f ms",
                         desc.name, len(matches), comparisons, total_ms)
    else:
        desc = descriptors[0]
        for idx, p in enumerate(pats):
            res, ms = _timed(desc.matcher, text, p, case_insensitive)
            results[idx] = res.with_run_info(pattern=p, elapsed_ms=ms, algorithm_id=desc.id.value)
            logger.debug("%s '%s': %d matches, %d comparisons, %d steps, %.3f ms",
                         desc.name, p, res.match_count, res.comparisons, len(res.steps), ms)

    return RunResultSet(
        results,
        text=text,
        patterns=tuple(pats),
        algorithm=algo_key,
        case_insensitive=case_insensitive,
    )

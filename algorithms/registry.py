"""Closed set of algorithms and their display metadata."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union

from algorithms.base import MatchResult
from algorithms.errors import ConfigurationError
from algorithms.kmp import kmp_match
from algorithms.rabin_karp import rabin_karp_match
from algorithms.z_algorithm import z_algorithm_match

logger = logging.getLogger(__name__)

Matcher = Callable[[str, str, bool], MatchResult]

BENCHMARK = "all"


class AlgorithmId(str, Enum):
    KMP = "kmp"
    RABIN_KARP = "rabin-karp"
    Z_ALGORITHM = "z-algorithm"


@dataclass(frozen=True)
class AlgorithmDescriptor:
    id: AlgorithmId
    name: str
    matcher: Matcher
    description: str
    color: str


ALGORITHMS: Mapping[AlgorithmId, AlgorithmDescriptor] = MappingProxyType({
    AlgorithmId.KMP: AlgorithmDescriptor(
        id=AlgorithmId.KMP,
        name="KMP",
        matcher=kmp_match,
        description="Uses a failure function to skip re-comparing characters after a mismatch.",
        color="#6366f1",
    ),
    AlgorithmId.RABIN_KARP: AlgorithmDescriptor(
        id=AlgorithmId.RABIN_KARP,
        name="Rabin-Karp",
        matcher=rabin_karp_match,
        description="Compares rolling hashes of text windows and verifies hash hits character by character.",
        color="#f59e0b",
    ),
    AlgorithmId.Z_ALGORITHM: AlgorithmDescriptor(
        id=AlgorithmId.Z_ALGORITHM,
        name="Z-Algorithm",
        matcher=z_algorithm_match,
        description="Builds the Z-array of pattern + separator + text; entries equal to the pattern length are matches.",
        color="#10b981",
    ),
})


def get_algorithm(identifier: Union[AlgorithmId, str]) -> AlgorithmDescriptor:
    try:
        return ALGORITHMS[AlgorithmId(identifier)]
    except ValueError:
        logger.error("unknown algorithm id %r", identifier)
        raise ConfigurationError(
            f"Unknown algorithm '{identifier}'. Expected one of: "
            + ", ".join(a.value for a in AlgorithmId),
            context={"algorithm": identifier},
        ) from None

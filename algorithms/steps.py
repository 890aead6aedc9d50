"""Step records emitted by the matchers.

Each kind of event is its own frozen dataclass carrying only the fields that
kind needs. ``kind`` is a class-level tag so consumers can dispatch on it
without isinstance chains.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Union


@dataclass(frozen=True)
class _Step:
    kind: ClassVar[str] = ""

    position: int
    description: str

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["kind"] = self.kind
        return d


@dataclass(frozen=True)
class CompareStep(_Step):
    kind: ClassVar[str] = "compare"

    pattern_index: int
    equal: bool


@dataclass(frozen=True)
class MatchStep(_Step):
    kind: ClassVar[str] = "match"

    pattern_index: int


@dataclass(frozen=True)
class MismatchStep(_Step):
    kind: ClassVar[str] = "mismatch"

    pattern_index: int
    shift: int


@dataclass(frozen=True)
class FoundStep(_Step):
    kind: ClassVar[str] = "found"


@dataclass(frozen=True)
class HashCompareStep(_Step):
    kind: ClassVar[str] = "hash-compare"

    window_hash: int
    pattern_hash: int


@dataclass(frozen=True)
class SpuriousStep(_Step):
    kind: ClassVar[str] = "spurious"

    window_hash: int
    mismatch_index: int


@dataclass(frozen=True)
class ZBoxStep(_Step):
    kind: ClassVar[str] = "z-box"

    left: int
    right: int
    z_value: int


@dataclass(frozen=True)
class ExtendStep(_Step):
    kind: ClassVar[str] = "extend"

    z_value: int


@dataclass(frozen=True)
class UpdateBoxStep(_Step):
    kind: ClassVar[str] = "update-box"

    left: int
    right: int


StepRecord = Union[
    CompareStep,
    MatchStep,
    MismatchStep,
    FoundStep,
    HashCompareStep,
    SpuriousStep,
    ZBoxStep,
    ExtendStep,
    UpdateBoxStep,
]

STEP_KINDS = tuple(
    cls.kind
    for cls in (
        CompareStep,
        MatchStep,
        MismatchStep,
        FoundStep,
        HashCompareStep,
        SpuriousStep,
        ZBoxStep,
        ExtendStep,
        UpdateBoxStep,
    )
)

"""Run conformance fixtures through the segmenter."""

from typing import Iterable, List, NamedTuple, Optional

from ..core.logging import log
from ..segmentation.driver import split_graphemes
from .gentest import BREAK, NO_BREAK, ConformanceCase


class ConformanceFailure(NamedTuple):
    case: ConformanceCase
    got: List[str]

    @property
    def line(self) -> Optional[int]:
        return self.case.line


def describe(clusters: Iterable[str]) -> str:
    """Render clusters in break-test notation, e.g. ``÷ 0061 × 0308 ÷``."""
    parts = [f" {NO_BREAK} ".join(f"{ord(c):04X}" for c in cluster) for cluster in clusters]
    if not parts:
        return BREAK
    return f"{BREAK} " + f" {BREAK} ".join(parts) + f" {BREAK}"


def check_cases(cases: Iterable[ConformanceCase]) -> List[ConformanceFailure]:
    failures: List[ConformanceFailure] = []
    total = 0
    for case in cases:
        total += 1
        got = split_graphemes(case.input)
        if got != case.clusters:
            failures.append(ConformanceFailure(case, got))

    log.info("ucd.conformance.checked", cases=total, failures=len(failures))
    return failures

"""
Conformance fixtures from the UCD ``GraphemeBreakTest.txt`` file.

Each data line lists hex code points separated by ``÷`` (boundary) and ``×``
(no boundary), for example ``÷ 0061 × 0308 ÷ 0062 ÷``. Fixtures are stored as
JSON so tests and ``graphseg ucd check`` can load them without the UCD file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import BaseModel, model_validator

from ..core.logging import log

BREAK = "\N{DIVISION SIGN}"
NO_BREAK = "\N{MULTIPLICATION SIGN}"


class ConformanceCase(BaseModel):
    input: str
    clusters: List[str]
    line: Optional[int] = None  # source line in the UCD file

    @model_validator(mode="after")
    def _clusters_cover_input(self) -> "ConformanceCase":
        if "".join(self.clusters) != self.input:
            raise ValueError("clusters do not concatenate to the input")
        if any(not c for c in self.clusters):
            raise ValueError("empty cluster")
        return self


def _is_surrogate(cp: int) -> bool:
    return 0xD800 <= cp <= 0xDFFF


def parse_break_test(lines: Iterable[str]) -> List[ConformanceCase]:
    """Parse break test lines into fixtures.

    Lines with surrogate code points are skipped because they cannot be
    encoded as UTF-8; lines with unparseable hex are skipped and logged.
    """
    cases: List[ConformanceCase] = []
    skipped = 0
    for line_no, line in enumerate(lines, 1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue

        clusters: List[str] = []
        try:
            for piece in line.split(BREAK):
                code_points = [int(f, 16) for f in piece.split() if f != NO_BREAK]
                if not code_points:
                    continue
                if any(_is_surrogate(cp) for cp in code_points):
                    raise ValueError("surrogate code point")
                clusters.append("".join(map(chr, code_points)))
        except ValueError as e:
            log.debug("ucd.gentest.skipped", line=line_no, reason=str(e))
            skipped += 1
            continue

        cases.append(ConformanceCase(input="".join(clusters), clusters=clusters, line=line_no))

    log.info("ucd.gentest.parsed", cases=len(cases), skipped=skipped)
    return cases


def dump_cases(cases: Iterable[ConformanceCase]) -> str:
    data = [c.model_dump(exclude_none=True) for c in cases]
    return json.dumps(data, ensure_ascii=True, indent=1) + "\n"


def load_cases(path: Path) -> List[ConformanceCase]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return [ConformanceCase.model_validate(item) for item in data]

"""
Range table generation from the UCD ``GraphemeBreakProperty.txt`` file.

The input is the Unicode data file format: one ``<range> ; <value>`` record per
line, where ``<range>`` is a hex code point or ``XXXX..YYYY`` (inclusive) and
everything after ``#`` is a comment. The output is a Python module with the
same shape as ``graphseg.segmentation.table``.

Latest input: https://www.unicode.org/Public/UCD/latest/ucd/auxiliary/GraphemeBreakProperty.txt
"""

from __future__ import annotations

import re
from typing import Iterable, List, NamedTuple, Optional

from ..core.logging import log
from ..segmentation.categories import PROPERTY_NAMES, Category

RANGE_SEP = ".."

_VERSION_RE = re.compile(r"GraphemeBreakProperty-(\d+\.\d+\.\d+)\.txt")

OUTPUT_HEADER = '''\
# generated by graphseg ucd gen-table; DO NOT EDIT
"""
Grapheme_Cluster_Break range table for UCD {version}.
"""

from typing import Tuple

from graphseg.segmentation.categories import Category

UCD_VERSION = {version!r}

Range = Tuple[int, int, Category]

RANGES: Tuple[Range, ...] = (
'''


class UCDFormatError(ValueError):
    """Malformed record in a UCD data file."""

    def __init__(self, line_no: int, message: str):
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


class PropertyRange(NamedTuple):
    """Half-open code point range with its property value name."""

    begin: int
    end: int
    name: str


def _parse_code_point(text: str, line_no: int) -> int:
    try:
        return int(text, 16)
    except ValueError:
        raise UCDFormatError(line_no, f"invalid code point {text!r}") from None


def parse_range(desc: str, line_no: int = 0) -> tuple[int, int]:
    """Parse ``XXXX`` or ``XXXX..YYYY`` into a half-open ``(begin, end)``."""
    first, sep, last = desc.partition(RANGE_SEP)
    begin = _parse_code_point(first.strip(), line_no)
    end = _parse_code_point(last.strip(), line_no) + 1 if sep else begin + 1
    if end <= begin:
        raise UCDFormatError(line_no, f"empty range {desc!r}")
    return begin, end


def parse_property_file(lines: Iterable[str]) -> List[PropertyRange]:
    """Parse property records, sorted by their first code point."""
    ranges: List[PropertyRange] = []
    for line_no, line in enumerate(lines, 1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        desc, sep, name = line.partition(";")
        if not sep:
            raise UCDFormatError(line_no, f"record without a semicolon: {line!r}")
        name = name.strip()
        if name not in PROPERTY_NAMES:
            raise UCDFormatError(line_no, f"unknown property value {name!r}")
        begin, end = parse_range(desc.strip(), line_no)
        ranges.append(PropertyRange(begin, end, name))

    ranges.sort(key=lambda r: r.begin)
    _check_overlaps(ranges)
    log.info("ucd.gentable.parsed", ranges=len(ranges), values=len({r.name for r in ranges}))
    return ranges


def _check_overlaps(ranges: List[PropertyRange]) -> None:
    for prev, cur in zip(ranges, ranges[1:]):
        if cur.begin < prev.end:
            raise UCDFormatError(
                0, f"overlapping ranges {prev.begin:04X}..{prev.end - 1:04X} and {cur.begin:04X}"
            )


def coalesce_ranges(ranges: Iterable[PropertyRange]) -> List[PropertyRange]:
    """Merge touching ranges that carry the same property value."""
    merged: List[PropertyRange] = []
    for r in ranges:
        if merged and merged[-1].end == r.begin and merged[-1].name == r.name:
            merged[-1] = merged[-1]._replace(end=r.end)
        else:
            merged.append(r)
    return merged


def detect_version(lines: Iterable[str]) -> Optional[str]:
    """Find the UCD version in the file header comments."""
    for line in lines:
        if not line.startswith("#"):
            break
        match = _VERSION_RE.search(line)
        if match:
            return match.group(1)
    return None


def render_table_module(ranges: Iterable[PropertyRange], version: str) -> str:
    out = [OUTPUT_HEADER.format(version=version)]
    for r in ranges:
        member = Category.from_property(r.name).name
        out.append(f"    (0x{r.begin:04X}, 0x{r.end:04X}, Category.{member}),\n")
    out.append(")\n")
    return "".join(out)


def generate(lines: List[str], coalesce: bool = True, version: Optional[str] = None) -> str:
    """Parse a property file and render the table module source."""
    ranges = parse_property_file(lines)
    if coalesce:
        before = len(ranges)
        ranges = coalesce_ranges(ranges)
        log.debug("ucd.gentable.coalesced", before=before, after=len(ranges))
    version = version or detect_version(lines) or "unknown"
    return render_table_module(ranges, version)

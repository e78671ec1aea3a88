"""
Boundary scanning over text buffers.

Buffers are either ``str`` (offsets are string indexes) or UTF-8 ``bytes``
(offsets are byte offsets). Every call starts a fresh engine at its start
offset, so a caller streaming input simply retries with a longer buffer after
``None``.
"""

from __future__ import annotations

import codecs
from typing import Iterator, List, Optional, Tuple, TypeVar, Union

from ..core.logging import log
from .categories import Category
from .classify import classify
from .engine import Segmenter

Text = TypeVar("Text", str, bytes)
Buffer = Union[str, bytes]


class DecodeError(ValueError):
    """Malformed UTF-8 in a byte buffer."""

    def __init__(self, offset: int, reason: str):
        super().__init__(f"invalid UTF-8 at byte offset {offset}: {reason}")
        self.offset = offset
        self.reason = reason


def _utf8_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_at(data: bytes, offset: int, at_eof: bool) -> Tuple[Optional[int], int]:
    """Decode the code point starting at ``offset``.

    Returns ``(code_point, size)``, or ``(None, 0)`` when the buffer ends in
    the middle of a valid sequence and more input may follow.
    """
    size = _utf8_length(data[offset])
    if size == 0:
        raise DecodeError(offset, f"invalid start byte 0x{data[offset]:02x}")

    unit = data[offset : offset + size]
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        char = decoder.decode(unit, final=at_eof)
    except UnicodeDecodeError as e:
        raise DecodeError(offset, e.reason) from e

    if not char:
        return None, 0
    return ord(char), size


def _code_points(
    text: Buffer, at_eof: bool, start: int
) -> Iterator[Tuple[int, Optional[int], int]]:
    """Yield ``(offset, code_point, size)``; a ``None`` code point ends a partial buffer."""
    if isinstance(text, str):
        for i in range(start, len(text)):
            yield i, ord(text[i]), 1
        return

    i = start
    while i < len(text):
        cp, size = decode_at(text, i, at_eof)
        yield i, cp, size
        if cp is None:
            return
        i += size


def next_boundary(text: Buffer, at_eof: bool, start: int = 0) -> Optional[int]:
    """Return the offset of the first grapheme cluster boundary after ``start``.

    The boundary before the code point at ``start`` is never reported.
    ``None`` means no boundary is certain yet: either nothing follows
    ``start``, or ``at_eof`` is false and the decision needs input that has
    not arrived. Offsets are absolute, so loops can advance a cursor instead
    of slicing the buffer.
    """
    if not 0 <= start <= len(text):
        raise ValueError(f"start {start} outside buffer of length {len(text)}")

    seg = Segmenter()
    try:
        for offset, cp, _ in _code_points(text, at_eof, start):
            if cp is None:
                # Incomplete trailing sequence; its category is not known yet.
                decision = seg.boundary_before(Category.UNKNOWN)
                if decision.certain and decision.found:
                    return offset
                return None
            category = classify(cp)
            decision = seg.boundary_before(category)
            if decision.certain and decision.found:
                return offset
            seg.advance(category)
    except DecodeError as e:
        log.warning("segment.decode_error", offset=e.offset, reason=e.reason)
        raise

    final = Category.END_OF_TEXT if at_eof else Category.UNKNOWN
    decision = seg.boundary_before(final)
    if decision.certain and decision.found:
        return len(text)
    return None


def first_grapheme_cluster(text: Text) -> Text:
    """Return the first grapheme cluster of a complete text."""
    end = next_boundary(text, True)
    return text[: end or 0]


def iter_graphemes(text: Text) -> Iterator[Text]:
    """Yield every grapheme cluster of a complete text, in order."""
    pos = 0
    while pos < len(text):
        end = next_boundary(text, True, pos)
        if end is None:
            return
        yield text[pos:end]
        pos = end


def split_graphemes(text: Text) -> List[Text]:
    return list(iter_graphemes(text))


def grapheme_count(text: Buffer) -> int:
    return sum(1 for _ in iter_graphemes(text))


def truncate_graphemes(text: Text, limit: int) -> Text:
    """Longest prefix of ``text`` holding at most ``limit`` grapheme clusters."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    end = 0
    for _ in range(limit):
        step = next_boundary(text, True, end)
        if step is None:
            break
        end = step
    return text[:end]

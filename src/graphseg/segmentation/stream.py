"""
Chunk-fed grapheme segmentation.
"""

from __future__ import annotations

from typing import List, Union

from .driver import next_boundary

Chunk = Union[str, bytes]


class StreamSegmenter:
    """Split text that arrives in pieces into grapheme clusters.

    Completed clusters are returned as soon as their end is certain; the
    remainder is held back until more input or ``close()`` decides it. The
    buffer is rescanned from its start on every ``feed``, which keeps no
    engine state between calls.
    """

    def __init__(self, binary: bool = False):
        self.binary = binary
        self._buffer: Chunk = b"" if binary else ""
        self._closed = False

    @property
    def pending(self) -> Chunk:
        """Input received but not yet emitted as a cluster."""
        return self._buffer

    def feed(self, chunk: Chunk) -> List[Chunk]:
        if self._closed:
            raise RuntimeError("feed() called after close()")
        if isinstance(chunk, bytes) != self.binary:
            expected = "bytes" if self.binary else "str"
            raise TypeError(f"expected {expected} chunk, got {type(chunk).__name__}")

        self._buffer += chunk  # type: ignore[operator]
        return self._drain(at_eof=False)

    def close(self) -> List[Chunk]:
        if self._closed:
            return []
        self._closed = True
        return self._drain(at_eof=True)

    def _drain(self, at_eof: bool) -> List[Chunk]:
        clusters: List[Chunk] = []
        pos = 0
        while pos < len(self._buffer):
            end = next_boundary(self._buffer, at_eof, pos)
            if end is None:
                break
            clusters.append(self._buffer[pos:end])
            pos = end
        self._buffer = self._buffer[pos:]
        return clusters

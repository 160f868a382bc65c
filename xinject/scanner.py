"""
Scanner for embedded expression regions.

Finds `start ... end` delimited spans in a text buffer and reports the
ranges between the delimiters. The scan is linear and never fails: an
unterminated expression runs to the end of the buffer, since documents
are scanned while they are being edited.

Symmetric markers (`start == end`) alternate: the first occurrence opens
a region, the next one closes it. Clashes with the host comment syntax
are checked by the caller, see `xinject.braces.has_conflicts`.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from .types import InertPredicate, Region


def _never_inert(offset: int) -> bool:
    return False


def _find_end(buffer: str, end: str, pos: int, is_inert: InertPredicate) -> int:
    """
    Offset of the first `end` at or after pos that is not inert,
    or len(buffer) when the expression is unterminated.
    """
    while True:
        idx = buffer.find(end, pos)
        if idx < 0:
            return len(buffer)
        if not is_inert(idx):
            return idx
        pos = idx + len(end)


def iter_candidates(
    buffer: str,
    start: str,
    end: str,
    is_inert: Optional[InertPredicate] = None,
) -> Iterator[Region]:
    """
    Yields raw candidate regions in document order, zero-width ones included.

    A `start` whose offset is inert is skipped and scanning resumes right
    after it.
    """
    if not start or not end:
        return
    inert = is_inert or _never_inert

    cursor = 0
    while True:
        start_offset = buffer.find(start, cursor)
        if start_offset < 0:
            return
        body = start_offset + len(start)
        if inert(start_offset):
            cursor = body
            continue
        end_offset = _find_end(buffer, end, body, inert)
        yield Region(body, end_offset)
        if end_offset >= len(buffer):
            return
        cursor = end_offset + len(end)


def scan(
    buffer: str,
    start: str,
    end: str,
    is_inert: Optional[InertPredicate] = None,
) -> List[Region]:
    """
    Embedded expression regions of buffer delimited by start/end.

    Args:
        buffer: Document text
        start: Opening marker; empty disables the scan
        end: Closing marker; empty disables the scan
        is_inert: Reports whether an offset lies inside a comment

    Returns:
        Ordered, non-overlapping, non-empty regions
    """
    return [r for r in iter_candidates(buffer, start, end, is_inert) if not r.is_empty]


def scan_attribute_value(value: str) -> List[Region]:
    """
    Whole-value mode for expression attributes: the value minus one
    boundary character on each side (the quotes).
    """
    if len(value) <= 1:
        return []
    region = Region(1, len(value) - 1)
    return [] if region.is_empty else [region]


__all__ = ["iter_candidates", "scan", "scan_attribute_value"]

"""Integer width arithmetic shared by the text flow and table layout code."""

from __future__ import annotations

from typing import Iterable, List, MutableSequence, Optional, Sequence, Tuple

# (start, span, required) as observed on one cell.
SpanObservation = Tuple[int, int, int]


def spread_evenly(
    excess: int,
    values: MutableSequence[int],
    offset: int = 0,
    length: Optional[int] = None,
) -> None:
    """Add ``excess`` to ``values[offset:offset + length]`` as evenly as possible.

    Every bucket gets ``excess // length``; the remainder is handed out one
    unit at a time, starting with the earliest bucket.
    """
    if length is None:
        length = len(values) - offset
    if excess <= 0 or length <= 0:
        return
    share, remainder = divmod(excess, length)
    for index in range(length):
        values[offset + index] += share + (1 if index < remainder else 0)


def compute_spans(observations: Iterable[SpanObservation], count: int = 0) -> List[int]:
    """Resolve per-cell width (or height) requirements into per-column values.

    Observations are satisfied in increasing span order, then by start
    position, so single-column requirements are settled before wider spans
    adjust them. When a span's columns are too narrow, the shortfall is
    spread evenly across them.
    """
    merged: dict[Tuple[int, int], int] = {}
    for start, span, required in observations:
        key = (span, start)
        if merged.get(key, -1) < required:
            merged[key] = required
        count = max(count, start + span)

    result = [0] * count
    for (span, start), required in sorted(merged.items()):
        available = sum(result[start:start + span])
        if available < required:
            spread_evenly(required - available, result, start, span)
    return result


def table_width(column_widths: Sequence[int], left_border: int, column_separator: int, right_border: int) -> int:
    separators = max(0, len(column_widths) - 1) * column_separator
    return left_border + right_border + separators + sum(column_widths)


def max_length(lines: Iterable[str]) -> int:
    return max((len(line) for line in lines), default=0)

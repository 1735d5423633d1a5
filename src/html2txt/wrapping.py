from __future__ import annotations

from typing import List, Optional, Tuple

from .geometry import spread_evenly
from .models import Alignment


def _is_hyphen_break(text: str, index: int) -> bool:
    return (
        text[index] == "-"
        and 0 < index < len(text) - 1
        and text[index - 1] not in " -"
        and text[index + 1] not in " -"
    )


def _space_break(text: str, index: int) -> Tuple[int, int]:
    end = index
    while end > 0 and text[end - 1] == " ":
        end -= 1
    start = index + 1
    while start < len(text) and text[start] == " ":
        start += 1
    return end, start


def find_break(text: str, measure: int) -> Optional[Tuple[int, int]]:
    """Return ``(end, start)``: keep ``text[:end]``, continue with ``text[start:]``."""
    for index in range(min(measure, len(text) - 1), 0, -1):
        if text[index] == " ":
            return _space_break(text, index)
    for index in range(min(measure - 1, len(text) - 2), 0, -1):
        if _is_hyphen_break(text, index):
            return index + 1, index + 1
    # Nothing fits; settle for the first break point, however far out.
    for index in range(1, len(text)):
        if text[index] == " ":
            return _space_break(text, index)
        if _is_hyphen_break(text, index):
            return index + 1, index + 1
    return None


def wrap_text(text: str, measure: int) -> List[str]:
    """Word-wrap one paragraph segment (no newlines) into lines of at most ``measure``.

    Words without a break point are never split, so a line may exceed the measure.
    """
    measure = max(1, measure)
    text = text.strip(" ")
    lines: List[str] = []
    while len(text) > measure:
        cut = find_break(text, measure)
        if cut is None:
            break
        end, start = cut
        lines.append(text[:end])
        text = text[start:]
    if text:
        lines.append(text)
    return lines


def bullet_margin(left_margin: int, bullet: str) -> str:
    if not bullet:
        return " " * left_margin
    if len(bullet) + 1 <= left_margin:
        return " " * (left_margin - len(bullet) - 1) + bullet + " "
    return bullet + " "


def align_line(line: str, measure: int, alignment: Alignment, *, last: bool = True) -> str:
    slack = measure - len(line)
    if slack <= 0 or alignment is Alignment.LEFT:
        return line
    if alignment is Alignment.RIGHT:
        return " " * slack + line
    if alignment is Alignment.CENTER:
        return " " * (slack // 2) + line
    words = line.split(" ")
    if last or len(words) < 2:
        return line
    gaps = [1] * (len(words) - 1)
    spread_evenly(slack, gaps)
    parts = [words[0]]
    for gap, word in zip(gaps, words[1:]):
        parts.append(" " * gap + word)
    return "".join(parts)


def right_pad(line: str, width: int) -> str:
    if len(line) >= width:
        return line
    return line + " " * (width - len(line))

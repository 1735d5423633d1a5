from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple, Union


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"

    @classmethod
    def parse(cls, value: Optional[str], default: Optional[Alignment] = None) -> Optional[Alignment]:
        if value is None:
            return default
        lowered = value.strip().lower()
        if lowered == "centre":
            lowered = "center"
        for member in cls:
            if member.value == lowered:
                return member
        return default


@dataclass(frozen=True)
class Text:
    content: str
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass(frozen=True)
class Element:
    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple[Node, ...] = ()
    line: Optional[int] = None
    column: Optional[int] = None

    def get(self, name: str, default: str = "") -> str:
        value = self.attributes.get(name)
        return default if value is None else value

    def has(self, name: str) -> bool:
        return name in self.attributes


Node = Union[Text, Element]


def describe(node: object) -> str:
    if isinstance(node, Element):
        return f"<{node.tag}>"
    if isinstance(node, Text):
        content = " ".join(node.content.split())
        if len(content) > 20:
            content = content[:17] + "..."
        return f'"{content}"'
    return type(node).__name__


def _default_page_width() -> int:
    try:
        return int(os.environ.get("COLUMNS", ""))
    except ValueError:
        return 80


@dataclass
class Html2TxtOptions:
    page_width: int = field(default_factory=_default_page_width)
    left_margin: int = 0
    right_margin: int = 1
    heading_font: Optional[str] = None

    @property
    def measure(self) -> int:
        return max(1, self.page_width - self.left_margin - self.right_margin)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..models import Element, Node, Text, describe

if TYPE_CHECKING:
    from ..engine import Html2Txt

ROW_GROUPS = ("thead", "tbody", "tfoot")


@dataclass(frozen=True)
class BorderStyle:
    """Characters used around and between cells; ``None`` means "no line here"."""

    top: Optional[str] = None
    row: Optional[str] = None
    heading: Optional[str] = None
    bottom: Optional[str] = None
    left: str = ""
    separator: str = " "
    right: str = ""

    @classmethod
    def from_attribute(cls, value: Optional[str]) -> BorderStyle:
        if value is None:
            return NO_BORDER
        value = value.strip()
        if not value:
            return SINGLE_BORDER
        try:
            width = int(value)
        except ValueError:
            return NO_BORDER
        if width <= 0:
            return NO_BORDER
        if width == 1:
            return SINGLE_BORDER
        return DOUBLE_BORDER


NO_BORDER = BorderStyle()
SINGLE_BORDER = BorderStyle(top="-", row="-", heading="=", bottom="-", left="|", separator="|", right="|")
DOUBLE_BORDER = BorderStyle(top="=", row="=", heading="=", bottom="=", left="||", separator="||", right="||")


@dataclass(frozen=True)
class Cell:
    is_header: bool = False
    row_span: int = 1
    col_span: int = 1
    content: Tuple[Node, ...] = ()


# Zero-size cell that fills the holes of ragged tables.
FILLER = Cell()


@dataclass
class Table:
    style: BorderStyle = NO_BORDER
    stretch_to_full_width: bool = False
    rows: List[List[Cell]] = field(default_factory=list)


@dataclass(frozen=True)
class CellLayout:
    lines: Tuple[str, ...] = ()

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)


def _parse_span(value: Optional[str]) -> int:
    if value is None:
        return 1
    try:
        return max(1, int(value.strip()))
    except ValueError:
        return 1


def _is_blank(node: Node) -> bool:
    return isinstance(node, Text) and not node.content.strip()


def parse_cell(element: Element) -> Cell:
    return Cell(
        is_header=element.tag == "th",
        row_span=_parse_span(element.attributes.get("rowspan")),
        col_span=_parse_span(element.attributes.get("colspan")),
        content=tuple(element.children),
    )


def parse_row(engine: Html2Txt, element: Element) -> List[Cell]:
    cells: List[Cell] = []
    for node in element.children:
        if _is_blank(node):
            continue
        if isinstance(node, Element) and node.tag in ("td", "th"):
            cells.append(parse_cell(node))
            continue
        engine.warning(node, f'Expected "<td>" or "<th>" instead of {describe(node)}')
    return cells


def _collect_rows(engine: Html2Txt, element: Element, rows: List[List[Cell]]) -> None:
    for node in element.children:
        if _is_blank(node):
            continue
        if isinstance(node, Element) and node.tag == "tr":
            rows.append(parse_row(engine, node))
            continue
        if isinstance(node, Element) and node.tag in ROW_GROUPS and element.tag == "table":
            _collect_rows(engine, node, rows)
            continue
        engine.warning(node, f'Expected "<tr>" instead of {describe(node)} inside "<{element.tag}>"')


def parse_table(engine: Html2Txt, element: Element) -> Table:
    rows: List[List[Cell]] = []
    _collect_rows(engine, element, rows)
    return Table(
        style=BorderStyle.from_attribute(element.attributes.get("border")),
        stretch_to_full_width=element.get("width").strip() == "100%",
        rows=rows,
    )

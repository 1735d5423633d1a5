from __future__ import annotations

import logging
import sys
from itertools import chain, repeat
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence, Tuple

from ..bulleting import NO_BULLETING, Bulleting
from ..conversion.core import LineSink
from ..geometry import compute_spans, spread_evenly, table_width
from ..models import Alignment, Element
from ..wrapping import bullet_margin, right_pad
from .grid import FILLER_ID, CellId, Grid, arrange, origins, run_length
from .model import BorderStyle, Cell, CellLayout, parse_table

if TYPE_CHECKING:
    from ..engine import Html2Txt

logger = logging.getLogger(__name__)

# Column measure of the "natural" pass; wide enough that nothing wraps.
NATURAL_MEASURE = sys.maxsize


class CellLayouts:
    """Memoised cell layouts, keyed by ``(cell_id, measure)``."""

    def __init__(self, engine: Html2Txt, cells: Sequence[Cell]) -> None:
        self.engine = engine
        self.cells = cells
        self._cache: Dict[Tuple[CellId, int], CellLayout] = {}

    def get(self, cell_id: CellId, measure: int) -> CellLayout:
        measure = max(1, measure)
        key = (cell_id, measure)
        layout = self._cache.get(key)
        if layout is None:
            layout = self._layout(self.cells[cell_id], measure)
            self._cache[key] = layout
        return layout

    def _layout(self, cell: Cell, measure: int) -> CellLayout:
        if not cell.content:
            return CellLayout()
        lines: List[str] = []
        with self.engine.aligned(Alignment.LEFT, lock=True):
            self.engine.format_blocks(0, NO_BULLETING, NO_BULLETING, measure, cell.content, lines.append)
        return CellLayout(tuple(line.rstrip() for line in lines))


class TableFormatter:
    """Lays out ``<table>`` elements as character-grid boxes."""

    def __call__(
        self,
        engine: Html2Txt,
        left_margin: int,
        bulleting: Bulleting,
        measure: int,
        element: Element,
        output: LineSink,
    ) -> None:
        label = bulleting.next()
        if label:
            output(bullet_margin(left_margin, label).rstrip())

        table = parse_table(engine, element)
        cells, grid = arrange(table)
        if not grid or not grid[0]:
            return
        layout = TableLayout(engine, table.style, cells, grid)
        widths = layout.column_widths_for(max(1, measure), table.stretch_to_full_width)
        for line in layout.render(widths, left_margin):
            output(line)


class TableLayout:
    def __init__(self, engine: Html2Txt, style: BorderStyle, cells: Sequence[Cell], grid: Grid) -> None:
        self.style = style
        self.cells = cells
        self.grid = grid
        self.row_count = len(grid)
        self.column_count = len(grid[0])
        self.origins = origins(grid)
        self.page_measure = engine.page_measure
        self.layouts = CellLayouts(engine, cells)

    @property
    def separator_width(self) -> int:
        return len(self.style.separator)

    def span_width(self, widths: Sequence[int], column: int, span: int) -> int:
        return sum(widths[column:column + span]) + (span - 1) * self.separator_width

    def table_width(self, widths: Sequence[int]) -> int:
        return table_width(widths, len(self.style.left), self.separator_width, len(self.style.right))

    def cell_layout(self, cell_id: CellId, widths: Sequence[int]) -> CellLayout:
        _, column = self.origins[cell_id]
        return self.layouts.get(cell_id, self.span_width(widths, column, self.cells[cell_id].col_span))

    def column_widths(self, measures: Sequence[int]) -> List[int]:
        """Lay out every cell in the given column measures; return the column widths they need."""
        observations = []
        for cell_id, (_, column) in self.origins.items():
            span = self.cells[cell_id].col_span
            required = self.cell_layout(cell_id, measures).width - (span - 1) * self.separator_width
            observations.append((column, span, required))
        return compute_spans(observations, self.column_count)

    def column_widths_for(self, measure: int, stretch: bool) -> List[int]:
        minimum = self.column_widths([1] * self.column_count)
        minimum_width = self.table_width(minimum)
        if measure <= minimum_width:
            logger.debug("Table needs %d columns, only %d available; using minimum widths", minimum_width, measure)
            return minimum

        natural = self.column_widths([NATURAL_MEASURE] * self.column_count)
        natural_width = self.table_width(natural)
        if natural_width <= measure:
            widths = list(natural)
            if stretch:
                # Nested in a natural-width pass the measure is unbounded.
                spread_evenly(min(measure, self.page_measure) - natural_width, widths)
            logger.debug("Table fits at natural widths %s (stretch=%s)", widths, stretch)
            return widths

        widths = list(minimum)
        spread_evenly(measure - minimum_width, widths)
        logger.debug("Table too wide at natural widths (%d > %d); spreading to %s", natural_width, measure, widths)
        return widths

    def row_heights(self, widths: Sequence[int]) -> List[int]:
        separator_lines = 0 if self.style.row is None else 1
        observations = []
        for cell_id, (row, _) in self.origins.items():
            span = self.cells[cell_id].row_span
            required = self.cell_layout(cell_id, widths).height - (span - 1) * separator_lines
            observations.append((row, span, required))
        return compute_spans(observations, self.row_count)

    def _producer(self, cell_id: CellId, widths: Sequence[int], width: int) -> Iterator[str]:
        lines = () if cell_id == FILLER_ID else self.cell_layout(cell_id, widths).lines
        return chain((right_pad(line, width) for line in lines), repeat(" " * width))

    def _separator_line(
        self,
        row: int,
        margin: str,
        widths: Sequence[int],
        continuing: List[Optional[Iterator[str]]],
    ) -> Optional[str]:
        style = self.style
        if row == 0:
            char = style.top
        elif row == self.row_count:
            char = style.bottom
        else:
            char = style.row
        if char is None:
            return None

        parts = [margin, "+" * len(style.left)]
        column = 0
        while column < self.column_count:
            producer = continuing[column]
            if producer is not None:
                # A cell spanning this boundary shows its next line instead.
                parts.append(next(producer))
                column += run_length(self.grid[row - 1], column)
            else:
                above = self.grid[row - 1][column] if row > 0 else FILLER_ID
                fill = char
                if style.heading is not None and row > 0 and self.cells[above].is_header:
                    fill = style.heading
                parts.append(fill * widths[column])
                column += 1
            if column == self.column_count:
                parts.append("+" * len(style.right))
            else:
                parts.append(self._cross(row, column - 1, char) * self.separator_width)
        return "".join(parts)

    def _cross(self, row: int, column: int, char: str) -> str:
        """Glyph on the boundary between ``column`` and ``column + 1`` above ``row``."""
        inside_above = row == 0 or self.grid[row - 1][column] == self.grid[row - 1][column + 1]
        inside_below = row == self.row_count or self.grid[row][column] == self.grid[row][column + 1]
        return char if inside_above and inside_below else "+"

    def render(self, widths: Sequence[int], left_margin: int) -> List[str]:
        style = self.style
        margin = " " * left_margin
        heights = self.row_heights(widths)
        continuing: List[Optional[Iterator[str]]] = [None] * self.column_count
        lines: List[str] = []
        for row in range(self.row_count + 1):
            separator = self._separator_line(row, margin, widths, continuing)
            if separator is not None:
                lines.append(separator)
            if row == self.row_count:
                break

            line = self.grid[row]
            segments: List[Tuple[Iterator[str], str]] = []
            column = 0
            while column < self.column_count:
                cell_id = line[column]
                span = run_length(line, column)
                producer = continuing[column]
                if producer is None:
                    producer = self._producer(cell_id, widths, self.span_width(widths, column, span))
                below = self.grid[row + 1][column] if row + 1 < self.row_count else None
                continuing[column] = producer if cell_id != FILLER_ID and below == cell_id else None
                for skipped in range(column + 1, column + span):
                    continuing[skipped] = None
                column += span
                segments.append((producer, style.right if column == self.column_count else style.separator))

            for _ in range(heights[row]):
                parts = [margin, style.left]
                for producer, trailer in segments:
                    parts.append(next(producer))
                    parts.append(trailer)
                lines.append("".join(parts))
        return lines

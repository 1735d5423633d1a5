"""Placement of table cells onto a rectangular grid of tiles."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .model import FILLER, Cell, Table

CellId = int
Grid = List[List[CellId]]

FILLER_ID: CellId = 0


def _is_free(tiles: List[List[Optional[CellId]]], row: int, column: int, cell: Cell) -> bool:
    for row_index in range(row, min(row + cell.row_span, len(tiles))):
        line = tiles[row_index]
        for column_index in range(column, min(column + cell.col_span, len(line))):
            if line[column_index] is not None:
                return False
    return True


def arrange(table: Table) -> Tuple[List[Cell], Grid]:
    """Place the table's cells row by row and return ``(cells, grid)``.

    ``cells`` is the arena the grid refers to; ``cells[FILLER_ID]`` is the
    filler. Every tile of a spanning cell holds the same id, and every row of
    the grid has the same length.
    """
    cells: List[Cell] = [FILLER]
    tiles: List[List[Optional[CellId]]] = []
    for row_index, row in enumerate(table.rows):
        while len(tiles) <= row_index:
            tiles.append([])
        column = 0
        for cell in row:
            while not _is_free(tiles, row_index, column, cell):
                column += 1
            cell_id = len(cells)
            cells.append(cell)
            for span_row in range(row_index, row_index + cell.row_span):
                while len(tiles) <= span_row:
                    tiles.append([])
                line = tiles[span_row]
                while len(line) < column + cell.col_span:
                    line.append(None)
                for span_column in range(column, column + cell.col_span):
                    line[span_column] = cell_id
            column += cell.col_span

    width = max((len(line) for line in tiles), default=0)
    grid: Grid = []
    for line in tiles:
        grid.append([FILLER_ID if tile is None else tile for tile in line] + [FILLER_ID] * (width - len(line)))
    return cells, grid


def origins(grid: Grid) -> Dict[CellId, Tuple[int, int]]:
    """Map every placed cell (the filler excluded) to its top-left tile."""
    result: Dict[CellId, Tuple[int, int]] = {}
    for row_index, line in enumerate(grid):
        for column, cell_id in enumerate(line):
            if cell_id != FILLER_ID and cell_id not in result:
                result[cell_id] = (row_index, column)
    return result


def run_length(line: List[CellId], column: int) -> int:
    """Number of consecutive tiles starting at ``column`` that hold the same id."""
    end = column + 1
    while end < len(line) and line[end] == line[column]:
        end += 1
    return end - column

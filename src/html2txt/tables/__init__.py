"""Table layout: parsing, grid arrangement, sizing and rendering."""

from .formatter import CellLayouts, TableFormatter, TableLayout
from .grid import FILLER_ID, CellId, Grid, arrange, origins
from .model import (
    DOUBLE_BORDER,
    FILLER,
    NO_BORDER,
    SINGLE_BORDER,
    BorderStyle,
    Cell,
    CellLayout,
    Table,
    parse_table,
)

__all__ = [
    "DOUBLE_BORDER",
    "FILLER",
    "FILLER_ID",
    "NO_BORDER",
    "SINGLE_BORDER",
    "BorderStyle",
    "Cell",
    "CellId",
    "CellLayout",
    "CellLayouts",
    "Grid",
    "Table",
    "TableFormatter",
    "TableLayout",
    "arrange",
    "origins",
    "parse_table",
]

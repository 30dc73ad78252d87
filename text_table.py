"""
Plain-text table with aligned columns and ASCII borders, drawn with rich.

Rows are built one cell at a time with ``add_cell`` and committed with
``end_row``; the first committed row is treated as the header.
"""

from __future__ import annotations
import io
from typing import List

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

# Wide enough that rich never wraps a column.
RENDER_WIDTH = 10_000


class TextTable:
    def __init__(self, table_box: box.Box = box.ASCII):
        self.table_box = table_box
        self.rows: List[List[str]] = []
        self._current: List[str] = []

    def add_cell(self, text: str) -> None:
        self._current.append(str(text))

    def end_row(self) -> None:
        self.rows.append(self._current)
        self._current = []

    @property
    def header(self) -> List[str]:
        return self.rows[0] if self.rows else []

    @property
    def body(self) -> List[List[str]]:
        return self.rows[1:]

    def to_rich(self) -> Table:
        """Build a rich Table holding the committed rows."""
        num_columns = max((len(row) for row in self.rows), default=0)
        table = Table(box=self.table_box)
        head = self.header + [""] * (num_columns - len(self.header))
        for name in head:
            # Text keeps cells out of rich markup parsing.
            table.add_column(Text(name), justify="center")
        for row in self.body:
            table.add_row(*(Text(cell) for cell in row))
        return table

    def render(self) -> str:
        if not self.rows or not any(self.rows):
            return ""
        buffer = io.StringIO()
        console = Console(file=buffer, width=RENDER_WIDTH, color_system=None)
        console.print(self.to_rich())
        return buffer.getvalue().rstrip("\n")

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.rows)

from __future__ import annotations

"""Per-character (column, row) grids of the geohash alphabet.

A symbol at an odd (1-indexed) position starts its 5 bits on longitude, so it
splits its parent cell into 8 columns by 4 rows; at an even position the split
is 4 columns by 8 rows. Columns count eastward and rows southward, so each
grid reads like the published geohash tables:

    odd:  b c f g u v y z      even:  p r x z
          8 9 d e s t w x             n q w y
          2 3 6 7 k m q r             j m t v
          0 1 4 5 h j n p             h k s u
                                      5 7 e g
                                      4 6 d f
                                      1 3 9 c
                                      0 2 8 b
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ghash.utils.alphabet import BASE32, BITS_PER_SYMBOL
from ghash.utils.box import Axis


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: Mapping[str, tuple[int, int]]
    layout: tuple[tuple[str, ...], ...]

    def cell(self, symbol: str) -> tuple[int, int] | None:
        """(column, row) of ``symbol``, or None if it is not in the alphabet."""

        return self.cells.get(symbol)

    def symbol(self, column: int, row: int) -> str:
        return self.layout[row][column]

    def rows(self) -> list[str]:
        return ["".join(r) for r in self.layout]


def _build_grid(first_axis: Axis) -> Grid:
    lon_bits = sum(
        1 for i in range(BITS_PER_SYMBOL) if (i % 2 == 0) == (first_axis is Axis.LON)
    )
    width = 1 << lon_bits
    height = 1 << (BITS_PER_SYMBOL - lon_bits)

    cells: dict[str, tuple[int, int]] = {}
    layout = [[""] * width for _ in range(height)]
    for value, symbol in enumerate(BASE32):
        col = row = 0
        axis = first_axis
        for shift in range(BITS_PER_SYMBOL - 1, -1, -1):
            bit = (value >> shift) & 1
            if axis is Axis.LON:
                col = (col << 1) | bit
            else:
                row = (row << 1) | bit
            axis = axis.flip()
        # Latitude bits count northward; rows count from the top.
        row = height - 1 - row
        cells[symbol] = (col, row)
        layout[row][col] = symbol

    return Grid(
        width=width,
        height=height,
        cells=MappingProxyType(cells),
        layout=tuple(tuple(r) for r in layout),
    )


ODD_GRID = _build_grid(Axis.LON)
EVEN_GRID = _build_grid(Axis.LAT)


def grid_for(position: int) -> Grid:
    """Grid used by the character at 1-indexed ``position``."""

    if position < 1:
        raise ValueError(f"position is 1-indexed, got {position}")
    return ODD_GRID if position % 2 else EVEN_GRID

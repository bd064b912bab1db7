from __future__ import annotations

import logging
from dataclasses import dataclass

from ghash.utils.alphabet import is_valid
from ghash.utils.grid import Grid, grid_for


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Level:
    grid: Grid
    col_from: int
    col_to: int
    row_from: int
    row_to: int


def _split_shorthand(combined: str) -> tuple[str, str] | None:
    # "6u4-gx" => ("6u4", "6gx"): the suffix overwrites the tail of the prefix.
    parts = combined.split("-")
    if len(parts) != 2:
        return None
    prefix, suffix = parts
    if not prefix or not suffix or len(suffix) > len(prefix):
        return None
    return prefix, prefix[: len(prefix) - len(suffix)] + suffix


def _resolve(from_hash: str, to_hash: str | None) -> tuple[str, str] | None:
    if to_hash is None:
        if not isinstance(from_hash, str):
            return None
        return _split_shorthand(from_hash.lower())
    if not isinstance(from_hash, str) or not isinstance(to_hash, str):
        return None
    return from_hash.lower(), to_hash.lower()


def _levels(from_hash: str, to_hash: str) -> list[_Level] | None:
    if len(from_hash) != len(to_hash):
        return None
    if not is_valid(from_hash) or not is_valid(to_hash):
        return None

    grids = [grid_for(p) for p in range(1, len(from_hash) + 1)]
    a = [g.cell(c) for g, c in zip(grids, from_hash)]
    b = [g.cell(c) for g, c in zip(grids, to_hash)]

    # Each axis is a mixed-radix number read level by level; order the corners
    # per axis so that "from" is north-west and "to" south-east.
    cols_from, cols_to = sorted((tuple(c for c, _ in a), tuple(c for c, _ in b)))
    rows_from, rows_to = sorted((tuple(r for _, r in a), tuple(r for _, r in b)))

    return [
        _Level(grid=g, col_from=cf, col_to=ct, row_from=rf, row_to=rt)
        for g, cf, ct, rf, rt in zip(grids, cols_from, cols_to, rows_from, rows_to)
    ]


def _expand(levels: list[_Level]) -> set[str]:
    out: set[str] = set()
    last = len(levels) - 1

    # Entries: (index, prefix, col_low, col_high, row_low, row_high).
    stack: list[tuple[int, str, bool, bool, bool, bool]] = [(0, "", True, True, True, True)]
    while stack:
        index, prefix, col_low, col_high, row_low, row_high = stack.pop()
        level = levels[index]
        grid = level.grid

        # A bound only applies while this branch still equals that corner's prefix.
        col_start = level.col_from if col_low else 0
        col_end = level.col_to if col_high else grid.width - 1
        row_start = level.row_from if row_low else 0
        row_end = level.row_to if row_high else grid.height - 1

        for row in range(row_start, row_end + 1):
            for col in range(col_start, col_end + 1):
                cell = prefix + grid.symbol(col, row)
                if index == last:
                    out.add(cell)
                    continue
                stack.append(
                    (
                        index + 1,
                        cell,
                        col_low and col == level.col_from,
                        col_high and col == level.col_to,
                        row_low and row == level.row_from,
                        row_high and row == level.row_to,
                    )
                )
    return out


def geohash_range(from_hash: str, to_hash: str | None = None) -> set[str] | None:
    """Every geohash of the corners' length inside the rectangle they span.

    ``from_hash`` and ``to_hash`` are opposite corners of equal length. A single
    ``"prefix-suffix"`` argument is shorthand for ``(prefix, prefix with its tail
    replaced by suffix)``. Returns None on malformed input or a length mismatch.

    Example:
        >>> sorted(geohash_range("6u4-gx"))[:3]
        ['6gd', '6ge', '6gf']
    """

    corners = _resolve(from_hash, to_hash)
    if corners is None:
        return None
    levels = _levels(*corners)
    if levels is None:
        logger.debug("Rejected geohash range %r..%r", *corners)
        return None

    out = _expand(levels)
    logger.debug(
        "Enumerated geohash range %s..%s (levels=%d cells=%d)",
        corners[0],
        corners[1],
        len(levels),
        len(out),
    )
    return out


def range_size(from_hash: str, to_hash: str | None = None) -> int | None:
    """Number of cells ``geohash_range`` would return, without enumerating them."""

    corners = _resolve(from_hash, to_hash)
    if corners is None:
        return None
    levels = _levels(*corners)
    if levels is None:
        return None

    x_from = x_to = y_from = y_to = 0
    for level in levels:
        x_from = x_from * level.grid.width + level.col_from
        x_to = x_to * level.grid.width + level.col_to
        y_from = y_from * level.grid.height + level.row_from
        y_to = y_to * level.grid.height + level.row_to
    return (x_to - x_from + 1) * (y_to - y_from + 1)

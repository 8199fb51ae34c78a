"""Coordinate types and helpers.

The board is stored as an 11x11 rectangular grid indexed ``[col][row]``.
Playable cells form a radius-5 hexagon inside it (91 cells, the Glinski
board); the remaining cells are boundary padding.

Axial layout::

    q = col - 5,  r = row - 5,  s = -q - r

White advances toward decreasing ``r``.  Tile names use Glinski files
``a b c d e f g h i k l`` (q = -5..5) and ranks counted from white's edge
of each file, e.g. the centre cell (0, 0) is ``f6``.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 11
BOARD_RADIUS = 5
_CENTER = BOARD_SIZE // 2

FILES = "abcdefghikl"


@dataclass(frozen=True, slots=True)
class GridCoordinate:
    """Index into the physical 11x11 tile grid."""

    col: int
    row: int


@dataclass(frozen=True, slots=True)
class AxialCoordinate:
    """Hex-native coordinate; all direction math happens here."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def offset(self, dq: int, dr: int) -> AxialCoordinate:
        return AxialCoordinate(self.q + dq, self.r + dr)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


# ── Grid <-> axial ───────────────────────────────────────────────────────────


def grid_to_axial(pos: GridCoordinate) -> AxialCoordinate:
    """Axial coordinate of a grid cell."""
    return AxialCoordinate(pos.col - _CENTER, pos.row - _CENTER)


def axial_to_grid(axial: AxialCoordinate) -> GridCoordinate:
    """Grid cell of an axial coordinate (inverse of :func:`grid_to_axial`)."""
    return GridCoordinate(axial.q + _CENTER, axial.r + _CENTER)


def is_in_grid(pos: GridCoordinate) -> bool:
    return 0 <= pos.col < BOARD_SIZE and 0 <= pos.row < BOARD_SIZE


def is_playable_axial(axial: AxialCoordinate) -> bool:
    """Whether *axial* lies inside the hexagonal playing area."""
    return max(abs(axial.q), abs(axial.r), abs(axial.s)) <= BOARD_RADIUS


def hex_distance(a: AxialCoordinate, b: AxialCoordinate) -> int:
    """Number of single orthogonal steps between two cells."""
    return (abs(a.q - b.q) + abs(a.r - b.r) + abs(a.s - b.s)) // 2


def mirror_axial(axial: AxialCoordinate) -> AxialCoordinate:
    """Reflect across the horizontal axis (white's setup -> black's)."""
    return AxialCoordinate(axial.q, -axial.q - axial.r)


def iter_playable_axials() -> list[AxialCoordinate]:
    """All playable cells, file by file from white's edge upward."""
    cells: list[AxialCoordinate] = []
    for q in range(-BOARD_RADIUS, BOARD_RADIUS + 1):
        for r in range(_bottom_r(q), _top_r(q) - 1, -1):
            cells.append(AxialCoordinate(q, r))
    return cells


# ── Tile names ───────────────────────────────────────────────────────────────


def _bottom_r(q: int) -> int:
    """``r`` of the cell on white's edge of file *q*."""
    return BOARD_RADIUS - max(0, q)


def _top_r(q: int) -> int:
    """``r`` of the cell on black's edge of file *q*."""
    return -BOARD_RADIUS - min(0, q)


def is_bottom_edge(axial: AxialCoordinate) -> bool:
    return axial.r == _bottom_r(axial.q)


def is_top_edge(axial: AxialCoordinate) -> bool:
    return axial.r == _top_r(axial.q)


def tile_name(axial: AxialCoordinate) -> str:
    """Glinski name of a playable cell, e.g. (0, 1) -> 'f5'."""
    if not is_playable_axial(axial):
        raise ValueError(f"Not a playable cell: {axial}")
    rank = _bottom_r(axial.q) - axial.r + 1
    return f"{FILES[axial.q + BOARD_RADIUS]}{rank}"


def parse_tile_name(name: str) -> AxialCoordinate:
    """Parse a Glinski tile name, e.g. 'f5' -> (0, 1)."""
    if len(name) < 2 or name[0] not in FILES or not name[1:].isdigit():
        raise ValueError(f"Invalid tile name: {name!r}")
    q = FILES.index(name[0]) - BOARD_RADIUS
    rank = int(name[1:])
    axial = AxialCoordinate(q, _bottom_r(q) - rank + 1)
    if rank < 1 or not is_playable_axial(axial):
        raise ValueError(f"Invalid tile name: {name!r}")
    return axial

"""Tiles and the markers they carry.

``TileStatus`` is a closed union of three variants.  Only
:class:`MoveStatus` carries a move payload; callers dispatch on the
variant class rather than probing for attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from hexchess.core.enums import TileStatusType
from hexchess.core.move import MoveInfo
from hexchess.core.piece import Piece
from hexchess.core.types import (
    AxialCoordinate,
    GridCoordinate,
    grid_to_axial,
    is_playable_axial,
)


@dataclass(frozen=True, slots=True)
class MarkerStatus:
    """Threat, en-passant, pawn-origin or promotion-zone marker."""

    type: TileStatusType


@dataclass(frozen=True, slots=True)
class HighlightStatus:
    """Move or capture highlight for the piece standing on *source*."""

    type: TileStatusType
    source: GridCoordinate


@dataclass(frozen=True, slots=True)
class MoveStatus:
    """One legal destination for one piece, valid for the current turn."""

    move: MoveInfo


TileStatus: TypeAlias = MarkerStatus | HighlightStatus | MoveStatus


@dataclass(slots=True)
class Tile:
    """A single cell of the storage grid."""

    id: str
    pos: GridCoordinate
    axial: AxialCoordinate
    playable: bool
    content: Piece | None = None
    statuses: list[TileStatus] = field(default_factory=list)

    @property
    def boundary(self) -> bool:
        return not self.playable

    # -- Status helpers -------------------------------------------------------

    def add_status(self, status: TileStatus) -> None:
        if status not in self.statuses:
            self.statuses.append(status)

    def has_marker(self, status_type: TileStatusType) -> bool:
        return MarkerStatus(status_type) in self.statuses

    def remove_markers(self, *status_types: TileStatusType) -> None:
        self.statuses = [
            s
            for s in self.statuses
            if not (isinstance(s, MarkerStatus) and s.type in status_types)
        ]

    def move_statuses(self) -> list[MoveStatus]:
        return [s for s in self.statuses if isinstance(s, MoveStatus)]

    def move_from(self, source: GridCoordinate) -> MoveInfo | None:
        """The move marker for the piece standing on *source*, if any."""
        for status in self.statuses:
            if isinstance(status, MoveStatus) and status.move.source == source:
                return status.move
        return None


def create_tile(pos: GridCoordinate) -> Tile:
    """Empty tile at *pos*, flagged playable when inside the hexagon."""
    axial = grid_to_axial(pos)
    return Tile(
        id=f"tile-{pos.col}-{pos.row}",
        pos=pos,
        axial=axial,
        playable=is_playable_axial(axial),
    )

"""MoveInfo value object."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hexchess.core.enums import MoveType, PieceType
from hexchess.core.types import AxialCoordinate, GridCoordinate, grid_to_axial, tile_name

if TYPE_CHECKING:
    from hexchess.core.board import Board
    from hexchess.core.piece import Piece

_TYPE_SEPARATORS: dict[MoveType, str] = {
    MoveType.STANDARD: "-",
    MoveType.CAPTURE: "x",
    MoveType.EN_PASSANT_CAPTURE: "x",
    MoveType.PROMOTION: "-",
}

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
}


@dataclass(frozen=True, slots=True)
class MoveInfo:
    """A candidate move computed for one turn.

    ``source`` is the grid cell of the moving piece, so a move can never
    outlive the board it was generated from.
    """

    axial: AxialCoordinate
    type: MoveType
    source: GridCoordinate
    source_tag: str
    promo_piece: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.type in (MoveType.CAPTURE, MoveType.EN_PASSANT_CAPTURE)

    def __str__(self) -> str:
        base = (
            f"{tile_name(grid_to_axial(self.source))}"
            f"{_TYPE_SEPARATORS[self.type]}{tile_name(self.axial)}"
        )
        if self.type == MoveType.EN_PASSANT_CAPTURE:
            base += " e.p."
        if self.promo_piece is not None:
            base += f"={_PROMO_CHARS.get(self.promo_piece, '')}"
        return base


MoveCalculationFunction = Callable[["Board", "Piece"], list[MoveInfo]]

"""High-level rules: check, self-check filtering, checkmate and stalemate."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from hexchess.core.enums import GameOverState, MoveType, PieceOwner, PieceType
from hexchess.core.move_generator import PAWN_FORWARD, attacked_axials
from hexchess.core.types import AxialCoordinate, grid_to_axial

if TYPE_CHECKING:
    from hexchess.core.board import Board
    from hexchess.core.move import MoveInfo
    from hexchess.core.piece import Piece


def _king_axial(
    occupancy: Mapping[AxialCoordinate, Piece],
    owner: PieceOwner,
) -> AxialCoordinate | None:
    for axial, piece in occupancy.items():
        if piece.owner == owner and piece.type == PieceType.KING:
            return axial
    return None


def is_in_check(occupancy: Mapping[AxialCoordinate, Piece], owner: PieceOwner) -> bool:
    """Is *owner*'s king attacked?  False when the king is missing."""
    king = _king_axial(occupancy, owner)
    if king is None:
        return False
    return king in attacked_axials(occupancy, owner.opposite)


def leaves_king_in_check(board: Board, move: MoveInfo) -> bool:
    """Would playing *move* leave the mover's own king attacked?"""
    occupancy = board.occupancy()
    mover = occupancy.pop(grid_to_axial(move.source), None)
    if mover is None:
        return False

    occupancy.pop(move.axial, None)
    if move.type == MoveType.EN_PASSANT_CAPTURE:
        dq, dr = PAWN_FORWARD[mover.owner.opposite]
        occupancy.pop(move.axial.offset(dq, dr), None)
    occupancy[move.axial] = mover

    return is_in_check(occupancy, mover.owner)


def filter_self_checks(board: Board, moves: list[MoveInfo]) -> list[MoveInfo]:
    return [move for move in moves if not leaves_king_in_check(board, move)]


def game_over_state_for(board: Board, owner: PieceOwner, move_count: int) -> GameOverState:
    """Outcome for *owner*, the side about to move with *move_count* moves.

    A side without a king has lost.  A side without moves is checkmated
    when its king is attacked and stalemated otherwise.
    """
    if board.king(owner) is None:
        return GameOverState.victory_for(owner.opposite)
    if move_count > 0:
        return GameOverState.UNFINISHED
    if is_in_check(board.occupancy(), owner):
        return GameOverState.victory_for(owner.opposite)
    return GameOverState.stalemated(owner)

"""Core domain layer — hex grid, pieces and move generation.

Quick start::

    from hexchess.core import Board, PieceOwner, generate_all_moves

    board = Board.initial()
    for move in generate_all_moves(board, PieceOwner.WHITE):
        print(move)
"""

from hexchess.core.board import Board, create_initial_board
from hexchess.core.enums import (
    GameOverState,
    MoveType,
    NextTurnSource,
    PieceOwner,
    PieceType,
    TileStatusType,
)
from hexchess.core.move import MoveCalculationFunction, MoveInfo
from hexchess.core.move_generator import (
    MOVE_GENERATORS,
    attacked_axials,
    generate_all_moves,
    generate_moves,
)
from hexchess.core.piece import Piece, create_piece, make_tag, piece_from_char
from hexchess.core.rules import filter_self_checks, game_over_state_for, is_in_check
from hexchess.core.tile import HighlightStatus, MarkerStatus, MoveStatus, Tile, TileStatus
from hexchess.core.types import (
    BOARD_RADIUS,
    BOARD_SIZE,
    AxialCoordinate,
    GridCoordinate,
    axial_to_grid,
    grid_to_axial,
    is_playable_axial,
    parse_tile_name,
    tile_name,
)

__all__ = [
    # Enums
    "GameOverState",
    "MoveType",
    "NextTurnSource",
    "PieceOwner",
    "PieceType",
    "TileStatusType",
    # Coordinates
    "BOARD_RADIUS",
    "BOARD_SIZE",
    "AxialCoordinate",
    "GridCoordinate",
    "axial_to_grid",
    "grid_to_axial",
    "is_playable_axial",
    "parse_tile_name",
    "tile_name",
    # Domain objects
    "Board",
    "HighlightStatus",
    "MarkerStatus",
    "MoveInfo",
    "MoveStatus",
    "Piece",
    "Tile",
    "TileStatus",
    "create_initial_board",
    "create_piece",
    "make_tag",
    "piece_from_char",
    # Move generation / rules
    "MOVE_GENERATORS",
    "MoveCalculationFunction",
    "attacked_axials",
    "filter_self_checks",
    "game_over_state_for",
    "generate_all_moves",
    "generate_moves",
    "is_in_check",
]

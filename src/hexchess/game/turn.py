"""Turn state machine: start-turn recomputation, move execution, end-turn.

Lifecycle of a turn::

    AwaitingSelection -> MoveHighlighted -> [AwaitingPromotionChoice]
        -> TurnEnded -> (next) AwaitingSelection

Every function mutates the state it is given; the reducer hands them a
private copy.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from hexchess.core.enums import (
    GameOverState,
    MoveType,
    PieceOwner,
    PieceType,
    TileStatusType,
)
from hexchess.core.move import MoveInfo
from hexchess.core.move_generator import (
    PAWN_FORWARD,
    attacked_axials,
    generate_all_moves,
)
from hexchess.core.piece import (
    Piece,
    create_bishop,
    create_knight,
    create_queen,
    create_rook,
    make_tag,
)
from hexchess.core.rules import filter_self_checks, game_over_state_for
from hexchess.core.tile import MarkerStatus, MoveStatus, Tile
from hexchess.core.types import AxialCoordinate, GridCoordinate
from hexchess.game.settings import RuleSettings
from hexchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

PieceFactory = Callable[[GridCoordinate, PieceOwner, str | None], Piece]

_PROMOTION_FACTORIES: dict[PieceType, PieceFactory] = {
    PieceType.KNIGHT: create_knight,
    PieceType.BISHOP: create_bishop,
    PieceType.ROOK: create_rook,
    PieceType.QUEEN: create_queen,
}


def current_player(state: GameState) -> PieceOwner:
    return state.current_player


# ── Turn boundaries ──────────────────────────────────────────────────────────


def start_turn(state: GameState, settings: RuleSettings) -> int:
    """Recompute threats and move markers for the side to move.

    Returns the number of moves materialised.  Sets ``game_over_state``
    when the side to move has lost its king or has no moves.
    """
    board = state.board
    board.clear_move_statuses()
    board.remove_markers(TileStatusType.WHITE_THREATENING, TileStatusType.BLACK_THREATENING)

    occupancy = board.occupancy()
    for owner in (PieceOwner.WHITE, PieceOwner.BLACK):
        marker = MarkerStatus(TileStatusType.threatening(owner))
        for axial in attacked_axials(occupancy, owner):
            tile = board.get_tile_at_axial(axial)
            if tile is not None:
                tile.add_status(marker)

    player = current_player(state)
    moves = generate_all_moves(board, player)
    if settings.enforce_king_safety:
        moves = filter_self_checks(board, moves)

    state.game_over_state = game_over_state_for(board, player, len(moves))
    if state.game_over_state != GameOverState.UNFINISHED:
        _LOGGER.info("Game over on turn %d: %s", state.turn, state.game_over_state.name)
        return 0

    for move in moves:
        tile = board.get_tile_at_axial(move.axial)
        if tile is not None:
            tile.add_status(MoveStatus(move))
    _LOGGER.debug("Turn %d: %s has %d moves", state.turn, player, len(moves))
    return len(moves)


def end_turn(state: GameState) -> None:
    """Clear per-turn markers, expire consumed en-passant marks, advance."""
    board = state.board
    mover = current_player(state)
    board.clear_move_statuses()
    board.clear_move_highlights()
    # The mover's chance to capture en passant is over.
    board.remove_markers(TileStatusType.en_passant(mover.opposite))
    state.turn += 1
    state.selected = None


# ── Move execution ───────────────────────────────────────────────────────────


def handle_pawn_double_move(
    state: GameState,
    piece: Piece,
    target: Tile,
    origin: AxialCoordinate,
) -> None:
    """Mark the cell a pawn skipped over as capturable en passant."""
    if piece.type != PieceType.PAWN:
        return
    dq, dr = PAWN_FORWARD[piece.owner]
    if target.axial != origin.offset(2 * dq, 2 * dr):
        return
    skipped = state.board.get_tile_at_axial(origin.offset(dq, dr))
    if skipped is not None:
        skipped.add_status(MarkerStatus(TileStatusType.en_passant(piece.owner)))


def check_for_pawn_promotion(state: GameState, piece: Piece, target: Tile) -> bool:
    del state
    return piece.type == PieceType.PAWN and target.has_marker(
        TileStatusType.promo_tile(piece.owner)
    )


def execute_move(state: GameState, move: MoveInfo) -> bool:
    """Play a validated *move*. Returns True when a promotion is now pending."""
    board = state.board
    source = board.tile_at(move.source)
    target = board.get_tile_at_axial(move.axial)
    if source is None or source.content is None or target is None:
        raise ValueError(f"Move does not match the board: {move}")
    mover = source.content

    board.capture_content(target)
    if move.type == MoveType.EN_PASSANT_CAPTURE:
        # The double-stepped pawn sits one step past the skipped cell.
        dq, dr = PAWN_FORWARD[mover.owner.opposite]
        victim = board.get_tile_at_axial(target.axial.offset(dq, dr))
        if (
            victim is not None
            and victim.content is not None
            and victim.content.owner != mover.owner
        ):
            board.capture_content(victim)

    # Lift-off
    origin = mover.axial
    source.content = None

    # Touch-down
    board.place(mover, target)
    mover.has_moved = True

    handle_pawn_double_move(state, mover, target, origin)

    if check_for_pawn_promotion(state, mover, target):
        state.pawn_promotion_flag = True
        state.promotion_tile = target.pos
        return True
    return False


def promote(state: GameState, piece_type: PieceType, settings: RuleSettings) -> Piece:
    """Replace the pawn on the pending promotion tile and lower the gate."""
    tile = state.promotion_target
    if not state.pawn_promotion_flag or tile is None:
        raise ValueError("No promotion pending")

    try:
        choice = PieceType(piece_type)
    except ValueError:
        choice = settings.default_promotion
    if choice not in _PROMOTION_FACTORIES:
        choice = settings.default_promotion
    if choice not in _PROMOTION_FACTORIES:
        choice = PieceType.QUEEN
    owner = current_player(state)
    piece = _PROMOTION_FACTORIES[choice](
        tile.pos, owner, make_tag(owner, choice, f"promo-{state.turn}")
    )
    piece.has_moved = True
    state.board.place(piece, tile)

    state.pawn_promotion_flag = False
    state.promotion_tile = None
    _LOGGER.info("Promoted to %s on %s", choice, tile.axial)
    return piece

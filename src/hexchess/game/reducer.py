"""Reducer - applies player intents to game state.

The reducer is the single point of state mutation: every change goes
through :func:`reduce`, which works on a private copy and returns it.
An intent that is not valid in the current state is ignored and the
input state object is returned unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from hexchess.core.board import Board
from hexchess.core.enums import GameOverState, PieceType, TileStatusType
from hexchess.core.piece import Piece
from hexchess.core.tile import HighlightStatus, Tile
from hexchess.core.types import AxialCoordinate, GridCoordinate
from hexchess.game.settings import RuleSettings
from hexchess.game.state import GameState
from hexchess.game.turn import end_turn, execute_move, promote, start_turn

_LOGGER = logging.getLogger(__name__)


# ── Intents ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ResetBoard:
    pass


@dataclass(frozen=True)
class SelectTile:
    tile: Tile | GridCoordinate | None


@dataclass(frozen=True)
class HighlightMoves:
    piece: Piece


@dataclass(frozen=True)
class UnhighlightMoves:
    piece: Piece


@dataclass(frozen=True)
class UnhighlightAllMoves:
    pass


@dataclass(frozen=True)
class AttemptMove:
    axial: AxialCoordinate


@dataclass(frozen=True)
class ExecutePromotePiece:
    piece_type: PieceType


Intent: TypeAlias = (
    ResetBoard
    | SelectTile
    | HighlightMoves
    | UnhighlightMoves
    | UnhighlightAllMoves
    | AttemptMove
    | ExecutePromotePiece
)


# ── Handlers ─────────────────────────────────────────────────────────────────
#
# Each handler mutates the draft it is given and returns False when the
# intent does not apply, in which case the draft is thrown away.


def _handle_reset(state: GameState, intent: ResetBoard, settings: RuleSettings) -> bool:
    _LOGGER.info("Resetting board")
    state.turn = 0
    state.game_over_state = GameOverState.UNFINISHED
    state.selected = None
    state.pawn_promotion_flag = False
    state.promotion_tile = None
    state.board.reset()
    start_turn(state, settings)
    return True


def _handle_select(state: GameState, intent: SelectTile, settings: RuleSettings) -> bool:
    if intent.tile is None:
        state.selected = None
        return True
    pos = intent.tile.pos if isinstance(intent.tile, Tile) else intent.tile
    tile = state.board.tile_at(pos)
    if tile is None or not tile.playable:
        return False
    state.selected = tile.pos
    return True


def _owns_tile(state: GameState, piece: Piece) -> bool:
    """Whether *piece* (possibly from an older snapshot) is still in place."""
    tile = state.board.tile_at(piece.pos)
    return tile is not None and tile.content is not None and tile.content.tag == piece.tag


def _handle_highlight(state: GameState, intent: HighlightMoves, settings: RuleSettings) -> bool:
    piece = intent.piece
    if not _owns_tile(state, piece):
        return False
    state.board.clear_move_highlights()
    for tile in state.board.playable_tiles():
        move = tile.move_from(piece.pos)
        if move is None:
            continue
        capture = move.is_capture or tile.content is not None
        tile.add_status(
            HighlightStatus(
                TileStatusType.CAPTURE_HIGHLIGHT if capture else TileStatusType.MOVE_HIGHLIGHT,
                piece.pos,
            )
        )
    return True


def _handle_unhighlight(
    state: GameState, intent: UnhighlightMoves, settings: RuleSettings
) -> bool:
    source = intent.piece.pos
    for tile in state.board.playable_tiles():
        tile.statuses = [
            s
            for s in tile.statuses
            if not (isinstance(s, HighlightStatus) and s.source == source)
        ]
    return True


def _handle_unhighlight_all(
    state: GameState, intent: UnhighlightAllMoves, settings: RuleSettings
) -> bool:
    state.board.clear_move_highlights()
    return True


def _handle_attempt_move(state: GameState, intent: AttemptMove, settings: RuleSettings) -> bool:
    if state.is_game_over or state.pawn_promotion_flag:
        return False

    selected = state.selected_tile
    if selected is None or selected.content is None:
        return False
    mover = selected.content

    # Make sure it is the turn of the selected piece
    if mover.owner != state.current_player:
        return False

    target = state.board.get_tile_at_axial(intent.axial)
    if target is None:
        return False
    move = target.move_from(mover.pos)
    if move is None or move.source_tag != mover.tag:
        return False

    if not execute_move(state, move):
        end_turn(state)
        start_turn(state, settings)
    return True


def _handle_promote(
    state: GameState, intent: ExecutePromotePiece, settings: RuleSettings
) -> bool:
    if not state.pawn_promotion_flag or state.promotion_tile is None:
        return False
    promote(state, intent.piece_type, settings)
    end_turn(state)
    start_turn(state, settings)
    return True


_Handler = Callable[[GameState, object, RuleSettings], bool]

_HANDLERS: dict[type, _Handler] = {
    ResetBoard: _handle_reset,
    SelectTile: _handle_select,
    HighlightMoves: _handle_highlight,
    UnhighlightMoves: _handle_unhighlight,
    UnhighlightAllMoves: _handle_unhighlight_all,
    AttemptMove: _handle_attempt_move,
    ExecutePromotePiece: _handle_promote,
}


# ── Public API ───────────────────────────────────────────────────────────────


def initial_state() -> GameState:
    """Empty scaffold; dispatch :class:`ResetBoard` to set up a game."""
    return GameState(board=Board.empty())


def reduce(
    state: GameState,
    intent: Intent,
    settings: RuleSettings | None = None,
) -> GameState:
    """Apply *intent* and return the next state.

    Never raises for invalid intents: they return *state* itself.
    """
    handler = _HANDLERS.get(type(intent))
    if handler is None:
        _LOGGER.debug("Ignoring unknown intent %r", intent)
        return state

    draft = state.clone()
    if not handler(draft, intent, settings or RuleSettings()):
        _LOGGER.debug("Ignoring %s on turn %d", type(intent).__name__, state.turn)
        return state
    return draft


def reset_board(state: GameState, settings: RuleSettings | None = None) -> GameState:
    return reduce(state, ResetBoard(), settings)


def select_tile(state: GameState, tile: Tile | GridCoordinate | None) -> GameState:
    return reduce(state, SelectTile(tile))


def highlight_moves(state: GameState, piece: Piece) -> GameState:
    return reduce(state, HighlightMoves(piece))


def unhighlight_moves(state: GameState, piece: Piece) -> GameState:
    return reduce(state, UnhighlightMoves(piece))


def unhighlight_all_moves(state: GameState) -> GameState:
    return reduce(state, UnhighlightAllMoves())


def attempt_move(
    state: GameState,
    axial: AxialCoordinate,
    settings: RuleSettings | None = None,
) -> GameState:
    return reduce(state, AttemptMove(axial), settings)


def execute_promote_piece(
    state: GameState,
    piece_type: PieceType,
    settings: RuleSettings | None = None,
) -> GameState:
    return reduce(state, ExecutePromotePiece(piece_type), settings)

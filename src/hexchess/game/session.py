"""GameSession: owns the current state and notifies listeners.

Wraps the pure reducer for collaborators that want a long-lived object:
UIs, the Qt bridge, or a transport feeding moves from a remote peer.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hexchess.core.enums import GameOverState, NextTurnSource, PieceType
from hexchess.core.move import MoveInfo
from hexchess.core.piece import Piece
from hexchess.core.tile import Tile
from hexchess.core.types import AxialCoordinate, GridCoordinate
from hexchess.game.interfaces import IGameSession
from hexchess.game.reducer import (
    AttemptMove,
    ExecutePromotePiece,
    HighlightMoves,
    Intent,
    ResetBoard,
    SelectTile,
    UnhighlightAllMoves,
    UnhighlightMoves,
    initial_state,
    reduce,
)
from hexchess.game.serialization import SerializedMove, resolve_serialized_move
from hexchess.game.settings import RuleSettings
from hexchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[GameState], None]
TurnStartedCallback = Callable[[int, NextTurnSource], None]  # turn, source
PromotionCallback = Callable[[GridCoordinate], None]
GameOverCallback = Callable[[GameOverState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_turn_started: list[TurnStartedCallback] = field(default_factory=list)
    on_promotion_pending: list[PromotionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Single authoritative game instance.

    Intents are applied one at a time, in call order; there is no
    reentrancy.  Listeners must not dispatch from inside a callback.
    """

    __slots__ = ("_state", "_settings", "events")

    def __init__(
        self,
        settings: RuleSettings | None = None,
        state: GameState | None = None,
    ) -> None:
        self._settings = settings or RuleSettings()
        self._state = state if state is not None else initial_state()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> RuleSettings:
        return self._settings

    def legal_moves(self) -> list[MoveInfo]:
        return self._state.legal_moves()

    # ── Dispatch ─────────────────────────────────────────────────────────

    def dispatch(self, intent: Intent, source: NextTurnSource = NextTurnSource.LOCAL) -> bool:
        """Apply *intent*. Returns True if the state changed."""
        previous = self._state
        current = reduce(previous, intent, self._settings)
        if current is previous:
            return False
        self._commit(previous, current, source, reset=isinstance(intent, ResetBoard))
        return True

    # ── IGameSession impl ────────────────────────────────────────────────

    def reset_board(self) -> None:
        self.dispatch(ResetBoard())

    def select_tile(self, tile: Tile | GridCoordinate | None) -> bool:
        return self.dispatch(SelectTile(tile))

    def highlight_moves(self, piece: Piece) -> bool:
        return self.dispatch(HighlightMoves(piece))

    def unhighlight_moves(self, piece: Piece) -> bool:
        return self.dispatch(UnhighlightMoves(piece))

    def unhighlight_all_moves(self) -> bool:
        return self.dispatch(UnhighlightAllMoves())

    def attempt_move(
        self,
        axial: AxialCoordinate,
        source: NextTurnSource = NextTurnSource.LOCAL,
    ) -> bool:
        return self.dispatch(AttemptMove(axial), source)

    def execute_promote_piece(
        self,
        piece_type: PieceType,
        source: NextTurnSource = NextTurnSource.LOCAL,
    ) -> bool:
        return self.dispatch(ExecutePromotePiece(piece_type), source)

    def apply_serialized_move(self, smove: SerializedMove) -> bool:
        """Play a move received from a remote peer.

        Selects the piece by tag, moves it and, when the move promotes,
        answers the promotion with the transmitted piece type.  The steps
        are reduced on the side and committed together, so a rejected
        move leaves the session untouched.
        """
        previous = self._state
        move = resolve_serialized_move(previous, smove)
        if move is None:
            _LOGGER.debug("Unresolvable serialized move from %s", smove.source_tag)
            return False

        selected = reduce(previous, SelectTile(move.source), self._settings)
        current = reduce(selected, AttemptMove(move.axial), self._settings)
        if current is selected:
            _LOGGER.debug("Rejected serialized move from %s", smove.source_tag)
            return False
        if current.pawn_promotion_flag and move.promo_piece is not None:
            current = reduce(current, ExecutePromotePiece(move.promo_piece), self._settings)

        self._commit(previous, current, NextTurnSource.ONLINE)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(
        self,
        previous: GameState,
        current: GameState,
        source: NextTurnSource,
        *,
        reset: bool = False,
    ) -> None:
        self._state = current
        self._emit_state_changed()
        if reset:
            self._emit_turn_started(NextTurnSource.RESET)
        elif current.turn != previous.turn:
            self._emit_turn_started(source)
        if current.pawn_promotion_flag and not previous.pawn_promotion_flag:
            assert current.promotion_tile is not None
            self._emit_promotion_pending(current.promotion_tile)
        if current.is_game_over and current.game_over_state != previous.game_over_state:
            self._emit_game_over(current.game_over_state)

    def _emit_state_changed(self) -> None:
        for cb in self.events.on_state_changed:
            cb(self._state)

    def _emit_turn_started(self, source: NextTurnSource) -> None:
        for cb in self.events.on_turn_started:
            cb(self._state.turn, source)

    def _emit_promotion_pending(self, pos: GridCoordinate) -> None:
        for cb in self.events.on_promotion_pending:
            cb(pos)

    def _emit_game_over(self, result: GameOverState) -> None:
        _LOGGER.info("Game over: %s", result.name)
        for cb in self.events.on_game_over:
            cb(result)

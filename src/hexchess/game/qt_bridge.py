"""Qt bridge exposing a game session through signals and slots."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from hexchess.core.enums import GameOverState, NextTurnSource, PieceType
from hexchess.core.piece import Piece
from hexchess.core.tile import Tile
from hexchess.core.types import AxialCoordinate, GridCoordinate
from hexchess.game.serialization import SerializedMove
from hexchess.game.session import GameSession
from hexchess.game.settings import RuleSettings
from hexchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class GameBridge(QObject):
    """Thread-affine wrapper around :class:`GameSession` for Qt views."""

    state_changed = pyqtSignal(object)
    turn_started = pyqtSignal(int, int)
    promotion_requested = pyqtSignal(object)
    game_over = pyqtSignal(int)
    move_rejected = pyqtSignal(object)

    __slots__ = ("_session",)

    def __init__(
        self,
        session: GameSession | None = None,
        *,
        settings: RuleSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else GameSession(settings)
        events = self._session.events
        events.on_state_changed.append(self._on_state_changed)
        events.on_turn_started.append(self._on_turn_started)
        events.on_promotion_pending.append(self._on_promotion_pending)
        events.on_game_over.append(self._on_game_over)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> GameState:
        return self._session.state

    # -- Slots -----------------------------------------------------------------

    @pyqtSlot()
    def reset_board(self) -> None:
        self._session.reset_board()

    @pyqtSlot(object)
    def select_tile(self, pos: object) -> None:
        if pos is not None and not isinstance(pos, (GridCoordinate, Tile)):
            self.move_rejected.emit(pos)
            return
        self._session.select_tile(pos)

    @pyqtSlot(object)
    def highlight_moves(self, piece: object) -> None:
        if isinstance(piece, Piece):
            self._session.highlight_moves(piece)

    @pyqtSlot(object)
    def unhighlight_moves(self, piece: object) -> None:
        if isinstance(piece, Piece):
            self._session.unhighlight_moves(piece)

    @pyqtSlot()
    def unhighlight_all_moves(self) -> None:
        self._session.unhighlight_all_moves()

    @pyqtSlot(int, int)
    def attempt_move(self, q: int, r: int) -> None:
        """Move the selected piece to axial ``(q, r)``."""
        axial = AxialCoordinate(q, r)
        if not self._session.attempt_move(axial):
            self.move_rejected.emit(axial)

    @pyqtSlot(int)
    def execute_promote_piece(self, piece_type: int) -> None:
        try:
            choice = PieceType(piece_type)
        except ValueError:
            self.move_rejected.emit(piece_type)
            return
        if not self._session.execute_promote_piece(choice):
            self.move_rejected.emit(choice)

    @pyqtSlot(object)
    def apply_serialized_move(self, payload: object) -> None:
        """Apply a move from a remote peer, given as a dict or SerializedMove."""
        try:
            if isinstance(payload, SerializedMove):
                smove = payload
            elif isinstance(payload, dict):
                smove = SerializedMove.from_dict(payload)
            else:
                raise ValueError(f"Unsupported move payload: {payload!r}")
        except ValueError as exc:
            _LOGGER.warning("Rejected remote move: %s", exc)
            self.move_rejected.emit(payload)
            return

        if not self._session.apply_serialized_move(smove):
            self.move_rejected.emit(smove)

    # -- Session callbacks -----------------------------------------------------

    def _on_state_changed(self, state: GameState) -> None:
        self.state_changed.emit(state)

    def _on_turn_started(self, turn: int, source: NextTurnSource) -> None:
        self.turn_started.emit(turn, int(source))

    def _on_promotion_pending(self, pos: GridCoordinate) -> None:
        self.promotion_requested.emit(pos)

    def _on_game_over(self, result: GameOverState) -> None:
        self.game_over.emit(int(result))

"""Game state container read by UI collaborators."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field

from hexchess.core.board import Board
from hexchess.core.enums import GameOverState, PieceOwner
from hexchess.core.move import MoveInfo
from hexchess.core.tile import HighlightStatus, Tile
from hexchess.core.types import GridCoordinate
from hexchess.game.interfaces import TurnPhase


@dataclass
class GameState:
    """Board plus turn bookkeeping.

    ``selected`` and ``promotion_tile`` are grid coordinates into
    ``board``; use :attr:`selected_tile` / :attr:`promotion_target` to
    resolve them.  Callers outside the reducer treat instances as
    read-only.
    """

    board: Board = field(default_factory=Board.empty)
    game_over_state: GameOverState = GameOverState.UNFINISHED
    selected: GridCoordinate | None = None
    turn: int = 0
    pawn_promotion_flag: bool = False
    promotion_tile: GridCoordinate | None = None

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def current_player(self) -> PieceOwner:
        """Even turns belong to white, odd turns to black."""
        return PieceOwner.WHITE if self.turn % 2 == 0 else PieceOwner.BLACK

    @property
    def selected_tile(self) -> Tile | None:
        if self.selected is None:
            return None
        return self.board.tile_at(self.selected)

    @property
    def promotion_target(self) -> Tile | None:
        if self.promotion_tile is None:
            return None
        return self.board.tile_at(self.promotion_tile)

    @property
    def is_game_over(self) -> bool:
        return self.game_over_state != GameOverState.UNFINISHED

    @property
    def phase(self) -> TurnPhase:
        if self.is_game_over:
            return TurnPhase.GAME_OVER
        if self.pawn_promotion_flag:
            return TurnPhase.AWAITING_PROMOTION_CHOICE
        for tile in self.board.playable_tiles():
            if any(isinstance(s, HighlightStatus) for s in tile.statuses):
                return TurnPhase.MOVE_HIGHLIGHTED
        return TurnPhase.AWAITING_SELECTION

    def legal_moves(self) -> list[MoveInfo]:
        """Moves materialised for the current turn."""
        moves: list[MoveInfo] = []
        for tile in self.board.playable_tiles():
            moves.extend(status.move for status in tile.move_statuses())
        return moves

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)

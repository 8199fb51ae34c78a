"""Abstract interfaces for the game layer.

UI and transport collaborators depend on :class:`IGameSession`, not on
the concrete session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexchess.core.enums import PieceType
    from hexchess.core.piece import Piece
    from hexchess.core.tile import Tile
    from hexchess.core.types import AxialCoordinate, GridCoordinate


# ── Turn FSM states ──────────────────────────────────────────────────────────


class TurnPhase(IntEnum):
    """Where the acting player is within the current turn."""

    AWAITING_SELECTION = auto()
    MOVE_HIGHLIGHTED = auto()
    AWAITING_PROMOTION_CHOICE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameSession(ABC):
    """The intent surface: the only way collaborators change the game."""

    @abstractmethod
    def reset_board(self) -> None:
        """Start a new game from the initial position."""

    @abstractmethod
    def select_tile(self, tile: Tile | GridCoordinate | None) -> bool:
        """Pick up the piece on *tile* (or drop the selection)."""

    @abstractmethod
    def highlight_moves(self, piece: Piece) -> bool:
        """Mark the destinations of *piece* for display."""

    @abstractmethod
    def unhighlight_moves(self, piece: Piece) -> bool:
        """Remove the destination marks of *piece*."""

    @abstractmethod
    def unhighlight_all_moves(self) -> bool:
        """Remove every destination mark."""

    @abstractmethod
    def attempt_move(self, axial: AxialCoordinate) -> bool:
        """Move the selected piece to *axial*. Returns True if applied."""

    @abstractmethod
    def execute_promote_piece(self, piece_type: PieceType) -> bool:
        """Answer a pending promotion. Returns True if applied."""

"""Game layer — turn state machine, reducer, session and wire formats.

Quick start::

    from hexchess.core import parse_tile_name
    from hexchess.game import GameSession

    session = GameSession()
    session.reset_board()
    session.select_tile(session.state.board.get_tile_at_axial(parse_tile_name("f5")))
    session.attempt_move(parse_tile_name("f6"))

Qt views use :class:`hexchess.game.qt_bridge.GameBridge`, which is not
imported here so the rest of the layer loads without a Qt platform.
"""

from hexchess.game.interfaces import IGameSession, TurnPhase
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
from hexchess.game.serialization import (
    SerializedMove,
    resolve_serialized_move,
    serialize_move,
    snapshot,
)
from hexchess.game.session import GameEvents, GameSession
from hexchess.game.settings import RuleSettings
from hexchess.game.state import GameState

__all__ = [
    # Interfaces
    "IGameSession",
    "TurnPhase",
    # Intents
    "AttemptMove",
    "ExecutePromotePiece",
    "HighlightMoves",
    "Intent",
    "ResetBoard",
    "SelectTile",
    "UnhighlightAllMoves",
    "UnhighlightMoves",
    # Concrete
    "GameEvents",
    "GameSession",
    "GameState",
    "RuleSettings",
    "initial_state",
    "reduce",
    # Wire formats
    "SerializedMove",
    "resolve_serialized_move",
    "serialize_move",
    "snapshot",
]

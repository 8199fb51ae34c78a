"""Wire shapes for moves and read-only state snapshots.

Moves travel by piece *tag* rather than instance id, so a peer holding
its own copy of the board can resolve them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from hexchess.core.enums import MoveType, PieceType
from hexchess.core.move import MoveInfo
from hexchess.core.types import AxialCoordinate, grid_to_axial, tile_name
from hexchess.game.state import GameState


@dataclass(frozen=True, slots=True)
class SerializedMove:
    """A move identified by destination and the stable tag of its piece."""

    axial: AxialCoordinate
    type: MoveType
    source_tag: str
    promo_piece_type: PieceType | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "axial": {"q": self.axial.q, "r": self.axial.r},
            "type": self.type.name.lower(),
            "sourceTag": self.source_tag,
            "promoPieceType": (
                self.promo_piece_type.name.lower()
                if self.promo_piece_type is not None
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SerializedMove:
        """Parse the shape produced by :meth:`to_dict`."""
        try:
            axial = AxialCoordinate(int(data["axial"]["q"]), int(data["axial"]["r"]))
            move_type = MoveType[str(data["type"]).upper()]
            source_tag = str(data["sourceTag"])
            promo = data.get("promoPieceType")
            promo_type = PieceType[str(promo).upper()] if promo is not None else None
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Malformed serialized move: {data!r}") from exc
        return cls(axial, move_type, source_tag, promo_type)


def serialize_move(move: MoveInfo, promo_piece_type: PieceType | None = None) -> SerializedMove:
    return SerializedMove(
        axial=move.axial,
        type=move.type,
        source_tag=move.source_tag,
        promo_piece_type=promo_piece_type if promo_piece_type is not None else move.promo_piece,
    )


def resolve_serialized_move(state: GameState, smove: SerializedMove) -> MoveInfo | None:
    """The live move matching *smove*, or None if it is not playable now."""
    piece = state.board.find_piece_by_tag(smove.source_tag)
    if piece is None:
        return None
    tile = state.board.get_tile_at_axial(smove.axial)
    if tile is None:
        return None
    move = tile.move_from(piece.pos)
    if move is None or move.source_tag != smove.source_tag:
        return None
    return replace(move, promo_piece=smove.promo_piece_type)


def snapshot(state: GameState) -> dict[str, Any]:
    """JSON-friendly view of *state* for renderers and transports."""
    selected = state.selected_tile
    promotion = state.promotion_target
    return {
        "turn": state.turn,
        "currentPlayer": state.current_player.name.lower(),
        "gameOverState": state.game_over_state.name.lower(),
        "pawnPromotionFlag": state.pawn_promotion_flag,
        "promotionTile": tile_name(promotion.axial) if promotion is not None else None,
        "selected": tile_name(selected.axial) if selected is not None else None,
        "pieces": [
            {
                "tile": tile_name(piece.axial),
                "type": piece.type.name.lower(),
                "owner": piece.owner.name.lower(),
                "tag": piece.tag,
                "hasMoved": piece.has_moved,
            }
            for piece in state.board.all_pieces()
        ],
        "moves": [
            {
                "from": tile_name(grid_to_axial(move.source)),
                "to": tile_name(move.axial),
                "type": move.type.name.lower(),
            }
            for move in state.legal_moves()
        ],
    }

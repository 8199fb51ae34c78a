"""Core enumerations for the hexagonal chess domain."""

from __future__ import annotations

from enum import IntEnum


class PieceOwner(IntEnum):
    """Side owning a piece."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> PieceOwner:
        return PieceOwner(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece types ordered by conventional value."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    def __str__(self) -> str:
        return self.name.lower()


class TileStatusType(IntEnum):
    """Markers a tile can carry."""

    WHITE_THREATENING = 0
    BLACK_THREATENING = 1
    EN_PASSANT_BLACK = 2
    EN_PASSANT_WHITE = 3
    WHITE_PAWN_ORIGIN = 4
    BLACK_PAWN_ORIGIN = 5
    MOVE_HIGHLIGHT = 6
    CAPTURE_HIGHLIGHT = 7
    WHITE_PROMO_TILE = 8
    BLACK_PROMO_TILE = 9

    # Per-owner lookups; the owner is the side the marker belongs to.

    @classmethod
    def threatening(cls, owner: PieceOwner) -> TileStatusType:
        return cls.WHITE_THREATENING if owner == PieceOwner.WHITE else cls.BLACK_THREATENING

    @classmethod
    def en_passant(cls, owner: PieceOwner) -> TileStatusType:
        """Marker left behind by *owner*'s pawn double step."""
        return cls.EN_PASSANT_WHITE if owner == PieceOwner.WHITE else cls.EN_PASSANT_BLACK

    @classmethod
    def pawn_origin(cls, owner: PieceOwner) -> TileStatusType:
        return cls.WHITE_PAWN_ORIGIN if owner == PieceOwner.WHITE else cls.BLACK_PAWN_ORIGIN

    @classmethod
    def promo_tile(cls, owner: PieceOwner) -> TileStatusType:
        """Tiles where *owner*'s pawns promote."""
        return cls.WHITE_PROMO_TILE if owner == PieceOwner.WHITE else cls.BLACK_PROMO_TILE


class MoveType(IntEnum):
    """Classification of a candidate move."""

    STANDARD = 0
    CAPTURE = 1
    EN_PASSANT_CAPTURE = 2
    PROMOTION = 3


class GameOverState(IntEnum):
    """Outcome of a game."""

    UNFINISHED = 0
    WHITE_VICTORY = 1
    BLACK_VICTORY = 2
    WHITE_STALEMATED = 3
    BLACK_STALEMATED = 4

    @classmethod
    def victory_for(cls, owner: PieceOwner) -> GameOverState:
        return cls.WHITE_VICTORY if owner == PieceOwner.WHITE else cls.BLACK_VICTORY

    @classmethod
    def stalemated(cls, owner: PieceOwner) -> GameOverState:
        return cls.WHITE_STALEMATED if owner == PieceOwner.WHITE else cls.BLACK_STALEMATED


class NextTurnSource(IntEnum):
    """What caused a new turn to start."""

    RESET = 0
    LOCAL = 1
    ONLINE = 2

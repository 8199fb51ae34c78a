"""Piece model and per-type factories."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from hexchess.core.enums import PieceOwner, PieceType
from hexchess.core.types import AxialCoordinate, GridCoordinate, grid_to_axial

# Board diagram character ↔ (PieceOwner, PieceType)
_CHAR_MAP: dict[str, tuple[PieceOwner, PieceType]] = {
    "P": (PieceOwner.WHITE, PieceType.PAWN),
    "N": (PieceOwner.WHITE, PieceType.KNIGHT),
    "B": (PieceOwner.WHITE, PieceType.BISHOP),
    "R": (PieceOwner.WHITE, PieceType.ROOK),
    "Q": (PieceOwner.WHITE, PieceType.QUEEN),
    "K": (PieceOwner.WHITE, PieceType.KING),
    "p": (PieceOwner.BLACK, PieceType.PAWN),
    "n": (PieceOwner.BLACK, PieceType.KNIGHT),
    "b": (PieceOwner.BLACK, PieceType.BISHOP),
    "r": (PieceOwner.BLACK, PieceType.ROOK),
    "q": (PieceOwner.BLACK, PieceType.QUEEN),
    "k": (PieceOwner.BLACK, PieceType.KING),
}

_CHARS: dict[tuple[PieceOwner, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


def _new_id() -> str:
    return uuid.uuid4().hex


def make_tag(owner: PieceOwner, piece_type: PieceType, suffix: object) -> str:
    """Stable label, e.g. ``white-pawn-4``."""
    return f"{owner.name.lower()}-{piece_type.name.lower()}-{suffix}"


@dataclass(slots=True)
class Piece:
    """A piece instance on the board.

    ``pos``/``axial`` mirror the tile that holds the piece and are kept in
    sync by :meth:`hexchess.core.board.Board.place`.
    """

    type: PieceType
    owner: PieceOwner
    pos: GridCoordinate
    axial: AxialCoordinate
    tag: str
    has_moved: bool = False
    id: str = field(default_factory=_new_id)

    def __str__(self) -> str:
        """Diagram character (uppercase = white, lowercase = black)."""
        return _CHARS[(self.owner, self.type)]

    @property
    def char(self) -> str:
        return str(self)


# ── Factories ────────────────────────────────────────────────────────────────


def create_piece(
    piece_type: PieceType,
    pos: GridCoordinate,
    owner: PieceOwner,
    tag: str | None = None,
) -> Piece:
    """Create a piece standing on grid cell *pos*."""
    return Piece(
        type=piece_type,
        owner=owner,
        pos=pos,
        axial=grid_to_axial(pos),
        tag=tag if tag is not None else make_tag(owner, piece_type, 0),
    )


def create_pawn(pos: GridCoordinate, owner: PieceOwner, tag: str | None = None) -> Piece:
    return create_piece(PieceType.PAWN, pos, owner, tag)


def create_knight(pos: GridCoordinate, owner: PieceOwner, tag: str | None = None) -> Piece:
    return create_piece(PieceType.KNIGHT, pos, owner, tag)


def create_bishop(pos: GridCoordinate, owner: PieceOwner, tag: str | None = None) -> Piece:
    return create_piece(PieceType.BISHOP, pos, owner, tag)


def create_rook(pos: GridCoordinate, owner: PieceOwner, tag: str | None = None) -> Piece:
    return create_piece(PieceType.ROOK, pos, owner, tag)


def create_queen(pos: GridCoordinate, owner: PieceOwner, tag: str | None = None) -> Piece:
    return create_piece(PieceType.QUEEN, pos, owner, tag)


def create_king(pos: GridCoordinate, owner: PieceOwner, tag: str | None = None) -> Piece:
    return create_piece(PieceType.KING, pos, owner, tag)


def piece_from_char(char: str, pos: GridCoordinate, tag: str | None = None) -> Piece:
    """Create piece from diagram character, e.g. 'N' → white knight."""
    try:
        owner, piece_type = _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None
    return create_piece(piece_type, pos, owner, tag)

"""Per-piece move generation and attack maps on the hexagonal board."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from hexchess.core.enums import MoveType, PieceOwner, PieceType, TileStatusType
from hexchess.core.move import MoveCalculationFunction, MoveInfo
from hexchess.core.types import AxialCoordinate, is_playable_axial, iter_playable_axials

if TYPE_CHECKING:
    from hexchess.core.board import Board
    from hexchess.core.piece import Piece
    from hexchess.core.tile import Tile

Offset = tuple[int, int]

# Edge-sharing neighbours.
ORTHOGONAL_DIRS: tuple[Offset, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
)

# Vertex-sharing directions (one cube component moves by two).
DIAGONAL_DIRS: tuple[Offset, ...] = (
    (1, -2),
    (2, -1),
    (1, 1),
    (-1, 2),
    (-2, 1),
    (-1, -1),
)

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    (1, -3),
    (2, -3),
    (3, -2),
    (3, -1),
    (2, 1),
    (1, 2),
    (-1, 3),
    (-2, 3),
    (-3, 2),
    (-3, 1),
    (-2, -1),
    (-1, -2),
)

KING_OFFSETS: tuple[Offset, ...] = ORTHOGONAL_DIRS + DIAGONAL_DIRS
QUEEN_DIRS: tuple[Offset, ...] = ORTHOGONAL_DIRS + DIAGONAL_DIRS

PAWN_FORWARD: dict[PieceOwner, Offset] = {
    PieceOwner.WHITE: (0, -1),
    PieceOwner.BLACK: (0, 1),
}

# Orthogonal neighbours either side of forward.
PAWN_CAPTURES: dict[PieceOwner, tuple[Offset, Offset]] = {
    PieceOwner.WHITE: ((-1, 0), (1, -1)),
    PieceOwner.BLACK: ((1, 0), (-1, 1)),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[Offset, ...],
) -> dict[AxialCoordinate, tuple[AxialCoordinate, ...]]:
    targets: dict[AxialCoordinate, tuple[AxialCoordinate, ...]] = {}
    for cell in iter_playable_axials():
        moves = [cell.offset(dq, dr) for dq, dr in offsets]
        targets[cell] = tuple(m for m in moves if is_playable_axial(m))
    return targets


def _build_rays(
    directions: tuple[Offset, ...],
) -> dict[AxialCoordinate, tuple[tuple[AxialCoordinate, ...], ...]]:
    rays_per_cell: dict[AxialCoordinate, tuple[tuple[AxialCoordinate, ...], ...]] = {}
    for cell in iter_playable_axials():
        cell_rays: list[tuple[AxialCoordinate, ...]] = []
        for dq, dr in directions:
            ray: list[AxialCoordinate] = []
            step = cell.offset(dq, dr)
            while is_playable_axial(step):
                ray.append(step)
                step = step.offset(dq, dr)
            cell_rays.append(tuple(ray))
        rays_per_cell[cell] = tuple(cell_rays)
    return rays_per_cell


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(DIAGONAL_DIRS)
_ROOK_RAYS = _build_rays(ORTHOGONAL_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


# -- Helpers ---------------------------------------------------------------


def _move(piece: Piece, target: Tile, move_type: MoveType) -> MoveInfo:
    return MoveInfo(
        axial=target.axial,
        type=move_type,
        source=piece.pos,
        source_tag=piece.tag,
    )


def _step_moves(
    board: Board,
    piece: Piece,
    targets: tuple[AxialCoordinate, ...],
) -> list[MoveInfo]:
    moves: list[MoveInfo] = []
    for axial in targets:
        tile = board.get_tile_at_axial(axial)
        if tile is None:
            continue
        if tile.content is None:
            moves.append(_move(piece, tile, MoveType.STANDARD))
        elif tile.content.owner != piece.owner:
            moves.append(_move(piece, tile, MoveType.CAPTURE))
    return moves


def _sliding_moves(
    board: Board,
    piece: Piece,
    rays: tuple[tuple[AxialCoordinate, ...], ...],
) -> list[MoveInfo]:
    moves: list[MoveInfo] = []
    for ray in rays:
        for axial in ray:
            tile = board.get_tile_at_axial(axial)
            if tile is None:
                break
            if tile.content is None:
                moves.append(_move(piece, tile, MoveType.STANDARD))
                continue
            if tile.content.owner != piece.owner:
                moves.append(_move(piece, tile, MoveType.CAPTURE))
            break
    return moves


# -- Generators --------------------------------------------------------------


def can_double_step(board: Board, piece: Piece) -> bool:
    """Unmoved pawns, and pawns back on one of their own origin tiles."""
    if not piece.has_moved:
        return True
    tile = board.tile_at(piece.pos)
    return tile is not None and tile.has_marker(TileStatusType.pawn_origin(piece.owner))


def pawn_moves(board: Board, piece: Piece) -> list[MoveInfo]:
    moves: list[MoveInfo] = []
    owner = piece.owner
    promo = TileStatusType.promo_tile(owner)
    dq, dr = PAWN_FORWARD[owner]

    one_step = board.get_tile_at_axial(piece.axial.offset(dq, dr))
    if one_step is not None and one_step.content is None:
        moves.append(
            _move(
                piece,
                one_step,
                MoveType.PROMOTION if one_step.has_marker(promo) else MoveType.STANDARD,
            )
        )
        if can_double_step(board, piece):
            two_step = board.get_tile_at_axial(piece.axial.offset(2 * dq, 2 * dr))
            if two_step is not None and two_step.content is None:
                moves.append(
                    _move(
                        piece,
                        two_step,
                        MoveType.PROMOTION if two_step.has_marker(promo) else MoveType.STANDARD,
                    )
                )

    enemy_passant = TileStatusType.en_passant(owner.opposite)
    for cq, cr in PAWN_CAPTURES[owner]:
        target = board.get_tile_at_axial(piece.axial.offset(cq, cr))
        if target is None:
            continue
        if target.content is not None:
            if target.content.owner != owner:
                moves.append(
                    _move(
                        piece,
                        target,
                        MoveType.PROMOTION if target.has_marker(promo) else MoveType.CAPTURE,
                    )
                )
        elif target.has_marker(enemy_passant):
            moves.append(_move(piece, target, MoveType.EN_PASSANT_CAPTURE))
    return moves


def knight_moves(board: Board, piece: Piece) -> list[MoveInfo]:
    return _step_moves(board, piece, _KNIGHT_TARGETS[piece.axial])


def bishop_moves(board: Board, piece: Piece) -> list[MoveInfo]:
    return _sliding_moves(board, piece, _BISHOP_RAYS[piece.axial])


def rook_moves(board: Board, piece: Piece) -> list[MoveInfo]:
    return _sliding_moves(board, piece, _ROOK_RAYS[piece.axial])


def queen_moves(board: Board, piece: Piece) -> list[MoveInfo]:
    return _sliding_moves(board, piece, _QUEEN_RAYS[piece.axial])


def king_moves(board: Board, piece: Piece) -> list[MoveInfo]:
    return _step_moves(board, piece, _KING_TARGETS[piece.axial])


MOVE_GENERATORS: dict[PieceType, MoveCalculationFunction] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def generate_moves(board: Board, piece: Piece) -> list[MoveInfo]:
    """Candidate moves for *piece* (may leave its own king attacked)."""
    return MOVE_GENERATORS[piece.type](board, piece)


def generate_all_moves(board: Board, owner: PieceOwner) -> list[MoveInfo]:
    moves: list[MoveInfo] = []
    for piece in board.pieces(owner):
        moves.extend(generate_moves(board, piece))
    return moves


# -- Attack detection ------------------------------------------------------


def attacked_axials(
    occupancy: Mapping[AxialCoordinate, Piece],
    owner: PieceOwner,
) -> set[AxialCoordinate]:
    """Cells *owner* attacks, occupied or not (defended pieces included)."""
    attacked: set[AxialCoordinate] = set()
    for axial, piece in occupancy.items():
        if piece.owner != owner:
            continue
        if piece.type == PieceType.PAWN:
            for cq, cr in PAWN_CAPTURES[owner]:
                target = axial.offset(cq, cr)
                if is_playable_axial(target):
                    attacked.add(target)
        elif piece.type == PieceType.KNIGHT:
            attacked.update(_KNIGHT_TARGETS[axial])
        elif piece.type == PieceType.KING:
            attacked.update(_KING_TARGETS[axial])
        else:
            for ray in _SLIDER_RAYS[piece.type][axial]:
                for target in ray:
                    attacked.add(target)
                    if target in occupancy:
                        break
    return attacked

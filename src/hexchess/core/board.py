"""Board - an 11x11 grid of tiles holding the hexagonal playing area."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from hexchess.core.enums import PieceOwner, PieceType, TileStatusType
from hexchess.core.piece import Piece, create_piece, make_tag, piece_from_char
from hexchess.core.tile import HighlightStatus, MarkerStatus, MoveStatus, Tile, create_tile
from hexchess.core.types import (
    BOARD_RADIUS,
    BOARD_SIZE,
    FILES,
    AxialCoordinate,
    GridCoordinate,
    axial_to_grid,
    is_bottom_edge,
    is_in_grid,
    is_playable_axial,
    is_top_edge,
    mirror_axial,
    parse_tile_name,
)

# White's army by Glinski tile name; black's is the mirror image.
_BACK_PIECES: tuple[tuple[str, PieceType], ...] = (
    ("g1", PieceType.KING),
    ("e1", PieceType.QUEEN),
    ("c1", PieceType.ROOK),
    ("i1", PieceType.ROOK),
    ("d1", PieceType.KNIGHT),
    ("h1", PieceType.KNIGHT),
    ("f1", PieceType.BISHOP),
    ("f2", PieceType.BISHOP),
    ("f3", PieceType.BISHOP),
)
_PAWN_TILES: tuple[str, ...] = ("b1", "c2", "d3", "e4", "f5", "g4", "h3", "i2", "k1")


def _setup_axial(name: str, owner: PieceOwner) -> AxialCoordinate:
    axial = parse_tile_name(name)
    return axial if owner == PieceOwner.WHITE else mirror_axial(axial)


class Board:
    """Mutable grid of tiles, indexed ``tiles[col][row]``.

    Every cell exists; only playable cells may hold pieces or markers.
    """

    __slots__ = ("tiles",)

    def __init__(self, tiles: list[list[Tile]]) -> None:
        self.tiles = tiles

    # -- Factories --------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        """Bare scaffold: no pieces, no markers."""
        return cls(
            [
                [create_tile(GridCoordinate(col, row)) for row in range(BOARD_SIZE)]
                for col in range(BOARD_SIZE)
            ]
        )

    @classmethod
    def initial(cls) -> Board:
        """Standard Glinski starting position."""
        board = cls.empty()
        board.reset()
        return board

    @classmethod
    def from_pieces(
        cls,
        placement: Mapping[str, str],
        *,
        has_moved: bool = True,
        zone_markers: bool = True,
    ) -> Board:
        """Board from ``{tile name: diagram char}``, e.g. ``{"f6": "R"}``.

        Pieces are flagged as moved unless *has_moved* is False.
        """
        board = cls.empty()
        if zone_markers:
            board.apply_zone_markers()
        counts: dict[str, int] = {}
        for name, char in placement.items():
            tile = board.get_tile_at_axial(parse_tile_name(name))
            assert tile is not None
            index = counts.get(char, 0)
            counts[char] = index + 1
            piece = piece_from_char(char, tile.pos)
            piece.tag = make_tag(piece.owner, piece.type, index)
            piece.has_moved = has_moved
            board.place(piece, tile)
        return board

    # -- Element access -------------------------------------------------------

    def __iter__(self) -> Iterator[Tile]:
        for column in self.tiles:
            yield from column

    def playable_tiles(self) -> Iterator[Tile]:
        return (tile for tile in self if tile.playable)

    def tile_at(self, pos: GridCoordinate) -> Tile | None:
        """Tile at grid cell *pos*, or None outside the grid."""
        if not is_in_grid(pos):
            return None
        return self.tiles[pos.col][pos.row]

    def get_tile_at_axial(self, axial: AxialCoordinate) -> Tile | None:
        """Playable tile at *axial*, or None when there is no such tile."""
        if not is_playable_axial(axial):
            return None
        return self.tile_at(axial_to_grid(axial))

    # -- Query helpers --------------------------------------------------------

    def pieces(self, owner: PieceOwner) -> list[Piece]:
        return [
            tile.content
            for tile in self.playable_tiles()
            if tile.content is not None and tile.content.owner == owner
        ]

    def all_pieces(self) -> list[Piece]:
        return [tile.content for tile in self.playable_tiles() if tile.content is not None]

    def king(self, owner: PieceOwner) -> Piece | None:
        for piece in self.pieces(owner):
            if piece.type == PieceType.KING:
                return piece
        return None

    def find_piece_by_tag(self, tag: str) -> Piece | None:
        for piece in self.all_pieces():
            if piece.tag == tag:
                return piece
        return None

    def occupancy(self) -> dict[AxialCoordinate, Piece]:
        """Axial -> piece map of every occupied tile."""
        return {piece.axial: piece for piece in self.all_pieces()}

    # -- Mutation -------------------------------------------------------------

    def place(self, piece: Piece, tile: Tile) -> None:
        """Put *piece* on *tile*, keeping its ``pos``/``axial`` in step."""
        tile.content = piece
        piece.pos = tile.pos
        piece.axial = tile.axial

    def capture_content(self, tile: Tile) -> Piece | None:
        """Remove and return the piece on *tile*."""
        captured = tile.content
        tile.content = None
        return captured

    def remove_markers(self, *status_types: TileStatusType) -> None:
        for tile in self.playable_tiles():
            tile.remove_markers(*status_types)

    def clear_move_highlights(self) -> None:
        """Drop every move/capture highlight on the board."""
        for tile in self.playable_tiles():
            tile.statuses = [s for s in tile.statuses if not isinstance(s, HighlightStatus)]

    def clear_move_statuses(self) -> None:
        """Drop every per-turn move marker on the board."""
        for tile in self.playable_tiles():
            tile.statuses = [s for s in tile.statuses if not isinstance(s, MoveStatus)]

    def apply_zone_markers(self) -> None:
        """Mark promotion zones (the far edge of every file) and pawn origins."""
        for owner in (PieceOwner.WHITE, PieceOwner.BLACK):
            for name in _PAWN_TILES:
                tile = self.get_tile_at_axial(_setup_axial(name, owner))
                assert tile is not None
                tile.add_status(MarkerStatus(TileStatusType.pawn_origin(owner)))
        for tile in self.playable_tiles():
            if is_top_edge(tile.axial):
                tile.add_status(MarkerStatus(TileStatusType.WHITE_PROMO_TILE))
            if is_bottom_edge(tile.axial):
                tile.add_status(MarkerStatus(TileStatusType.BLACK_PROMO_TILE))

    def reset(self) -> None:
        """Wipe every tile and set up both armies."""
        for tile in self:
            tile.content = None
            tile.statuses = []
        self.apply_zone_markers()

        for owner in (PieceOwner.WHITE, PieceOwner.BLACK):
            counts: dict[PieceType, int] = {}
            setup = [*_BACK_PIECES, *((name, PieceType.PAWN) for name in _PAWN_TILES)]
            for name, piece_type in setup:
                tile = self.get_tile_at_axial(_setup_axial(name, owner))
                assert tile is not None
                index = counts.get(piece_type, 0)
                counts[piece_type] = index + 1
                piece = create_piece(
                    piece_type, tile.pos, owner, tag=make_tag(owner, piece_type, index)
                )
                self.place(piece, tile)

    # -- Dunder helpers -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __repr__(self) -> str:
        # Flat-topped layout: files are columns, each line is half a rank.
        lines: list[str] = []
        for y2 in range(-2 * BOARD_RADIUS, 2 * BOARD_RADIUS + 1):
            cells: list[str] = []
            for q in range(-BOARD_RADIUS, BOARD_RADIUS + 1):
                tile = None
                if (y2 - q) % 2 == 0:
                    tile = self.get_tile_at_axial(AxialCoordinate(q, (y2 - q) // 2))
                if tile is None:
                    cells.append(" ")
                else:
                    cells.append(str(tile.content) if tile.content else ".")
            lines.append(" ".join(cells).rstrip())
        lines.append(" ".join(FILES))
        return "\n".join(lines)


def create_initial_board() -> Board:
    """Fresh board in the starting position."""
    return Board.initial()

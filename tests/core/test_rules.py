"""Tests for check detection, self-check filtering and game-over states."""

from hexchess.core.board import Board
from hexchess.core.enums import GameOverState, PieceOwner
from hexchess.core.move_generator import generate_all_moves, generate_moves
from hexchess.core.rules import (
    filter_self_checks,
    game_over_state_for,
    is_in_check,
    leaves_king_in_check,
)
from hexchess.core.types import parse_tile_name, tile_name

# Black king on f11 boxed in by three rooks; none of them gives check.
_BOXED_IN = {"f11": "k", "g5": "R", "k6": "R", "e4": "R", "f1": "K"}


def _legal_count(board: Board, owner: PieceOwner) -> int:
    return len(filter_self_checks(board, generate_all_moves(board, owner)))


class TestCheck:
    def test_initial_not_in_check(self) -> None:
        board = Board.initial()
        assert not is_in_check(board.occupancy(), PieceOwner.WHITE)
        assert not is_in_check(board.occupancy(), PieceOwner.BLACK)

    def test_rook_gives_check(self) -> None:
        board = Board.from_pieces({"f1": "K", "f9": "r"})
        assert is_in_check(board.occupancy(), PieceOwner.WHITE)

    def test_blocked_check(self) -> None:
        board = Board.from_pieces({"f1": "K", "f4": "P", "f9": "r"})
        assert not is_in_check(board.occupancy(), PieceOwner.WHITE)

    def test_missing_king_not_in_check(self) -> None:
        board = Board.from_pieces({"f9": "r"})
        assert not is_in_check(board.occupancy(), PieceOwner.WHITE)


class TestSelfCheck:
    def test_pinned_rook_stays_on_file(self) -> None:
        board = Board.from_pieces({"f1": "K", "f3": "R", "f9": "r"})
        rook = board.get_tile_at_axial(parse_tile_name("f3")).content
        moves = filter_self_checks(board, generate_moves(board, rook))
        assert moves
        assert all(m.axial.q == 0 for m in moves)
        assert "f9" in {tile_name(m.axial) for m in moves}

    def test_king_cannot_step_into_attack(self) -> None:
        board = Board.from_pieces({"f1": "K", "e9": "r"})
        king = board.king(PieceOwner.WHITE)
        assert king is not None
        for move in generate_moves(board, king):
            if move.axial.q == -1:
                assert leaves_king_in_check(board, move)

    def test_capture_removes_attacker(self) -> None:
        board = Board.from_pieces({"f1": "K", "f2": "r"})
        king = board.king(PieceOwner.WHITE)
        assert king is not None
        capture = next(m for m in generate_moves(board, king) if tile_name(m.axial) == "f2")
        assert not leaves_king_in_check(board, capture)


class TestGameOver:
    def test_unfinished_with_moves(self) -> None:
        board = Board.initial()
        moves = len(generate_all_moves(board, PieceOwner.WHITE))
        assert game_over_state_for(board, PieceOwner.WHITE, moves) == GameOverState.UNFINISHED

    def test_missing_king_loses(self) -> None:
        board = Board.from_pieces({"f6": "p", "f1": "K"})
        assert game_over_state_for(board, PieceOwner.BLACK, 1) == GameOverState.WHITE_VICTORY

    def test_stalemate(self) -> None:
        board = Board.from_pieces(_BOXED_IN)
        assert not is_in_check(board.occupancy(), PieceOwner.BLACK)
        assert _legal_count(board, PieceOwner.BLACK) == 0
        assert game_over_state_for(board, PieceOwner.BLACK, 0) == GameOverState.BLACK_STALEMATED

    def test_checkmate(self) -> None:
        board = Board.from_pieces({**_BOXED_IN, "h7": "B"})
        assert is_in_check(board.occupancy(), PieceOwner.BLACK)
        assert _legal_count(board, PieceOwner.BLACK) == 0
        assert game_over_state_for(board, PieceOwner.BLACK, 0) == GameOverState.WHITE_VICTORY

    def test_boxed_in_king_has_pseudo_moves(self) -> None:
        board = Board.from_pieces(_BOXED_IN)
        assert len(generate_all_moves(board, PieceOwner.BLACK)) == 5

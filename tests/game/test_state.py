"""Tests for GameState."""

from collections.abc import Callable

from hexchess.core.enums import GameOverState, PieceOwner, TileStatusType
from hexchess.core.tile import HighlightStatus
from hexchess.core.types import axial_to_grid, parse_tile_name
from hexchess.game.interfaces import TurnPhase
from hexchess.game.reducer import initial_state, reset_board
from hexchess.game.state import GameState


class TestGameStateDefaults:
    def test_scaffold(self) -> None:
        gs = initial_state()
        assert gs.turn == 0
        assert gs.game_over_state == GameOverState.UNFINISHED
        assert gs.selected is None
        assert not gs.pawn_promotion_flag
        assert gs.board.all_pieces() == []
        assert gs.legal_moves() == []

    def test_turn_parity(self) -> None:
        assert GameState(turn=0).current_player == PieceOwner.WHITE
        assert GameState(turn=1).current_player == PieceOwner.BLACK
        assert GameState(turn=6).current_player == PieceOwner.WHITE


class TestGameStatePhase:
    def test_awaiting_selection_after_reset(self) -> None:
        gs = reset_board(initial_state())
        assert gs.phase == TurnPhase.AWAITING_SELECTION

    def test_move_highlighted(self) -> None:
        gs = reset_board(initial_state())
        tile = gs.board.get_tile_at_axial(parse_tile_name("f6"))
        assert tile is not None
        tile.add_status(
            HighlightStatus(TileStatusType.MOVE_HIGHLIGHT, axial_to_grid(parse_tile_name("f5")))
        )
        assert gs.phase == TurnPhase.MOVE_HIGHLIGHTED

    def test_promotion_and_game_over(self) -> None:
        gs = GameState(pawn_promotion_flag=True)
        assert gs.phase == TurnPhase.AWAITING_PROMOTION_CHOICE
        gs.game_over_state = GameOverState.BLACK_VICTORY
        assert gs.is_game_over
        assert gs.phase == TurnPhase.GAME_OVER

    def test_selected_tile_resolves(self, make_state: Callable[..., GameState]) -> None:
        gs = make_state({"f6": "R"})
        gs.selected = axial_to_grid(parse_tile_name("f6"))
        assert gs.selected_tile is not None
        assert gs.selected_tile.content is not None


class TestGameStateClone:
    def test_clone_is_independent(self) -> None:
        gs = reset_board(initial_state())
        copy = gs.clone()
        assert copy.board == gs.board
        copy.turn = 5
        copy.board.capture_content(copy.board.get_tile_at_axial(parse_tile_name("f5")))
        assert gs.turn == 0
        assert gs.board.get_tile_at_axial(parse_tile_name("f5")).content is not None

    def test_legal_moves_belong_to_current_player(self) -> None:
        gs = reset_board(initial_state())
        white_tags = {p.tag for p in gs.board.pieces(PieceOwner.WHITE)}
        moves = gs.legal_moves()
        assert moves
        assert {m.source_tag for m in moves} <= white_tags

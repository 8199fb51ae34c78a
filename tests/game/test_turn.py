"""Tests for the turn lifecycle: start_turn, execute_move, end_turn, promote."""

from collections.abc import Callable

import pytest

from hexchess.core.enums import GameOverState, MoveType, PieceOwner, PieceType, TileStatusType
from hexchess.core.move import MoveInfo
from hexchess.core.tile import MoveStatus, Tile
from hexchess.core.types import axial_to_grid, parse_tile_name
from hexchess.game.settings import RuleSettings
from hexchess.game.state import GameState
from hexchess.game.turn import end_turn, execute_move, promote, start_turn

StateFactory = Callable[..., GameState]


def _tile(state: GameState, name: str) -> Tile:
    tile = state.board.get_tile_at_axial(parse_tile_name(name))
    assert tile is not None
    return tile


def _move(state: GameState, source: str, target: str) -> MoveInfo:
    move = _tile(state, target).move_from(axial_to_grid(parse_tile_name(source)))
    assert move is not None, f"{source}-{target} is not available"
    return move


class TestStartTurn:
    def test_materialises_moves_for_side_to_move(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f5": "P", "f7": "p"})
        tags = {m.source_tag for m in state.legal_moves()}
        assert "white-pawn-0" in tags
        assert "black-pawn-0" not in tags

    def test_returns_move_count(self, make_state: StateFactory) -> None:
        state = make_state({"f6": "R", "g10": "k", "b1": "K"})
        count = start_turn(state, RuleSettings())
        assert count == len(state.legal_moves())
        assert sum(m.source_tag == "white-rook-0" for m in state.legal_moves()) == 30

    def test_recomputes_threat_markers(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f5": "P"})
        assert _tile(state, "e5").has_marker(TileStatusType.WHITE_THREATENING)
        assert _tile(state, "g5").has_marker(TileStatusType.WHITE_THREATENING)
        assert not _tile(state, "f6").has_marker(TileStatusType.WHITE_THREATENING)
        assert _tile(state, "g9").has_marker(TileStatusType.BLACK_THREATENING)

    def test_threats_follow_pieces(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f5": "P"})
        execute_move(state, _move(state, "f5", "f6"))
        end_turn(state)
        start_turn(state, RuleSettings())
        assert not _tile(state, "e5").has_marker(TileStatusType.WHITE_THREATENING)
        assert _tile(state, "e6").has_marker(TileStatusType.WHITE_THREATENING)

    def test_no_moves_ends_game(self, make_state: StateFactory) -> None:
        settings = RuleSettings(enforce_king_safety=True)
        state = make_state(
            {"f11": "k", "g5": "R", "k6": "R", "e4": "R", "f1": "K"},
            turn=1,
            settings=settings,
        )
        assert state.legal_moves() == []
        assert state.game_over_state == GameOverState.BLACK_STALEMATED

    def test_missing_king_ends_game(self, make_state: StateFactory) -> None:
        state = make_state({"f6": "p", "f5": "P", "f1": "K"}, turn=1)
        assert state.game_over_state == GameOverState.WHITE_VICTORY
        assert state.legal_moves() == []
        assert start_turn(state, RuleSettings()) == 0

    def test_king_safety_filters_pinned_piece(self, make_state: StateFactory) -> None:
        placement = {"f1": "K", "f3": "R", "f9": "r", "a6": "k"}
        loose = make_state(placement)
        strict = make_state(placement, settings=RuleSettings(enforce_king_safety=True))
        assert len(strict.legal_moves()) < len(loose.legal_moves())
        rook_moves = [m for m in strict.legal_moves() if m.source_tag == "white-rook-0"]
        assert all(m.axial.q == 0 for m in rook_moves)


class TestExecuteMove:
    def test_moves_piece_and_syncs_position(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f6": "R"})
        rook = _tile(state, "f6").content
        promoted = execute_move(state, _move(state, "f6", "f9"))
        assert not promoted
        assert _tile(state, "f6").content is None
        assert _tile(state, "f9").content is rook
        assert rook.axial == parse_tile_name("f9")
        assert rook.pos == axial_to_grid(parse_tile_name("f9"))
        assert rook.has_moved

    def test_capture_removes_target(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f6": "R", "f9": "n"})
        execute_move(state, _move(state, "f6", "f9"))
        assert len(state.board.pieces(PieceOwner.BLACK)) == 1

    def test_double_step_marks_skipped_tile(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f5": "P"})
        execute_move(state, _move(state, "f5", "f7"))
        assert _tile(state, "f6").has_marker(TileStatusType.EN_PASSANT_WHITE)

    def test_single_step_leaves_no_mark(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f5": "P"})
        execute_move(state, _move(state, "f5", "f6"))
        assert not any(
            t.has_marker(TileStatusType.EN_PASSANT_WHITE) for t in state.board.playable_tiles()
        )

    def test_en_passant_removes_passed_pawn(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "g5": "P", "f7": "p"}, turn=1)
        execute_move(state, _move(state, "f7", "f5"))
        end_turn(state)
        start_turn(state, RuleSettings())

        capture = _move(state, "g5", "f6")
        assert capture.type == MoveType.EN_PASSANT_CAPTURE
        execute_move(state, capture)
        assert _tile(state, "f5").content is None
        assert _tile(state, "f6").content is not None
        assert _tile(state, "f6").content.owner == PieceOwner.WHITE
        assert state.board.pieces(PieceOwner.BLACK)[0].type == PieceType.KING

    def test_promotion_raises_gate(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "a6": "k", "f10": "P"})
        assert execute_move(state, _move(state, "f10", "f11"))
        assert state.pawn_promotion_flag
        assert state.promotion_tile == axial_to_grid(parse_tile_name("f11"))

    def test_stale_move_rejected(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f6": "R"})
        move = _move(state, "f6", "f9")
        state.board.capture_content(_tile(state, "f6"))
        with pytest.raises(ValueError):
            execute_move(state, move)


class TestEndTurn:
    def test_advances_and_clears(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f6": "R"})
        state.selected = axial_to_grid(parse_tile_name("f6"))
        end_turn(state)
        assert state.turn == 1
        assert state.selected is None
        assert not any(
            isinstance(s, MoveStatus) for t in state.board.playable_tiles() for s in t.statuses
        )

    def test_expires_opponent_en_passant_only(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "g10": "k", "f5": "P", "e7": "p"})
        execute_move(state, _move(state, "f5", "f7"))
        end_turn(state)
        # White's mark survives black's reply window.
        assert _tile(state, "f6").has_marker(TileStatusType.EN_PASSANT_WHITE)
        start_turn(state, RuleSettings())
        end_turn(state)
        assert not _tile(state, "f6").has_marker(TileStatusType.EN_PASSANT_WHITE)


class TestPromote:
    @pytest.mark.parametrize(
        "choice", [PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN]
    )
    def test_replaces_pawn(self, make_state: StateFactory, choice: PieceType) -> None:
        state = make_state({"g1": "K", "a6": "k", "f10": "P"})
        pawn = _tile(state, "f10").content
        execute_move(state, _move(state, "f10", "f11"))
        piece = promote(state, choice, RuleSettings())
        assert piece.type == choice
        assert piece.owner == PieceOwner.WHITE
        assert piece.id != pawn.id
        assert piece.tag == f"white-{choice.name.lower()}-promo-0"
        assert piece.has_moved
        assert _tile(state, "f11").content is piece
        assert not state.pawn_promotion_flag
        assert state.promotion_tile is None

    def test_invalid_choice_uses_default(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "a6": "k", "f10": "P"})
        execute_move(state, _move(state, "f10", "f11"))
        piece = promote(state, PieceType.KING, RuleSettings(default_promotion=PieceType.ROOK))
        assert piece.type == PieceType.ROOK

    def test_invalid_default_falls_back_to_queen(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "a6": "k", "f10": "P"})
        execute_move(state, _move(state, "f10", "f11"))
        piece = promote(state, PieceType.PAWN, RuleSettings(default_promotion=PieceType.PAWN))
        assert piece.type == PieceType.QUEEN

    def test_integer_choice_is_coerced(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "a6": "k", "f10": "P"})
        execute_move(state, _move(state, "f10", "f11"))
        piece = promote(state, 3, RuleSettings())  # type: ignore[arg-type]
        assert piece.type == PieceType.ROOK
        assert piece.tag == "white-rook-promo-0"

    def test_nothing_pending(self, make_state: StateFactory) -> None:
        state = make_state({"g1": "K", "a6": "k"})
        with pytest.raises(ValueError):
            promote(state, PieceType.QUEEN, RuleSettings())

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator, Mapping

import pytest

from hexchess.core.board import Board
from hexchess.game.settings import RuleSettings
from hexchess.game.state import GameState
from hexchess.game.turn import start_turn

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


StateFactory = Callable[..., GameState]


@pytest.fixture
def make_state() -> StateFactory:
    """Build a started turn on a board given as ``{tile name: diagram char}``."""

    def _make(
        placement: Mapping[str, str],
        *,
        turn: int = 0,
        settings: RuleSettings | None = None,
    ) -> GameState:
        state = GameState(board=Board.from_pieces(placement), turn=turn)
        start_turn(state, settings or RuleSettings())
        return state

    return _make

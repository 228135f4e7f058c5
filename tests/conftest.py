"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from gambit.core.board import Board
from gambit.game.controller import GameController


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def controller() -> GameController:
    return GameController()

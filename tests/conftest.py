"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.types import parse_square
from chessrules.game.state import GameState


def play_moves(state: GameState, *moves: str) -> GameState:
    """Play coordinate moves such as ``"e2e4"`` through the validating API."""
    for move in moves:
        state = state.play(parse_square(move[:2]), parse_square(move[2:4]))
    return state


@pytest.fixture
def play() -> Callable[..., GameState]:
    return play_moves


@pytest.fixture
def initial_state() -> GameState:
    return GameState.initial()

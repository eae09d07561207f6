"""GameController: select / submit flow on top of immutable game states.

Keeps the current :class:`GameState` plus the states before it, validates
submitted moves and notifies listeners through simple callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import cast

from chessrules.core.enums import Color, GameResult
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import MoveRecord
from chessrules.core.types import Square
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]  # record, state after
GameOverCallback = Callable[[GameResult, GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass
class Tally:
    """Finished-game counts across a session."""

    white: int = 0
    black: int = 0
    draws: int = 0

    def record(self, result: GameResult) -> None:
        if result == GameResult.WHITE_WINS:
            self.white += 1
        elif result == GameResult.BLACK_WINS:
            self.black += 1
        elif result == GameResult.DRAW:
            self.draws += 1


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a game: validates moves, keeps history, notifies listeners.

    Methods are meant to be called from a single thread.  The states handed
    to callbacks are immutable, so listeners may keep them.
    """

    __slots__ = ("_state", "_history", "tally", "events")

    def __init__(self) -> None:
        self._state = GameState.initial()
        self._history: list[GameState] = []
        self.tally = Tally()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def history(self) -> tuple[GameState, ...]:
        """States preceding the current one, oldest first."""
        return tuple(self._history)

    @property
    def side_to_move(self) -> Color:
        return self._state.turn

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, state: GameState | None = None) -> None:
        """Start over from *state*, or the standard starting position."""
        self._state = state if state is not None else GameState.initial()
        self._history = []

    def select(self, sq: Square) -> list[Square]:
        """Legal destinations for *sq* if it holds a piece of the side to move."""
        if self._state.is_game_over or not sq.is_valid:
            return []
        piece = self._state.board[sq]
        if piece is None or piece.color != self._state.turn:
            return []
        return self._state.legal_moves(sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply the move if legal. Returns True if it was applied."""
        try:
            next_state = self._state.play(from_sq, to_sq)
        except IllegalMoveError as exc:
            _LOGGER.debug("Rejected move: %s", exc)
            return False

        self._history.append(self._state)
        self._state = next_state

        self._emit_move(cast(MoveRecord, next_state.last_move))

        if next_state.is_game_over:
            self._finish()
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._history.append(self._state)
        self._state = self._state.resign(color)
        self._finish()

    def undo_move(self) -> bool:
        """Return to the previous state. Returns True on success."""
        if self._state.is_game_over or not self._history:
            return False
        self._state = self._history.pop()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self) -> None:
        result = self._state.result
        self.tally.record(result)
        _LOGGER.info("Game over: %s", result.name)
        for cb in self.events.on_game_over:
            cb(result, self._state)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

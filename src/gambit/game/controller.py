"""GameController: the in-process API a presentation layer talks to.

Coordinates: Board, legality filter, move executor, rules evaluation.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.enums import GamePhase
from gambit.core.errors import IllegalMoveError
from gambit.core.executor import apply_move
from gambit.core.fen import board_from_fen
from gambit.core.legality import legal_moves
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.rules import GameState, Rules
from gambit.core.types import Square, ensure_square
from gambit.game.interfaces import IGameController
from gambit.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]  # move, state after it
GameOverCallback = Callable[[GameState], None]
PhaseCallback = Callable[[GamePhase], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns the single live board and serialises every change to it.

    Thread-safety: all methods run synchronously and must be called from a
    single thread (the UI thread). A host that calls in from several threads
    has to provide its own locking.
    """

    __slots__ = (
        "_settings",
        "_board",
        "_state",
        "_selected",
        "_selected_moves",
        "events",
    )

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._board = board_from_fen(self._settings.start_fen)
        self._state = Rules.initial_state(self._board)
        self._selected: Square | None = None
        self._selected_moves: list[Move] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        """A snapshot of the live board; changes to it are not reflected back."""
        return self._board.copy()

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def highlighted(self) -> tuple[Square, ...]:
        """Destinations reachable from the selected square.

        Always empty when ``settings.highlight_legal_moves`` is off; selection
        and moving are unaffected by that flag.
        """
        if not self._settings.highlight_legal_moves:
            return ()
        return tuple(m.to_sq for m in self._selected_moves)

    # ── IGameController impl ─────────────────────────────────────────────

    def piece_at(self, square: Square) -> Piece | None:
        return self._board[ensure_square(square)]

    def legal_moves(self, square: Square) -> list[Move]:
        sq = ensure_square(square)
        if self._state.is_terminal:
            return []
        return legal_moves(self._board, sq)

    def apply_move(self, move: Move) -> GameState:
        """Play *move* and return the resulting state.

        *move* must be one of the current ``legal_moves`` results. Anything
        else, or any move after the game has ended, is a broken precondition
        and raises :class:`IllegalMoveError` without touching the board.
        """
        if self._state.is_terminal:
            _LOGGER.warning("Move %s rejected: game is over", move)
            raise IllegalMoveError(f"Game is over ({self._state.phase.name})")

        from_sq = ensure_square(move.from_sq)
        ensure_square(move.to_sq)
        if move not in legal_moves(self._board, from_sq):
            _LOGGER.warning(
                "Move %s rejected: not legal for %s", move, self._state.side_to_move
            )
            raise IllegalMoveError(f"Illegal move: {move}")

        previous_phase = self._state.phase
        apply_move(self._board, move)
        self._clear_selection()
        self._state = Rules.evaluate(self._board)
        _LOGGER.debug("Applied %s -> %s", move, self._state.status_text)

        self._emit_move(move)
        if self._state.phase != previous_phase:
            self._emit_phase(self._state.phase)
        if self._state.is_terminal:
            _LOGGER.info("Game over: %s", self._state.status_text)
            self._emit_game_over()
        return self._state

    def reset(self) -> None:
        self._board = board_from_fen(self._settings.start_fen)
        self._state = Rules.initial_state(self._board)
        self._clear_selection()
        _LOGGER.info("Game reset")
        for cb in self.events.on_reset:
            cb()
        self._emit_phase(self._state.phase)

    # ── Selection (click-to-move) ────────────────────────────────────────

    def select(self, square: Square) -> list[Move]:
        """Select *square* and return its legal moves.

        Selecting an empty square or an opponent piece clears the selection.
        """
        sq = ensure_square(square)
        piece = self._board[sq]
        if (
            self._state.is_terminal
            or piece is None
            or piece.color != self._board.side_to_move
        ):
            self._clear_selection()
            return []
        self._selected = sq
        self._selected_moves = legal_moves(self._board, sq)
        return list(self._selected_moves)

    def click(self, square: Square) -> GameState | None:
        """Two-step click interaction.

        If a piece is selected and one of its legal moves lands on *square*,
        that move is played and the new state returned. Otherwise *square*
        becomes the new selection (or the selection is cleared) and None is
        returned. Clicks are ignored once the game is over.
        """
        sq = ensure_square(square)
        if self._state.is_terminal:
            self._clear_selection()
            return None
        for move in self._selected_moves:
            if move.to_sq == sq:
                return self.apply_move(move)
        self.select(sq)
        return None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _clear_selection(self) -> None:
        self._selected = None
        self._selected_moves = []

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._state)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

"""Tests for GameController: the engine's external API."""

import logging

import pytest

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, GamePhase, PieceType
from gambit.core.errors import IllegalMoveError, InvalidSquareError
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.rules import GameState
from gambit.core.types import (
    A7, D5, D6, E1, E2, E4, E5, E7, G1, H4, Square, parse_square,
)
from gambit.game.controller import GameController
from gambit.game.settings import GameSettings


def _move(ctrl: GameController, uci: str) -> Move:
    """Find the legal move for 'e2e4'-style text."""
    to_sq = parse_square(uci[2:4])
    matches = [m for m in ctrl.legal_moves(parse_square(uci[:2])) if m.to_sq == to_sq]
    assert len(matches) == 1, f"no unique legal move {uci}: {matches}"
    return matches[0]


def _play(ctrl: GameController, *ucis: str) -> GameState:
    state = ctrl.state
    for uci in ucis:
        state = ctrl.apply_move(_move(ctrl, uci))
    return state


FOOLS_MATE = ("f2f3", "e7e5", "g2g4", "d8h4")


class TestQueries:
    def test_piece_at(self, controller: GameController) -> None:
        assert controller.piece_at(E1) == Piece(Color.WHITE, PieceType.KING)
        assert controller.piece_at((4, 4)) is None

    def test_initial_phase(self, controller: GameController) -> None:
        assert controller.state.phase == GamePhase.INITIAL
        assert controller.state.side_to_move == Color.WHITE
        assert controller.state.status_text == "White to move"

    def test_legal_moves_from_start(self, controller: GameController) -> None:
        assert {m.to_sq for m in controller.legal_moves(E2)} == {
            parse_square("e3"),
            E4,
        }
        assert controller.legal_moves(E7) == []

    def test_board_is_a_snapshot(self, controller: GameController) -> None:
        snapshot = controller.board
        snapshot[E2] = None
        assert controller.piece_at(E2) is not None

    @pytest.mark.parametrize("bad", [(8, 0), (0, 8), (-1, 0), "e2", None])
    def test_invalid_square_everywhere(self, controller: GameController, bad) -> None:
        with pytest.raises(InvalidSquareError):
            controller.piece_at(bad)
        with pytest.raises(InvalidSquareError):
            controller.legal_moves(bad)
        with pytest.raises(InvalidSquareError):
            controller.select(bad)
        with pytest.raises(InvalidSquareError):
            controller.click(bad)


class TestApplyMove:
    def test_first_move(self, controller: GameController) -> None:
        state = controller.apply_move(_move(controller, "e2e4"))
        assert state.phase == GamePhase.ONGOING
        assert state.side_to_move == Color.BLACK
        assert not state.in_check
        assert controller.piece_at(E4) == Piece(Color.WHITE, PieceType.PAWN)

    def test_illegal_move_rejected(self, controller: GameController) -> None:
        with pytest.raises(IllegalMoveError):
            controller.apply_move(Move(E2, E5))
        assert controller.state.side_to_move == Color.WHITE

    def test_wrong_side_rejected(self, controller: GameController) -> None:
        with pytest.raises(IllegalMoveError):
            controller.apply_move(Move(E7, E5))

    def test_rejected_move_leaves_board_untouched(
        self, controller: GameController
    ) -> None:
        before = controller.board
        with pytest.raises(IllegalMoveError):
            controller.apply_move(Move(E2, E5))
        assert controller.board == before
        assert controller.state.phase == GamePhase.INITIAL

    def test_rejection_is_not_a_square_error(self, controller: GameController) -> None:
        with pytest.raises(IllegalMoveError) as excinfo:
            controller.apply_move(Move(E2, E5))
        assert not isinstance(excinfo.value, InvalidSquareError)

    def test_check_flag(self, controller: GameController) -> None:
        state = _play(controller, "e2e4", "f7f6", "d1h5")
        assert state.phase == GamePhase.ONGOING
        assert state.in_check
        assert state.status_text == "Black to move (Check)"

    def test_fools_mate(self, controller: GameController) -> None:
        state = _play(controller, *FOOLS_MATE)
        assert state.phase == GamePhase.CHECKMATE
        assert state.winner == Color.BLACK
        assert state.status_text == "White is in checkmate. Black wins!"
        assert controller.piece_at(H4) == Piece(Color.BLACK, PieceType.QUEEN)

    def test_scholars_mate(self, controller: GameController) -> None:
        state = _play(
            controller, "e2e4", "e7e5", "f1c4", "b8c6", "d1h5", "g8f6", "h5f7"
        )
        assert state.phase == GamePhase.CHECKMATE
        assert state.winner == Color.WHITE

    def test_stalemate(self) -> None:
        ctrl = GameController(GameSettings(start_fen="7k/8/5K2/8/8/8/8/6Q1 w - - 0 1"))
        state = _play(ctrl, "g1g6")
        assert state.phase == GamePhase.STALEMATE
        assert state.winner is None
        assert state.status_text == "Stalemate. Draw."

    def test_no_moves_after_game_over(self, controller: GameController) -> None:
        _play(controller, *FOOLS_MATE)
        assert controller.legal_moves(E2) == []
        with pytest.raises(IllegalMoveError):
            controller.apply_move(Move(E2, parse_square("e3")))


class TestEnPassantThroughController:
    def test_capture_window_is_one_move(self, controller: GameController) -> None:
        _play(controller, "e2e4", "a7a6", "e4e5", "d7d5")
        assert Move(E5, D6, en_passant=True) in controller.legal_moves(E5)

        _play(controller, "a2a3", "a6a5")
        assert all(not m.en_passant for m in controller.legal_moves(E5))

    def test_capture_removes_passed_pawn(self, controller: GameController) -> None:
        _play(controller, "e2e4", "a7a6", "e4e5", "d7d5")
        controller.apply_move(Move(E5, D6, en_passant=True))
        assert controller.piece_at(D6) == Piece(Color.WHITE, PieceType.PAWN)
        assert controller.piece_at(D5) is None
        assert controller.piece_at(E5) is None


class TestCastlingThroughController:
    def test_kingside_castle(self, controller: GameController) -> None:
        _play(controller, "e2e4", "e7e5", "g1f3", "b8c6", "f1c4", "g8f6")
        castle = Move(E1, G1, castling=True)
        assert castle in controller.legal_moves(E1)
        controller.apply_move(castle)
        assert controller.piece_at(G1) == Piece(Color.WHITE, PieceType.KING)
        assert controller.piece_at(parse_square("f1")) == Piece(
            Color.WHITE, PieceType.ROOK
        )
        assert not controller.board.castling & CastlingRights.WHITE_BOTH


class TestPromotionThroughController:
    def test_auto_queen(self) -> None:
        ctrl = GameController(GameSettings(start_fen="8/P7/8/8/8/8/8/k6K w - - 0 1"))
        moves = ctrl.legal_moves(A7)
        assert len(moves) == 1
        assert moves[0].promotion == PieceType.QUEEN
        state = ctrl.apply_move(moves[0])
        assert ctrl.piece_at(parse_square("a8")) == Piece(Color.WHITE, PieceType.QUEEN)
        assert state.in_check


class TestReset:
    def test_reset_restores_everything(self, controller: GameController) -> None:
        _play(controller, "e2e4", "e7e5", "e1e2", "d7d5")
        controller.reset()
        assert controller.board == Board.initial()
        assert controller.board.castling == CastlingRights.ALL
        assert controller.board.en_passant is None
        assert controller.state.phase == GamePhase.INITIAL
        assert controller.state.side_to_move == Color.WHITE

    def test_reset_after_checkmate(self, controller: GameController) -> None:
        _play(controller, *FOOLS_MATE)
        controller.reset()
        assert len(controller.legal_moves(E2)) == 2

    def test_reset_uses_configured_start(self) -> None:
        fen = "7k/8/5K2/8/8/8/8/6Q1 w - - 0 1"
        ctrl = GameController(GameSettings(start_fen=fen))
        _play(ctrl, "g1g6")
        ctrl.reset()
        assert ctrl.piece_at(G1) == Piece(Color.WHITE, PieceType.QUEEN)


class TestSelection:
    def test_click_select_then_move(self, controller: GameController) -> None:
        assert controller.click(E2) is None
        assert controller.selected == E2
        assert set(controller.highlighted) == {parse_square("e3"), E4}

        state = controller.click(E4)
        assert state is not None
        assert state.side_to_move == Color.BLACK
        assert controller.selected is None
        assert controller.highlighted == ()

    def test_click_opponent_piece_clears(self, controller: GameController) -> None:
        controller.click(E2)
        assert controller.click(E7) is None
        assert controller.selected is None

    def test_click_other_own_piece_reselects(self, controller: GameController) -> None:
        controller.click(E2)
        controller.click(G1)
        assert controller.selected == G1
        assert len(controller.highlighted) == 2

    def test_click_unreachable_square(self, controller: GameController) -> None:
        controller.click(E2)
        assert controller.click(Square(3, 4)) is None  # e5
        assert controller.selected is None
        assert controller.state.side_to_move == Color.WHITE

    def test_clicks_ignored_after_game_over(self, controller: GameController) -> None:
        _play(controller, *FOOLS_MATE)
        assert controller.click(E2) is None
        assert controller.selected is None
        assert controller.select(E2) == []

    def test_highlight_disabled_only_hides_highlights(self) -> None:
        ctrl = GameController(GameSettings(highlight_legal_moves=False))
        assert len(ctrl.select(E2)) == 2
        assert ctrl.selected == E2
        assert ctrl.highlighted == ()
        assert ctrl.click(E4) is not None

    def test_highlight_enabled_by_default(self, controller: GameController) -> None:
        assert controller.settings.highlight_legal_moves
        controller.select(E2)
        assert set(controller.highlighted) == {parse_square("e3"), E4}


class TestEvents:
    def test_move_event_fires(self, controller: GameController) -> None:
        events: list[tuple[str, Color]] = []
        controller.events.on_move.append(
            lambda m, st: events.append((m.uci, st.side_to_move))
        )
        _play(controller, "e2e4")
        assert events == [("e2e4", Color.BLACK)]

    def test_phase_and_game_over_events(self, controller: GameController) -> None:
        phases: list[GamePhase] = []
        results: list[GameState] = []
        controller.events.on_phase_changed.append(phases.append)
        controller.events.on_game_over.append(results.append)
        _play(controller, *FOOLS_MATE)
        assert phases == [GamePhase.ONGOING, GamePhase.CHECKMATE]
        assert len(results) == 1
        assert results[0].winner == Color.BLACK

    def test_reset_event(self, controller: GameController) -> None:
        calls: list[str] = []
        phases: list[GamePhase] = []
        controller.events.on_reset.append(lambda: calls.append("reset"))
        controller.events.on_phase_changed.append(phases.append)
        controller.reset()
        assert calls == ["reset"]
        assert phases == [GamePhase.INITIAL]


class TestLogging:
    def test_game_over_logged(
        self, controller: GameController, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="gambit.game.controller")
        _play(controller, *FOOLS_MATE)
        assert "Game over: White is in checkmate. Black wins!" in caplog.text

    def test_rejected_move_logged(
        self, controller: GameController, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="gambit.game.controller")
        with pytest.raises(IllegalMoveError):
            controller.apply_move(Move(E2, E5))
        assert "rejected" in caplog.text

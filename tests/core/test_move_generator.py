"""Tests for raw moves, the legality filter, castling and attack detection."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move_generator import (
    MoveGenerator,
    has_any_legal_move,
    is_in_check,
    is_square_attacked,
    legal_moves,
    raw_moves,
)
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, A2, A3, A4, A5, A8,
    B1, B3, B5, B6, B8,
    C1, C2, C3, C5, C6,
    D1, D2, D4, D5, D6, D8,
    E1, E2, E3, E4, E5, E6, E7, E8,
    F1, F2, F3, F5,
    G1, G8,
    H1, H5, H8,
    Square,
)


def _moved(char: str) -> Piece:
    return Piece.from_char(char, has_moved=True)


# ── Raw moves ────────────────────────────────────────────────────────────────


class TestRawPawn:
    def test_initial_double_step(self) -> None:
        assert raw_moves(Board.initial(), E2) == [E3, E4]

    def test_blocked_pawn(self) -> None:
        board = Board.from_placement({E2: "P", E3: "n"})
        assert raw_moves(board, E2) == []

    def test_double_step_blocked_on_landing(self) -> None:
        board = Board.from_placement({E2: "P", E4: "n"})
        assert raw_moves(board, E2) == [E3]

    def test_no_double_step_off_start_row(self) -> None:
        board = Board.from_placement({E3: _moved("P")})
        assert raw_moves(board, E3) == [E4]

    def test_captures_enemy_only(self) -> None:
        board = Board.from_placement({E4: _moved("P"), D5: "p", F5: "N"})
        assert set(raw_moves(board, E4)) == {E5, D5}

    def test_black_pawn_moves_down(self) -> None:
        board = Board.initial()
        assert raw_moves(board, Square(1, 3)) == [Square(2, 3), Square(3, 3)]

    def test_en_passant_target(self) -> None:
        board = Board.from_placement({E5: _moved("P"), D5: _moved("p")})
        assert set(raw_moves(board, E5, en_passant=D6)) == {E6, D6}
        assert raw_moves(board, E5) == [E6]

    def test_attack_only_reports_both_diagonals(self) -> None:
        board = Board.from_placement({E4: _moved("P"), E5: "p", F5: "N"})
        assert set(raw_moves(board, E4, attack_only=True)) == {D5, F5}

    def test_attack_only_on_edge_file(self) -> None:
        board = Board.from_placement({A4: _moved("P")})
        assert raw_moves(board, A4, attack_only=True) == [B5]


class TestRawPieces:
    def test_knight_in_corner(self) -> None:
        board = Board.from_placement({A1: "N"})
        assert set(raw_moves(board, A1)) == {B3, C2}

    def test_knight_skips_friendly(self) -> None:
        assert set(raw_moves(Board.initial(), B1)) == {A3, C3}

    def test_bishop_blocked_at_start(self) -> None:
        assert raw_moves(Board.initial(), C1) == []

    def test_rook_stops_at_pieces(self) -> None:
        board = Board.from_placement({A1: "R", A4: "P", D1: "n"})
        assert set(raw_moves(board, A1)) == {A2, A3, B1, C1, D1}

    def test_queen_on_empty_board(self) -> None:
        board = Board.from_placement({D4: "Q"})
        assert len(raw_moves(board, D4)) == 27

    def test_king_raw_moves_exclude_castling(self) -> None:
        board = Board.from_placement({E1: "K", A1: "R", H1: "R"})
        assert set(raw_moves(board, E1)) == {D1, D2, E2, F2, F1}

    def test_empty_and_off_board_squares(self) -> None:
        board = Board.initial()
        assert raw_moves(board, E4) == []
        assert raw_moves(board, Square(8, 0)) == []
        assert raw_moves(board, Square(-1, 4)) == []


# ── Legality filter ──────────────────────────────────────────────────────────


class TestLegalMoves:
    def test_initial_position_has_twenty_moves(self) -> None:
        board = Board.initial()
        total = sum(
            len(legal_moves(board, sq)) for sq, _ in board.occupied(Color.WHITE)
        )
        assert total == 20

    def test_pinned_piece_cannot_move(self) -> None:
        board = Board.from_placement({E1: "K", E2: "B", E8: "r", A8: "k"})
        assert raw_moves(board, E2) != []
        assert legal_moves(board, E2) == []

    def test_king_cannot_step_into_attack(self) -> None:
        board = Board.from_placement({E1: "K", A2: "r", H8: "k"})
        assert set(legal_moves(board, E1)) == {D1, F1}

    def test_only_blocking_move_when_in_check(self) -> None:
        board = Board.from_placement({E1: "K", A2: "R", E8: "r", H8: "k"})
        assert legal_moves(board, A2) == [E2]

    def test_king_captures_undefended_attacker(self) -> None:
        board = Board.from_placement({E1: "K", E2: "q", E8: "k"})
        assert legal_moves(board, E1) == [E2]

    def test_king_cannot_capture_defended_attacker(self) -> None:
        board = Board.from_placement({E1: "K", E2: "q", E7: "r", A8: "k"})
        assert legal_moves(board, E1) == []

    def test_en_passant_capture_is_legal(self) -> None:
        board = Board.from_placement(
            {E1: "K", E8: "k", E5: _moved("P"), D5: _moved("p")}
        )
        assert set(legal_moves(board, E5, D6)) == {E6, D6}

    def test_en_passant_cannot_expose_king(self) -> None:
        # Removing both pawns from the fifth rank opens the rook onto a5.
        board = Board.from_placement(
            {A5: "K", B5: _moved("P"), C5: _moved("p"), H5: "r", H8: "k"}
        )
        assert legal_moves(board, B5, C6) == [B6]

    def test_en_passant_target_is_trusted(self) -> None:
        # The target alone marks the capture; the passed pawn is not looked up.
        board = Board.from_placement({E1: "K", E8: "k", E5: _moved("P")})
        assert set(legal_moves(board, E5, D6)) == {E6, D6}

    def test_empty_and_off_board_squares(self) -> None:
        board = Board.initial()
        assert legal_moves(board, E4) == []
        assert legal_moves(board, Square(3, 9)) == []

    def test_never_leaves_own_king_in_check(self) -> None:
        board = Board.from_placement(
            {E1: "K", D2: "P", F2: "N", B5: "b", E8: "r", A8: "k"}
        )
        for sq, piece in board.occupied(Color.WHITE):
            for to_sq in legal_moves(board, sq):
                after = board.copy()
                after[to_sq] = piece
                after[sq] = None
                assert not is_in_check(after, Color.WHITE), f"{sq}->{to_sq}"

    def test_board_is_not_mutated(self) -> None:
        board = Board.initial()
        snapshot = board.copy()
        for sq, _ in board.occupied(Color.WHITE):
            legal_moves(board, sq)
        assert board == snapshot


# ── Castling ─────────────────────────────────────────────────────────────────


class TestCastling:
    def test_both_sides_offered(self) -> None:
        board = Board.from_placement({E1: "K", A1: "R", H1: "R", E8: "k"})
        assert set(legal_moves(board, E1)) == {D1, D2, E2, F2, F1, C1, G1}

    def test_black_kingside(self) -> None:
        board = Board.from_placement({E8: "k", H8: "r", E1: "K"})
        assert G8 in legal_moves(board, E8)

    def test_blocked_by_piece_between(self) -> None:
        board = Board.from_placement({E1: "K", A1: "R", B1: "N", H1: "R", E8: "k"})
        moves = legal_moves(board, E1)
        assert C1 not in moves
        assert G1 in moves

    def test_path_attacked(self) -> None:
        board = Board.from_placement({E1: "K", A1: "R", H1: "R", D8: "r", H8: "k"})
        moves = legal_moves(board, E1)
        assert C1 not in moves
        assert G1 in moves

    def test_destination_attacked(self) -> None:
        board = Board.from_placement({E1: "K", A1: "R", H1: "R", G8: "r", A8: "k"})
        moves = legal_moves(board, E1)
        assert G1 not in moves
        assert C1 in moves

    def test_b_file_attack_does_not_block_queenside(self) -> None:
        board = Board.from_placement({E1: "K", A1: "R", B8: "r", H8: "k"})
        assert C1 in legal_moves(board, E1)

    def test_not_out_of_check(self) -> None:
        board = Board.from_placement({E1: "K", A1: "R", H1: "R", E8: "r", A8: "k"})
        moves = legal_moves(board, E1)
        assert C1 not in moves
        assert G1 not in moves

    def test_king_has_moved(self) -> None:
        board = Board.from_placement({E1: _moved("K"), A1: "R", H1: "R", E8: "k"})
        moves = legal_moves(board, E1)
        assert C1 not in moves
        assert G1 not in moves

    def test_rook_has_moved(self) -> None:
        board = Board.from_placement({E1: "K", A1: _moved("R"), H1: "R", E8: "k"})
        moves = legal_moves(board, E1)
        assert C1 not in moves
        assert G1 in moves

    def test_missing_or_wrong_rook(self) -> None:
        board = Board.from_placement({E1: "K", A1: "N", H1: "B", E8: "k"})
        moves = legal_moves(board, E1)
        assert C1 not in moves
        assert G1 not in moves


# ── Attack detection ─────────────────────────────────────────────────────────


class TestAttacks:
    def test_initial_attacks(self) -> None:
        board = Board.initial()
        assert is_square_attacked(board, F3, Color.WHITE)
        assert not is_square_attacked(board, E4, Color.WHITE)
        assert is_square_attacked(board, Square(2, 5), Color.BLACK)  # f6

    def test_pawn_attacks_friendly_square(self) -> None:
        board = Board.from_placement({D2: "P", E3: "P"})
        assert is_square_attacked(board, E3, Color.WHITE)

    def test_pieces_do_not_attack_friendly_squares(self) -> None:
        assert not is_square_attacked(Board.initial(), E2, Color.WHITE)

    def test_in_check(self) -> None:
        board = Board.from_placement({E1: "K", E8: "r", A8: "k"})
        assert is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_pawn_gives_check(self) -> None:
        board = Board.from_placement({E1: "K", D2: "p", A8: "k"})
        assert is_in_check(board, Color.WHITE)

    def test_missing_king_is_not_in_check(self) -> None:
        board = Board.from_placement({E8: "k", E1: "R"})
        assert not is_in_check(board, Color.WHITE)

    @pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
    def test_initial_not_in_check(self, color: Color) -> None:
        assert not is_in_check(Board.initial(), color)


class TestAnyLegalMove:
    def test_initial(self) -> None:
        assert has_any_legal_move(Board.initial(), Color.WHITE)
        assert MoveGenerator(Board.initial()).has_any_legal_move(Color.BLACK)

    def test_stalemated_king(self) -> None:
        board = Board.from_placement({H8: "k", Square(2, 5): "K", Square(2, 6): "Q"})
        assert not has_any_legal_move(board, Color.BLACK)

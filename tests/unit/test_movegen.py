"""
走法生成单元测试
"""

import pytest

from xiangqi_core.board import Board
from xiangqi_core.exceptions import InvalidPositionError, PieceMismatchError
from xiangqi_core.movegen import (
    GENERATORS,
    ORTHOGONAL,
    RAYS,
    all_moves,
    attacks,
    legal_destinations,
)
from xiangqi_core.piece import create_piece
from xiangqi_core.types import Color, Move, PieceType, Position


def targets(board: Board, square: str) -> set[str]:
    pos = Position.from_notation(square)
    return {p.to_notation() for p in legal_destinations(board, pos, board.get_piece(pos))}


class TestInitialPosition:
    """开局局面的走法"""

    @pytest.fixture
    def board(self):
        return Board.initial()

    def test_corner_rook(self, board: Board):
        """开局车只能走到兵前两格"""
        rook = board.get_piece(Position(0, 0))
        assert legal_destinations(board, Position(0, 0), rook) == {Position(1, 0), Position(2, 0)}

    def test_horse(self, board: Board):
        """开局马被车和相蹩住两条腿"""
        assert targets(board, "b0") == {"a2", "c2"}

    def test_cannon(self, board: Board):
        assert targets(board, "b2") == {
            "a2", "c2", "d2", "e2", "f2", "g2",
            "b1", "b3", "b4", "b5", "b6",
            "b9",
        }  # fmt: skip

    def test_king_and_advisor(self, board: Board):
        assert targets(board, "e0") == {"e1"}
        assert targets(board, "d0") == {"e1"}

    def test_elephant(self, board: Board):
        assert targets(board, "c0") == {"a2", "e2"}

    def test_pawn(self, board: Board):
        assert targets(board, "e3") == {"e4"}
        assert targets(board, "e6") == {"e5"}

    def test_all_moves_count(self, board: Board):
        """开局每方 44 种走法"""
        assert len(all_moves(board, Color.RED)) == 44
        assert len(all_moves(board, Color.BLACK)) == 44

    def test_all_moves_scan_order(self, board: Board):
        moves = all_moves(board, Color.RED)
        origins = [m.from_pos for m in moves]
        assert origins == sorted(origins)
        assert moves[0] == Move(Position(0, 0), Position(1, 0))


class TestKingAndAdvisor:
    """将/帅、士/仕不出九宫"""

    def test_king_in_palace_center(self, make_board):
        board = make_board({"e1": "K"})
        assert targets(board, "e1") == {"e0", "e2", "d1", "f1"}

    def test_king_on_palace_edge(self, make_board):
        board = make_board({"d0": "K"})
        assert targets(board, "d0") == {"d1", "e0"}

    def test_black_king_palace(self, make_board):
        board = make_board({"f7": "k"})
        assert targets(board, "f7") == {"f8", "e7"}

    def test_king_cannot_land_on_own_piece(self, make_board):
        board = make_board({"e1": "K", "e2": "A", "d1": "p"})
        assert targets(board, "e1") == {"e0", "f1", "d1"}

    def test_advisor_center(self, make_board):
        board = make_board({"e8": "a"})
        assert targets(board, "e8") == {"d9", "f9", "d7", "f7"}

    def test_advisor_corner(self, make_board):
        board = make_board({"f2": "A"})
        assert targets(board, "f2") == {"e1"}


class TestElephant:
    """象/相"""

    def test_elephant_cannot_cross_river(self, make_board):
        board = make_board({"c4": "E"})
        assert targets(board, "c4") == {"a2", "e2"}

    def test_black_elephant_cannot_cross_river(self, make_board):
        board = make_board({"e5": "e"})
        assert targets(board, "e5") == {"c7", "g7"}

    def test_elephant_eye_blocked(self, make_board):
        """塞象眼"""
        board = make_board({"e2": "E", "d1": "p", "f3": "P"})
        assert targets(board, "e2") == {"c4", "g0"}


class TestHorse:
    """马"""

    def test_horse_in_center(self, make_board):
        board = make_board({"e4": "H"})
        assert targets(board, "e4") == {"d6", "f6", "d2", "f2", "c5", "c3", "g5", "g3"}

    def test_horse_leg_blocked(self, make_board):
        """蹩马腿：马脚上的棋子不论颜色都会挡住"""
        board = make_board({"e4": "H", "e5": "p", "d4": "P"})
        assert targets(board, "e4") == {"d2", "f2", "g5", "g3"}

    def test_horse_on_edge(self, make_board):
        board = make_board({"a0": "h"})
        assert targets(board, "a0") == {"b2", "c1"}


class TestRook:
    """车"""

    def test_rook_on_empty_board(self, make_board):
        board = make_board({"e4": "R"})
        assert len(targets(board, "e4")) == 17

    def test_rook_stops_at_pieces(self, make_board):
        board = make_board({"a0": "R", "a3": "p", "c0": "P"})
        assert targets(board, "a0") == {"a1", "a2", "a3", "b0"}


class TestCannon:
    """炮"""

    def test_cannon_without_screen_cannot_capture(self, make_board):
        board = make_board({"a0": "C", "a5": "r"})
        assert targets(board, "a0") == {"a1", "a2", "a3", "a4"} | {
            f"{c}0" for c in "bcdefghi"
        }

    def test_cannon_captures_over_one_screen(self, make_board):
        board = make_board({"a0": "C", "a5": "p", "a8": "r"})
        assert {"a1", "a2", "a3", "a4", "a8"} <= targets(board, "a0")
        assert "a5" not in targets(board, "a0")
        assert "a9" not in targets(board, "a0")

    def test_cannon_two_screens(self, make_board):
        """隔两个子不能吃"""
        board = make_board({"a0": "C", "a5": "p", "a6": "P", "a8": "r"})
        assert "a6" not in targets(board, "a0")
        assert "a8" not in targets(board, "a0")

    def test_cannon_cannot_capture_own_piece(self, make_board):
        board = make_board({"a0": "C", "a5": "p", "a8": "R"})
        assert "a8" not in targets(board, "a0")


class TestPawn:
    """兵/卒"""

    def test_pawn_before_river(self, make_board):
        board = make_board({"e3": "P", "c6": "p"})
        assert targets(board, "e3") == {"e4"}
        assert targets(board, "c6") == {"c5"}

    def test_pawn_after_river(self, make_board):
        board = make_board({"e5": "P", "c4": "p"})
        assert targets(board, "e5") == {"e6", "d5", "f5"}
        assert targets(board, "c4") == {"c3", "b4", "d4"}

    def test_pawn_on_last_row(self, make_board):
        """到底线后只能横走"""
        board = make_board({"a9": "P"})
        assert targets(board, "a9") == {"b9"}


class TestLegalDestinations:
    """参数校验与不变式"""

    def test_invalid_position(self):
        board = Board.initial()
        rook = create_piece(PieceType.ROOK, Color.RED)
        with pytest.raises(InvalidPositionError):
            legal_destinations(board, Position(10, 0), rook)

    def test_piece_mismatch(self):
        board = Board.initial()
        rook = board.get_piece(Position(0, 0))
        with pytest.raises(PieceMismatchError):
            legal_destinations(board, Position(4, 4), rook)
        with pytest.raises(PieceMismatchError):
            legal_destinations(board, Position(0, 1), rook)

    def test_rays_match_stepping(self):
        """预计算的直线路线与逐格推进一致"""
        assert len(RAYS) == 90
        for pos, lines in RAYS.items():
            for (dr, dc), line in zip(ORTHOGONAL, lines):
                expected = []
                step = Position(pos.row + dr, pos.col + dc)
                while step.is_valid():
                    expected.append(step)
                    step = Position(step.row + dr, step.col + dc)
                assert list(line) == expected
            # 任意格子横向 8 格、纵向 9 格
            assert sum(len(line) for line in lines) == 17

    def test_every_piece_type_has_generator(self):
        assert set(GENERATORS) == set(PieceType)

    def test_attacks(self):
        board = Board.initial()
        cannon = board.get_piece(Position(2, 1))
        assert attacks(board, Position(2, 1), cannon, Position(9, 1))
        assert not attacks(board, Position(2, 1), cannon, Position(7, 1))

    def test_random_boards_destinations_are_sane(self, random_boards):
        """目标格都在棋盘内、不落在己方棋子上，且不修改棋盘"""
        for board in random_boards:
            snapshot = dict((pos, piece) for pos, piece in board.pieces())
            for pos, piece in board.pieces():
                for dest in legal_destinations(board, pos, piece):
                    assert dest.is_valid()
                    assert dest != pos
                    occupant = board.get_piece(dest)
                    assert occupant is None or occupant.color != piece.color
                    if piece.piece_type in (PieceType.KING, PieceType.ADVISOR):
                        assert dest.is_in_palace(piece.color)
                    if piece.piece_type == PieceType.ELEPHANT:
                        assert dest.is_on_own_side(piece.color)
            assert dict(board.pieces()) == snapshot

    def test_all_moves_matches_destinations(self, random_boards):
        for board in random_boards:
            for color in Color:
                expected = {
                    Move(pos, dest)
                    for pos, piece in board.pieces(color)
                    for dest in legal_destinations(board, pos, piece)
                }
                moves = all_moves(board, color)
                assert set(moves) == expected
                assert len(moves) == len(expected)

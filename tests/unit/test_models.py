"""
序列化模型测试
"""

import json

import pytest
from pydantic import ValidationError

from xiangqi_core.analysis import analyze
from xiangqi_core.board import Board
from xiangqi_core.exceptions import InvalidBoardError
from xiangqi_core.models import AnalysisModel, BoardModel, MoveModel, PositionModel
from xiangqi_core.types import Color, Move, PieceType, Position


class TestPositionModel:
    def test_bounds(self):
        assert PositionModel(row=9, col=8).to_position() == Position(9, 8)
        with pytest.raises(ValidationError):
            PositionModel(row=10, col=0)
        with pytest.raises(ValidationError):
            PositionModel(row=0, col=-1)


class TestMoveModel:
    def test_aliases(self):
        model = MoveModel.from_move(Move.from_notation("b2e2"))
        data = model.model_dump(by_alias=True)
        assert data["from"] == {"row": 2, "col": 1}
        assert data["to"] == {"row": 2, "col": 4}
        assert data["notation"] == "b2e2"

    def test_parse_by_alias(self):
        model = MoveModel.model_validate(
            {"from": {"row": 0, "col": 0}, "to": {"row": 1, "col": 0}}
        )
        assert model.to_move() == Move.from_notation("a0a1")


class TestBoardModel:
    def test_round_trip(self):
        board = Board.initial()
        model = BoardModel.from_board(board, Color.BLACK)
        loaded = BoardModel.model_validate_json(model.model_dump_json())
        assert loaded.turn == Color.BLACK
        assert loaded.to_board() == board

    def test_parse_layout(self):
        data = {
            "pieces": [
                {"type": "king", "color": "red", "position": {"row": 0, "col": 4}},
                {"type": "rook", "color": "black", "position": {"row": 5, "col": 4}},
            ],
            "turn": "black",
        }
        model = BoardModel.model_validate(data)
        board = model.to_board()
        assert model.turn == Color.BLACK
        rook = board.get_piece(Position(5, 4))
        assert rook.piece_type == PieceType.ROOK
        assert rook.color == Color.BLACK

    def test_unknown_piece_type(self):
        with pytest.raises(ValidationError):
            BoardModel.model_validate(
                {"pieces": [{"type": "queen", "color": "red", "position": {"row": 0, "col": 0}}]}
            )

    def test_duplicate_position(self):
        piece = {"type": "pawn", "color": "red", "position": {"row": 3, "col": 0}}
        model = BoardModel.model_validate({"pieces": [piece, piece]})
        with pytest.raises(InvalidBoardError):
            model.to_board()


class TestAnalysisModel:
    def test_from_analysis(self, make_board):
        board = make_board({"e9": "k", "a9": "R", "a8": "R", "d0": "K"})
        model = AnalysisModel.from_analysis(analyze(board, Color.BLACK))
        data = json.loads(model.model_dump_json())

        assert data["result"] == "red_win"
        assert data["side_to_move"] == "black"
        assert data["black"]["checkmated"] is True
        assert data["black"]["king"] == {"row": 9, "col": 4}
        assert data["black"]["checkers"][0]["type"] == "rook"
        assert data["black"]["king_escapes"] == {"e8": True, "d9": True, "f9": True}
        assert data["red"]["in_check"] is False

    def test_missing_king(self, make_board):
        board = make_board({"e0": "K"})
        model = AnalysisModel.from_analysis(analyze(board, Color.BLACK))
        assert model.black.king is None
        assert model.black.checkmated

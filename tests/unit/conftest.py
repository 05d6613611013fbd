"""
测试公共 fixture
"""

import random

import pytest

from xiangqi_core.board import Board
from xiangqi_core.fen import CHAR_TO_PIECE
from xiangqi_core.piece import create_piece
from xiangqi_core.types import BOARD_COLS, BOARD_ROWS, Color, PieceType, Position


def build_board(layout: dict[str, str]) -> Board:
    """{"e0": "K", "e9": "k", ...}：大写红方，小写黑方"""
    pieces = {}
    for square, char in layout.items():
        color = Color.RED if char.isupper() else Color.BLACK
        pieces[Position.from_notation(square)] = create_piece(CHAR_TO_PIECE[char.lower()], color)
    return Board(pieces)


def random_board(rng: random.Random, n_pieces: int) -> Board:
    """双方各一个将，其余棋子随机摆放（不保证符合开局可达性）"""
    pieces = {}
    for color in Color:
        rows = (0, 1, 2) if color == Color.RED else (7, 8, 9)
        pieces[Position(rng.choice(rows), rng.randint(3, 5))] = create_piece(PieceType.KING, color)

    others = [t for t in PieceType if t != PieceType.KING]
    while len(pieces) < n_pieces + 2:
        pos = Position(rng.randrange(BOARD_ROWS), rng.randrange(BOARD_COLS))
        if pos in pieces:
            continue
        pieces[pos] = create_piece(rng.choice(others), rng.choice(list(Color)))
    return Board(pieces)


@pytest.fixture
def make_board():
    return build_board


@pytest.fixture
def make_random_board():
    return random_board


@pytest.fixture
def random_boards():
    """固定种子的随机局面"""
    rng = random.Random(20240101)
    return [random_board(rng, rng.randint(4, 20)) for _ in range(60)]

"""
Xiangqi Core

Rules engine and adversarial search for Chinese chess (xiangqi):
move generation, check / checkmate detection and automated move selection.
"""

from xiangqi_core.ai import AIConfig, choose_move
from xiangqi_core.board import Board
from xiangqi_core.exceptions import (
    FenError,
    InvalidBoardError,
    InvalidPositionError,
    MoveError,
    PieceMismatchError,
    XiangqiError,
)
from xiangqi_core.fen import INITIAL_FEN, board_from_fen, parse_fen
from xiangqi_core.logging import logger
from xiangqi_core.movegen import all_moves, legal_destinations
from xiangqi_core.piece import Piece, create_piece
from xiangqi_core.rules import (
    find_checkers,
    game_result,
    is_checkmate,
    is_in_check,
    is_legal_move,
    legal_moves,
)
from xiangqi_core.types import Color, GameResult, Move, PieceType, Position

# 作为库被引用时不输出日志，configure_logging 会重新启用
logger.disable("xiangqi_core")

__version__ = "0.1.0"

__all__ = [
    "AIConfig",
    "Board",
    "Color",
    "FenError",
    "GameResult",
    "INITIAL_FEN",
    "InvalidBoardError",
    "InvalidPositionError",
    "Move",
    "MoveError",
    "Piece",
    "PieceMismatchError",
    "PieceType",
    "Position",
    "XiangqiError",
    "all_moves",
    "board_from_fen",
    "choose_move",
    "create_piece",
    "find_checkers",
    "game_result",
    "is_checkmate",
    "is_in_check",
    "is_legal_move",
    "legal_destinations",
    "legal_moves",
    "parse_fen",
]

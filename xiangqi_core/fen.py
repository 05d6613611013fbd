"""
FEN 局面记法

## 格式

    <棋盘> [<回合>]

### 棋盘部分

从 row 9 到 row 0（黑方底线到红方底线），每行用 `/` 分隔。

- 红方：K(帅) A(仕) E(相) H(马) R(车) C(炮) P(兵)
- 黑方：k a e h r c p
- 空格：数字 (1-9)

### 回合

`r`（红方走）或 `b`（黑方走），省略时为红方。

## 示例

初始局面：
    rheakaehr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RHEAKAEHR r

## 走法格式

`b2e2`：列字母 + 行号，起点在前终点在后。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xiangqi_core.exceptions import FenError, XiangqiError
from xiangqi_core.piece import create_piece
from xiangqi_core.types import BOARD_COLS, BOARD_ROWS, Color, Move, PieceType, Position

if TYPE_CHECKING:
    from xiangqi_core.board import Board


# 棋子类型 -> 字符
PIECE_TO_CHAR: dict[PieceType, str] = {
    PieceType.KING: "k",
    PieceType.ADVISOR: "a",
    PieceType.ELEPHANT: "e",
    PieceType.HORSE: "h",
    PieceType.ROOK: "r",
    PieceType.CANNON: "c",
    PieceType.PAWN: "p",
}

# 字符 -> 棋子类型
CHAR_TO_PIECE: dict[str, PieceType] = {v: k for k, v in PIECE_TO_CHAR.items()}

INITIAL_FEN = "rheakaehr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RHEAKAEHR r"


@dataclass
class FenState:
    """FEN 解析结果"""

    board: Board
    turn: Color


def board_to_fen(board: Board, turn: Color | None = None) -> str:
    """棋盘转 FEN，给出 turn 时附带回合"""
    rows = []
    for row in range(BOARD_ROWS - 1, -1, -1):
        row_str = ""
        empty_count = 0
        for col in range(BOARD_COLS):
            piece = board.get_piece(Position(row, col))
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                row_str += str(empty_count)
                empty_count = 0
            char = PIECE_TO_CHAR[piece.piece_type]
            row_str += char.upper() if piece.color == Color.RED else char
        if empty_count > 0:
            row_str += str(empty_count)
        rows.append(row_str)

    fen = "/".join(rows)
    if turn is not None:
        fen += " r" if turn == Color.RED else " b"
    return fen


def parse_fen(fen: str) -> FenState:
    """解析 FEN 字符串

    Raises:
        FenError: 格式错误或局面不合法
    """
    from xiangqi_core.board import Board

    parts = fen.strip().split()
    if not 1 <= len(parts) <= 2:
        raise FenError(f"Invalid FEN format: expected '<board> [<turn>]', got: {fen!r}")

    turn = Color.RED
    if len(parts) == 2:
        turn_str = parts[1].lower()
        if turn_str not in ("r", "b", "w"):
            raise FenError(f"Invalid turn: {parts[1]}")
        turn = Color.BLACK if turn_str == "b" else Color.RED

    pieces = _parse_board(parts[0])
    try:
        board = Board.from_pieces(pieces)
    except XiangqiError as e:
        raise FenError(str(e)) from e
    return FenState(board=board, turn=turn)


def _parse_board(board_str: str) -> list:
    """解析棋盘字符串，返回 (位置, 棋子) 列表"""
    rows = board_str.split("/")
    if len(rows) != BOARD_ROWS:
        raise FenError(f"Invalid board: expected {BOARD_ROWS} rows, got {len(rows)}")

    pieces = []
    for row_idx, row_str in enumerate(rows):
        # FEN 从上往下是 row 9 到 row 0
        row = BOARD_ROWS - 1 - row_idx
        col = 0
        for ch in row_str:
            if ch.isdigit():
                col += int(ch)
            elif ch.lower() in CHAR_TO_PIECE:
                if col >= BOARD_COLS:
                    raise FenError(f"Row {row} has more than {BOARD_COLS} columns")
                color = Color.RED if ch.isupper() else Color.BLACK
                pieces.append((Position(row, col), create_piece(CHAR_TO_PIECE[ch.lower()], color)))
                col += 1
            else:
                raise FenError(f"Invalid character in board: {ch}")

        if col != BOARD_COLS:
            raise FenError(f"Row {row} has {col} columns, expected {BOARD_COLS}")

    return pieces


def board_from_fen(fen: str) -> Board:
    """只取 FEN 的棋盘部分"""
    return parse_fen(fen).board


def parse_move(move_str: str) -> Move:
    """解析走法字符串，如 b2e2"""
    try:
        return Move.from_notation(move_str.strip())
    except ValueError as e:
        raise FenError(f"Invalid move: {move_str}") from e


def move_to_str(move: Move) -> str:
    return move.to_notation()

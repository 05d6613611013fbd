"""
核心类型定义

位置、阵营、棋子类型、走法等基础值类型
"""

from enum import Enum
from typing import NamedTuple

# 棋盘尺寸
BOARD_ROWS = 10
BOARD_COLS = 9

# 列号 <-> 字母（记谱用）
COL_TO_CHAR = "abcdefghi"
CHAR_TO_COL = {c: i for i, c in enumerate(COL_TO_CHAR)}


class Color(Enum):
    """阵营，红方先行"""

    RED = "red"
    BLACK = "black"

    @property
    def opposite(self) -> "Color":
        return Color.BLACK if self == Color.RED else Color.RED

    @property
    def forward(self) -> int:
        """前进方向的行增量"""
        return 1 if self == Color.RED else -1


class PieceType(Enum):
    """棋子类型"""

    # 将/帅
    KING = "king"
    # 士/仕
    ADVISOR = "advisor"
    # 象/相
    ELEPHANT = "elephant"
    # 马
    HORSE = "horse"
    # 车
    ROOK = "rook"
    # 炮
    CANNON = "cannon"
    # 卒/兵
    PAWN = "pawn"


class Position(NamedTuple):
    """棋盘位置 (row, col)

    row: 0-9 (0 是红方底线，9 是黑方底线)
    col: 0-8 (从左到右)
    """

    row: int
    col: int

    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_ROWS and 0 <= self.col < BOARD_COLS

    def is_in_palace(self, color: Color) -> bool:
        """是否在该方九宫格内"""
        if not (3 <= self.col <= 5):
            return False
        if color == Color.RED:
            return 0 <= self.row <= 2
        return 7 <= self.row <= 9

    def is_on_own_side(self, color: Color) -> bool:
        """是否在该方半场（未过河）"""
        if color == Color.RED:
            return 0 <= self.row <= 4
        return 5 <= self.row <= 9

    def __add__(self, other: tuple[int, int]) -> "Position":
        return Position(self.row + other[0], self.col + other[1])

    def to_notation(self) -> str:
        """坐标记谱，如 e0"""
        return f"{COL_TO_CHAR[self.col]}{self.row}"

    @classmethod
    def from_notation(cls, text: str) -> "Position":
        if len(text) != 2 or text[0] not in CHAR_TO_COL or not text[1].isdigit():
            raise ValueError(f"Invalid square: {text}")
        return cls(int(text[1]), CHAR_TO_COL[text[0]])


class Move(NamedTuple):
    """走法：把 from_pos 上的棋子移到 to_pos（隐含吃子）"""

    from_pos: Position
    to_pos: Position

    def to_notation(self) -> str:
        """转换为坐标记谱，如 b2e2"""
        return f"{self.from_pos.to_notation()}{self.to_pos.to_notation()}"

    @classmethod
    def from_notation(cls, notation: str) -> "Move":
        # 格式: "b2e2"
        if len(notation) != 4:
            raise ValueError(f"Invalid move format: {notation}")
        return cls(Position.from_notation(notation[:2]), Position.from_notation(notation[2:]))

    def __str__(self) -> str:
        return self.to_notation()


class GameResult(Enum):
    """对局结果"""

    ONGOING = "ongoing"
    RED_WIN = "red_win"
    BLACK_WIN = "black_win"
    DRAW = "draw"

    @classmethod
    def win_for(cls, color: Color) -> "GameResult":
        return cls.RED_WIN if color == Color.RED else cls.BLACK_WIN

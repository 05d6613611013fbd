"""
棋子定义

棋子是不可变的值对象：类型 + 阵营 + 稳定 ID。
ID 只用于界面关联，规则判断从不使用。走法规则见 movegen。
"""

from dataclasses import dataclass

from xiangqi_core.types import Color, PieceType


@dataclass(frozen=True, slots=True)
class Piece:
    """棋子"""

    piece_type: PieceType
    color: Color
    piece_id: str = ""

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    def __repr__(self) -> str:
        return f"{self.piece_type.value}({self.color.value})"

    def to_dict(self) -> dict:
        return {
            "type": self.piece_type.value,
            "color": self.color.value,
            "id": self.piece_id,
        }


def create_piece(piece_type: PieceType, color: Color, piece_id: str = "") -> Piece:
    """工厂函数：创建棋子"""
    return Piece(piece_type, color, piece_id)


# 底线棋子排列（按列）
BACK_RANK = [
    PieceType.ROOK,
    PieceType.HORSE,
    PieceType.ELEPHANT,
    PieceType.ADVISOR,
    PieceType.KING,
    PieceType.ADVISOR,
    PieceType.ELEPHANT,
    PieceType.HORSE,
    PieceType.ROOK,
]

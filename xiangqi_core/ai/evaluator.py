"""
棋局评估器

提供局面评分和单步走法评分，用于搜索排序和叶子节点估值
"""

from xiangqi_core.board import Board
from xiangqi_core.exceptions import MoveError
from xiangqi_core.rules import is_checkmate, is_in_check
from xiangqi_core.types import Color, Move, PieceType, Position

# 棋子协同作战的类型
ATTACKING_TYPES = (PieceType.ROOK, PieceType.HORSE, PieceType.CANNON)


class Evaluator:
    """棋局评估器

    基于子力价值、位置、吃子和将军的综合评估
    """

    # 棋子基础价值
    PIECE_VALUES = {
        PieceType.KING: 10000,
        PieceType.ROOK: 90,
        PieceType.CANNON: 45,
        PieceType.HORSE: 40,
        PieceType.ADVISOR: 20,
        PieceType.ELEPHANT: 20,
        PieceType.PAWN: 10,
    }

    # 吃子收益 = (被吃子价值 - 吃子方价值) * CAPTURE_WEIGHT
    CAPTURE_WEIGHT = 15
    KING_CAPTURE_BONUS = 1_000_000
    SELF_CHECK_PENALTY = 2000
    CHECK_BONUS = 1000
    CHECKMATE_BONUS = 50000
    SUPPORT_BONUS = 5
    KING_GUARD_BONUS = 10
    CENTER_BONUS = 10
    RIVER_PAWN_BONUS = 15

    def position_value(self, pos: Position, color: Color) -> float:
        """位置分：越往前越高，中路三列额外加分"""
        advanced = pos.row if color == Color.RED else 9 - pos.row
        center = 3 if abs(pos.col - 4) <= 1 else 0
        return advanced * 2 + center

    def evaluate(self, board: Board, color: Color) -> float:
        """评估局面

        返回正值表示有利于指定颜色，负值表示不利
        """
        score = 0.0
        for pos, piece in board.pieces():
            value = self.PIECE_VALUES[piece.piece_type] + self.position_value(pos, piece.color)
            if piece.color == color:
                score += value
            else:
                score -= value
        return score

    def evaluate_move(self, board: Board, move: Move) -> float:
        """评估单步走法对走棋方的价值"""
        piece = board.get_piece(move.from_pos)
        if piece is None:
            raise MoveError(f"No piece at position {tuple(move.from_pos)}")
        color = piece.color
        to_pos = move.to_pos
        score = 0.0

        # 吃子：用低价值棋子吃高价值棋子更好
        target = board.get_piece(to_pos)
        if target is not None:
            exchange = self.PIECE_VALUES[target.piece_type] - self.PIECE_VALUES[piece.piece_type]
            score += exchange * self.CAPTURE_WEIGHT
            if target.piece_type == PieceType.KING:
                score += self.KING_CAPTURE_BONUS

        after = board.with_move(move)

        # 走后自己被将军
        if is_in_check(after, color):
            score -= self.SELF_CHECK_PENALTY

        # 走后将军对方，将死更好
        if is_in_check(after, color.opposite):
            score += self.CHECK_BONUS
            if is_checkmate(after, color.opposite):
                score += self.CHECKMATE_BONUS

        # 向前推进
        gain = self.position_value(to_pos, color) - self.position_value(move.from_pos, color)
        score += gain * 2

        # 车马炮附近有己方棋子
        if piece.piece_type in ATTACKING_TYPES:
            nearby = 0
            for pos, other in after.pieces(color):
                if pos == to_pos or other.piece_type == PieceType.KING:
                    continue
                if abs(pos.row - to_pos.row) + abs(pos.col - to_pos.col) <= 3:
                    nearby += 1
            score += nearby * self.SUPPORT_BONUS

        # 将/帅身边有己方棋子护卫
        if piece.piece_type == PieceType.KING:
            guards = 0
            for offset in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                neighbor = after.get_piece(to_pos + offset)
                if neighbor is not None and neighbor.color == color:
                    guards += 1
            score += guards * self.KING_GUARD_BONUS

        # 控制河口中路
        if to_pos.row in (4, 5) and 3 <= to_pos.col <= 5:
            score += self.CENTER_BONUS

        # 过河兵
        if piece.piece_type == PieceType.PAWN and not to_pos.is_on_own_side(color):
            score += self.RIVER_PAWN_BONUS

        return score

"""
局面分析

汇总双方的将军/将死状态、正在将军的棋子以及将/帅每个落点是否安全，
用于调试和命令行展示。
"""

from dataclasses import dataclass, field

from xiangqi_core.board import Board
from xiangqi_core.movegen import destinations
from xiangqi_core.piece import Piece
from xiangqi_core.rules import find_checkers, game_result, is_checkmate, is_in_check
from xiangqi_core.types import Color, GameResult, Move, Position


@dataclass
class SideReport:
    """一方的状态"""

    color: Color
    king: Position | None
    in_check: bool
    checkmated: bool
    # 正在将军的对方棋子
    checkers: list[tuple[Position, Piece]] = field(default_factory=list)
    # 将/帅每个落点走后是否仍被将军
    king_escapes: dict[Position, bool] = field(default_factory=dict)


@dataclass
class Analysis:
    """局面分析结果"""

    side_to_move: Color
    result: GameResult
    sides: dict[Color, SideReport]

    @property
    def current(self) -> SideReport:
        return self.sides[self.side_to_move]

    @property
    def opponent(self) -> SideReport:
        return self.sides[self.side_to_move.opposite]


def _side_report(board: Board, color: Color) -> SideReport:
    king_pos = board.find_king(color)
    in_check = is_in_check(board, color)
    report = SideReport(
        color=color,
        king=king_pos,
        in_check=in_check,
        checkmated=is_checkmate(board, color),
    )
    if king_pos is None or not in_check:
        return report

    report.checkers = find_checkers(board, color)
    king = board.get_piece(king_pos)
    for to_pos in destinations(board, king_pos, king):
        after = board.with_move(Move(king_pos, to_pos))
        report.king_escapes[to_pos] = is_in_check(after, color)
    return report


def analyze(board: Board, side_to_move: Color) -> Analysis:
    """分析局面"""
    return Analysis(
        side_to_move=side_to_move,
        result=game_result(board, side_to_move),
        sides={color: _side_report(board, color) for color in Color},
    )

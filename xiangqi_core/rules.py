"""
将军与将死判断

- is_in_check: 对方任一棋子的目标格包含己方将/帅即为被将军
- is_checkmate: 被将军且无法通过 移将 / 吃掉将军的棋子 / 垫子 解除
- legal_moves / game_result: 供对局管理方在每步之后调用

所有"试走"都在临时快照上进行，传入的棋盘不会被修改。
"""

from typing import Iterable

from xiangqi_core.board import Board
from xiangqi_core.movegen import all_moves, attacks, destinations
from xiangqi_core.piece import Piece
from xiangqi_core.types import Color, GameResult, Move, PieceType, Position


def is_in_check(board: Board, color: Color) -> bool:
    """检查指定阵营的将/帅是否被将军

    没有将/帅时视为被将军（已输的局面）。
    """
    king_pos = board.find_king(color)
    if king_pos is None:
        return True

    return any(
        attacks(board, pos, piece, king_pos) for pos, piece in board.pieces(color.opposite)
    )


def find_checkers(board: Board, color: Color) -> list[tuple[Position, Piece]]:
    """找到所有正在将军的对方棋子"""
    king_pos = board.find_king(color)
    if king_pos is None:
        return []
    return [
        (pos, piece)
        for pos, piece in board.pieces(color.opposite)
        if attacks(board, pos, piece, king_pos)
    ]


def _clears_check(board: Board, move: Move, color: Color) -> bool:
    """在临时快照上试走，走后是否不再被将军"""
    return not is_in_check(board.with_move(move), color)


def _can_reach_safely(board: Board, color: Color, targets: Iterable[Position]) -> bool:
    """己方是否有棋子能走到 targets 中某一格并解除将军"""
    targets = set(targets)
    for pos, piece in board.pieces(color):
        for to_pos in destinations(board, pos, piece):
            if to_pos in targets and _clears_check(board, Move(pos, to_pos), color):
                return True
    return False


def squares_between(a: Position, b: Position) -> list[Position]:
    """同一行或同一列上 a、b 之间（不含两端）的格子，不共线时为空"""
    if a.row == b.row:
        step = 1 if b.col > a.col else -1
        return [Position(a.row, col) for col in range(a.col + step, b.col, step)]
    if a.col == b.col:
        step = 1 if b.row > a.row else -1
        return [Position(row, a.col) for row in range(a.row + step, b.row, step)]
    return []


def cannon_screen(board: Board, cannon_pos: Position, target: Position) -> Position | None:
    """炮与目标之间的第一个棋子（炮架）"""
    for pos in squares_between(cannon_pos, target):
        if board.get_piece(pos) is not None:
            return pos
    return None


def horse_leg(horse_pos: Position, target: Position) -> Position:
    """马跳向 target 时的马脚位置"""
    dr = target.row - horse_pos.row
    dc = target.col - horse_pos.col
    if abs(dr) == 2:
        return Position(horse_pos.row + dr // 2, horse_pos.col)
    return Position(horse_pos.row, horse_pos.col + dc // 2)


def interposition_squares(
    board: Board, attacker_pos: Position, attacker: Piece, king_pos: Position
) -> list[Position]:
    """可以垫子阻挡将军的空格

    - 车、兵：攻击者与将之间的格子（兵贴身将军时为空）
    - 炮：炮架与将之间的格子，以及炮与炮架之间的格子（再垫一子成为双架）
    - 马：马脚
    """
    if attacker.piece_type in (PieceType.ROOK, PieceType.PAWN):
        return squares_between(attacker_pos, king_pos)

    if attacker.piece_type == PieceType.CANNON:
        screen = cannon_screen(board, attacker_pos, king_pos)
        if screen is None:
            return []
        return squares_between(screen, king_pos) + squares_between(attacker_pos, screen)

    if attacker.piece_type == PieceType.HORSE:
        return [horse_leg(attacker_pos, king_pos)]

    return []


def is_checkmate(board: Board, color: Color) -> bool:
    """检查指定阵营是否被将死

    依次尝试：移将、(多子将军时)穷举所有走法、吃掉将军的棋子、垫子、炮架离线。
    任一方法解除将军即不是将死。
    """
    if not is_in_check(board, color):
        return False

    king_pos = board.find_king(color)
    if king_pos is None:
        # 将/帅已被吃
        return True
    king = board.get_piece(king_pos)

    # 方法1：移将到安全位置
    for to_pos in destinations(board, king_pos, king):
        if _clears_check(board, Move(king_pos, to_pos), color):
            return False

    checkers = find_checkers(board, color)
    if not checkers:
        return False

    # 多子将军：一步无法同时吃掉或挡住两个攻击者，只能穷举
    if len(checkers) > 1:
        return not any(_clears_check(board, move, color) for move in all_moves(board, color))

    attacker_pos, attacker = checkers[0]

    # 方法2：吃掉正在将军的棋子
    if _can_reach_safely(board, color, [attacker_pos]):
        return False

    # 方法3：垫子
    blocking = interposition_squares(board, attacker_pos, attacker, king_pos)
    if blocking and _can_reach_safely(board, color, blocking):
        return False

    # 方法4：己方炮架离开炮线
    # 炮架走开既不吃子也不垫子，前三种方法都覆盖不到
    if attacker.piece_type == PieceType.CANNON:
        screen = cannon_screen(board, attacker_pos, king_pos)
        screen_piece = board.get_piece(screen) if screen is not None else None
        if screen_piece is not None and screen_piece.color == color:
            for to_pos in destinations(board, screen, screen_piece):
                if _clears_check(board, Move(screen, to_pos), color):
                    return False

    return True


def is_legal_move(board: Board, move: Move, color: Color) -> bool:
    """走法是否属于该方且走后不被将军"""
    piece = board.get_piece(move.from_pos)
    if piece is None or piece.color != color:
        return False
    if move.to_pos not in destinations(board, move.from_pos, piece):
        return False
    return _clears_check(board, move, color)


def legal_moves(board: Board, color: Color) -> list[Move]:
    """一方所有走后不被将军的走法"""
    return [move for move in all_moves(board, color) if _clears_check(board, move, color)]


def game_result(board: Board, side_to_move: Color) -> GameResult:
    """判断对局结果

    轮到走棋的一方被将死则对方胜；无子可走但未被将军判和。
    """
    if is_checkmate(board, side_to_move):
        return GameResult.win_for(side_to_move.opposite)
    if not legal_moves(board, side_to_move):
        return GameResult.DRAW
    return GameResult.ONGOING

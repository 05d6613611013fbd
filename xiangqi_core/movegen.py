"""
走法生成

七种棋子各自的目标格算法。结果只保证"在棋盘内、不落在己方棋子上"，
不检查走后是否被将军（那是 rules.legal_moves 的职责）。
"""

from typing import Callable

from xiangqi_core.board import Board
from xiangqi_core.exceptions import InvalidPositionError, PieceMismatchError
from xiangqi_core.piece import Piece
from xiangqi_core.types import BOARD_COLS, BOARD_ROWS, Color, Move, PieceType, Position

ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# (马脚偏移, 该方向的两个落点)
HORSE_LEGS = (
    ((-1, 0), ((-2, -1), (-2, 1))),
    ((1, 0), ((2, -1), (2, 1))),
    ((0, -1), ((-1, -2), (1, -2))),
    ((0, 1), ((-1, 2), (1, 2))),
)


def _build_rays() -> dict[Position, tuple[tuple[Position, ...], ...]]:
    """每个格子四个直线方向上由近到远的格子"""
    rays = {}
    for row in range(BOARD_ROWS):
        for col in range(BOARD_COLS):
            pos = Position(row, col)
            directions = []
            for dr, dc in ORTHOGONAL:
                line = []
                step = pos + (dr, dc)
                while step.is_valid():
                    line.append(step)
                    step = step + (dr, dc)
                directions.append(tuple(line))
            rays[pos] = tuple(directions)
    return rays


# 车、炮的滑动路线
RAYS = _build_rays()


def _can_land(board: Board, pos: Position, color: Color) -> bool:
    """目标格为空或是对方棋子"""
    target = board.get_piece(pos)
    return target is None or target.color != color


def king_moves(board: Board, pos: Position, color: Color) -> list[Position]:
    """将/帅：直走一格，不出九宫"""
    moves = []
    for offset in ORTHOGONAL:
        new_pos = pos + offset
        if new_pos.is_in_palace(color) and _can_land(board, new_pos, color):
            moves.append(new_pos)
    return moves


def advisor_moves(board: Board, pos: Position, color: Color) -> list[Position]:
    """士/仕：斜走一格，不出九宫"""
    moves = []
    for offset in DIAGONAL:
        new_pos = pos + offset
        if new_pos.is_in_palace(color) and _can_land(board, new_pos, color):
            moves.append(new_pos)
    return moves


def elephant_moves(board: Board, pos: Position, color: Color) -> list[Position]:
    """象/相：走田字，象眼不能有子，不能过河"""
    moves = []
    for dr, dc in DIAGONAL:
        new_pos = pos + (dr * 2, dc * 2)
        if not (new_pos.is_valid() and new_pos.is_on_own_side(color)):
            continue
        # 塞象眼
        if board.get_piece(pos + (dr, dc)) is not None:
            continue
        if _can_land(board, new_pos, color):
            moves.append(new_pos)
    return moves


def horse_moves(board: Board, pos: Position, color: Color) -> list[Position]:
    """马：走日字，马脚不能有子"""
    moves = []
    for leg_offset, targets in HORSE_LEGS:
        leg_pos = pos + leg_offset
        # 蹩马腿
        if not leg_pos.is_valid() or board.get_piece(leg_pos) is not None:
            continue
        for offset in targets:
            new_pos = pos + offset
            if new_pos.is_valid() and _can_land(board, new_pos, color):
                moves.append(new_pos)
    return moves


def rook_moves(board: Board, pos: Position, color: Color) -> list[Position]:
    """车：直线滑动，遇子停止，可吃第一个对方棋子"""
    moves = []
    for line in RAYS[pos]:
        for new_pos in line:
            target = board.get_piece(new_pos)
            if target is None:
                moves.append(new_pos)
            else:
                if target.color != color:
                    moves.append(new_pos)
                break
    return moves


def cannon_moves(board: Board, pos: Position, color: Color) -> list[Position]:
    """炮：不隔子时走到任意空格；隔一个炮架时只能吃架后第一个对方棋子"""
    moves = []
    for line in RAYS[pos]:
        found_screen = False
        for new_pos in line:
            target = board.get_piece(new_pos)
            if not found_screen:
                if target is None:
                    moves.append(new_pos)
                else:
                    found_screen = True
            elif target is not None:
                if target.color != color:
                    moves.append(new_pos)
                break
    return moves


def pawn_moves(board: Board, pos: Position, color: Color) -> list[Position]:
    """兵/卒：过河前只能前进，过河后可左右，永不后退"""
    moves = []
    forward_pos = pos + (color.forward, 0)
    if forward_pos.is_valid() and _can_land(board, forward_pos, color):
        moves.append(forward_pos)

    if not pos.is_on_own_side(color):
        for dc in (-1, 1):
            side_pos = pos + (0, dc)
            if side_pos.is_valid() and _can_land(board, side_pos, color):
                moves.append(side_pos)
    return moves


GENERATORS: dict[PieceType, Callable[[Board, Position, Color], list[Position]]] = {
    PieceType.KING: king_moves,
    PieceType.ADVISOR: advisor_moves,
    PieceType.ELEPHANT: elephant_moves,
    PieceType.HORSE: horse_moves,
    PieceType.ROOK: rook_moves,
    PieceType.CANNON: cannon_moves,
    PieceType.PAWN: pawn_moves,
}


def destinations(board: Board, pos: Position, piece: Piece) -> list[Position]:
    """不做参数校验的目标格生成，供规则判断和搜索内部使用"""
    return GENERATORS[piece.piece_type](board, pos, piece.color)


def legal_destinations(board: Board, position: Position, piece: Piece) -> set[Position]:
    """获取棋子的所有目标格

    Raises:
        InvalidPositionError: position 不在棋盘内
        PieceMismatchError: piece 不是棋盘上该位置的棋子
    """
    position = Position(*position)
    if not position.is_valid():
        raise InvalidPositionError(position)
    occupant = board.get_piece(position)
    if occupant != piece:
        raise PieceMismatchError(f"Expected {piece!r} at {tuple(position)}, found {occupant!r}")
    return set(destinations(board, position, piece))


def attacks(board: Board, position: Position, piece: Piece, target: Position) -> bool:
    """该棋子能否走到（吃到）target"""
    return target in destinations(board, position, piece)


def all_moves(board: Board, color: Color) -> list[Move]:
    """一方全部伪合法走法，按棋盘扫描顺序"""
    moves = []
    for pos, piece in board.pieces(color):
        for to_pos in destinations(board, pos, piece):
            moves.append(Move(pos, to_pos))
    return moves

"""
棋盘类定义

Board 是不可变的局面快照：位置 -> 棋子的稀疏映射。
任何"试走"都生成新的快照，调用方的棋盘永远不会被修改。
"""

from collections import Counter
from typing import Iterable, Iterator, Mapping

from xiangqi_core.exceptions import InvalidBoardError, InvalidPositionError, MoveError
from xiangqi_core.piece import BACK_RANK, Piece, create_piece
from xiangqi_core.types import BOARD_COLS, BOARD_ROWS, Color, Move, PieceType, Position


class Board:
    """象棋棋盘

    坐标系统：
    - row 0-9: 0 是红方底线，9 是黑方底线
    - col 0-8: 从左到右
    """

    __slots__ = ("_pieces", "_hash", "_sorted", "_kings")

    def __init__(self, pieces: Mapping[Position, Piece] | None = None):
        self._pieces: dict[Position, Piece] = {}
        self._hash: int | None = None
        # 按扫描顺序的 (位置, 棋子) 与将/帅位置，首次查询时计算
        self._sorted: tuple[tuple[Position, Piece], ...] | None = None
        self._kings: dict[Color, Position] | None = None
        for pos, piece in (pieces or {}).items():
            pos = Position(*pos)
            if not pos.is_valid():
                raise InvalidPositionError(pos)
            if not isinstance(piece, Piece):
                raise InvalidBoardError(f"Not a piece at {tuple(pos)}: {piece!r}")
            self._pieces[pos] = piece
        self._check_kings()

    @classmethod
    def _trusted(cls, pieces: dict[Position, Piece]) -> "Board":
        """跳过校验直接包装字典（仅内部模拟使用，调用方不得再修改该字典）"""
        board = cls.__new__(cls)
        board._pieces = pieces
        board._hash = None
        board._sorted = None
        board._kings = None
        return board

    @classmethod
    def from_pieces(cls, pieces: Iterable[tuple[Position, Piece]]) -> "Board":
        """从 (位置, 棋子) 列表构造，位置重复时报错"""
        layout: dict[Position, Piece] = {}
        for pos, piece in pieces:
            pos = Position(*pos)
            if pos in layout:
                raise InvalidBoardError(f"Two pieces at {tuple(pos)}")
            layout[pos] = piece
        return cls(layout)

    @classmethod
    def initial(cls) -> "Board":
        """标准开局布局"""
        layout: dict[Position, Piece] = {}
        # 红方（下方，row 0-4）
        cls._place_pieces_for_color(layout, Color.RED, base_row=0)
        # 黑方（上方，row 5-9）
        cls._place_pieces_for_color(layout, Color.BLACK, base_row=9)
        return cls._trusted(layout)

    @staticmethod
    def _place_pieces_for_color(
        layout: dict[Position, Piece], color: Color, base_row: int
    ) -> None:
        """为一方放置全部 16 个棋子"""
        forward = color.forward
        counters: Counter[PieceType] = Counter()

        def place(pos: Position, piece_type: PieceType) -> None:
            counters[piece_type] += 1
            if piece_type == PieceType.KING:
                piece_id = f"{color.value}-king"
            else:
                piece_id = f"{color.value}-{piece_type.value}-{counters[piece_type]}"
            layout[pos] = create_piece(piece_type, color, piece_id)

        # 后排棋子
        for col, piece_type in enumerate(BACK_RANK):
            place(Position(base_row, col), piece_type)

        # 炮在第三线
        for col in (1, 7):
            place(Position(base_row + 2 * forward, col), PieceType.CANNON)

        # 兵/卒在第四线
        for col in (0, 2, 4, 6, 8):
            place(Position(base_row + 3 * forward, col), PieceType.PAWN)

    def _check_kings(self) -> None:
        kings = Counter(p.color for p in self._pieces.values() if p.is_king)
        for color, count in kings.items():
            if count > 1:
                raise InvalidBoardError(f"{color.value} has {count} kings")

    def get_piece(self, pos: Position) -> Piece | None:
        """获取指定位置的棋子"""
        return self._pieces.get(pos)

    def pieces(self, color: Color | None = None) -> list[tuple[Position, Piece]]:
        """按行列扫描顺序返回 (位置, 棋子)，可按阵营过滤"""
        if self._sorted is None:
            self._sorted = tuple(sorted(self._pieces.items()))
        if color is None:
            return list(self._sorted)
        return [(pos, piece) for pos, piece in self._sorted if piece.color == color]

    def find_king(self, color: Color) -> Position | None:
        """找到指定阵营的将/帅位置"""
        if self._kings is None:
            self._kings = {
                piece.color: pos for pos, piece in self._pieces.items() if piece.is_king
            }
        return self._kings.get(color)

    def with_move(self, move: Move) -> "Board":
        """返回应用走法后的新棋盘（目标格原有棋子被吃掉），不做合法性检查"""
        pieces = dict(self._pieces)
        piece = pieces.pop(move.from_pos, None)
        if piece is None:
            raise MoveError(f"No piece at position {tuple(move.from_pos)}")
        pieces[move.to_pos] = piece
        return Board._trusted(pieces)

    def with_move_undone(self, move: Move, captured: Piece | None) -> "Board":
        """撤销 with_move：棋子退回原位，被吃的棋子放回"""
        pieces = dict(self._pieces)
        piece = pieces.pop(move.to_pos, None)
        if piece is None:
            raise MoveError(f"No piece at position {tuple(move.to_pos)}")
        pieces[move.from_pos] = piece
        if captured is not None:
            pieces[move.to_pos] = captured
        return Board._trusted(pieces)

    def with_piece(self, pos: Position, piece: Piece | None) -> "Board":
        """返回在 pos 放置（或移除）一个棋子后的新棋盘"""
        pieces = dict(self._pieces)
        if piece is None:
            pieces.pop(pos, None)
        else:
            pieces[Position(*pos)] = piece
        return Board(pieces)

    def to_fen(self, turn: Color | None = None) -> str:
        from xiangqi_core.fen import board_to_fen

        return board_to_fen(self, turn)

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {
            "pieces": [
                {**piece.to_dict(), "position": {"row": pos.row, "col": pos.col}}
                for pos, piece in self.pieces()
            ]
        }

    def __iter__(self) -> Iterator[Position]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __contains__(self, pos: object) -> bool:
        return pos in self._pieces

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._pieces.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"Board({len(self._pieces)} pieces)"

    def display(self) -> str:
        """返回棋盘的文本表示"""
        char_map = {
            (PieceType.KING, Color.RED): "帅",
            (PieceType.KING, Color.BLACK): "将",
            (PieceType.ADVISOR, Color.RED): "仕",
            (PieceType.ADVISOR, Color.BLACK): "士",
            (PieceType.ELEPHANT, Color.RED): "相",
            (PieceType.ELEPHANT, Color.BLACK): "象",
            (PieceType.HORSE, Color.RED): "马",
            (PieceType.HORSE, Color.BLACK): "马",
            (PieceType.ROOK, Color.RED): "车",
            (PieceType.ROOK, Color.BLACK): "车",
            (PieceType.CANNON, Color.RED): "炮",
            (PieceType.CANNON, Color.BLACK): "炮",
            (PieceType.PAWN, Color.RED): "兵",
            (PieceType.PAWN, Color.BLACK): "卒",
        }

        lines = []
        for row in range(BOARD_ROWS - 1, -1, -1):
            line = f"{row} "
            for col in range(BOARD_COLS):
                piece = self.get_piece(Position(row, col))
                if piece is None:
                    line += "十 "
                else:
                    line += char_map[(piece.piece_type, piece.color)] + " "
            lines.append(line)
        lines.append("  a  b  c  d  e  f  g  h  i")
        return "\n".join(lines)

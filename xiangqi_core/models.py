"""
序列化模型

Pydantic models for loading board layouts and dumping results as JSON.
"""

from pydantic import BaseModel, ConfigDict, Field

from xiangqi_core.analysis import Analysis, SideReport
from xiangqi_core.board import Board
from xiangqi_core.piece import create_piece
from xiangqi_core.types import Color, Move, PieceType, Position


class PositionModel(BaseModel):
    """棋盘位置"""

    row: int = Field(ge=0, le=9)
    col: int = Field(ge=0, le=8)

    @classmethod
    def from_position(cls, pos: Position) -> "PositionModel":
        return cls(row=pos.row, col=pos.col)

    def to_position(self) -> Position:
        return Position(self.row, self.col)


class PieceModel(BaseModel):
    """棋子信息"""

    type: PieceType
    color: Color
    position: PositionModel
    id: str = ""


class MoveModel(BaseModel):
    """走法信息"""

    model_config = ConfigDict(populate_by_name=True)

    from_pos: PositionModel = Field(alias="from")
    to_pos: PositionModel = Field(alias="to")
    notation: str = ""

    @classmethod
    def from_move(cls, move: Move) -> "MoveModel":
        return cls(
            from_pos=PositionModel.from_position(move.from_pos),
            to_pos=PositionModel.from_position(move.to_pos),
            notation=move.to_notation(),
        )

    def to_move(self) -> Move:
        return Move(self.from_pos.to_position(), self.to_pos.to_position())


class BoardModel(BaseModel):
    """棋盘布局"""

    pieces: list[PieceModel]
    turn: Color = Color.RED

    @classmethod
    def from_board(cls, board: Board, turn: Color = Color.RED) -> "BoardModel":
        return cls(
            pieces=[
                PieceModel(
                    type=piece.piece_type,
                    color=piece.color,
                    position=PositionModel.from_position(pos),
                    id=piece.piece_id,
                )
                for pos, piece in board.pieces()
            ],
            turn=turn,
        )

    def to_board(self) -> Board:
        """转换为 Board，位置重复或一方多将时抛出 InvalidBoardError"""
        return Board.from_pieces(
            (p.position.to_position(), create_piece(p.type, p.color, p.id)) for p in self.pieces
        )


class SideReportModel(BaseModel):
    """一方的将军状态"""

    color: Color
    king: PositionModel | None
    in_check: bool
    checkmated: bool
    checkers: list[PieceModel] = []
    king_escapes: dict[str, bool] = {}

    @classmethod
    def from_report(cls, report: SideReport) -> "SideReportModel":
        king = PositionModel.from_position(report.king) if report.king is not None else None
        return cls(
            color=report.color,
            king=king,
            in_check=report.in_check,
            checkmated=report.checkmated,
            checkers=[
                PieceModel(
                    type=piece.piece_type,
                    color=piece.color,
                    position=PositionModel.from_position(pos),
                    id=piece.piece_id,
                )
                for pos, piece in report.checkers
            ],
            king_escapes={
                pos.to_notation(): still_in_check
                for pos, still_in_check in report.king_escapes.items()
            },
        )


class AnalysisModel(BaseModel):
    """局面分析结果"""

    side_to_move: Color
    result: str
    red: SideReportModel
    black: SideReportModel

    @classmethod
    def from_analysis(cls, analysis: Analysis) -> "AnalysisModel":
        return cls(
            side_to_move=analysis.side_to_move,
            result=analysis.result.value,
            red=SideReportModel.from_report(analysis.sides[Color.RED]),
            black=SideReportModel.from_report(analysis.sides[Color.BLACK]),
        )

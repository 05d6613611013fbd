"""
异常定义

所有异常都表示调用方违反了前置条件（编程错误），
无合法走法、被将死等属于正常结果，不抛异常。
"""


class XiangqiError(ValueError):
    """xiangqi_core 异常基类"""


class InvalidPositionError(XiangqiError):
    """位置超出棋盘范围"""

    def __init__(self, position):
        super().__init__(f"Position out of board: {tuple(position)}")
        self.position = position


class PieceMismatchError(XiangqiError):
    """传入的棋子与棋盘上该位置的棋子不一致"""


class InvalidBoardError(XiangqiError):
    """棋盘布局不合法（如一方多于一个将）"""


class MoveError(XiangqiError):
    """走法无法应用到棋盘上"""


class FenError(XiangqiError):
    """FEN 或走法记谱格式错误"""

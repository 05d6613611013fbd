"""
贪婪 AI 策略

只用静态走法评分，不进行深度搜索
"""

import random
from typing import ClassVar

from xiangqi_core.ai.base import AIConfig, AIEngine, AIStrategy
from xiangqi_core.ai.evaluator import Evaluator
from xiangqi_core.board import Board
from xiangqi_core.movegen import all_moves
from xiangqi_core.types import Move


@AIEngine.register
class GreedyAI(AIStrategy):
    """贪婪 AI

    只评估当前一步走法，适合作为快速对手，比 Minimax 弱
    """

    name: ClassVar[str] = "greedy"

    def __init__(self, config: AIConfig | None = None, rng: random.Random | None = None):
        super().__init__(config, rng)
        self.evaluator = Evaluator()

    def select_move(self, board: Board) -> Move | None:
        moves = all_moves(board, self.config.ai_color)
        scored = [(move, self.evaluator.evaluate_move(board, move)) for move in moves]
        return self._pick(scored)

"""
Minimax AI 策略

静态走法评分 + 带 Alpha-Beta 剪枝的 Minimax 搜索，
两者加权后在最好的几步中随机选择
"""

import random
from typing import ClassVar

from xiangqi_core.ai.base import AIConfig, AIEngine, AIStrategy
from xiangqi_core.ai.evaluator import Evaluator
from xiangqi_core.board import Board
from xiangqi_core.logging import logger
from xiangqi_core.movegen import all_moves
from xiangqi_core.rules import is_checkmate
from xiangqi_core.types import Color, Move

# 将死得分，远高于任何普通评估
MATE_SCORE = 100_000


@AIEngine.register
class MinimaxAI(AIStrategy):
    """Minimax AI

    每个候选走法先做静态评分，再向下搜索 config.depth 层
    """

    name: ClassVar[str] = "minimax"

    def __init__(self, config: AIConfig | None = None, rng: random.Random | None = None):
        super().__init__(config, rng)
        self.evaluator = Evaluator()
        self._nodes_searched = 0

    def select_move(self, board: Board) -> Move | None:
        color = self.config.ai_color
        candidates = all_moves(board, color)
        if not candidates:
            return None

        self._nodes_searched = 0
        scored: list[tuple[Move, float]] = []

        for move in candidates:
            static_score = self.evaluator.evaluate_move(board, move)
            search_score = self._minimax(
                board.with_move(move),
                self.config.depth,
                color.opposite,
                float("-inf"),
                float("inf"),
            )
            score = (
                static_score * self.config.static_weight
                + search_score * self.config.search_weight
            )
            scored.append((move, score))

        move = self._pick(scored)
        logger.debug(
            f"minimax({color.value}): {len(candidates)} candidates, "
            f"{self._nodes_searched} nodes, chose {move}"
        )
        return move

    def _minimax(
        self, board: Board, depth: int, to_move: Color, alpha: float, beta: float
    ) -> float:
        """Minimax 搜索，带 Alpha-Beta 剪枝

        分数始终以 AI 一方为视角，AI 走棋的节点取最大值
        """
        self._nodes_searched += 1
        ai_color = self.config.ai_color

        # 达到搜索深度，返回评估值
        if depth <= 0:
            return self.evaluator.evaluate(board, ai_color)

        # 将死：越快获胜越好，越慢被将死越好
        if is_checkmate(board, ai_color):
            return -MATE_SCORE - depth
        if is_checkmate(board, ai_color.opposite):
            return MATE_SCORE + depth

        moves = all_moves(board, to_move)
        if not moves:
            return self.evaluator.evaluate(board, ai_color)

        maximizing = to_move == ai_color
        best_score = float("-inf") if maximizing else float("inf")

        for move in self._order_moves(board, moves):
            score = self._minimax(board.with_move(move), depth - 1, to_move.opposite, alpha, beta)

            if maximizing:
                best_score = max(best_score, score)
                alpha = max(alpha, score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, score)

            # Alpha-Beta 剪枝
            if beta <= alpha:
                break

        return best_score

    def _order_moves(self, board: Board, moves: list[Move]) -> list[Move]:
        """按走棋方自己的静态评分从高到低排序，只保留前 max_children 个"""
        scores = {move: self.evaluator.evaluate_move(board, move) for move in moves}
        ordered = sorted(moves, key=scores.__getitem__, reverse=True)
        return ordered[: self.config.max_children]

    @property
    def nodes_searched(self) -> int:
        """返回上次搜索的节点数"""
        return self._nodes_searched

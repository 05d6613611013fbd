"""
AI Engine Module

Automated move selection with pluggable strategies.
"""

import random

from xiangqi_core.ai.base import AIConfig, AIEngine, AIStrategy
from xiangqi_core.ai.evaluator import Evaluator
from xiangqi_core.ai.greedy_ai import GreedyAI
from xiangqi_core.ai.minimax_ai import MATE_SCORE, MinimaxAI
from xiangqi_core.board import Board
from xiangqi_core.types import Move


def choose_move(
    board: Board, config: AIConfig | None = None, rng: random.Random | None = None
) -> Move | None:
    """为 config.ai_color 选择一步走法，无子可走时返回 None"""
    return MinimaxAI(config, rng).select_move(board)


__all__ = [
    "AIConfig",
    "AIEngine",
    "AIStrategy",
    "Evaluator",
    "GreedyAI",
    "MATE_SCORE",
    "MinimaxAI",
    "choose_move",
]

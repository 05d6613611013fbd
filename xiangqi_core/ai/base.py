"""
AI 引擎基类和策略接口

定义可扩展的 AI 架构，支持策略模式和注册机制
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from xiangqi_core.board import Board
from xiangqi_core.types import Color, Move


@dataclass
class AIConfig:
    """AI 配置"""

    name: str = "AI"
    # AI 执哪一方
    ai_color: Color = Color.BLACK
    # 候选走法之后继续搜索的层数
    depth: int = 2
    # 每个节点只展开排序后最好的前 N 个走法
    max_children: int = 15
    # 从得分最高的前 K 个走法中随机选择
    top_k: int = 3
    # 综合评分 = 静态评分 * static_weight + 搜索评分 * search_weight
    static_weight: float = 0.7
    search_weight: float = 0.3
    # 固定选择最佳走法（测试用）
    deterministic: bool = False
    seed: int | None = None


class AIStrategy(ABC):
    """AI 策略接口

    所有 AI 实现必须继承此类，实现可插拔的 AI 策略
    """

    # 策略名称，用于注册和识别
    name: ClassVar[str] = "base"

    def __init__(self, config: AIConfig | None = None, rng: random.Random | None = None):
        self.config = config or AIConfig()
        self._rng = rng or random.Random(self.config.seed)

    @abstractmethod
    def select_move(self, board: Board) -> Move | None:
        """为 config.ai_color 选择一步走法

        Args:
            board: 当前局面快照（不会被修改）

        Returns:
            选择的走法，如果没有可走的棋则返回 None
        """
        pass

    def _pick(self, scored: list[tuple[Move, float]]) -> Move | None:
        """按得分从高到低排序，在前 top_k 个中随机选一个

        同分时保持生成顺序，确定性模式总是返回第一个。
        """
        if not scored:
            return None
        ranked = sorted(scored, key=lambda item: item[1], reverse=True)
        if self.config.deterministic or self.config.top_k <= 1:
            return ranked[0][0]
        top_moves = ranked[: self.config.top_k]
        return self._rng.choice(top_moves)[0]


class AIEngine:
    """AI 引擎

    管理 AI 策略的注册和选择，提供统一的 AI 调用接口
    """

    # 已注册的策略
    _strategies: ClassVar[dict[str, type[AIStrategy]]] = {}

    def __init__(self, strategy: AIStrategy | None = None):
        self.strategy = strategy

    @classmethod
    def register(cls, strategy_class: type[AIStrategy]) -> type[AIStrategy]:
        """注册 AI 策略（可用作装饰器）"""
        cls._strategies[strategy_class.name] = strategy_class
        return strategy_class

    @classmethod
    def get_strategy(
        cls, name: str, config: AIConfig | None = None, rng: random.Random | None = None
    ) -> AIStrategy:
        """获取指定名称的策略实例"""
        if name not in cls._strategies:
            available = ", ".join(cls._strategies.keys())
            raise ValueError(f"Unknown AI strategy: {name}. Available: {available}")
        return cls._strategies[name](config, rng)

    @classmethod
    def list_strategies(cls) -> list[str]:
        """列出所有已注册的策略"""
        return list(cls._strategies.keys())

    def select_move(self, board: Board) -> Move | None:
        """使用当前策略选择走法"""
        if self.strategy is None:
            raise ValueError("No AI strategy set")
        return self.strategy.select_move(board)

    def set_strategy(self, strategy: AIStrategy) -> None:
        self.strategy = strategy

"""
类型定义单元测试
"""

import pytest

from xiangqi_core.types import Color, GameResult, Move, Position


class TestColor:
    """Color 枚举测试"""

    def test_color_values(self):
        assert Color.RED.value == "red"
        assert Color.BLACK.value == "black"

    def test_color_opposite(self):
        """测试获取对方颜色"""
        assert Color.RED.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.RED

    def test_forward_direction(self):
        """红方向 row 增大方向前进，黑方相反"""
        assert Color.RED.forward == 1
        assert Color.BLACK.forward == -1


class TestPosition:
    """Position 测试"""

    def test_position_is_valid(self):
        """测试位置有效性检查"""
        assert Position(0, 0).is_valid()
        assert Position(9, 8).is_valid()
        assert Position(5, 4).is_valid()

        assert not Position(-1, 0).is_valid()
        assert not Position(0, -1).is_valid()
        assert not Position(10, 0).is_valid()
        assert not Position(0, 9).is_valid()

    def test_position_is_in_palace(self):
        """测试九宫格检查"""
        # 红方九宫格
        assert Position(0, 3).is_in_palace(Color.RED)
        assert Position(1, 4).is_in_palace(Color.RED)
        assert Position(2, 5).is_in_palace(Color.RED)
        assert not Position(3, 4).is_in_palace(Color.RED)
        assert not Position(0, 2).is_in_palace(Color.RED)
        assert not Position(8, 4).is_in_palace(Color.RED)

        # 黑方九宫格
        assert Position(7, 4).is_in_palace(Color.BLACK)
        assert Position(9, 5).is_in_palace(Color.BLACK)
        assert not Position(6, 4).is_in_palace(Color.BLACK)
        assert not Position(1, 4).is_in_palace(Color.BLACK)

    def test_position_is_on_own_side(self):
        """测试己方半场检查"""
        assert Position(0, 0).is_on_own_side(Color.RED)
        assert Position(4, 8).is_on_own_side(Color.RED)
        assert not Position(5, 0).is_on_own_side(Color.RED)

        assert Position(9, 0).is_on_own_side(Color.BLACK)
        assert Position(5, 8).is_on_own_side(Color.BLACK)
        assert not Position(4, 0).is_on_own_side(Color.BLACK)

    def test_position_add(self):
        """测试位置加法"""
        new_pos = Position(5, 4) + (1, -1)
        assert new_pos == Position(6, 3)
        assert isinstance(new_pos, Position)

    def test_position_notation(self):
        assert Position(0, 4).to_notation() == "e0"
        assert Position.from_notation("b2") == Position(2, 1)

    @pytest.mark.parametrize("text", ["", "j1", "a", "aa", "a10"])
    def test_invalid_square_notation(self, text):
        with pytest.raises(ValueError):
            Position.from_notation(text)


class TestMove:
    """Move 测试"""

    def test_move_to_notation(self):
        """测试走法转记谱"""
        move = Move(Position(2, 1), Position(2, 4))
        assert move.to_notation() == "b2e2"
        assert str(move) == "b2e2"

    def test_move_from_notation(self):
        """测试从记谱解析走法"""
        move = Move.from_notation("e0e1")
        assert move.from_pos == Position(0, 4)
        assert move.to_pos == Position(1, 4)

    def test_move_is_hashable_value(self):
        assert Move(Position(0, 0), Position(1, 0)) == Move.from_notation("a0a1")
        assert len({Move.from_notation("a0a1"), Move.from_notation("a0a1")}) == 1


class TestGameResult:
    def test_win_for(self):
        assert GameResult.win_for(Color.RED) == GameResult.RED_WIN
        assert GameResult.win_for(Color.BLACK) == GameResult.BLACK_WIN

"""
象棋规则引擎 CLI

- show: 显示棋盘
- moves: 查询某个棋子的目标格，或当前方全部合法走法
- analyze: 双方将军/将死分析
- best: 获取 AI 推荐走法
- list: 列出所有策略

## 使用示例

```bash
python -m xiangqi_core.cli moves --fen "rheakaehr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RHEAKAEHR r"
python -m xiangqi_core.cli moves --square b2
python -m xiangqi_core.cli best --fen "..." --strategy minimax --deterministic --json
```
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from xiangqi_core.ai import AIConfig, AIEngine
from xiangqi_core.analysis import analyze as analyze_board
from xiangqi_core.board import Board
from xiangqi_core.exceptions import XiangqiError
from xiangqi_core.fen import INITIAL_FEN, parse_fen
from xiangqi_core.logging import configure_logging, logger
from xiangqi_core.models import AnalysisModel, BoardModel, MoveModel
from xiangqi_core.movegen import legal_destinations
from xiangqi_core.rules import legal_moves
from xiangqi_core.types import Color, Position

app = typer.Typer(help="Xiangqi rules engine - 走法生成、将军判断与 AI 选步")
console = Console()

FEN_OPTION = typer.Option(INITIAL_FEN, "--fen", "-f", help="FEN 字符串")
LAYOUT_OPTION = typer.Option(None, "--layout", "-l", help="JSON 棋盘布局文件（优先于 --fen）")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出 DEBUG 日志"),
    log_file: Path | None = typer.Option(None, "--log-file", help="日志文件路径"),
) -> None:
    configure_logging("DEBUG" if verbose else "WARNING", log_file)


def _load(fen: str, layout: Path | None) -> tuple[Board, Color]:
    """从 JSON 布局文件或 FEN 加载局面"""
    if layout is not None:
        model = BoardModel.model_validate_json(layout.read_text(encoding="utf-8"))
        return model.to_board(), model.turn
    state = parse_fen(fen)
    return state.board, state.turn


def _fail(e: Exception) -> NoReturn:
    print(f"Error: {e}", file=sys.stderr)
    raise typer.Exit(1) from None


@app.command()
def show(fen: str = FEN_OPTION, layout: Path | None = LAYOUT_OPTION) -> None:
    """显示棋盘"""
    try:
        board, turn = _load(fen, layout)
    except (XiangqiError, ValueError, OSError) as e:
        _fail(e)
    console.print(board.display())
    console.print(f"turn: {turn.value}")


@app.command()
def moves(
    fen: str = FEN_OPTION,
    layout: Path | None = LAYOUT_OPTION,
    square: str | None = typer.Option(None, "--square", "-s", help="只查询该格棋子，如 b2"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """查询目标格或合法走法"""
    try:
        board, turn = _load(fen, layout)
        if square is not None:
            pos = Position.from_notation(square)
            piece = board.get_piece(pos)
            if piece is None:
                raise XiangqiError(f"No piece at {square}")
            targets = sorted(legal_destinations(board, pos, piece))
            notations = [p.to_notation() for p in targets]
            title = f"{piece!r} at {square}"
        else:
            move_list = legal_moves(board, turn)
            notations = [m.to_notation() for m in move_list]
            title = f"Legal moves for {turn.value}"
    except (XiangqiError, ValueError, OSError) as e:
        _fail(e)

    logger.info(f"moves: {title}, {len(notations)} found")
    if output_json:
        console.print_json(data={"title": title, "moves": notations, "total": len(notations)})
        return

    console.print(f"{title} ({len(notations)}):")
    for notation in notations:
        console.print(f"  {notation}")


@app.command()
def analyze(
    fen: str = FEN_OPTION,
    layout: Path | None = LAYOUT_OPTION,
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """分析双方将军/将死状态"""
    try:
        board, turn = _load(fen, layout)
    except (XiangqiError, ValueError, OSError) as e:
        _fail(e)

    analysis = analyze_board(board, turn)
    if output_json:
        console.print_json(AnalysisModel.from_analysis(analysis).model_dump_json())
        return

    table = Table(title=f"Analysis (turn={turn.value}, result={analysis.result.value})")
    table.add_column("Side")
    table.add_column("King")
    table.add_column("In check")
    table.add_column("Checkmated")
    table.add_column("Checkers")
    for color, report in analysis.sides.items():
        table.add_row(
            color.value,
            report.king.to_notation() if report.king is not None else "-",
            str(report.in_check),
            str(report.checkmated),
            ", ".join(f"{p!r}@{pos.to_notation()}" for pos, p in report.checkers) or "-",
        )
    console.print(table)


@app.command()
def best(
    fen: str = FEN_OPTION,
    layout: Path | None = LAYOUT_OPTION,
    strategy: str = typer.Option("minimax", "--strategy", "-s", help="AI 策略"),
    depth: int = typer.Option(2, "--depth", "-d", help="搜索深度"),
    seed: int | None = typer.Option(None, "--seed", help="随机种子"),
    deterministic: bool = typer.Option(False, "--deterministic", help="总是选择最佳走法"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """为当前走棋方选择走法"""
    try:
        board, turn = _load(fen, layout)
        config = AIConfig(
            name=strategy, ai_color=turn, depth=depth, seed=seed, deterministic=deterministic
        )
        ai = AIEngine.get_strategy(strategy, config)
    except (XiangqiError, ValueError, OSError) as e:
        _fail(e)

    move = ai.select_move(board)
    logger.info(f"best: strategy={strategy}, color={turn.value}, move={move}")

    if output_json:
        payload = None
        if move is not None:
            payload = MoveModel.from_move(move).model_dump(mode="json", by_alias=True)
        console.print_json(data={"strategy": strategy, "color": turn.value, "move": payload})
        return

    if move is None:
        console.print(f"No move available for {turn.value}")
    else:
        console.print(f"Best move (strategy={strategy}, color={turn.value}): {move}")


@app.command(name="list")
def list_strategies() -> None:
    """列出所有可用的 AI 策略"""
    strategies = AIEngine.list_strategies()
    console.print(f"Available strategies ({len(strategies)}):")
    for name in strategies:
        console.print(f"  {name}")


if __name__ == "__main__":
    app()

"""
游戏模块
包含2048棋盘引擎和规则
"""

from .game_2048 import (
    Board,
    Difficulty,
    Direction,
    GameState,
    rotate_board,
    slide_board,
    slide_board_left,
    slide_row_left,
)

__all__ = [
    'Board',
    'Difficulty',
    'Direction',
    'GameState',
    'rotate_board',
    'slide_board',
    'slide_board_left',
    'slide_row_left',
]

"""
工具模块
包含随机数源、游戏记录和文本显示工具
"""

from .random_source import RandomSource
from .game_log import GameLog
from .visualization import render_board

__all__ = ['RandomSource', 'GameLog', 'render_board']

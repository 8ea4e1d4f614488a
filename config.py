"""
2048 文本版游戏配置文件
包含所有可调参数的默认值
"""


class GameConfig:
    """游戏规则配置"""

    # 棋盘大小（固定为4x4）
    BOARD_SIZE = 4

    # 默认随机种子
    SEED = 42

    # 难度代码 -> 胜利目标
    WIN_TARGETS = {
        'E': 256,
        'M': 512,
        'H': 1024,
    }

    # 难度代码 -> 生成2的阈值（抽到 <= 阈值 生成2，否则生成4）
    SPAWN_THRESHOLDS = {
        'E': 5,  # 50/50
        'M': 7,  # 70/30
        'H': 9,  # 90/10
    }

    # 生成瓦片时的抽样区间（闭区间）
    SPAWN_DRAW_RANGE = (1, 10)

    # 开局瓦片数量
    INITIAL_TILES = 2


class DisplayConfig:
    """文本显示配置"""

    # 每个格子的宽度（字符数）
    CELL_WIDTH = 4


class PathConfig:
    """路径配置"""

    # 游戏记录保存路径
    LOG_DIR = "2048_logs"

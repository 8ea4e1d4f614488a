from copy import deepcopy
from enum import Enum

import numpy as np

from config import GameConfig
from utils.random_source import RandomSource


class Direction(Enum):
    """移动方向"""
    UP = 'U'
    DOWN = 'D'
    LEFT = 'L'
    RIGHT = 'R'

    @classmethod
    def from_code(cls, code):
        """解析单字符方向代码（不区分大小写），无法识别时返回None"""
        if isinstance(code, cls):
            return code
        if not isinstance(code, str) or len(code) != 1:
            return None
        try:
            return cls(code.upper())
        except ValueError:
            return None


class Difficulty(Enum):
    """难度：决定胜利目标和新瓦片的分布"""
    EASY = 'E'
    MEDIUM = 'M'
    HARD = 'H'

    @classmethod
    def from_code(cls, code):
        """只接受大写代码 E/M/H"""
        if isinstance(code, cls):
            return code
        for difficulty in cls:
            if difficulty.value == code:
                return difficulty
        raise ValueError(f"Invalid mode: {code!r}. Must be 'E', 'M' or 'H'")

    @property
    def win_target(self):
        return GameConfig.WIN_TARGETS[self.value]

    @property
    def spawn_threshold(self):
        return GameConfig.SPAWN_THRESHOLDS[self.value]


class GameState(Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


# 旋转次数（逆时针为正）：把目标方向转成"向左"
ROTATIONS = {
    Direction.LEFT: 0,
    Direction.RIGHT: 2,
    Direction.UP: 1,
    Direction.DOWN: -1,
}


def slide_row_left(row):
    """
    把一行向左滑动并合并

    参数:
    row: 一行数值（0表示空格）

    返回:
    new_row: 合并后的新行（长度不变，右侧补0）
    """
    new_row = []
    merged = []  # new_row中每个值是否已在本次合并过
    for value in row:
        if value == 0:
            continue
        if new_row and new_row[-1] == value and not merged[-1]:
            # 合并到上一个输出值，每个瓦片每次移动最多合并一次
            new_row[-1] *= 2
            merged[-1] = True
        else:
            new_row.append(int(value))
            merged.append(False)
    new_row.extend([0] * (len(row) - len(new_row)))
    return new_row


def slide_board_left(grid):
    """对每一行执行左移，返回(新棋盘, 是否变化)"""
    new_grid = np.array([slide_row_left(row) for row in grid], dtype=np.int64)
    changed = not np.array_equal(new_grid, grid)
    return new_grid, changed


def rotate_board(grid, counter_clockwise=True):
    """将棋盘旋转90度"""
    return np.rot90(grid, 1 if counter_clockwise else -1)


def slide_board(grid, direction):
    """
    模拟一次移动（不修改输入，不生成新瓦片）
    先旋转使目标方向变为"向左"，左移后再旋转回来

    返回:
    (new_grid, changed)
    """
    k = ROTATIONS[direction]
    rotated = np.rot90(grid, k)
    moved, changed = slide_board_left(rotated)
    return np.ascontiguousarray(np.rot90(moved, -k)), changed


class Board:
    """
    4x4 棋盘引擎
    只负责状态、移动、生成瓦片和胜负判断，不做任何输入输出
    """
    size = GameConfig.BOARD_SIZE

    def __init__(self, difficulty, random_source=None):
        self._setup(difficulty, random_source)
        for _ in range(GameConfig.INITIAL_TILES):
            self._spawn_tile()

    def _setup(self, difficulty, random_source):
        self.difficulty = Difficulty.from_code(difficulty)
        self.win_target = self.difficulty.win_target
        self.random_source = random_source if random_source is not None else RandomSource()
        self._grid = np.zeros((self.size, self.size), dtype=np.int64)

    @classmethod
    def from_grid(cls, grid, difficulty=Difficulty.EASY, random_source=None):
        """用给定的棋盘构造，不生成初始瓦片"""
        values = np.array(grid, dtype=np.int64)
        if values.shape != (cls.size, cls.size):
            raise ValueError(f"Grid must be {cls.size}x{cls.size}, got shape {values.shape}")
        board = cls.__new__(cls)
        board._setup(difficulty, random_source)
        board._grid = values
        return board

    @property
    def grid(self):
        """棋盘副本"""
        return self._grid.copy()

    def copy(self):
        """独立副本：随机数源也复制一份，副本上的移动不影响原棋盘后续生成的瓦片"""
        return Board.from_grid(self._grid, self.difficulty, deepcopy(self.random_source))

    def empty_cells(self):
        """按行优先顺序返回所有空格坐标"""
        return [(int(i), int(j)) for i, j in zip(*np.nonzero(self._grid == 0))]

    def max_tile(self):
        return int(self._grid.max())

    def _spawn_tile(self):
        """在随机空格上放置2或4，没有空格时什么也不做"""
        empty = self.empty_cells()
        if not empty:
            return None

        index = self.random_source.next_in_range(0, len(empty) - 1)
        row, col = empty[index]
        low, high = GameConfig.SPAWN_DRAW_RANGE
        draw = self.random_source.next_in_range(low, high)
        self._grid[row, col] = 2 if draw <= self.difficulty.spawn_threshold else 4
        return row, col

    def move(self, direction):
        """
        执行一次移动

        参数:
        direction: Direction 或单字符代码（U/D/L/R，不区分大小写）

        返回:
        moved: 棋盘是否变化；变化时会生成一个新瓦片
        """
        direction = Direction.from_code(direction)
        if direction is None:
            return False

        new_grid, changed = slide_board(self._grid, direction)
        if not changed:
            return False

        self._grid = new_grid
        self._spawn_tile()
        return True

    def can_move(self, direction):
        direction = Direction.from_code(direction)
        if direction is None:
            return False
        _, changed = slide_board(self._grid, direction)
        return changed

    def valid_moves(self):
        """返回所有会改变棋盘的方向"""
        return [direction for direction in Direction if self.can_move(direction)]

    def check_win(self):
        return bool(np.any(self._grid == self.win_target))

    def is_terminal(self):
        """棋盘已满且横向、纵向都没有相邻的相同值"""
        grid = self._grid
        if np.any(grid == 0):
            return False
        if np.any(grid[:, :-1] == grid[:, 1:]):
            return False
        if np.any(grid[:-1, :] == grid[1:, :]):
            return False
        return True

    def state(self):
        if self.check_win():
            return GameState.WON
        if self.is_terminal():
            return GameState.LOST
        return GameState.IN_PROGRESS

    def to_list(self):
        return self._grid.tolist()

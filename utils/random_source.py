import numpy as np


class RandomSource:
    """
    可注入的随机数源
    相同种子 + 相同调用序列 => 相同结果
    """
    def __init__(self, seed=None):
        self.seed(seed)

    def seed(self, value):
        """重置生成器状态"""
        self.current_seed = value
        self._rng = np.random.default_rng(value)

    def next_in_range(self, low, high):
        """返回闭区间 [low, high] 内均匀分布的整数"""
        if low > high:
            raise ValueError(f"Invalid range: [{low}, {high}]")
        return int(self._rng.integers(low, high, endpoint=True))

import json
from datetime import datetime
from pathlib import Path

from config import PathConfig


class GameLog:
    """
    一局游戏的记录
    保存种子、难度和每一步有效移动，可以据此确定性地回放
    """
    def __init__(self, seed, difficulty):
        self.seed = seed
        self.difficulty = difficulty
        self.moves = []
        self.final_board = None
        self.max_tile = 0
        self.outcome = None
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    def __len__(self):
        return len(self.moves)

    def record_move(self, code):
        self.moves.append(code.upper())

    def finish(self, board, outcome):
        """记录最终棋盘和结果（won / lost / quit）"""
        self.final_board = board.to_list()
        self.max_tile = board.max_tile()
        self.outcome = outcome

    def to_dict(self):
        return {
            'seed': self.seed,
            'difficulty': self.difficulty,
            'steps': len(self.moves),
            'moves': self.moves,
            'final_board': self.final_board,
            'max_tile': self.max_tile,
            'outcome': self.outcome,
            'timestamp': self.timestamp,
        }

    def save(self, log_dir=None):
        """保存游戏记录，返回文件路径"""
        log_dir = Path(log_dir or PathConfig.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        filepath = log_dir / f"2048_seed{self.seed}_{self.timestamp}.json"
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
        return filepath

    @classmethod
    def load(cls, path):
        """加载游戏记录，找不到时再到日志目录下查找"""
        filepath = Path(path)
        if not filepath.exists():
            filepath = Path(PathConfig.LOG_DIR) / path
        if not filepath.exists():
            raise FileNotFoundError(f"Game log not found: {path}")

        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if 'seed' not in data or 'difficulty' not in data:
            raise ValueError(f"Game log {filepath} is missing seed or difficulty")

        log = cls(data['seed'], data['difficulty'])
        log.moves = list(data.get('moves', []))
        log.final_board = data.get('final_board')
        log.max_tile = data.get('max_tile', 0)
        log.outcome = data.get('outcome')
        log.timestamp = data.get('timestamp', log.timestamp)
        return log

import sys

from config import GameConfig
from game import Board, Difficulty, Direction, GameState
from utils import GameLog, RandomSource, render_board

SEED_PROMPT = "Enter random seed: "
MODE_PROMPT = "Choose game mode: Easy (E), Medium (M), or Hard (H): "
MOVE_PROMPT = "Enter move: U, D, L, or R. Q to quit: "


class TextGame:
    def __init__(self, seed=None, difficulty=None, record=False, log_dir=None):
        """
        文本版2048游戏

        参数:
            seed: 随机种子（None时从输入读取）
            difficulty: 难度代码 E/M/H（None时从输入读取）
            record: 是否记录游戏
            log_dir: 记录保存目录（默认PathConfig.LOG_DIR）
        """
        self.seed = seed
        self.difficulty = Difficulty.from_code(difficulty) if difficulty is not None else None
        self.record = record
        self.log_dir = log_dir
        self.board = None
        self.game_log = None

    def _read(self, prompt):
        """读取一行输入，输入结束时返回None"""
        try:
            return input(prompt).strip()
        except EOFError:
            return None

    def _ask_seed(self):
        while True:
            text = self._read(SEED_PROMPT)
            if text is None:
                return None
            try:
                return int(text)
            except ValueError:
                print("Error: Invalid seed.")

    def _ask_difficulty(self):
        while True:
            text = self._read(MODE_PROMPT)
            if text is None:
                return None
            try:
                return Difficulty.from_code(text)
            except ValueError:
                print("Error: Invalid mode.")

    def display(self):
        print(render_board(self.board.grid))

    def play(self):
        """开始游戏，返回最终状态（中途退出返回IN_PROGRESS）"""
        if self.seed is None:
            self.seed = self._ask_seed()
            if self.seed is None:
                return GameState.IN_PROGRESS
        if self.difficulty is None:
            self.difficulty = self._ask_difficulty()
            if self.difficulty is None:
                return GameState.IN_PROGRESS

        self.board = Board(self.difficulty, RandomSource(self.seed))
        if self.record:
            self.game_log = GameLog(self.seed, self.difficulty.value)

        while not self.board.is_terminal():
            self.display()

            move = self._read(MOVE_PROMPT)
            if move is None or move.upper() == 'Q':
                break

            if Direction.from_code(move) is None:
                print("Error: Invalid move.")
                continue

            if not self.board.move(move):
                print("Invalid move direction.")
                continue

            if self.game_log is not None:
                self.game_log.record_move(move)

            if self.board.check_win():
                self.display()
                print("You win!")
                break

        state = self.board.state()
        if state == GameState.LOST:
            self.display()
            print("You lose.")

        if self.game_log is not None:
            self.save_log(state)
        return state

    def save_log(self, state):
        """保存游戏记录"""
        outcome = 'quit' if state == GameState.IN_PROGRESS else state.value
        self.game_log.finish(self.board, outcome)
        filepath = self.game_log.save(self.log_dir)
        print(f"\nGame log saved: {filepath}")
        return filepath

    def replay(self, replay_file):
        """
        回放游戏记录
        用记录里的种子和难度重建棋盘并依次执行每一步

        返回:
            最终棋盘是否与记录一致
        """
        log = GameLog.load(replay_file)
        self.seed = log.seed
        self.difficulty = Difficulty.from_code(log.difficulty)
        self.board = Board(self.difficulty, RandomSource(log.seed))

        print(f"Replay: seed {log.seed} | mode {self.difficulty.value} | {len(log)} moves")
        self.display()

        for step, code in enumerate(log.moves, start=1):
            if not self.board.move(code):
                print(f"Move {step} ({code}) did not change the board, replay diverged.")
                return False
            print(f"\nMove {step}: {code}")
            self.display()

        if log.final_board is not None and self.board.to_list() != log.final_board:
            print("Replay diverged from the recorded board.")
            return False

        print(f"Replay finished. Outcome: {log.outcome}")
        return True


def main(argv=None):
    """
    直接运行本文件时的入口
        python ManControl.py [seed]
        python ManControl.py --replay <log_file>
    """
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] == "--replay":
        if len(argv) < 2:
            print("Please specify a replay file")
            return 1
        return 0 if TextGame().replay(argv[1]) else 1

    seed = None
    if argv:
        try:
            seed = int(argv[0])
        except ValueError:
            print(f"Seed must be an integer, using default seed {GameConfig.SEED}")
            seed = GameConfig.SEED

    TextGame(seed=seed, record=True).play()
    return 0


if __name__ == "__main__":
    sys.exit(main())

import json

import pytest

from config import PathConfig
from game import Board, Difficulty
from tests.helpers import ScriptedRandom
from utils import GameLog, RandomSource, render_board


def test_next_in_range_is_inclusive():
    random_source = RandomSource(123)
    seen = {random_source.next_in_range(1, 3) for _ in range(500)}
    assert seen == {1, 2, 3}
    assert random_source.next_in_range(5, 5) == 5


def test_same_seed_replays_same_sequence():
    first = RandomSource(99)
    second = RandomSource(99)
    assert [first.next_in_range(0, 1000) for _ in range(20)] == \
        [second.next_in_range(0, 1000) for _ in range(20)]


def test_reseed_restarts_sequence():
    random_source = RandomSource(5)
    values = [random_source.next_in_range(1, 10) for _ in range(10)]
    random_source.seed(5)
    assert [random_source.next_in_range(1, 10) for _ in range(10)] == values
    assert random_source.current_seed == 5


def test_next_in_range_rejects_empty_range():
    with pytest.raises(ValueError):
        RandomSource(0).next_in_range(3, 2)


def test_render_board():
    grid = [
        [0, 2, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 1024, 0],
        [16, 0, 0, 4],
    ]
    border = "-" * 21
    expected = "\n".join([
        border,
        "|    |   2|    |    |",
        border,
        "|    |    |    |    |",
        border,
        "|    |    |1024|    |",
        border,
        "|  16|    |    |   4|",
        border,
    ])
    assert render_board(grid) == expected


def test_game_log_save_and_load(tmp_path):
    board = Board.from_grid([[2, 4, 0, 0]] + [[0] * 4 for _ in range(3)], Difficulty.MEDIUM, ScriptedRandom([]))
    log = GameLog(11, 'M')
    log.record_move('l')
    log.record_move('U')
    log.finish(board, 'quit')

    path = log.save(tmp_path)
    assert path.parent == tmp_path
    assert path.name.startswith("2048_seed11_")

    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['moves'] == ['L', 'U']
    assert data['steps'] == 2
    assert data['max_tile'] == 4

    loaded = GameLog.load(path)
    assert loaded.seed == 11
    assert loaded.difficulty == 'M'
    assert loaded.moves == ['L', 'U']
    assert loaded.final_board == board.to_list()
    assert loaded.outcome == 'quit'


def test_game_log_load_falls_back_to_log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(PathConfig, "LOG_DIR", str(tmp_path))
    path = GameLog(1, 'E').save()
    assert GameLog.load(path.name).seed == 1


def test_game_log_load_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        GameLog.load(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text(json.dumps({'moves': []}), encoding='utf-8')
    with pytest.raises(ValueError):
        GameLog.load(broken)

from __future__ import annotations

from typing import Iterable, Sequence


class ScriptedRandom:
    """Random source that replays a fixed list of values and records each requested range."""

    def __init__(self, values: Sequence[int]):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def seed(self, value) -> None:
        pass

    def next_in_range(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        value = self.values.pop(0)
        assert low <= value <= high, f"scripted value {value} outside [{low}, {high}]"
        return value


def feed_input(monkeypatch, answers: Iterable[str]) -> list[str]:
    """Patch input() to answer from a list; raises EOFError once the list runs out."""

    remaining = iter(answers)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts

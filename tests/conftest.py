from itertools import cycle

import pytest

from guess_the_number.game import Difficulty, GameConfig, TurnEngine


class FixedRng:
    """Stands in for numpy's Generator, returning secrets from a fixed list."""

    def __init__(self, *secrets: int):
        self._secrets = cycle(secrets)
        self.calls: list[tuple[int, int, bool]] = []

    def integers(self, low, high, endpoint=False):
        self.calls.append((low, high, endpoint))
        return next(self._secrets)


def create_engine(
    names=("Alice", "Bob"),
    total_rounds: int = 1,
    max_number: int = 5,
    secrets=(3,),
    *,
    start: bool = True,
) -> TurnEngine:
    config = GameConfig(list(names), total_rounds, max_number=max_number)
    engine = TurnEngine(config, FixedRng(*secrets))
    if start:
        engine.start_turn()
    return engine


def play_out(engine: TurnEngine, guesses) -> list:
    return [engine.submit_guess(guess) for guess in guesses]


@pytest.fixture
def engine() -> TurnEngine:
    return create_engine()


@pytest.fixture
def easy_config() -> GameConfig:
    return GameConfig(["Alice", "Bob", "Carol"], 2, difficulty=Difficulty.SUPER_EASY)

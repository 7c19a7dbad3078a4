"""Define rules and scoring for the guess the number game."""

import re
from enum import Enum
import numpy as np

# Default game settings
MIN_NUMBER = 1
DEFAULT_PLAYER_NAME = "Player {}"

WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")

# Scoring values
POINTS_CORRECT = 5
POINTS_WRONG = 3


class Difficulty(Enum):
    """Difficulty tiers, ordered from easiest to hardest."""

    SUPER_EASY = ("Super-Easy (1-5)", 5)
    SOMEWHAT_EASY = ("Somewhat-Easy (1-10)", 10)
    EASY = ("Easy (1-30)", 30)
    SOMEWHAT_MEDIUM = ("Somewhat-Medium (1-35)", 35)
    MEDIUM = ("Medium (1-50)", 50)
    SOMEWHAT_HARD = ("Somewhat-Hard (1-75)", 75)
    EXTREMELY_HARD = ("Extremely-Hard (1-100)", 100)
    NEXT_TO_IMPOSSIBLE = ("Next-to-Impossible (1-100,000)", 100000)

    @property
    def label(self) -> str:
        """Returns the label shown in the difficulty selection."""
        return self.value[0]

    @property
    def max_number(self) -> int:
        """Returns the highest guessable number of this tier."""
        return self.value[1]

    def __str__(self):
        return self.label

    @classmethod
    def labels(cls) -> list[str]:
        """Returns all tier labels, easiest first."""
        return [difficulty.label for difficulty in cls]

    @classmethod
    def from_choice(cls, choice: "Difficulty | str") -> "Difficulty":
        """Look up a tier by member, label or member name."""
        if isinstance(choice, cls):
            return choice

        text = str(choice).strip()
        for difficulty in cls:
            if text == difficulty.label or text.upper() == difficulty.name:
                return difficulty

        raise ValueError(f"{choice!r} is not a valid difficulty")


def draw_secret(max_number: int, rng=None) -> int:
    """Draw a secret number uniformly from [MIN_NUMBER, max_number]."""

    if max_number < MIN_NUMBER:
        raise ValueError(f"Maximum number {max_number} must be at least {MIN_NUMBER}")

    if rng is None:
        rng = np.random.default_rng()

    return int(rng.integers(MIN_NUMBER, max_number, endpoint=True))


def parse_whole_number(raw: str | int) -> int:
    """Read a signed whole number, rejecting floats, underscores and exponents."""

    if isinstance(raw, bool):
        raise ValueError(f"{raw!r} is not a whole number")
    if isinstance(raw, (int, np.integer)):
        return int(raw)

    text = str(raw).strip()
    if not WHOLE_NUMBER.fullmatch(text):
        raise ValueError(f"{raw!r} is not a whole number")
    return int(text)


def score_guess(guess: int, secret_number: int) -> int:
    """Return the score change for a guess."""
    return POINTS_CORRECT if guess == secret_number else -POINTS_WRONG


def default_player_name(index: int) -> str:
    """Return the generated name for the player at a 0-based index."""
    return DEFAULT_PLAYER_NAME.format(index + 1)


def top_scorers(scores: list[int]) -> list[int]:
    """Return the indices of every player holding the maximum score."""

    if not scores:
        return []

    best = max(scores)
    return [index for index, score in enumerate(scores) if score == best]

"""Define values handed from the game engine to the GUI."""

from dataclasses import dataclass, field
from .rules import POINTS_CORRECT, POINTS_WRONG


def score_line(name: str, score: int) -> str:
    """Render one scoreboard entry."""
    return f"{name}: {score} points"


@dataclass(frozen=True)
class TurnView:
    """What the GUI shows while a player is on turn."""

    round_number: int
    total_rounds: int
    player_index: int
    player_name: str
    max_number: int
    scores: tuple[tuple[str, int], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GuessResult:
    """Outcome of one scored guess. Reveals the secret number."""

    player_index: int
    player_name: str
    guess: int
    secret_number: int
    correct: bool
    points: int
    score: int
    game_over: bool = field(default=False)

    @property
    def message(self) -> str:
        """Returns the turn summary shown to the players."""
        if self.correct:
            return (
                f"CORRECT! The number was {self.secret_number}.\n"
                f"You earned {POINTS_CORRECT} points!"
            )
        return (
            f"WRONG! The number was {self.secret_number}.\n"
            f"You lost {POINTS_WRONG} points."
        )


@dataclass(frozen=True)
class Standings:
    """Final scores and the winner or tied winners."""

    scores: tuple[tuple[str, int], ...]
    winner_indices: tuple[int, ...]

    @property
    def is_tie(self) -> bool:
        """Whether more than one player holds the top score."""
        return len(self.winner_indices) > 1

    @property
    def winners(self) -> list[str]:
        """Returns the names of every player holding the top score."""
        return [self.scores[index][0] for index in self.winner_indices]

    @property
    def winner(self) -> str | None:
        """Returns the sole winner's name, or None on a tie."""
        if len(self.winner_indices) != 1:
            return None
        return self.winners[0]

    @property
    def top_score(self) -> int | None:
        """Returns the highest final score."""
        if not self.winner_indices:
            return None
        return self.scores[self.winner_indices[0]][1]

    def summary(self) -> str:
        """Render the game over message."""

        lines = ["Game Over!", "", "Final Scores:"]
        lines.extend(score_line(name, score) for name, score in self.scores)
        lines.append("")

        if self.is_tie:
            lines.append(f"It's a tie between {', '.join(self.winners)}!")
        else:
            lines.append(f"Congratulations, {self.winner} wins!")

        return "\n".join(lines)

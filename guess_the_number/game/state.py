"""Defines guess the number game state."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable
from .errors import InvalidSetupValue
from .rules import Difficulty


@dataclass
class Player:
    """A player and their running score."""

    name: str
    score: int = field(default=0)


@dataclass(frozen=True)
class GameConfig:
    """Configuration of a guess the number game, fixed after setup."""

    players: tuple[Player, ...]
    total_rounds: int
    max_number: int
    difficulty: Difficulty | None

    def __init__(
        self,
        players: Iterable[Player | str],
        total_rounds: int,
        max_number: int | None = None,
        difficulty: Difficulty | None = None,
    ):
        players = tuple(
            player if isinstance(player, Player) else Player(player)
            for player in players
        )
        if not players:
            raise InvalidSetupValue("A game needs at least one player")
        if total_rounds <= 0:
            raise InvalidSetupValue("The number of rounds must be positive")

        if max_number is None:
            if difficulty is None:
                raise InvalidSetupValue("Either a difficulty or a maximum is needed")
            max_number = difficulty.max_number
        if max_number <= 0:
            raise InvalidSetupValue("The maximum number must be positive")

        object.__setattr__(self, "players", players)
        object.__setattr__(self, "total_rounds", total_rounds)
        object.__setattr__(self, "max_number", max_number)
        object.__setattr__(self, "difficulty", difficulty)

    @property
    def player_count(self) -> int:
        """Returns the number of players."""
        return len(self.players)

    @property
    def player_names(self) -> list[str]:
        """Returns the player names in turn order."""
        return [player.name for player in self.players]


class Phase(Enum):
    """Phases of the turn state machine."""

    AWAITING_SETUP = "awaiting_setup"
    TURN_IN_PROGRESS = "turn_in_progress"
    GAME_OVER = "game_over"


@dataclass
class TurnState:
    """State of the game between turns. One instance per game."""

    current_round: int = field(default=1)
    current_player_index: int = field(default=0)
    secret_number: int | None = field(default=None, repr=False)
    phase: Phase = field(default=Phase.AWAITING_SETUP)

    @property
    def finished(self) -> bool:
        """Whether the last round has been played."""
        return self.phase is Phase.GAME_OVER

    @property
    def turn_in_progress(self) -> bool:
        """Whether a secret has been drawn and is awaiting a guess."""
        return self.phase is Phase.TURN_IN_PROGRESS

"""Resolve moderator input into a game configuration.

Every function here either returns a valid value, raises InvalidSetupValue
(the caller should ask again) or raises SetupCancelled (the caller should
not start a game). None stands for a cancelled prompt.
"""

from typing import Sequence
import structlog
from .errors import InvalidSetupValue, SetupCancelled
from .rules import Difficulty, default_player_name, parse_whole_number
from .state import GameConfig, Player

logger = structlog.get_logger()


def parse_count(raw: str | int | None, what: str = "count") -> int:
    """Parse a positive whole number such as a player or round count."""

    if raw is None:
        raise SetupCancelled(f"Setup cancelled while asking for the {what}")

    try:
        number = parse_whole_number(raw)
    except ValueError:
        raise InvalidSetupValue("Invalid input. Please enter a number.") from None

    if number <= 0:
        raise InvalidSetupValue("Please enter a positive number.")

    return number


def resolve_difficulty(choice: Difficulty | str | None) -> Difficulty:
    """Resolve a difficulty selection."""

    if choice is None:
        raise SetupCancelled("Setup cancelled while selecting the difficulty")

    try:
        return Difficulty.from_choice(choice)
    except ValueError as e:
        raise InvalidSetupValue(str(e)) from e


def resolve_name(raw: str | None, index: int) -> str:
    """Trim a player name, falling back to a generated one when blank."""

    if raw is None:
        raise SetupCancelled(f"Setup cancelled while naming player {index + 1}")

    name = raw.strip()
    return name if name else default_player_name(index)


def resolve_config(
    player_count_raw: str | int | None,
    round_count_raw: str | int | None,
    difficulty_choice: Difficulty | str | None,
    name_inputs: Sequence[str | None] = (),
) -> GameConfig:
    """Validate all setup input and build the game configuration."""

    player_count = parse_count(player_count_raw, "number of players")
    total_rounds = parse_count(round_count_raw, "number of rounds")
    difficulty = resolve_difficulty(difficulty_choice)

    if len(name_inputs) > player_count:
        raise InvalidSetupValue(
            f"Got {len(name_inputs)} names for {player_count} players"
        )

    # Missing trailing names count as left blank
    padded_names = list(name_inputs) + [""] * (player_count - len(name_inputs))
    players = [
        Player(resolve_name(raw, index)) for index, raw in enumerate(padded_names)
    ]

    config = GameConfig(players, total_rounds, difficulty=difficulty)

    logger.info(
        "game configured",
        players=config.player_names,
        total_rounds=config.total_rounds,
        difficulty=difficulty.name,
        max_number=config.max_number,
    )

    return config

"""Support for the guess the number game engine."""

import numpy as np
import structlog
from .errors import (
    GameNotFinishedError,
    GameOverError,
    InvalidGuessFormat,
    TurnNotStartedError,
)
from .events import GuessResult, Standings, TurnView
from .rules import draw_secret, parse_whole_number, score_guess, top_scorers
from .state import GameConfig, Phase, Player, TurnState

logger = structlog.get_logger()


def parse_guess(raw: str | int) -> int:
    """Read a guess as a whole number."""

    try:
        return parse_whole_number(raw)
    except ValueError:
        raise InvalidGuessFormat(raw) from None


class TurnEngine:
    """Drives a game one turn at a time.

    The engine owns the only TurnState of a game. The GUI holds a reference
    to the engine and reads state through it.
    """

    def __init__(self, config: GameConfig, rng=None):
        if rng is None:
            rng = np.random.default_rng()

        self.config = config
        self.rng = rng
        self.state = TurnState()
        self.standings: Standings | None = None

    @property
    def players(self) -> tuple[Player, ...]:
        """Returns the players in turn order."""
        return self.config.players

    @property
    def finished(self) -> bool:
        """Whether the last round has been played."""
        return self.state.finished

    @property
    def current_player(self) -> Player:
        """Returns the player on turn."""
        return self.players[self.state.current_player_index]

    def scores(self) -> tuple[tuple[str, int], ...]:
        """Returns (name, score) for every player in turn order."""
        return tuple((player.name, player.score) for player in self.players)

    def view(self) -> TurnView:
        """Summarise the current turn for display."""

        return TurnView(
            round_number=self.state.current_round,
            total_rounds=self.config.total_rounds,
            player_index=self.state.current_player_index,
            player_name=self.current_player.name,
            max_number=self.config.max_number,
            scores=self.scores(),
        )

    def start_turn(self) -> TurnView:
        """Draw a new secret number for the player on turn."""

        if self.state.finished:
            raise GameOverError("Can not start a turn when the game is over")

        self.state.secret_number = draw_secret(self.config.max_number, self.rng)
        self.state.phase = Phase.TURN_IN_PROGRESS

        logger.debug(
            "turn started",
            round=self.state.current_round,
            player=self.current_player.name,
            max_number=self.config.max_number,
        )

        return self.view()

    def submit_guess(self, raw: str | int) -> GuessResult:
        """Score a guess for the player on turn and move to the next turn.

        Raises InvalidGuessFormat without touching any state if the guess
        is not a whole number; the same player should guess again.
        """

        if self.state.finished:
            raise GameOverError("Can not guess when the game is over")
        if not self.state.turn_in_progress:
            raise TurnNotStartedError("Can not guess before a turn has started")

        guess = parse_guess(raw)

        player_index = self.state.current_player_index
        player = self.current_player
        secret_number = self.state.secret_number
        points = score_guess(guess, secret_number)
        player.score += points

        logger.info(
            "guess scored",
            round=self.state.current_round,
            player=player.name,
            guess=guess,
            secret_number=secret_number,
            points=points,
            score=player.score,
        )

        self.advance_turn()

        return GuessResult(
            player_index=player_index,
            player_name=player.name,
            guess=guess,
            secret_number=secret_number,
            correct=points > 0,
            points=points,
            score=player.score,
            game_over=self.state.finished,
        )

    def advance_turn(self):
        """Move to the next player, wrapping into the next round."""

        if self.state.finished:
            raise GameOverError("Can not advance when the game is over")

        self.state.current_player_index += 1
        if self.state.current_player_index >= self.config.player_count:
            self.state.current_player_index = 0
            self.state.current_round += 1

        if self.state.current_round > self.config.total_rounds:
            self.state.phase = Phase.GAME_OVER
            self.state.secret_number = None
            self.standings = self.compute_standings()

            logger.info(
                "game over",
                scores=list(self.standings.scores),
                winners=self.standings.winners,
                top_score=self.standings.top_score,
                tie=self.standings.is_tie,
            )
        else:
            self.start_turn()

    def compute_standings(self) -> Standings:
        """Find every player holding the top score."""

        if not self.state.finished:
            raise GameNotFinishedError("Can not compute standings before the game is over")

        scores = self.scores()
        winner_indices = top_scorers([score for _, score in scores])

        return Standings(scores=scores, winner_indices=tuple(winner_indices))

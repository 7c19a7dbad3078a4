"""Define errors raised by the guess the number game."""


class GameError(Exception):
    """Base class for all game errors."""


class InvalidSetupValue(GameError, ValueError):
    """A setup value was rejected; the moderator should be asked again."""


class SetupCancelled(GameError):
    """The moderator aborted setup, so no game is created."""


class InvalidGuessFormat(GameError, ValueError):
    """A guess could not be read as a whole number."""

    def __init__(self, raw):
        super().__init__(f"{raw!r} is not a valid number")
        self.raw = raw


class GameStateError(GameError, RuntimeError):
    """An operation was called in the wrong phase of the game."""


class TurnNotStartedError(GameStateError):
    """A guess was submitted before the first turn was started."""


class GameOverError(GameStateError):
    """A turn operation was called after the last round."""


class GameNotFinishedError(GameStateError):
    """Standings were requested before the last round was played."""

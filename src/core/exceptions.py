"""Custom exceptions shared by all layers. The Service propagates these as-is."""


class GameError(Exception):
    """Top-level exception for anything going wrong while handling a game."""


class NotFoundError(GameError):
    """Game, player or piece does not exist."""


class RepositoryError(GameError):
    """Persistence layer could not complete the request."""


class ForbiddenMoveError(GameError):
    """Player attempts to move a piece they do not own."""


class IllegalMoveError(GameError):
    """The move breaks the rules of the game."""


class NotYourTurnError(IllegalMoveError):
    """Player attempts to move while waiting for the opponent."""


class GameStateError(GameError):
    """The game is not in a state that allows the request (finished game, wrong mode, unknown status...)."""


class InvalidRequestError(GameError):
    """Malformed request data.

    NOTE: deliberately not a ValueError, so pydantic validators let it through unchanged.
    """


class NoLegalMoveError(GameError):
    """A bot was asked to move without having a single legal move."""

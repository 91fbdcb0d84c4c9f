"""Contract shared by all computer opponents."""

from typing import Protocol

from src.gobblet.game import Game
from src.gobblet.moves import Move
from src.gobblet.player import Player


class BotStrategy(Protocol):
    def decide_move(self, game: Game, player: Player) -> Move:
        """
        Pick the next move for `player`.

        Precondition: the game is in progress and the player has at least one legal move.
        Implementations raise NoLegalMoveError otherwise.
        """
        ...

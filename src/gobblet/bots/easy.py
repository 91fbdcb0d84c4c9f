"""Easy opponent: any legal reserve placement, picked uniformly at random."""

import random
from typing import Optional

from src.core.exceptions import NoLegalMoveError
from src.gobblet.game import Game
from src.gobblet.moves import Move
from src.gobblet.player import Player


class EasyBotStrategy:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def decide_move(self, game: Game, player: Player) -> Move:
        options = game.reserve_placements(player)
        if not options:
            raise NoLegalMoveError(f"Player {player.id} has no piece left to place.")
        return self.rng.choice(options)

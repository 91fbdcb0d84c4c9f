"""
Storage contract for Gobblet games.

A stored game is its JSON-friendly state (players with their reserves, the 3x3 grid of stacks, the move list
and the allocated pieces) plus metadata: status, whose turn it is, winner, mode (pvp / pvc) and bot difficulty.
Implemented with SQLAlchemy (sql_repository) and with a plain dictionary (memory_repository).
"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Where the service loads game state from and writes it back to after every move"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Stored state for this ID, or None for an unknown game."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Save a freshly created game; the repository assigns the ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite board, reserves, moves and metadata of an existing game. None if the ID is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Drop the game and hand back its last state (None if there was nothing to delete)."""
        ...

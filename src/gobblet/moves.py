"""A move: who moved which piece, from the reserve or another square, to which square."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from src.core.models import MoveData
from src.gobblet.pieces import Piece
from src.gobblet.square import Square


class Reserve(Protocol):
    """Just the parts of a Player needed to re-resolve a move"""

    @property
    def id(self) -> str: ...

    def find_piece(self, piece_id: str) -> Optional[Piece]: ...


@dataclass(frozen=True)
class Move:
    player_id: str
    from_square: Optional[Square]  # None: the piece comes from the player's reserve
    to_square: Square
    piece: Piece

    @property
    def is_placement(self) -> bool:
        return self.from_square is None

    def clone(self, players: Iterable[Reserve]) -> Move:
        """
        Re-resolve the move against cloned players.
        If the piece is still in the cloned player's reserve use that one, otherwise recreate it by id.
        """
        player = next(p for p in players if p.id == self.player_id)
        piece = player.find_piece(self.piece.id) or self.piece.clone(player)
        return Move(self.player_id, self.from_square, self.to_square, piece)

    def to_data(self) -> MoveData:
        return {
            "player_id": self.player_id,
            "piece": self.piece.to_data(),
            "from": self.from_square.to_pair() if self.from_square else None,
            "to": self.to_square.to_pair(),
        }

    @classmethod
    def from_data(cls, data: MoveData) -> Move:
        from_square = Square.from_pair(data["from"]) if data["from"] is not None else None
        return cls(
            player_id=data["player_id"],
            from_square=from_square,
            to_square=Square.from_pair(data["to"]),
            piece=Piece.from_data(data["piece"]),
        )

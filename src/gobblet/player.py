"""A player and the reserve of pieces they have not placed yet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Self
from uuid import uuid4

from src.core.models import PlayerData
from src.core.shared_types import PlayerType
from src.gobblet.pieces import PIECES_PER_SIZE, Piece, PieceSize


@dataclass
class Player:
    id: str
    type: PlayerType
    name: Optional[str] = None
    pieces: list[Piece] = field(default_factory=list)

    @classmethod
    def with_starting_pieces(
        cls, player_type: PlayerType, name: Optional[str] = None
    ) -> Self:
        """New player holding 2 pieces of every size"""
        player = cls(id=str(uuid4()), type=player_type, name=name)
        for size in PieceSize:
            for _ in range(PIECES_PER_SIZE):
                player.add_piece(Piece(size=size, owner_id=player.id))
        return player

    @property
    def is_computer(self) -> bool:
        return self.type == PlayerType.COMPUTER

    def available_pieces(self) -> list[Piece]:
        """Copy of the reserve: mutate the reserve through add_piece / remove_piece only."""
        return list(self.pieces)

    def has_piece(self, size: PieceSize) -> bool:
        return any(piece.size == size for piece in self.pieces)

    def find_piece(self, piece_id: str) -> Optional[Piece]:
        return next((piece for piece in self.pieces if piece.id == piece_id), None)

    def remove_piece(self, piece: Piece) -> None:
        """No-op if the piece is not in the reserve (e.g. it was moved from the board)."""
        self.pieces = [p for p in self.pieces if p.id != piece.id]

    def add_piece(self, piece: Piece) -> None:
        self.pieces.append(piece)

    def max_available_size(self) -> int:
        """0 when the reserve is empty"""
        return max((int(piece.size) for piece in self.pieces), default=0)

    def clone(self) -> Player:
        cloned = Player(self.id, self.type, self.name)
        for piece in self.pieces:
            cloned.add_piece(piece.clone(cloned))
        return cloned

    def to_data(self) -> PlayerData:
        return {
            "id": self.id,
            "type": self.type.value,
            "name": self.name,
            "pieces": [piece.to_data() for piece in self.pieces],
        }

    @classmethod
    def from_data(cls, data: PlayerData) -> Self:
        return cls(
            id=data["id"],
            type=PlayerType(data["type"]),
            name=data.get("name"),
            pieces=[Piece.from_data(piece) for piece in data["pieces"]],
        )

"""Defines the Gobblet pieces"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Protocol
from uuid import uuid4

from src.core.models import PieceData


class PieceSize(IntEnum):
    """Ordered: a piece can only cover (gobble) strictly smaller pieces."""

    SM = 1
    MD = 2
    LG = 3


# Every player starts with this many pieces of each size.
PIECES_PER_SIZE = 2


class Owner(Protocol):
    """Just the part of a Player a piece needs to know about"""

    @property
    def id(self) -> str: ...


def new_piece_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class Piece:
    """
    Immutable sized token.

    NOTE: The owner is referenced by id, never by object. That way a cloned Game can share
    pieces with the original without any reference pointing back into the original object graph.
    """

    size: PieceSize
    owner_id: str
    id: str = field(default_factory=new_piece_id)

    def can_cover(self, other: Piece) -> bool:
        return self.size > other.size

    def clone(self, new_owner: Owner) -> Piece:
        """Same id and size, owned by the (cloned) player with the same id."""
        return replace(self, owner_id=new_owner.id)

    @classmethod
    def from_data(cls, data: PieceData) -> Piece:
        return cls(size=PieceSize[data["size"]], owner_id=data["owner_id"], id=data["id"])

    def to_data(self) -> PieceData:
        return {"id": self.id, "size": self.size.name, "owner_id": self.owner_id}

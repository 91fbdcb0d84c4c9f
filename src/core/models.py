"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the domain layer (Game.to_model / Game.from_model) and the db layer use the model defined here,
which decouples the live object graph of a Game from whatever format it gets persisted in.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

# Type aliases to make GameModel easier to read
PlayerData = dict[str, Any]  # {"id", "type", "name", "pieces": [PieceData]}
PieceData = dict[str, str]  # {"id", "size", "owner_id"}
StackData = list[PieceData]  # bottom -> top
MoveData = dict[str, Any]  # {"player_id", "piece", "from", "to"}


@dataclass
class GameModel:
    """Transport-safe representation of a Gobblet game used between Service, DB, and Game layers."""

    players: list[PlayerData]
    board: list[list[StackData]]
    moves: list[MoveData]
    status: str
    current_player_id: str
    winner_id: Optional[str]
    mode: str
    difficulty: Optional[str] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    # every piece handed out when the game was created, wherever it is now
    pieces: list[PieceData] = field(default_factory=list)

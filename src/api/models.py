"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import BotDifficulty, GameMode, PlayerType, Status
from src.gobblet.square import BOARD_DIMENSIONS

PieceSizeName = str  # "SM" | "MD" | "LG"


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    mode: GameMode
    difficulty: BotDifficulty = BotDifficulty.EASY


class JoinGameRequest(BaseModel):
    game_id: UUID
    player_name: str

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be empty.")
        return value


class MoveRequest(BaseModel):
    game_id: UUID
    player_id: str
    piece_id: str
    to: tuple[int, int]

    @field_validator("to")
    @classmethod
    def validate_square(cls, value: tuple[int, int]) -> tuple[int, int]:
        row, col = value
        if not (0 <= row < BOARD_DIMENSIONS[0] and 0 <= col < BOARD_DIMENSIONS[1]):
            raise InvalidRequestError(
                f"Cannot interpret to: {list(value)!r} as a square on the board."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class CamelModel(BaseModel):
    """Serialized with camelCase keys: use model_dump(by_alias=True)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PieceView(CamelModel):
    id: str
    size: PieceSizeName


class PlayerView(CamelModel):
    id: str
    type: PlayerType
    pieces: list[PieceView]


class WinnerView(CamelModel):
    id: str
    type: PlayerType
    name: Optional[str] = None


class CellView(CamelModel):
    owner_id: str
    piece_id: str
    size: PieceSizeName


class GameSnapshot(CamelModel):
    """Public view of a game. Board is row-major, showing the top piece of every cell."""

    game_id: str
    status: Status
    current_player: str
    winner: Optional[WinnerView]
    players: list[PlayerView]
    board: list[list[Optional[CellView]]]


class MoveHistoryEntry(CamelModel):
    player_id: str
    piece_size: PieceSizeName
    to: list[int]


class PieceResponse(CamelModel):
    id: str
    owner_id: str
    size: PieceSizeName

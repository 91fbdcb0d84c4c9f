"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    players: Mapped[list[dict[str, Any]]] = mapped_column(JSON)
    # 3x3 grid of stacks (bottom -> top) of pieces
    board: Mapped[list[list[list[dict[str, str]]]]] = mapped_column(JSON)
    moves: Mapped[list[dict[str, Any]]] = mapped_column(JSON)
    # every piece allocated at creation
    pieces: Mapped[list[dict[str, str]]] = mapped_column(JSON)
    status: Mapped[str]
    current_player_id: Mapped[str]
    winner_id: Mapped[Optional[str]]
    mode: Mapped[str]
    difficulty: Mapped[Optional[str]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    started_at: Mapped[Optional[datetime]]
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)

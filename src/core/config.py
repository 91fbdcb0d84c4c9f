"""Runtime configuration, read from environment variables (prefix GOBBLET_)."""

import os
from dataclasses import dataclass
from functools import lru_cache

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./gobblet.db"
    database_echo: bool = False
    # plies searched by the hard bot
    search_depth: int = 4
    # A failed placement still removes the piece from the mover's reserve (historic behaviour).
    consume_piece_on_failed_move: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            database_url=os.environ.get("GOBBLET_DATABASE_URL", defaults.database_url),
            database_echo=_env_bool("GOBBLET_DATABASE_ECHO", defaults.database_echo),
            search_depth=int(
                os.environ.get("GOBBLET_SEARCH_DEPTH", defaults.search_depth)
            ),
            consume_piece_on_failed_move=_env_bool(
                "GOBBLET_CONSUME_PIECE_ON_FAILED_MOVE",
                defaults.consume_piece_on_failed_move,
            ),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()

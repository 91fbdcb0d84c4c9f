"""Implementation of (Game)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        game_db = DBGame(id=new_id)
        self._copy_into(game_db, game)
        if game.created_at is not None:
            game_db.created_at = game.created_at
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        self._copy_into(game_db, game)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _copy_into(self, game_db: DBGame, game: GameModel) -> None:
        """JSON columns get fresh values (not mutated in place), so SQLAlchemy picks up the change."""
        game_db.players = game.players
        game_db.board = game.board
        game_db.moves = game.moves
        game_db.pieces = game.pieces
        game_db.status = game.status
        game_db.current_player_id = game.current_player_id
        game_db.winner_id = game.winner_id
        game_db.mode = game.mode
        game_db.difficulty = game.difficulty
        game_db.started_at = game.started_at

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            players=game_db.players,
            board=game_db.board,
            moves=game_db.moves,
            status=game_db.status,
            current_player_id=game_db.current_player_id,
            winner_id=game_db.winner_id,
            mode=game_db.mode,
            difficulty=game_db.difficulty,
            created_at=game_db.created_at,
            started_at=game_db.started_at,
            pieces=game_db.pieces,
        )

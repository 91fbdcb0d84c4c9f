"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from src.core.shared_types import BotDifficulty, GameMode, Status
from src.db.sql_repository import GameModel, SQLGameRepository
from src.gobblet.game import Game
from src.gobblet.moves import Move
from src.gobblet.square import Square


@pytest.fixture
def model() -> GameModel:
    """Mock game data: a fresh pvc game"""
    return Game.new_game(GameMode.PVC, BotDifficulty.HARD).to_model()


def played_one_move(model: GameModel) -> GameModel:
    game = Game.from_model(model)
    human = game.players[0]
    game.make_move(Move(human.id, None, Square(1, 1), human.pieces[-1]))
    return game.to_model()


def test_create_game(db_session_repo: Session, model: GameModel) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db.players == model.players
    assert record_in_db.board == model.board
    assert record_in_db.moves == []
    assert record_in_db.pieces == model.pieces
    assert len(record_in_db.pieces) == 12
    assert record_in_db.status == Status.IN_PROGRESS
    assert record_in_db.current_player_id == model.current_player_id
    assert record_in_db.winner_id is None
    assert record_in_db.mode == GameMode.PVC
    assert record_in_db.difficulty == BotDifficulty.HARD
    assert record_in_db.created_at is not None
    assert record_in_db.started_at is None


def test_get_game_by_id(db_session_repo: Session, model: GameModel) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(model)
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_stored_game_rebuilds_same_engine_state(
    db_session_repo: Session, model: GameModel
) -> None:
    """Same piece ids, same stacks, same reserves after a round trip through the db"""
    repo = SQLGameRepository(db_session_repo)
    after_move = played_one_move(model)
    _, game_id = repo.create_game(after_move)

    stored = repo.get_game(game_id)
    assert stored is not None
    rebuilt = Game.from_model(stored)
    original = Game.from_model(after_move)
    assert rebuilt.board == original.board
    assert rebuilt.players == original.players
    assert rebuilt.moves == original.moves
    assert rebuilt.current_player.id == original.current_player.id


def test_get_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(model)
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session, model: GameModel) -> None:
    """Update an earlier created record."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    after = played_one_move(model)
    updated_game = repo.update_game(game_id, after)
    assert updated_game is not None
    assert updated_game.board == after.board
    assert updated_game.players == after.players
    assert updated_game.moves == after.moves
    assert updated_game.current_player_id == after.current_player_id


def test_consecutive_game_updates(db_session_repo: Session, model: GameModel) -> None:
    """Tests that we can successfully make multiple updates to the same game."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    first_update = played_one_move(model)
    game = Game.from_model(first_update)
    computer = game.players[1]
    game.make_move(Move(computer.id, None, Square(0, 0), computer.pieces[0]))
    second_update = game.to_model()

    repo.update_game(game_id, first_update)
    repo.update_game(game_id, second_update)

    after_all_updates = repo.get_game(game_id)
    assert after_all_updates is not None
    assert after_all_updates.moves == second_update.moves
    assert after_all_updates.board == second_update.board
    assert after_all_updates.current_player_id == second_update.current_player_id


def test_attempt_updating_unknown_game(
    db_session_repo: Session, model: GameModel
) -> None:
    """the update_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), model) is None


def test_delete_game(db_session_repo: Session, model: GameModel) -> None:
    """Record of the game should no longer exist after deletion"""
    repo = SQLGameRepository(db_session_repo)
    created_game, game_id = repo.create_game(model)
    deleted_game = repo.delete_game(game_id)

    # the correct game should be deleted
    assert deleted_game == created_game

    # The game should no longer be available in db
    assert repo.get_game(game_id) is None


def test_attempt_deleting_unknown_game(db_session_repo: Session) -> None:
    """the delete_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.delete_game(uuid4()) is None

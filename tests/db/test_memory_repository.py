"""Unit tests for src/db/memory_repository.py"""

from uuid import uuid4

from src.core.models import GameModel
from src.core.shared_types import GameMode
from src.db.memory_repository import InMemoryGameRepository
from src.gobblet.game import Game


def new_model() -> GameModel:
    return Game.new_game(GameMode.PVP).to_model()


def test_create_and_get() -> None:
    repo = InMemoryGameRepository()
    model = new_model()
    stored, game_id = repo.create_game(model)
    assert stored == model
    assert repo.get_game(game_id) == model


def test_stored_game_is_isolated_from_caller() -> None:
    """Changing a model after storing / fetching it does not change the record"""
    repo = InMemoryGameRepository()
    model = new_model()
    _, game_id = repo.create_game(model)
    model.players[0]["pieces"].clear()

    fetched = repo.get_game(game_id)
    assert fetched is not None
    assert len(fetched.players[0]["pieces"]) == 6

    fetched.status = "win"
    again = repo.get_game(game_id)
    assert again is not None
    assert again.status == "in_progress"


def test_update_and_delete() -> None:
    repo = InMemoryGameRepository()
    _, game_id = repo.create_game(new_model())
    other = new_model()

    assert repo.update_game(game_id, other) == other
    assert repo.get_game(game_id) == other
    assert repo.delete_game(game_id) == other
    assert repo.get_game(game_id) is None


def test_unknown_ids() -> None:
    repo = InMemoryGameRepository()
    assert repo.get_game(uuid4()) is None
    assert repo.update_game(uuid4(), new_model()) is None
    assert repo.delete_game(uuid4()) is None


def test_games_are_kept_apart() -> None:
    repo = InMemoryGameRepository()
    first, first_id = repo.create_game(new_model())
    second, second_id = repo.create_game(new_model())
    assert first_id != second_id
    assert repo.get_game(first_id) == first
    assert repo.get_game(second_id) == second

    repo.clear()
    assert repo.get_game(first_id) is None

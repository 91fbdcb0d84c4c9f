"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.shared_types import GameMode, PlayerType
from src.db.schema import Base
from src.gobblet.board import Board
from src.gobblet.game import Game
from src.gobblet.pieces import PieceSize
from src.gobblet.player import Player
from src.gobblet.square import Square

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

# (owner index, size, row, col) as used by the `game_with_pieces` fixture
Placement = tuple[int, PieceSize, int, int]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def human() -> Player:
    return Player.with_starting_pieces(PlayerType.HUMAN, name="Mocker M. Mockerson")


@pytest.fixture
def computer() -> Player:
    return Player.with_starting_pieces(PlayerType.COMPUTER)


@pytest.fixture
def new_game(human: Player, computer: Player) -> Game:
    """Empty board, full reserves, human to move"""
    return Game(
        board=Board(), players=(human, computer), current_player=human, mode=GameMode.PVC
    )


@pytest.fixture
def game_with_pieces() -> Callable[[list[Placement], int], Game]:
    """
    Call the inner function with pieces to put on the board (taken out of the owner's reserve),
    and the index of the player to move. Player 0 is human, player 1 the computer.
    """

    def _create_game(placements: list[Placement], to_move: int = 0) -> Game:
        players = (
            Player.with_starting_pieces(PlayerType.HUMAN),
            Player.with_starting_pieces(PlayerType.COMPUTER),
        )
        board = Board()
        for owner_idx, size, row, col in placements:
            owner = players[owner_idx]
            piece = next(p for p in owner.pieces if p.size == size)
            owner.remove_piece(piece)
            assert board.cell(Square(row, col)).place(piece)
        return Game(
            board=board,
            players=players,
            current_player=players[to_move],
            mode=GameMode.PVC,
        )

    return _create_game

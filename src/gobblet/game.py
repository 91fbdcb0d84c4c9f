"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating the turn order, applying moves through the Board and tracking when the game ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Self

from src.core.exceptions import GameStateError, NotFoundError, NotYourTurnError
from src.core.models import GameModel
from src.core.shared_types import BotDifficulty, GameMode, PlayerType, Status
from src.gobblet.board import Board
from src.gobblet.moves import Move
from src.gobblet.pieces import Piece
from src.gobblet.player import Player
from src.gobblet.square import all_squares


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: tuple[Player, Player]
    current_player: Player
    mode: GameMode = GameMode.PVP
    difficulty: Optional[BotDifficulty] = None
    moves: list[Move] = field(default_factory=list)
    status: Status = Status.IN_PROGRESS
    winner: Optional[Player] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    # Every piece allocated at creation. Reserves and board lose track of a consumed piece, this list does not.
    pieces: list[Piece] = field(default_factory=list)
    # NOTE: a failed placement still takes the piece out of the mover's reserve when True.
    consume_piece_on_failed_move: bool = True

    @classmethod
    def new_game(
        cls,
        mode: GameMode,
        difficulty: Optional[BotDifficulty] = None,
        consume_piece_on_failed_move: bool = True,
    ) -> Self:
        """Empty board, full reserves. The first (human) player moves first."""
        first = Player.with_starting_pieces(PlayerType.HUMAN)
        second_type = PlayerType.COMPUTER if mode == GameMode.PVC else PlayerType.HUMAN
        second = Player.with_starting_pieces(second_type)
        return cls(
            board=Board(),
            players=(first, second),
            current_player=first,
            mode=mode,
            difficulty=difficulty if mode == GameMode.PVC else None,
            pieces=first.available_pieces() + second.available_pieces(),
            consume_piece_on_failed_move=consume_piece_on_failed_move,
        )

    @classmethod
    def from_model(
        cls, model: GameModel, consume_piece_on_failed_move: bool = True
    ) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in Status.__members__.values():
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        if len(model.players) != 2:
            raise GameStateError(
                f"A game needs exactly two players, got {len(model.players)}."
            )

        first, second = (Player.from_data(data) for data in model.players)
        players = (first, second)
        game = cls(
            board=Board.from_data(model.board),
            players=players,
            current_player=first,
            mode=GameMode(model.mode),
            difficulty=BotDifficulty(model.difficulty) if model.difficulty else None,
            moves=[Move.from_data(move) for move in model.moves],
            status=Status(model.status),
            created_at=model.created_at,
            started_at=model.started_at,
            pieces=[Piece.from_data(piece) for piece in model.pieces],
            consume_piece_on_failed_move=consume_piece_on_failed_move,
        )
        game.current_player = game.player(model.current_player_id)
        game.winner = game.player(model.winner_id) if model.winner_id else None
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            players=[player.to_data() for player in self.players],
            board=self.board.to_data(),
            moves=[move.to_data() for move in self.moves],
            status=self.status.value,
            current_player_id=self.current_player.id,
            winner_id=self.winner.id if self.winner else None,
            mode=self.mode.value,
            difficulty=self.difficulty.value if self.difficulty else None,
            created_at=self.created_at,
            started_at=self.started_at,
            pieces=[piece.to_data() for piece in self.pieces],
        )

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def player(self, player_id: str) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise NotFoundError(f"Player with {player_id=} is not part of this game.")

    def opponent(self, player: Optional[Player] = None) -> Player:
        """The other player (of the current player, unless given)."""
        player = player or self.current_player
        return next(p for p in self.players if p.id != player.id)

    def find_piece(self, piece_id: str) -> Optional[Piece]:
        """Look in both reserves first, then on the board."""
        for player in self.players:
            piece = player.find_piece(piece_id)
            if piece is not None:
                return piece
        return self.board.find_piece_by_id(piece_id)

    def all_pieces(self) -> list[Piece]:
        """Pieces still in play: both reserves, then the board."""
        reserves = [piece for player in self.players for piece in player.pieces]
        return reserves + self.board.all_pieces()

    def allocated_pieces(self) -> list[Piece]:
        """Every piece the game started with, including ones lost on a failed placement."""
        if not self.pieces:
            return self.all_pieces()
        return list(self.pieces)

    def reserve_placements(self, player: Player) -> list[Move]:
        """Every legal move placing a piece from the player's reserve (no repositioning of pieces on the board)."""
        return [
            Move(player.id, None, square, piece)
            for piece in player.available_pieces()
            for square in all_squares()
            if self.board.is_valid_move(square, piece)
        ]

    def make_move(self, move: Move) -> bool:
        """
        Attempt to make a move
        -----

        1. check the game is still in progress and it is the mover's turn (raise otherwise)
        2. update the board
        3. take the piece out of the mover's reserve
        4. failed on the board? stop here: no turn change, nothing recorded
        5. record the move, then either declare the win or pass the turn

        Returns whether the move was applied.
        """
        if self.is_over:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        if move.player_id != self.current_player.id:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {self.current_player.id} to make a move first."
            )

        success = self.board.apply_move(move)
        if success or self.consume_piece_on_failed_move:
            self.current_player.remove_piece(move.piece)
        if not success:
            return False

        self.moves.append(move)

        if self.board.check_win(self.current_player):
            self._change_status(Status.WIN)
            self.winner = self.current_player
        else:
            self.current_player = self.opponent()
        return True

    def clone(self) -> Game:
        """Fully independent copy, used for look-ahead search."""
        players = (self.players[0].clone(), self.players[1].clone())
        cloned = Game(
            board=self.board.clone(players),
            players=players,
            current_player=players[0],
            mode=self.mode,
            difficulty=self.difficulty,
            status=self.status,
            created_at=self.created_at,
            started_at=self.started_at,
            pieces=list(self.pieces),
            consume_piece_on_failed_move=self.consume_piece_on_failed_move,
        )
        cloned.current_player = cloned.player(self.current_player.id)
        cloned.winner = cloned.player(self.winner.id) if self.winner else None
        cloned.moves = [move.clone(players) for move in self.moves]
        return cloned

    # -- PRIVATE HELPERS ---
    def _change_status(self, new_status: Status) -> None:
        self.status = new_status

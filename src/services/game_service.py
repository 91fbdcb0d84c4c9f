"""Orchestration of communication from API models to business logic and persistence layers (and the reverse direction)."""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional
from uuid import UUID

from src.api.models import (
    CellView,
    CreateGameRequest,
    DeleteGameRequest,
    GameSnapshot,
    GetGameRequest,
    JoinGameRequest,
    MoveHistoryEntry,
    MoveRequest,
    PieceResponse,
    PieceView,
    PlayerView,
    WinnerView,
)
from src.core.config import Settings, get_settings
from src.core.exceptions import (
    ForbiddenMoveError,
    GameStateError,
    IllegalMoveError,
    NotFoundError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import BotDifficulty, GameMode, PlayerType
from src.db.repository import GameRepository
from src.gobblet.bots.factory import BotStrategyFactory
from src.gobblet.bots.strategy import BotStrategy
from src.gobblet.game import Game
from src.gobblet.moves import Move
from src.gobblet.square import Square

logger = logging.getLogger(__name__)

BotFactory = Callable[[BotDifficulty], BotStrategy]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GameService:
    """
    Orchestration of layers for a Gobblet game.

    NOTE: Moves on the same game ID are not serialized here. The caller must make sure only one request
    mutates a given game at a time.

    NOTE: A computer player whose reserve is empty cannot answer (bots only place from the reserve).
    The game then stays in progress with the computer as current player, and every human move raises
    NotYourTurnError. Callers can spot this state in the snapshot (status in_progress, current player
    is the computer, its piece list is empty) and should end or delete the game.
    """

    def __init__(
        self,
        repository: GameRepository,
        bot_factory: Optional[BotFactory] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.repo = repository
        self.settings = settings or get_settings()
        self.bot_factory: BotFactory = bot_factory or (
            lambda difficulty: BotStrategyFactory.create(
                difficulty, self.settings.search_depth
            )
        )

    # -- API logic ---
    def create_game(self, request: CreateGameRequest) -> GameSnapshot:
        """Two players with full reserves, empty board."""
        new_game = Game.new_game(
            mode=request.mode,
            difficulty=request.difficulty,
            consume_piece_on_failed_move=self.settings.consume_piece_on_failed_move,
        )
        new_game.created_at = utc_now()
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info(
            "created game %s mode=%s difficulty=%s",
            game_id,
            request.mode,
            new_game.difficulty,
        )
        return self._create_snapshot(game_id, self._to_game(stored_game))

    def join_game(self, request: JoinGameRequest) -> GameSnapshot:
        """Second (human) player of a pvp game gets a name."""
        game = self._load_game(request.game_id)
        if game.mode != GameMode.PVP:
            raise GameStateError("Only player vs player games can be joined.")

        game.players[1].name = request.player_name
        self._save_game(request.game_id, game)
        logger.info("player %r joined game %s", request.player_name, request.game_id)
        return self._create_snapshot(request.game_id, game)

    def start_game(self, request: GetGameRequest) -> GameSnapshot:
        game = self._load_game(request.game_id)
        if game.started_at is None:
            game.started_at = utc_now()
            self._save_game(request.game_id, game)
        logger.info("started game %s", request.game_id)
        return self._create_snapshot(request.game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameSnapshot:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game = self._load_game(request.game_id)
        return self._create_snapshot(request.game_id, game)

    def make_move(self, request: MoveRequest) -> GameSnapshot:
        """
        Make a move attempt.
        ---
        When the turn passes to a computer player, the bot answers before this method returns.
        """
        game = self._load_game(request.game_id)

        # Resolve player and piece (reserves first, then the board)
        player = game.player(request.player_id)
        piece = game.find_piece(request.piece_id)
        if piece is None:
            raise NotFoundError(f"Piece with {request.piece_id=} not found.")
        if piece.owner_id != player.id:
            raise ForbiddenMoveError(
                f"Piece {piece.id} does not belong to player {player.id}."
            )

        from_square = game.board.find_piece_position(piece)
        if from_square is not None and game.board.top(from_square) != piece:
            raise IllegalMoveError(
                f"Piece {piece.id} is covered on {from_square.to_pair()} and cannot move."
            )

        move = Move(player.id, from_square, Square.from_pair(request.to), piece)
        logger.info(
            "game %s: player %s moves piece %s from %s to %s",
            request.game_id,
            player.id,
            piece.id,
            from_square.to_pair() if from_square else None,
            list(request.to),
        )
        applied = game.make_move(move)

        # Also persist a failed attempt: the reserve may have lost the piece.
        self._save_game(request.game_id, game)
        if not applied:
            raise IllegalMoveError(
                f"Cannot place {piece.size.name} on {list(request.to)}: the cell holds a piece of equal or bigger size."
            )

        if self._is_bot_turn(game):
            self._play_bot_move(request.game_id, game)

        return self._create_snapshot(request.game_id, game)

    def get_move_history(self, request: GetGameRequest) -> list[MoveHistoryEntry]:
        game = self._load_game(request.game_id)
        return [
            MoveHistoryEntry(
                player_id=move.player_id,
                piece_size=move.piece.size.name,
                to=move.to_square.to_pair(),
            )
            for move in game.moves
        ]

    def get_pieces(self, request: GetGameRequest) -> list[PieceResponse]:
        """All 12 pieces the game was created with, wherever they are now (or lost on a failed placement)."""
        game = self._load_game(request.game_id)
        return [
            PieceResponse(id=piece.id, owner_id=piece.owner_id, size=piece.size.name)
            for piece in game.allocated_pieces()
        ]

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("deleted game %s", request.game_id)

    # -- Internal helpers --
    def _is_bot_turn(self, game: Game) -> bool:
        return not game.is_over and game.current_player.type == PlayerType.COMPUTER

    def _play_bot_move(self, game_id: UUID, game: Game) -> None:
        bot = game.current_player
        if not game.reserve_placements(bot):
            logger.warning("game %s: computer player %s has no legal move", game_id, bot.id)
            return

        strategy = self.bot_factory(game.difficulty or BotDifficulty.EASY)
        bot_move = strategy.decide_move(game, bot)
        logger.info(
            "game %s: computer player %s moves to %s",
            game_id,
            bot.id,
            bot_move.to_square.to_pair(),
        )
        applied = game.make_move(bot_move)
        self._save_game(game_id, game)
        if not applied:
            logger.warning("game %s: invalid bot move %s", game_id, bot_move)

    def _create_snapshot(self, game_id: UUID, game: Game) -> GameSnapshot:
        """Convert a Game into the public GameSnapshot."""
        winner = (
            WinnerView(id=game.winner.id, type=game.winner.type, name=game.winner.name)
            if game.winner
            else None
        )
        players = [
            PlayerView(
                id=player.id,
                type=player.type,
                pieces=[
                    PieceView(id=piece.id, size=piece.size.name)
                    for piece in player.available_pieces()
                ],
            )
            for player in game.players
        ]
        board: list[list[Optional[CellView]]] = []
        for row in game.board.grid:
            board_row: list[Optional[CellView]] = []
            for cell in row:
                top = cell.top()
                board_row.append(
                    CellView(owner_id=top.owner_id, piece_id=top.id, size=top.size.name)
                    if top
                    else None
                )
            board.append(board_row)

        return GameSnapshot(
            game_id=str(game_id),
            status=game.status,
            current_player=game.current_player.id,
            winner=winner,
            players=players,
            board=board,
        )

    def _to_game(self, model: GameModel) -> Game:
        return Game.from_model(
            model,
            consume_piece_on_failed_move=self.settings.consume_piece_on_failed_move,
        )

    def _load_game(self, game_id: UUID) -> Game:
        return self._to_game(self._fetch_game(game_id))

    def _save_game(self, game_id: UUID, game: Game) -> None:
        if self.repo.update_game(game_id, game.to_model()) is None:
            raise RepositoryError(f"Game with {game_id=} could not be updated.")

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise NotFoundError(f"Game with {game_id=} not found.")
        return game_model

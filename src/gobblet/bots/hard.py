"""
Hard opponent: fixed depth minimax with alpha-beta pruning.

Only reserve placements are searched (same restriction as the easy bot).
Every node clones the whole Game and plays the move on the clone, so the live game is never touched.

At the horizon positions are scored with a static evaluation:
for each of the 8 lines, count how many of its cells each side could still end up owning,
map that count onto a steep curve and sum (mine - theirs).
"""

import logging
import math
from typing import Optional

from src.core.exceptions import NoLegalMoveError
from src.core.shared_types import Status
from src.gobblet.board import LINES, Line
from src.gobblet.game import Game
from src.gobblet.moves import Move
from src.gobblet.player import Player

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 4

# reachable cells in a line -> score
LINE_VALUES: dict[int, int] = {0: 0, 1: 1, 2: 16, 3: 256}

# Static evaluation of a finished game (only reached when evaluate() is called directly).
WIN_SCORE = 1_000_000

SearchResult = tuple[float, Optional[Move]]


def move_priority(move: Move) -> int:
    """center > corners > edges"""
    if move.to_square.is_center():
        return 3
    if move.to_square.is_corner():
        return 2
    return 1


def order_moves(moves: list[Move]) -> list[Move]:
    """Stable sort: moves with equal priority keep their generation order."""
    return sorted(moves, key=move_priority, reverse=True)


def unique_moves(moves: list[Move]) -> list[Move]:
    """Placing an equally sized piece on the same square gives the same position. Keep the first."""
    seen: set[tuple[int, int, int]] = set()
    unique: list[Move] = []
    for move in moves:
        key = (int(move.piece.size), move.to_square.row, move.to_square.col)
        if key not in seen:
            seen.add(key)
            unique.append(move)
    return unique


class HardBotStrategy:
    def __init__(self, depth: int = DEFAULT_DEPTH) -> None:
        self.depth = depth

    def decide_move(self, game: Game, player: Player) -> Move:
        score, move = self.minimax(game, player, self.depth, -math.inf, math.inf)
        if move is not None:
            logger.debug("hard bot picked %s (score=%s)", move, score)
            return move

        # Every line of play loses (or the search found nothing): any legal move will do.
        legal_moves = self.legal_moves(game, player)
        if not legal_moves:
            raise NoLegalMoveError(f"Player {player.id} has no piece left to place.")
        return legal_moves[0]

    def minimax(
        self,
        game: Game,
        maximizing_player: Player,
        depth: int,
        alpha: float,
        beta: float,
    ) -> SearchResult:
        """Scores are always from the point of view of maximizing_player."""
        opponent = game.opponent(maximizing_player)
        if game.board.check_win(maximizing_player):
            return math.inf, None
        if game.board.check_win(opponent):
            return -math.inf, None
        if game.status == Status.DRAW:
            return 0, None
        if depth == 0:
            return self.evaluate(game, maximizing_player), None

        current = game.current_player
        legal_moves = self.legal_moves(game, current)
        if not legal_moves:
            return self.evaluate(game, maximizing_player), None

        maximizing = current.id == maximizing_player.id
        best_move: Optional[Move] = None
        value = -math.inf if maximizing else math.inf

        for move in order_moves(legal_moves):
            next_game = game.clone()
            next_game.make_move(move.clone(next_game.players))
            score, _ = self.minimax(
                next_game, maximizing_player, depth - 1, alpha, beta
            )
            if maximizing:
                if score > value:
                    value, best_move = score, move
                alpha = max(alpha, value)
            else:
                if score < value:
                    value, best_move = score, move
                beta = min(beta, value)
            if alpha >= beta:
                break

        return value, best_move

    def legal_moves(self, game: Game, player: Player) -> list[Move]:
        return unique_moves(game.reserve_placements(player))

    # --- STATIC EVALUATION ---
    def evaluate(self, game: Game, player: Player) -> float:
        board = game.board
        opponent = game.opponent(player)

        if board.check_win(player):
            return WIN_SCORE
        if board.check_win(opponent):
            return -WIN_SCORE
        if game.status == Status.DRAW:
            return 0

        my_max = player.max_available_size()
        opp_max = opponent.max_available_size()

        score = 0
        for line in LINES:
            mine, theirs = self.line_reachability(
                game, line, player, my_max, opp_max
            )
            score += LINE_VALUES[mine] - LINE_VALUES[theirs]
        return score

    def line_reachability(
        self, game: Game, line: Line, player: Player, my_max: int, opp_max: int
    ) -> tuple[int, int]:
        """
        Number of cells in the line each side could still own: (mine, theirs).

        A cell topped by one side counts for the other side only if they still hold a bigger piece.
        A single piece that cannot be covered blocks the whole line for the other side.
        """
        my_reachable = opp_reachable = 0
        my_blocked = opp_blocked = False

        for square in line:
            top = game.board.top(square)
            if top is None:
                my_reachable += 1
                opp_reachable += 1
            elif top.owner_id == player.id:
                my_reachable += 1
                if top.size >= opp_max:
                    opp_blocked = True
                else:
                    opp_reachable += 1
            else:
                opp_reachable += 1
                if top.size >= my_max:
                    my_blocked = True
                else:
                    my_reachable += 1

        if my_blocked:
            my_reachable = 0
        if opp_blocked:
            opp_reachable = 0
        return my_reachable, opp_reachable

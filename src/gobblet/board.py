"""The Game board implements all rules that effect the position: stacking pieces in cells and detecting lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from src.core.models import StackData
from src.gobblet.moves import Move
from src.gobblet.pieces import Owner, Piece
from src.gobblet.square import BOARD_DIMENSIONS, Square, all_squares

Line = tuple[Square, Square, Square]


def _lines() -> list[Line]:
    """The 8 winning lines: 3 rows, 3 columns, 2 diagonals"""
    size = BOARD_DIMENSIONS[0]
    rows = [tuple(Square(r, c) for c in range(size)) for r in range(size)]
    cols = [tuple(Square(r, c) for r in range(size)) for c in range(size)]
    diagonal = tuple(Square(i, i) for i in range(size))
    anti_diagonal = tuple(Square(i, size - 1 - i) for i in range(size))
    return [*rows, *cols, diagonal, anti_diagonal]  # type: ignore[list-item]


LINES: list[Line] = _lines()


@dataclass
class Cell:
    """A stack of pieces. Last element is the top (the only visible piece)."""

    pieces: list[Piece] = field(default_factory=list)

    def top(self) -> Optional[Piece]:
        return self.pieces[-1] if self.pieces else None

    def can_place(self, piece: Piece) -> bool:
        top = self.top()
        return top is None or piece.can_cover(top)

    def place(self, piece: Piece) -> bool:
        if not self.can_place(piece):
            return False
        self.pieces.append(piece)
        return True

    def remove_top(self) -> Optional[Piece]:
        return self.pieces.pop() if self.pieces else None

    def stack(self) -> list[Piece]:
        """Copy of the stack, bottom to top"""
        return list(self.pieces)

    def contains(self, piece: Piece) -> bool:
        return any(p.id == piece.id for p in self.pieces)

    def is_empty(self) -> bool:
        return not self.pieces

    def clone(self, players: Iterable[Owner]) -> Cell:
        """Copy of the stack with every piece re-owned to the player with the matching id."""
        owners = {player.id: player for player in players}
        return Cell([piece.clone(owners[piece.owner_id]) for piece in self.pieces])

    def to_data(self) -> StackData:
        return [piece.to_data() for piece in self.pieces]

    @classmethod
    def from_data(cls, data: StackData) -> Cell:
        return cls([Piece.from_data(piece) for piece in data])


@dataclass
class Board:
    grid: list[list[Cell]] = field(
        default_factory=lambda: [
            [Cell() for _ in range(BOARD_DIMENSIONS[1])]
            for _ in range(BOARD_DIMENSIONS[0])
        ]
    )

    def cell(self, square: Square) -> Cell:
        """Out of bounds is a programming error: requests are validated before reaching the board."""
        if not square.is_within_bounds():
            raise IndexError(f"{square} is not on the board.")
        return self.grid[square.row][square.col]

    def top(self, square: Square) -> Optional[Piece]:
        return self.cell(square).top()

    def is_valid_move(self, square: Square, piece: Piece) -> bool:
        return self.cell(square).can_place(piece)

    def apply_move(self, move: Move) -> bool:
        """
        Update the position on the board.

        The destination is checked first: a failed move leaves the board untouched (also the source cell).
        Returns whether the piece got placed.
        """
        if not self.is_valid_move(move.to_square, move.piece):
            return False
        if move.from_square is not None:
            lifted = self.cell(move.from_square).remove_top()
            assert lifted is not None, f"No piece to lift from {move.from_square}"
        return self.cell(move.to_square).place(move.piece)

    def owns_square(self, square: Square, player_id: str) -> bool:
        top = self.top(square)
        return top is not None and top.owner_id == player_id

    def check_win(self, player: Owner) -> bool:
        """Any row, column or diagonal with only the player's pieces on top."""
        return any(
            all(self.owns_square(square, player.id) for square in line)
            for line in LINES
        )

    def find_piece_position(self, piece: Piece) -> Optional[Square]:
        for square in all_squares():
            if self.cell(square).contains(piece):
                return square
        return None

    def find_piece_by_id(self, piece_id: str) -> Optional[Piece]:
        for square in all_squares():
            for piece in self.cell(square).pieces:
                if piece.id == piece_id:
                    return piece
        return None

    def all_pieces(self) -> list[Piece]:
        """Every piece on the board, hidden ones included (row-major, bottom to top)."""
        return [piece for square in all_squares() for piece in self.cell(square).pieces]

    def clone(self, players: Iterable[Owner]) -> Board:
        players = list(players)
        return Board([[cell.clone(players) for cell in row] for row in self.grid])

    def to_data(self) -> list[list[StackData]]:
        return [[cell.to_data() for cell in row] for row in self.grid]

    @classmethod
    def from_data(cls, data: list[list[StackData]]) -> Board:
        return cls([[Cell.from_data(stack) for stack in row] for row in data])

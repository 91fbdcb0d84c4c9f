"""
A square (cell coordinate) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

# Gobblet is played on a 3x3 board only.
BOARD_DIMENSIONS = (3, 3)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> Square:
        """[row, col] (as sent by clients / stored in the db) to a Square"""
        row, col = pair
        return cls(int(row), int(col))

    def to_pair(self) -> list[int]:
        return [self.row, self.col]

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def is_center(self) -> bool:
        return self.row == BOARD_DIMENSIONS[0] // 2 and self.col == BOARD_DIMENSIONS[1] // 2

    def is_corner(self) -> bool:
        return self.row in (0, BOARD_DIMENSIONS[0] - 1) and self.col in (
            0,
            BOARD_DIMENSIONS[1] - 1,
        )


def all_squares() -> list[Square]:
    """Row-major order"""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]

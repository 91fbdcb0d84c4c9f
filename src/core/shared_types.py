"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"
    LOSE = "lose"


class PlayerType(StrEnum):
    HUMAN = "human"
    COMPUTER = "computer"


class GameMode(StrEnum):
    PVP = "pvp"
    PVC = "pvc"


class BotDifficulty(StrEnum):
    EASY = "easy"
    HARD = "hard"

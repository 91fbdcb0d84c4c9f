"""Select the bot strategy belonging to a difficulty."""

from typing import Optional

from src.core.config import get_settings
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import BotDifficulty
from src.gobblet.bots.easy import EasyBotStrategy
from src.gobblet.bots.hard import HardBotStrategy
from src.gobblet.bots.strategy import BotStrategy


class BotStrategyFactory:
    @staticmethod
    def create(
        difficulty: BotDifficulty, search_depth: Optional[int] = None
    ) -> BotStrategy:
        if difficulty == BotDifficulty.EASY:
            return EasyBotStrategy()
        if difficulty == BotDifficulty.HARD:
            return HardBotStrategy(depth=search_depth or get_settings().search_depth)
        raise InvalidRequestError(f"Unsupported bot difficulty: {difficulty}")

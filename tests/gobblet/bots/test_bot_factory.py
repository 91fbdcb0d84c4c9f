"""Unit tests for /src/gobblet/bots/factory.py"""

import pytest

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import BotDifficulty
from src.gobblet.bots.easy import EasyBotStrategy
from src.gobblet.bots.factory import BotStrategyFactory
from src.gobblet.bots.hard import HardBotStrategy


def test_easy() -> None:
    assert isinstance(BotStrategyFactory.create(BotDifficulty.EASY), EasyBotStrategy)


def test_hard_with_depth() -> None:
    bot = BotStrategyFactory.create(BotDifficulty.HARD, search_depth=2)
    assert isinstance(bot, HardBotStrategy)
    assert bot.depth == 2


def test_hard_uses_configured_depth_by_default() -> None:
    bot = BotStrategyFactory.create(BotDifficulty.HARD)
    assert isinstance(bot, HardBotStrategy)
    assert bot.depth == 4


def test_unknown_difficulty() -> None:
    with pytest.raises(InvalidRequestError):
        BotStrategyFactory.create("medium")  # type: ignore[arg-type]

"""
Factory for creating short id generation strategies.
"""

from enum import Enum
from typing import Optional

from shortener_app.services.short_id_strategies import (
    ShortIdStrategy,
    UuidShortIdStrategy,
    RandomShortIdStrategy
)
from shortener_app.config import settings


class ShortIdStrategyType(Enum):
    """Available short id generation strategies"""
    UUID = "uuid"
    RANDOM = "random"


class ShortIdFactory:
    """Factory for creating short id generation strategies"""

    @classmethod
    def create_strategy(
        cls,
        strategy_type: Optional[ShortIdStrategyType] = None,
        length: Optional[int] = None
    ) -> ShortIdStrategy:
        """
        Create a short id generation strategy.

        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.
            length: Length of generated ids.
                    If None, uses value from settings.

        Returns:
            A ShortIdStrategy instance

        Raises:
            ValueError: If strategy_type is unknown or length is out of range
        """
        if strategy_type is None:
            strategy_type = ShortIdStrategyType(settings.short_id_strategy)
        if length is None:
            length = settings.short_id_length

        if strategy_type == ShortIdStrategyType.UUID:
            return UuidShortIdStrategy(length=length)
        if strategy_type == ShortIdStrategyType.RANDOM:
            return RandomShortIdStrategy(length=length)

        raise ValueError(f"Unknown strategy type: {strategy_type}")

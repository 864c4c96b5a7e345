"""
Factory for creating short code generation strategies.
Uses caching to avoid creating multiple instances.
"""

from enum import Enum
from tinyurl_app.services.short_code_strategies import (
    ShortCodeStrategy,
    HexShortCodeStrategy,
    RandomShortCodeStrategy
)
from tinyurl_app.config import Settings, settings


class ShortCodeStrategyType(Enum):
    """Available short code generation strategies"""
    HEX = "hex"
    RANDOM = "random"


class ShortCodeFactory:
    """Factory for creating short code generation strategies with caching"""

    _instances = {}  # Cache for strategy instances

    @classmethod
    def create_strategy(
        cls,
        strategy_type: ShortCodeStrategyType = None,
        app_settings: Settings = None
    ) -> ShortCodeStrategy:
        """
        Create or return cached short code generation strategy.

        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.
            app_settings: Settings to read strategy options from.
                          If None, uses the module-level settings.

        Returns:
            A cached instance of a ShortCodeStrategy

        Raises:
            ValueError: If strategy_type is unknown
        """
        if app_settings is None:
            app_settings = settings

        # Use default from settings if not specified
        if strategy_type is None:
            strategy_type = ShortCodeStrategyType(app_settings.short_code_strategy)

        if strategy_type == ShortCodeStrategyType.HEX:
            cache_key = (strategy_type, app_settings.short_code_bytes)
        elif strategy_type == ShortCodeStrategyType.RANDOM:
            cache_key = (strategy_type, app_settings.short_code_length)
        else:
            raise ValueError(f"Unknown strategy type: {strategy_type}")

        # Keyed by type and size: apps built with different settings get their own
        if cache_key in cls._instances:
            return cls._instances[cache_key]

        if strategy_type == ShortCodeStrategyType.HEX:
            instance = HexShortCodeStrategy(num_bytes=app_settings.short_code_bytes)
        else:
            instance = RandomShortCodeStrategy(length=app_settings.short_code_length)

        cls._instances[cache_key] = instance
        return instance

    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances = {}

"""
Registry for looking up strategies by name.
"""
from typing import Dict, Type, List
from .strategies import (
    Strategy, StrategyConfig, ConservativeStrategy, DiceThresholdStrategy
)


class StrategyRegistry:
    """Strategies available to computer players and the simulator."""

    def __init__(self):
        self._strategies: Dict[str, Type[Strategy]] = {}
        self.register(ConservativeStrategy)
        self.register(DiceThresholdStrategy)

    def register(self, strategy_class: Type[Strategy]):
        """Register a strategy under its lower-cased config name."""
        name = strategy_class.get_default_config().name.lower()
        if name in self._strategies:
            raise ValueError(f"Strategy already registered: {name}")
        self._strategies[name] = strategy_class

    def get_strategy(self, name: str, **overrides) -> Strategy:
        """Build a strategy, optionally overriding its default parameters."""
        strategy_class = self._strategies.get(name.lower())
        if not strategy_class:
            raise ValueError(f"Unknown strategy: {name}")

        config = strategy_class.get_default_config()
        unknown = set(overrides) - set(config.parameters)
        if unknown:
            raise ValueError(f"Unknown parameters for {config.name}: {', '.join(sorted(unknown))}")
        config.parameters.update(overrides)
        return strategy_class(config)

    def list_strategies(self) -> List[str]:
        return list(self._strategies)

    def get_all_strategies_info(self) -> Dict[str, StrategyConfig]:
        return {
            name: strategy_class.get_default_config()
            for name, strategy_class in self._strategies.items()
        }


strategy_registry = StrategyRegistry()

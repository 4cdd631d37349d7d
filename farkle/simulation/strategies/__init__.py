"""
Strategy implementations for computer-played Farkle turns.
"""
from .base import Strategy, StrategyConfig
from .conservative import ConservativeStrategy
from .dice_threshold import DiceThresholdStrategy

__all__ = [
    "Strategy",
    "StrategyConfig",
    "ConservativeStrategy",
    "DiceThresholdStrategy",
]

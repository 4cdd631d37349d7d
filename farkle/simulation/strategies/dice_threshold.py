"""
Dice threshold strategy implementation.
"""
from ...core.turn import TurnState
from .base import Strategy, StrategyConfig


class DiceThresholdStrategy(Strategy):
    """Roll again only with enough dice in hand.

    Hot dice always count as six dice to roll.
    """

    def setup(self, min_dice: int = 3, max_score: int = 2000):
        self.min_dice = min_dice
        self.max_score = max_score

    def should_continue(self, state: TurnState) -> bool:
        if state.accumulated_score >= self.max_score:
            return False
        return state.dice_to_roll >= self.min_dice

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="DiceThreshold",
            description="Roll again while at least min_dice dice remain",
            parameters={"min_dice": 3, "max_score": 2000}
        )

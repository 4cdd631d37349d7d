"""
Conservative strategy implementation.
"""
from ...core.turn import TurnState
from .base import Strategy, StrategyConfig


class ConservativeStrategy(Strategy):
    """Bank once the turn reaches a score threshold."""

    def setup(self, threshold: int = 300):
        self.threshold = threshold

    def should_continue(self, state: TurnState) -> bool:
        return state.accumulated_score < self.threshold

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="Conservative",
            description="Bank after reaching score threshold",
            parameters={"threshold": 300}
        )

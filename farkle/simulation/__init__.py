"""Simulation module for Farkle."""
from .simulator import TurnSimulator, SimulationResult
from .strategies import Strategy
from .strategy_registry import strategy_registry

__all__ = [
    "TurnSimulator",
    "SimulationResult",
    "Strategy",
    "strategy_registry",
]

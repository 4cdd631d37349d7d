"""
Shared fixtures for the Farkle tests.
"""
import io

import pytest
from rich.console import Console

from farkle.config import FarkleSettings


class ScriptedRandomSource:
    """Rolls a fixed sequence of faces, one per draw."""

    def __init__(self, faces):
        self.faces = [int(f) for f in str(faces)] if isinstance(faces, (str, int)) else list(faces)
        self.draws = 0

    def seed(self, value):
        pass

    def next_random(self, limit):
        face = self.faces[self.draws]
        self.draws += 1
        return (face - 1) % limit


@pytest.fixture
def scripted_rng():
    """Factory for a random source that rolls the given faces in order."""
    return ScriptedRandomSource


@pytest.fixture
def settings():
    return FarkleSettings(target_score=10000, max_players=4, log_level="WARNING")


@pytest.fixture
def make_cli(settings):
    """Build an InteractiveCLI reading answers from text and recording output."""
    from farkle.cli.interface import InteractiveCLI

    def factory(answers: str):
        console = Console(file=io.StringIO(), width=120, highlight=False)
        return InteractiveCLI(settings, console=console, stream=io.StringIO(answers))

    return factory


def output_of(cli) -> str:
    return cli.console.file.getvalue()


@pytest.fixture
def cli_output():
    return output_of

import logging
from typing import List, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt, IntPrompt

from ..config import FarkleSettings, get_settings
from ..core.errors import SelectionError
from ..core.game import Game, MIN_PLAYERS
from ..core.player import Player
from ..core.random_source import RandomSource
from ..core.turn import Turn, TurnStatus
from ..simulation import TurnSimulator, SimulationResult
from ..simulation.strategy_registry import strategy_registry


logger = logging.getLogger(__name__)


class TextPrompt(Prompt):
    """Text prompt that ends with a single space."""
    prompt_suffix = " "


class NumberPrompt(IntPrompt):
    prompt_suffix = " "


def parse_seed(text: str) -> int:
    """Parse a seed typed as decimal, 0x-prefixed hexadecimal or 0-prefixed octal."""
    text = text.strip().lower()
    if text.startswith("0x"):
        value = int(text[2:], 16)
    elif len(text) > 1 and text.startswith("0"):
        value = int(text[1:], 8)
    else:
        value = int(text, 10)
    if value < 0:
        raise ValueError(f"Seed must be non-negative, got {value}")
    return value


def is_digit_sequence(text: str) -> bool:
    """Check that text is non-empty and made only of ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()


class InteractiveCLI:
    """Interactive command-line interface for Farkle."""

    def __init__(
        self,
        settings: Optional[FarkleSettings] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.settings = settings or get_settings()
        self.console = console or Console(highlight=False)
        self.stream = stream
        self.simulator = TurnSimulator()

    def _ask(self, prompt: str) -> str:
        return TextPrompt.ask(prompt, console=self.console, stream=self.stream)

    def ask_player_count(self) -> int:
        """Ask for the number of players, re-prompting once if out of range."""
        max_players = self.settings.max_players
        players = NumberPrompt.ask("How many players?", console=self.console, stream=self.stream)
        if not MIN_PLAYERS <= players <= max_players:
            players = NumberPrompt.ask(
                f"This game only supports {MIN_PLAYERS} to {max_players} players. How many?",
                console=self.console,
                stream=self.stream,
            )
            if not MIN_PLAYERS <= players <= max_players:
                clamped = min(max(players, MIN_PLAYERS), max_players)
                logger.warning("Player count %d out of range, using %d", players, clamped)
                players = clamped
        return players

    def ask_seed(self) -> int:
        """Ask for a seed integer until one parses."""
        while True:
            text = self._ask("Enter a seed integer (decimal or hexadecimal)")
            try:
                return parse_seed(text)
            except ValueError:
                self.console.print("[red]Please enter a number such as 42 or 0x2A[/red]")

    def show_scores(self, game: Game):
        """Display the score line."""
        scores = "  ".join(f"{i + 1}: {p.score}" for i, p in enumerate(game.players))
        self.console.print(f"\nSCORES -- {scores}")

    def keep_dice(self, turn: Turn):
        """Prompt until the player keeps a scoring selection."""
        while True:
            text = self._ask("Which to keep?").strip()
            if not is_digit_sequence(text):
                self.console.print("[red]Enter the dice to keep as digits, e.g. 15[/red]")
                continue

            result = turn.keep(text)
            if result.accepted:
                return result
            if result.error == SelectionError.NO_SCORING_DICE:
                self.console.print("Must keep scoring dice. Try again.")
            else:
                self.console.print("No match, try again.")

    def play_turn(self, turn: Turn) -> int:
        """Play a single turn interactively and return its score."""
        while True:
            dice_count = turn.state.dice_to_roll
            roll = turn.roll()
            self.console.print(f"Rolling {dice_count} dice...{roll}")

            if turn.state.status == TurnStatus.BUSTED:
                self.console.print("[bold red]FARKLE -- your turn is over.[/bold red]")
                return turn.final_score

            result = self.keep_dice(turn)
            self.console.print(f"Keeping {result.kept}, score = {result.points}")
            self.console.print(f"Score so far = {turn.state.accumulated_score}")

            if result.hot_dice:
                question = "[bold magenta]HOT DICE![/bold magenta]  Roll 6 dice (y/n)?"
            else:
                question = f"{turn.state.dice_to_roll} dice left -- roll again (y/n)?"

            answer = self._ask(question).strip()
            if answer[:1] != "y":
                return turn.bank()

    def run(self, players: Optional[int] = None, seed: Optional[int] = None, rng=None) -> Game:
        """Play a full game; returns the finished game."""
        self.console.print("[bold cyan]Welcome to Farkle![/bold cyan]")
        if players is None:
            players = self.ask_player_count()
        if rng is None:
            if seed is None:
                seed = self.ask_seed()
            rng = RandomSource(seed)

        game = Game(
            [Player(f"Player {i + 1}") for i in range(players)],
            rng,
            target_score=self.settings.target_score,
        )

        while not game.game_over:
            self.show_scores(game)
            self.console.print(f"{game.current_player.name}'s turn")
            turn = game.start_turn()
            score = self.play_turn(turn)
            self.console.print(f"Turn score = {score}")
            game.complete_turn(turn)

        if game.winner:
            self.show_scores(game)
            self.console.print(f"[bold green]{game.winner.name} wins![/bold green]")
        return game

    def show_simulation_results(self, result: SimulationResult, strategy_name: str):
        """Display simulation results."""
        table = Table(title=f"Turn Simulation ({strategy_name}, {result.num_simulations} turns)")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Expected score", f"{result.expected_value:.1f}")
        table.add_row("Std deviation", f"{result.std_deviation:.1f}")
        for p, value in result.percentiles.items():
            table.add_row(f"{p}th percentile", f"{value:.0f}")
        table.add_row("Bust rate", f"{result.bust_rate:.1%}")
        table.add_row("Hot dice rate", f"{result.hot_dice_rate:.1%}")
        self.console.print(table)

    def show_bust_probabilities(self, probabilities: List[float]):
        table = Table(title="Chance of a Farkle")
        table.add_column("Dice", style="cyan")
        table.add_column("Bust", style="red")
        for num_dice, probability in enumerate(probabilities, start=1):
            table.add_row(str(num_dice), f"{probability:.1%}")
        self.console.print(table)

    def run_simulation(self, strategy_name: str, num_turns: int, seed: Optional[int] = None) -> SimulationResult:
        """Run simulation without playing."""
        strategy = strategy_registry.get_strategy(strategy_name)
        self.console.print(f"[dim]{strategy.get_description()}[/dim]")

        with self.console.status("[bold green]Simulating turns..."):
            result = self.simulator.simulate_turns(strategy, num_turns=num_turns, seed=seed)
            probabilities = [
                self.simulator.calculate_probabilities(n, num_trials=num_turns, seed=seed)["bust_probability"]
                for n in range(1, 7)
            ]

        self.show_simulation_results(result, strategy_name)
        self.show_bust_probabilities(probabilities)
        return result

import click

from ..config import configure_logging, get_settings
from ..core.game import MIN_PLAYERS
from ..simulation.strategy_registry import strategy_registry
from .interface import InteractiveCLI, parse_seed


def _validate_seed(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_seed(value)
    except ValueError:
        raise click.BadParameter("seed must be a decimal, 0x-prefixed hexadecimal or 0-prefixed octal integer")


@click.command()
@click.option('--players', '-p', type=int, help='Number of players (skips the prompt)')
@click.option('--seed', callback=_validate_seed, help='Random seed, decimal, 0x-prefixed hex or 0-prefixed octal (skips the prompt)')
@click.option('--target', type=click.IntRange(min=1), help='Score needed to win')
@click.option('--log-level', help='Logging level, e.g. DEBUG')
@click.option('--simulate', '-s', is_flag=True, help='Run in simulation mode')
@click.option('--turns', '-t', type=click.IntRange(min=1), help='Number of turns to simulate')
@click.option('--strategy', type=click.Choice(strategy_registry.list_strategies(), case_sensitive=False),
              default='conservative', show_default=True, help='Strategy used in simulation mode')
def main(players, seed, target, log_level, simulate, turns, strategy):
    """Farkle - a dice game for 1 to 4 players."""
    settings = get_settings()
    overrides = {}
    if target is not None:
        overrides["target_score"] = target
    if log_level is not None:
        overrides["log_level"] = log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level, settings.log_file)

    if players is not None and not MIN_PLAYERS <= players <= settings.max_players:
        raise click.BadParameter(
            f"must be between {MIN_PLAYERS} and {settings.max_players}", param_hint="--players"
        )

    cli = InteractiveCLI(settings)
    if simulate:
        click.echo(f"Running {turns or settings.simulation_turns} turns of simulation...")
        cli.run_simulation(strategy, turns or settings.simulation_turns, seed=seed)
    else:
        cli.run(players=players, seed=seed)


if __name__ == "__main__":
    main()

"""Main CLI application for PokeSim."""

import random
from typing import Optional

import typer
from rich.console import Console

from pokesim import __version__
from pokesim.cli.ui.displays import display_battle, display_pokedex
from pokesim.core.battle import simulate
from pokesim.core.errors import CombatantNotFoundError
from pokesim.data.catalog import get_combatant, list_combatants
from pokesim.utils.config import config
from pokesim.utils.helpers import setup_logging

# Create main app
app = typer.Typer(
    name="pokesim",
    help="PokeSim - simulate Pokemon battles and serve the game API",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pokesim {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: str = typer.Option(config.log_level, "--log-level", "-l", help="Logging level"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """PokeSim command line."""
    setup_logging(log_level)


@app.command("pokedex")
def show_pokedex() -> None:
    """List the Pokemon available for battle."""
    display_pokedex(list_combatants())


@app.command("battle")
def battle(
    player_id: int = typer.Argument(..., help="Pokedex number of the player's Pokemon"),
    opponent_id: int = typer.Argument(..., help="Pokedex number of the opponent's Pokemon"),
    rounds: int = typer.Option(
        config.default_max_rounds, "--rounds", "-r", help="Maximum number of rounds"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed for a reproducible battle"),
) -> None:
    """Simulate a battle between two catalog Pokemon."""
    try:
        player = get_combatant(player_id)
        opponent = get_combatant(opponent_id)
    except CombatantNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    outcome = simulate(player, opponent, max_rounds=rounds, rng=random.Random(seed))
    display_battle(player, opponent, outcome)


@app.command("serve")
def serve(
    host: str = typer.Option(config.host, "--host", help="Interface to bind"),
    port: int = typer.Option(config.port, "--port", "-p", help="Port to listen on"),
) -> None:
    """Run the game API server."""
    import uvicorn

    console.print(f"[green]Starting Pokemon game API server on {host}:{port}[/green]")
    uvicorn.run("pokesim.server:app", host=host, port=port, log_level=config.log_level.lower())


if __name__ == "__main__":
    app()

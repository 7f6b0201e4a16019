"""Rich display components for the CLI."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pokesim.core.battle import BattleOutcome, EventKind, Winner
from pokesim.core.pokemon import Combatant
from pokesim.utils.helpers import hp_bar

console = Console()


TYPE_COLORS = {
    "normal": "white",
    "fire": "red",
    "water": "blue",
    "grass": "green",
    "poison": "magenta",
}

EVENT_STYLES = {
    EventKind.START: "bold",
    EventKind.ROUND: "cyan",
    EventKind.ATTACK: "white",
    EventKind.FAINT: "red bold",
    EventKind.CONCLUSION: "yellow bold",
}

WINNER_COLORS = {
    Winner.PLAYER: "green",
    Winner.OPPONENT: "red",
    Winner.DRAW: "yellow",
}


def _types_markup(combatant: Combatant) -> str:
    return "/".join(
        f"[{TYPE_COLORS.get(t, 'white')}]{t.capitalize()}[/{TYPE_COLORS.get(t, 'white')}]"
        for t in combatant.types
    )


def display_pokedex(combatants: list[Combatant]) -> None:
    """Display catalog entries in a table."""
    if not combatants:
        console.print("[dim]No Pokemon found.[/dim]")
        return

    table = Table(title="Pokedex", box=box.ROUNDED)
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", min_width=12)
    table.add_column("Type", width=15)
    table.add_column("Lv", width=4)
    table.add_column("HP", width=7)
    table.add_column("Atk", width=4)
    table.add_column("Def", width=4)
    table.add_column("Spe", width=4)
    table.add_column("Moves")

    for c in combatants:
        table.add_row(
            f"{c.id:03d}",
            c.name,
            _types_markup(c),
            str(c.level),
            f"{c.hp}/{c.max_hp}",
            str(c.attack),
            str(c.defense),
            str(c.speed),
            ", ".join(m.name for m in c.moves),
        )

    console.print(table)


def display_battle(player: Combatant, opponent: Combatant, outcome: BattleOutcome) -> None:
    """Display the battle log followed by a result card."""
    lines = []
    for event in outcome.events:
        style = EVENT_STYLES.get(event.kind, "white")
        indent = "  " if event.kind in (EventKind.ATTACK, EventKind.FAINT) else ""
        lines.append(f"{indent}[{style}]{escape(event.message)}[/{style}]")
    console.print(Panel("\n".join(lines), title="Battle Log", box=box.ROUNDED))

    color = WINNER_COLORS[outcome.winner]
    content = f"""[bold]Winner:[/bold] [{color}]{outcome.winner.value}[/{color}]
[dim]Rounds:[/dim] {outcome.rounds}

{player.name:<12} {hp_bar(outcome.player_hp, player.max_hp)} {outcome.player_hp}/{player.max_hp}
{opponent.name:<12} {hp_bar(outcome.opponent_hp, opponent.max_hp)} {outcome.opponent_hp}/{opponent.max_hp}"""

    console.print(Panel(content, title="Result", box=box.ROUNDED))

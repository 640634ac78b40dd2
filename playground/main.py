"""Main entry point - walks through the nation model and the game persistence store."""

from __future__ import annotations
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from playground.config import PlaygroundConfig
from playground.models.game import Game, Player
from playground.models.geo import ethnic_breakdown
from playground.models.sovereign import Nation, united_kingdom
from playground.systems.defaults import SettingsDefaultsService
from playground.systems.persistence_store import PersistenceStore
from playground.systems.settings_store import SettingsStore


console = Console()


def setup_logging(level: str) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def show_nation(nation: Nation, out: Console) -> None:
    """Print a nation's summary and per-state ethnic breakdown."""
    out.print(Panel(nation.summary(), title=nation.name, border_style="cyan"))

    table = Table(title="Ethnic Groups", show_header=True, header_style="bold magenta")
    table.add_column("State", style="cyan")
    table.add_column("Groups")
    for state in nation.states:
        table.add_row(state.display_name, ", ".join(str(e) for e in ethnic_breakdown(state)))
    out.print(table)


def sample_game() -> Game:
    """The single-player game the demo saves."""
    return Game(players=[
        Player(
            name="Smart Kid",
            level=100,
            points=99,
            description="Smarted boy in the class",
        ),
    ])


def run_demo(persistence: PersistenceStore, out: Console) -> bool:
    """Save the sample game, load it back, and print the players."""
    persistence.save(sample_game())

    game = persistence.current_game()
    if game is None:
        out.print("[red]No saved game could be loaded[/red]")
        return False

    table = Table(title="Current Game", show_header=True, header_style="bold magenta")
    table.add_column("Player", style="cyan")
    table.add_column("Level", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Description")
    for player in game.players:
        table.add_row(player.name, str(player.level), str(player.points), player.description or "")
    out.print(table)
    return True


def main():
    """Main entry point."""
    config = PlaygroundConfig.from_env()
    setup_logging(config.log_level)

    console.print(Panel(
        "[bold magenta]SOLID Playground[/bold magenta]\n"
        "[dim]Interface segregation and dependency inversion[/dim]",
        border_style="magenta",
    ))

    show_nation(united_kingdom(), console)

    persistence = PersistenceStore(store=SettingsDefaultsService(SettingsStore(config.settings_path)))

    if len(sys.argv) > 1:
        if sys.argv[1] == "--reset":
            persistence.clear()
            console.print("[yellow]Stored game erased[/yellow]")
            return
        else:
            console.print("[yellow]Usage: python -m playground.main [--reset][/yellow]")
            sys.exit(1)

    if not run_demo(persistence, console):
        sys.exit(1)


if __name__ == "__main__":
    main()

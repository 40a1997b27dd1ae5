from __future__ import annotations
import random
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..core.env import Settings
from ..core.log import setup_logging
from ..errors import GenerationError
from ..game_loop import GameSession, CORRECT, ONE_AWAY, DUPLICATE, INVALID
from ..generator import PuzzleGenerator
from ..store import PuzzleStore
from ..types import Puzzle

app = typer.Typer()
console = Console()

COLOR_STYLES = {
    "green": "bold green",
    "yellow": "bold yellow",
    "purple": "bold magenta",
    "red": "bold red",
}


def render_board(session: GameSession, shuffled: list[str]) -> None:
    for group in session.found_groups:
        style = COLOR_STYLES[group.color.value]
        console.print(f"[{style}]{group.theme.upper()}[/]: {', '.join(group.texts)}")

    remaining = set(session.remaining_words())
    words = [w for w in shuffled if w in remaining]
    table = Table(show_header=False, show_lines=True)
    for _ in range(4):
        table.add_column(justify="center", min_width=12)
    for i in range(0, len(words), 4):
        table.add_row(*words[i:i + 4])
    if words:
        console.print(table)
    console.print(f"Mistakes remaining: {'●' * session.remaining_attempts}")


def load_puzzle(settings: Settings, puzzle_id: Optional[str], ai: bool, theme: Optional[str]) -> Puzzle:
    store = PuzzleStore(settings.store_path)
    if ai:
        puzzle = PuzzleGenerator.from_settings(settings).generate_puzzle(theme)
        return store.save(puzzle, "AI")
    puzzle = store.get_by_id(puzzle_id) if puzzle_id else store.get_random()
    if puzzle is None:
        console.print("[red]No puzzle found.[/] Add one with `vnconnections admin upload` or play with --ai")
        raise typer.Exit(1)
    return puzzle


@app.command()
def main(
    puzzle_id: Optional[str] = typer.Option(None, "--id", help="Play a specific stored puzzle"),
    ai: bool = typer.Option(False, help="Generate a fresh puzzle instead of using the archive"),
    theme: Optional[str] = typer.Option(None, help="Theme hint for --ai"),
    max_mistakes: int = 4,
):
    """
    Play a puzzle in the terminal. Enter 4 words separated by commas.
    """
    settings = Settings.from_env()
    setup_logging(settings.log_level, console)

    try:
        puzzle = load_puzzle(settings, puzzle_id, ai, theme)
    except GenerationError as e:
        console.print(f"[red]Could not generate puzzle:[/] {e}")
        raise typer.Exit(1)

    console.rule(f"[bold cyan]{puzzle.game_name or 'Connections'} ({puzzle.overall_difficulty.value})")
    shuffled = puzzle.all_words()
    random.shuffle(shuffled)
    session = GameSession(puzzle, max_mistakes=max_mistakes)

    while not session.finished:
        render_board(session, shuffled)
        raw = typer.prompt("Guess")
        outcome = session.submit(raw.split(","))

        if outcome.result == CORRECT:
            console.print(f"[green]Correct![/] {outcome.group.theme}")
        elif outcome.result == ONE_AWAY:
            console.print("[yellow]One away...[/]")
        elif outcome.result == DUPLICATE:
            console.print("[yellow]Already guessed.[/]")
        elif outcome.result == INVALID:
            console.print("[yellow]Pick 4 different words from the board.[/]")
        else:
            console.print("[red]Wrong, try again![/]")

    if session.solved:
        render_board(session, shuffled)
        console.print(f"[bold green]Solved![/] Score: {session.score()} "
                      f"({session.elapsed_millis() // 1000}s, {session.mistakes} mistakes)")
    else:
        console.print("[bold red]Out of attempts.[/] Answers:")
        for group in puzzle.groups:
            style = COLOR_STYLES[group.color.value]
            console.print(f"[{style}]{group.theme.upper()}[/]: {', '.join(group.texts)}")


if __name__ == "__main__":
    app()

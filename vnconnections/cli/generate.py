#!/usr/bin/env python3
"""Generate puzzles with an LLM and save them to the puzzle store."""

from __future__ import annotations
from typing import Optional

import orjson
import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from ..core.env import Settings
from ..core.log import setup_logging
from ..errors import GenerationError
from ..generator import PuzzleGenerator, AI_CREATOR
from ..store import PuzzleStore

app = typer.Typer()
console = Console()


@app.command()
def main(
    theme: Optional[str] = typer.Option(None, help="Optional theme inspiration"),
    count: int = typer.Option(1, help="Number of puzzles to generate"),
    model: Optional[str] = typer.Option(None, help="Model preset or name (default: PUZZLE_MODEL)"),
    show: bool = typer.Option(False, help="Print generated puzzles as JSON"),
):
    """
    Generate puzzles and store them as unverified AI puzzles.

    Example:
        vnconnections generate --theme "động vật" --count 3
    """
    settings = Settings.from_env()
    if model:
        settings.model = model
    setup_logging(settings.log_level, console)

    generator = PuzzleGenerator.from_settings(settings)
    store = PuzzleStore(settings.store_path)

    console.rule("[bold cyan]Puzzle Generation")
    console.print(f"Model: {generator.model}")
    console.print(f"API keys: {len(generator.credentials)}")
    console.print(f"Theme: {theme or '(any)'}")

    generated = 0
    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
        task = progress.add_task("Generating...", total=count)
        for i in range(count):
            progress.update(task, description=f"Generating ({i + 1}/{count})...")
            try:
                puzzle = generator.generate_puzzle(theme)
            except GenerationError as e:
                console.print(f"[red]Error generating puzzle: {e}[/]")
                break
            saved = store.save(puzzle, AI_CREATOR)
            generated += 1
            progress.update(task, advance=1)
            console.print(f"[green]✓[/] {saved.game_name} [dim]{saved.id}[/]")
            if show:
                console.print_json(orjson.dumps(saved.to_dict()).decode())

    console.print(f"\nSaved {generated}/{count} puzzle(s) to {settings.store_path}")
    if generated < count:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

from __future__ import annotations
from pathlib import Path

import orjson
import typer
from rich.console import Console
from rich.table import Table

from ..core.env import Settings
from ..core.log import setup_logging
from ..engine import validate_puzzle
from ..errors import UploadError, PuzzleNotFoundError
from ..retention import run_sweep
from ..store import PuzzleStore
from ..upload import build_puzzle_from_upload

app = typer.Typer(help="Manage stored puzzles.")
console = Console()


def open_store() -> PuzzleStore:
    settings = Settings.from_env()
    setup_logging(settings.log_level, console)
    return PuzzleStore(settings.store_path)


@app.command()
def upload(path: Path):
    """Upload a puzzle from a JSON file (gameName, overallDifficulty, 4 groups)."""
    store = open_store()
    try:
        payload = orjson.loads(path.read_bytes())
        puzzle = build_puzzle_from_upload(payload)
    except (OSError, orjson.JSONDecodeError, UploadError) as e:
        console.print(f"[red]Upload failed:[/] {e}")
        raise typer.Exit(1)

    saved = store.save(puzzle)
    console.print(f"[green]Puzzle uploaded successfully![/] {saved.game_name} [dim]{saved.id}[/]")


@app.command("list")
def list_puzzles(limit: int = 50):
    """Show the newest stored puzzles."""
    store = open_store()
    table = Table(title=f"Puzzles ({len(store)})")
    for col in ["ID", "Name", "Difficulty", "By", "Verified", "Rating", "Valid", "Created"]:
        table.add_column(col)
    for p in store.list_all(limit):
        table.add_row(
            p.id,
            p.game_name or "",
            p.overall_difficulty.value,
            p.created_by or "",
            "✓" if p.verified else "",
            str(p.rating),
            "✓" if validate_puzzle(p) else "[red]✗[/]",
            p.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@app.command()
def show(puzzle_id: str):
    """Print a stored puzzle as JSON."""
    store = open_store()
    puzzle = store.get_by_id(puzzle_id)
    if puzzle is None:
        console.print(f"[red]Puzzle not found:[/] {puzzle_id}")
        raise typer.Exit(1)
    console.print_json(orjson.dumps(puzzle.to_dict()).decode())


@app.command()
def verify(puzzle_id: str):
    """Mark a puzzle verified so the retention sweep keeps it."""
    store = open_store()
    try:
        store.mark_verified(puzzle_id)
    except PuzzleNotFoundError as e:
        console.print(f"[red]{e.args[0]}[/]")
        raise typer.Exit(1)
    console.print("[green]Puzzle verified successfully[/]")


@app.command()
def rate(puzzle_id: str, rating: int = typer.Argument(..., help="1 or -1")):
    """Up- or down-vote a puzzle."""
    if rating not in (1, -1):
        console.print("[red]Rating must be 1 or -1[/]")
        raise typer.Exit(1)
    store = open_store()
    try:
        puzzle = store.update_rating(puzzle_id, rating)
    except PuzzleNotFoundError as e:
        console.print(f"[red]{e.args[0]}[/]")
        raise typer.Exit(1)
    console.print(f"Rating is now {puzzle.rating}")


@app.command()
def delete(puzzle_id: str):
    """Delete a puzzle."""
    store = open_store()
    if not store.delete(puzzle_id):
        console.print(f"[red]Puzzle not found:[/] {puzzle_id}")
        raise typer.Exit(1)
    console.print("Puzzle deleted successfully")


@app.command()
def cleanup():
    """Run the retention sweep (unpopular and stale unverified puzzles)."""
    store = open_store()
    counts = run_sweep(store)
    console.print(f"Deleted {counts['unpopular']} unpopular and {counts['unverified']} unverified puzzle(s)")


if __name__ == "__main__":
    app()

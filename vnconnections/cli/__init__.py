"""
CLI commands for the Vietnamese Connections game.
"""

import typer
from rich import print

from ..core.env import load_env
from . import admin, generate, play

app = typer.Typer(help="Vietnamese Connections: play, generate and manage puzzles.")
app.command("play")(play.main)
app.command("generate")(generate.main)
app.add_typer(admin.app, name="admin")


@app.command()
def env():
    """Show which API keys were detected (masked)."""
    print({"env_keys_detected": load_env()})


__all__ = ["app"]

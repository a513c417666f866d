"""Start the stack with docker compose, attached to the operator's terminal."""

from __future__ import annotations

import subprocess

from installer import settings
from installer.console import console


def compose_command() -> list[str]:
    return [settings.COMPOSE_BIN, "compose", "up", "-d", "--build"]


def launch_stack() -> int:
    """Run the compose command in the foreground and return its exit code."""
    cmd = compose_command()
    console.print(f"[yellow]➡️  Running {' '.join(cmd)}[/yellow]")
    returncode = subprocess.call(cmd)
    if returncode != 0:
        console.print(f"[red]{' '.join(cmd)} exited with code {returncode}.[/red]")
    return returncode

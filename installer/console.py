"""Shared console for the installer transcript."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)

BANNER = r"""
  ____                    _ _
 / ___| _   _ _ __   __ _| | |_ __ ___
 \___ \| | | | '_ \ / _` | | | '_ ` _ \
  ___) | |_| | |_) | (_| | | | | | | | |
 |____/ \__,_| .__/ \__,_|_|_|_| |_| |_|
            |_|
======================================
  🚀 SupaLLM Installation Script
======================================
"""


def print_banner() -> None:
    console.print(BANNER, style="cyan", markup=False)


def info(message: str) -> None:
    console.print(f"[yellow]{escape(message)}[/yellow]")


def success(message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]")


def error(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")

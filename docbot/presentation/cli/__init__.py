"""Typer CLI."""

from docbot.presentation.cli.app import app, main

__all__ = ["app", "main"]

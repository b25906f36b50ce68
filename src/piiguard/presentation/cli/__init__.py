"""Command-line interface."""

from piiguard.presentation.cli.app import app, cli

__all__ = ["app", "cli"]

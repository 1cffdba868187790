"""Suiteplug CLI — Typer-based command-line interface.

Provides the ``suiteplug`` command with subcommands for listing plugin kinds
and inspecting what a set of required modules contributes.

All output uses Rich for formatted terminal display.
"""

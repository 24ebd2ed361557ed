"""Rehash CLI — Typer-based command-line interface.

Provides the ``rehash`` command with subcommands for reconciling a build
snapshot, digesting a single file, and showing the effective settings.

All output uses Rich for formatted terminal display.
"""

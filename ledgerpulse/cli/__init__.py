"""Ledgerpulse CLI — Typer-based command-line interface.

Provides the ``ledgerpulse`` command with subcommands for replaying a
captured ledger stream and listing entry types.

All output uses Rich for formatted terminal display.
"""

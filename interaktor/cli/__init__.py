"""Interaktor CLI: Typer-based command-line interface.

Provides the ``interaktor`` command with subcommands for inspecting an
interaktor's declared contract and hooks, and for invoking it with JSON
input.

All output uses Rich for formatted terminal display.
"""

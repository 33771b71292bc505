"""Command-line interface for chaoticbadge.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Single badge rendering with color, icon and size overrides
- Batch rendering from a JSON manifest on a thread pool
- Verbose/quiet output modes
"""

from chaoticbadge.cli.app import cli, main

__all__ = ["cli", "main"]

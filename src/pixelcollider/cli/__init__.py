"""Command-line interface for pixelcollider.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Collider generation with presets and per-option overrides
- Alpha distribution analysis
- Threshold sweeps for tuning
- Verbose/quiet output modes
"""

from pixelcollider.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]

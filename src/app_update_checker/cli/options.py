"""Shared CLI options."""

from __future__ import annotations

import typer

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
PlatformOption = typer.Option(..., "--platform", "-p", help="Target platform: android, ios")
TimeoutOption = typer.Option(None, "--timeout", "-t", help="HTTP timeout in seconds (default: APPCHECK_TIMEOUT or 10)")

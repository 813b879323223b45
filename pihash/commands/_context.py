"""Helpers shared by the command modules."""

from __future__ import annotations

import click
from rich.console import Console

from pihash.core.config import AppConfig


def get_context_objects(ctx: click.Context) -> tuple[AppConfig, Console, bool]:
    """Extract config, console and verbosity from the click context.

    Commands invoked outside the ``pihash`` group get defaults.
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    config: AppConfig = obj.get("config") or AppConfig()
    console: Console = obj.get("console") or Console()
    verbose: bool = obj.get("verbose", False)
    return config, console, verbose

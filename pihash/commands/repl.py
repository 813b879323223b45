"""Interactive hashing of standard input lines."""

from __future__ import annotations

import click

from pihash.core.types import Variant
from pihash.core.utils import strip_newline
from pihash.hashing.registry import hexdigest

REPL_VARIANTS = (Variant.HASH32, Variant.HASH64, Variant.HASH128)


@click.command()
@click.option("--prompt", default=">> ", show_default=True, help="Prompt string")
@click.option("--wide", is_flag=True, help="Also print hash256")
def repl(prompt: str, wide: bool) -> None:
    """Hash each line read from standard input until end of input."""
    variants = REPL_VARIANTS + (Variant.HASH256,) if wide else REPL_VARIANTS
    label_width = max(len(v.value) for v in variants) + 1

    click.echo(prompt, nl=False)
    try:
        with click.open_file("-", "rb") as stdin:
            for line in stdin:
                data = strip_newline(line)
                for variant in variants:
                    label = f"{variant.value}:".ljust(label_width)
                    click.echo(f"{label} {hexdigest(variant, data)}")
                click.echo(prompt, nl=False)
    except OSError as e:
        raise click.ClickException(f"Cannot read input: {e}") from e

    click.echo()

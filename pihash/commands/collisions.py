"""Dictionary collision command."""

from __future__ import annotations

from pathlib import Path

import click
import structlog
from rich.table import Table

from pihash.analysis.collisions import CollisionError, assert_no_collisions, check_word_list
from pihash.commands._context import get_context_objects
from pihash.core.types import Variant

logger = structlog.get_logger()


@click.command()
@click.argument("wordlist", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--variant",
    "-V",
    "variants",
    multiple=True,
    type=click.Choice([v.value for v in Variant]),
    help="Variant to check (repeatable, defaults to the configured list)",
)
@click.pass_context
def collisions(ctx: click.Context, wordlist: Path, variants: tuple[str, ...]) -> None:
    """Hash every word in WORDLIST and report equal digests."""
    config, console, verbose = get_context_objects(ctx)
    chosen = [Variant(v) for v in variants] or config.collision_variants

    try:
        report = check_word_list(wordlist, chosen)
    except OSError as e:
        logger.error("wordlist_read_failed", path=str(wordlist), error=str(e))
        raise click.ClickException(f"Cannot read word list {wordlist}: {e}") from e

    if config.output_format == "json":
        print(report.model_dump_json(indent=2))
    else:
        table = Table(title=f"Collision check: {wordlist.name}")
        table.add_column("Variant", style="cyan")
        table.add_column("Words", style="green", justify="right")
        table.add_column("Collisions", justify="right")

        for variant in report.variants:
            count = report.count(variant)
            style = "red" if count else "green"
            table.add_row(variant.value, f"{report.words_checked:,}", f"[{style}]{count}[/{style}]")

        console.print(table)

        if report.collisions:
            details = Table(title="Colliding pairs")
            details.add_column("Variant", style="cyan")
            details.add_column("First")
            details.add_column("Second")
            details.add_column("Digest", style="yellow")
            for collision in report.collisions:
                details.add_row(
                    collision.variant.value,
                    collision.first,
                    collision.second,
                    collision.digest,
                )
            console.print(details)
        elif verbose:
            console.print(f"[green]✓[/green] No collisions among {report.words_checked:,} words")

    try:
        assert_no_collisions(report)
    except CollisionError as e:
        raise click.ClickException(str(e)) from e

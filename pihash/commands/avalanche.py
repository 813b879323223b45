"""Avalanche test command for the register mixers."""

from __future__ import annotations

import click
from rich.table import Table

from pihash.analysis.avalanche import AvalancheError, assert_avalanche, run_avalanche
from pihash.commands._context import get_context_objects


@click.command()
@click.option("--runs", "-n", type=click.IntRange(min=1), default=None, help="Trials per mixer")
@click.option(
    "--tolerance",
    "-t",
    type=click.FloatRange(0.0, 0.5, min_open=True, max_open=True),
    default=None,
    help="Allowed distance of the mean from 0.5",
)
@click.option("--seed", "-s", type=int, default=None, help="Random seed for a reproducible run")
@click.pass_context
def avalanche(
    ctx: click.Context,
    runs: int | None,
    tolerance: float | None,
    seed: int | None,
) -> None:
    """Measure how many output bits each mixer flips for a one-step input change."""
    config, console, _ = get_context_objects(ctx)

    report = run_avalanche(
        runs=runs or config.avalanche_runs,
        tolerance=tolerance or config.avalanche_tolerance,
        seed=seed,
    )

    if config.output_format == "json":
        print(report.model_dump_json(indent=2))
    else:
        table = Table(title="Avalanche (Hamming) scores")
        table.add_column("Mixer", style="cyan")
        table.add_column("Bits", justify="right")
        table.add_column("Runs", justify="right")
        table.add_column("Mean", justify="right")
        table.add_column("Delta", justify="right")
        table.add_column("Good", justify="right")
        table.add_column("Status")

        for result in report.results:
            status = "[green]PASS[/green]" if result.passed(report.tolerance) else "[red]FAIL[/red]"
            table.add_row(
                result.mixer,
                str(result.bits),
                f"{result.runs:,}",
                f"{result.mean:.4f}",
                f"±{result.delta:.4f}",
                f"{result.good:,}",
                status,
            )

        console.print(table)

    try:
        assert_avalanche(report)
    except AvalancheError as e:
        raise click.ClickException(str(e)) from e

"""Digest command: hash a whole file."""

from __future__ import annotations

import json
import mmap
import os
from pathlib import Path

import click
import structlog

from pihash.commands._context import get_context_objects
from pihash.core.types import HashDigest, Variant
from pihash.hashing.registry import get_variant

logger = structlog.get_logger()


def digest_file(path: Path, variant: Variant | str = Variant.HASH128) -> tuple[int, HashDigest | None]:
    """Hash a file through a read-only memory map.

    Args:
        path: File to hash
        variant: Hash variant to use

    Returns:
        Tuple of (file_size, digest); digest is None for an empty file

    Raises:
        OSError: If the file cannot be opened, sized or mapped
    """
    info = get_variant(variant)

    with open(path, "rb") as f:
        size = os.fstat(f.fileno()).st_size
        if size == 0:
            return 0, None

        with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mapped:
            result = info.digest(mapped)

    logger.debug("file_digested", path=str(path), size=size, variant=info.variant.value)
    return size, result


@click.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--variant",
    "-V",
    type=click.Choice([v.value for v in Variant]),
    default=None,
    help="Hash variant (defaults to the configured variant)",
)
@click.pass_context
def digest(ctx: click.Context, file: Path, variant: str | None) -> None:
    """Print the hex digest of FILE."""
    config, _, _ = get_context_objects(ctx)
    chosen = Variant(variant) if variant else config.default_variant

    try:
        size, result = digest_file(file, chosen)
    except OSError as e:
        logger.error("digest_failed", path=str(file), error=str(e))
        raise click.ClickException(f"Cannot hash file {file}: {e}") from e

    if result is None:
        logger.info("empty_file", path=str(file))
        return

    if config.output_format == "json":
        info = {
            "file": str(file),
            "variant": chosen.value,
            "size": size,
            "digest": result.hex(),
        }
        print(json.dumps(info, indent=2))
    else:
        click.echo(result.hex())

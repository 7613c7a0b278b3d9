"""
CLI tool to compute, validate and generate EAN-13 codes.

Usage:
    python -m tools.ean_codes.main checksum 400638133393
    python -m tools.ean_codes.main validate 4006381333931 5901234123457
    python -m tools.ean_codes.main generate --prefix 200 --product-id 42
    python -m tools.ean_codes.main generate --count 10 --seed 7 --format json
"""

import json
import random
import sys

import click
import structlog
from pydantic import ValidationError

from eancodec.barcode import (
    InvalidArgument,
    InvalidPayload,
    check_code,
    compute_check_digit,
    generate_record,
)
from eancodec.config import configure_logging, get_settings

logger = structlog.get_logger(__name__)


@click.group()
def main() -> None:
    """EAN-13 check digit, validation and generation tool."""
    try:
        settings = get_settings()
    except ValidationError as e:
        click.echo(f"Error: invalid configuration\n{e}", err=True)
        sys.exit(1)

    configure_logging(settings.log_level, settings.log_format)


@main.command()
@click.argument("payload")
def checksum(payload: str) -> None:
    """Print the check digit for a 12-digit PAYLOAD."""
    try:
        digit = compute_check_digit(payload)
    except InvalidPayload as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(str(digit))


@main.command()
@click.argument("codes", nargs=-1, required=True)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
def validate(codes: tuple[str, ...], output_format: str) -> None:
    """Validate one or more EAN-13 CODES."""
    results = [check_code(code) for code in codes]
    invalid = [r for r in results if not r.is_valid]

    if output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for r in results:
            status = "valid" if r.is_valid else f"invalid: {r.error}"
            click.echo(f"{r.candidate}  {status}")

    logger.debug("Validated codes", total=len(results), invalid=len(invalid))

    if invalid:
        sys.exit(1)


@main.command()
@click.option("--prefix", "-p", default=None, help="GS1 prefix (default from settings)")
@click.option("--product-id", "-i", type=int, default=None, help="Product id for the last 9 digits")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="Number of codes")
@click.option("--seed", type=int, default=None, help="Seed for random digits")
@click.option(
    "--overflow",
    type=click.Choice(["reject", "truncate"]),
    default=None,
    help="Policy for product ids longer than 9 digits (default from settings)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
def generate(
    prefix: str | None,
    product_id: int | None,
    count: int,
    seed: int | None,
    overflow: str | None,
    output_format: str,
) -> None:
    """Generate EAN-13 codes for internal or testing use."""
    settings = get_settings()

    if product_id is not None and count > 1:
        click.echo("Error: --product-id always yields the same code; use --count 1", err=True)
        sys.exit(1)

    prefix = prefix if prefix is not None else settings.ean_default_prefix
    seed = seed if seed is not None else settings.ean_random_seed
    overflow = overflow if overflow is not None else settings.ean_product_id_overflow
    rng = random.Random(seed) if seed is not None else None

    try:
        records = [
            generate_record(prefix, product_id, rng=rng, overflow=overflow)
            for _ in range(count)
        ]
    except InvalidArgument as e:
        logger.debug("Rejected generation arguments", prefix=prefix, error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for r in records:
        logger.debug("Generated EAN-13", code=r.code, prefix=r.prefix, random=r.product_id is None)

    if output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in records], indent=2))
    else:
        for r in records:
            click.echo(r.code)


if __name__ == "__main__":
    main()

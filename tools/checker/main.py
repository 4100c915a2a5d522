"""
CLI tool to validate and generate Swiss NAVS13 numbers.

Only the structure is checked (756 country code and EAN-13 check digit),
which does not mean that a number is administratively valid.

Usage:
    poetry run navs13 756.1234.5678.97
    poetry run navs13 --create --number 5
    poetry run navs13 --create --seed 42
"""

import random
import sys

import click
import structlog
from pydantic import ValidationError

from navs13 import ValidatedIdentifier, generate_many, parse
from navs13.config import configure_logging, get_settings

logger = structlog.get_logger(__name__)

EXIT_OK = 0


def validate_number(value: str) -> int:
    """
    Validate one NAVS13 and report the outcome.

    Returns:
        Process exit code: 0 when valid, otherwise the failure's code
    """
    result = parse(value)

    if isinstance(result, ValidatedIdentifier):
        click.echo(f"{result} is valid.")
        return EXIT_OK

    logger.info("Invalid NAVS13", kind=result.kind, exit_code=result.exit_code)
    click.echo(
        f"{value} is invalid. Error code {result.exit_code}, description {result.description}",
        err=True,
    )
    return result.exit_code


def create_numbers(count: int, seed: int | None = None) -> list[str]:
    """Generate ``count`` identifiers in canonical form."""
    random_source = random.Random(seed) if seed is not None else None
    return [str(identifier) for identifier in generate_many(count, random_source)]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("navs13", required=False)
@click.option(
    "--create", "-c",
    is_flag=True,
    help="Creates a structurally valid NAVS13 for test purposes.",
)
@click.option(
    "--number", "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of NAVS13 to generate (default: 1, max: NAVS13_MAX_GENERATE_COUNT, 255 unless set).",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for reproducible generation.",
)
@click.version_option(package_name="navs13")
@click.pass_context
def main(
    ctx: click.Context,
    navs13: str | None,
    create: bool,
    number: int | None,
    seed: int | None,
) -> None:
    """
    Validate NAVS13, or create test numbers with --create.

    Note that only the structure is validated. This is not enough to make a
    number effective. Example: 756.1234.5678.97
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e
    configure_logging(settings)

    if navs13 is not None and (create or number is not None or seed is not None):
        raise click.UsageError("NAVS13 cannot be combined with --create, --number or --seed.")

    if create:
        try:
            numbers = create_numbers(number or 1, seed)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="'--number'") from e
        for value in numbers:
            click.echo(value)
        sys.exit(EXIT_OK)

    if number is not None or seed is not None:
        raise click.UsageError("--number and --seed require --create.")

    if navs13 is None:
        click.echo(ctx.get_help())
        sys.exit(EXIT_OK)

    sys.exit(validate_number(navs13))


if __name__ == "__main__":
    main()

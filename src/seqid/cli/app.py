"""
Root Typer application for the seqid CLI.

Defaults for every option come from ``SEQID_*`` environment variables via
:class:`~seqid.core.settings.IdSettings`; command-line options override them.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from typer import Typer

from seqid.cli.utils import err_console, output_rows, parse_origin
from seqid.core.checksum import checksum as luhn_checksum
from seqid.core.errors import SeqIdError
from seqid.core.factory import build_generator, create_validator
from seqid.core.logging import configure_logging
from seqid.core.settings import IdSettings, get_settings
from seqid.core.validators import ValidatorKind

app = Typer(
    name="seqid",
    help="seqid - compact, self-validating numeric identifiers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from seqid import __version__

        typer.echo(f"seqid {__version__}")
        raise typer.Exit()


def _log_level_callback(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return IdSettings.model_validate({"log_level": value}).log_level
    except ValidationError as e:
        raise typer.BadParameter(f"unknown log level: {value}") from e


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override SEQID_LOG_LEVEL.", callback=_log_level_callback
    ),
) -> None:
    """seqid CLI - generate, sign and verify identifiers."""
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_format=settings.json_logs,
        service="seqid",
    )


# ── Commands ─────────────────────────────────────────────────────────────

# negative numbers are arguments, not options
_NUMERIC_ARGS = {"ignore_unknown_options": True}


@app.command("generate")
def generate(
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many ids to generate."),
    minimum: int | None = typer.Option(None, "--min", help="Lowest sequence value."),
    maximum: int | None = typer.Option(None, "--max", help="Highest sequence value."),
    initial: int | None = typer.Option(None, "--initial", help="First sequence value."),
    validator: ValidatorKind | None = typer.Option(None, "--validator", help="Signing scheme."),
    origin: str | None = typer.Option(None, "--origin", help="ISO 8601 origin time."),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Generate ids from an in-process range sequencer."""
    overrides = {
        "sequence_min": minimum,
        "sequence_max": maximum,
        "sequence_initial": initial,
        "validator": validator,
        "origin": parse_origin(origin),
    }
    settings = get_settings().model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )
    generator = build_generator(settings)

    try:
        ids = [generator.generate() for _ in range(count)]
    except SeqIdError as e:
        err_console.print(f"[bold red]Error[/bold red] ({e.category.value}): {e.message}")
        raise typer.Exit(code=1) from e

    if json_out:
        output_rows([{"id": value} for value in ids], as_json=True)
        return
    for value in ids:
        typer.echo(value)


@app.command("verify", context_settings=_NUMERIC_ARGS)
def verify(
    values: list[int] = typer.Argument(..., help="Ids to verify."),
    validator: ValidatorKind | None = typer.Option(None, "--validator", help="Signing scheme."),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Verify ids. Exits with status 1 if any id is invalid."""
    checker = create_validator(validator or get_settings().validator)
    rows = [{"id": value, "valid": checker.verify(value)} for value in values]

    output_rows(rows, as_json=json_out, title="Verification")

    invalid = [row["id"] for row in rows if not row["valid"]]
    if invalid:
        if not json_out:
            err_console.print(f"[bold red]{len(invalid)} invalid[/bold red] of {len(rows)}")
        raise typer.Exit(code=1)


@app.command("sign", context_settings=_NUMERIC_ARGS)
def sign(
    number: int = typer.Argument(..., help="Number to sign."),
    validator: ValidatorKind | None = typer.Option(None, "--validator", help="Signing scheme."),
) -> None:
    """Sign a number (append its check digit)."""
    signer = create_validator(validator or get_settings().validator)
    typer.echo(signer.sign(number))


@app.command("checksum", context_settings=_NUMERIC_ARGS)
def checksum(number: int = typer.Argument(..., help="Number to checksum.")) -> None:
    """Print the Luhn digit sum of a number."""
    typer.echo(luhn_checksum(number))


if __name__ == "__main__":
    app()

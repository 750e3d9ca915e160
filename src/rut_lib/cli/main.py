"""Command-line interface for rut-lib.

Thin layer over the domain: every command parses its arguments, calls the
`Rut` constructors or the batch service, and renders with Rich. Domain errors
(`RutError`) are caught here, printed to stderr and turned into exit code 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from rut_lib.adapters.json_exporter import export_report_json, export_ruts_json
from rut_lib.cli.ui_components import (
    build_formats_table,
    build_generated_table,
    build_report_table,
    build_rut_table,
    print_banner,
)
from rut_lib.core.config import AppSettings, build_random_source
from rut_lib.core.domain.checksum import compute_check_digit
from rut_lib.core.domain.errors import RutError
from rut_lib.core.domain.models import Format, Rut
from rut_lib.core.domain.parser import extract
from rut_lib.core.services.batch_validation import validate_many

app = typer.Typer(
    no_args_is_help=True,
    help="Validate, format and generate Chilean RUTs (modulo 11).",
)

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class CliState:
    settings: AppSettings
    verbose: bool = False
    quiet: bool = False


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


def _fail(exc: Exception) -> NoReturn:
    _err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _resolve_format(state: CliState, fmt: Optional[Format]) -> Format:
    return fmt if fmt is not None else state.settings.default_format


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print parsing traces."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide the banner."),
) -> None:
    settings = AppSettings()
    ctx.obj = CliState(settings=settings, verbose=verbose, quiet=quiet or not settings.show_banner)


@app.command()
def parse(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="RUT text, e.g. 17.951.585-7"),
    fmt: Optional[Format] = typer.Option(None, "--format", "-f", help="Output format."),
) -> None:
    """Parse and verify a RUT."""

    state = _state(ctx)
    if state.verbose:
        try:
            unverified = extract(text)
            _err_console.log(
                f"body={unverified.number} claimed_dv={unverified.dv} "
                f"expected_dv={compute_check_digit(unverified.number)}"
            )
        except RutError:
            _err_console.log(f"no RUT shape in {escape(repr(text))}")

    try:
        rut = Rut.from_text(text)
    except RutError as exc:
        _fail(exc)

    if not state.quiet:
        print_banner(_console)
    _console.print(build_rut_table(rut, _resolve_format(state, fmt)))


@app.command(name="from-number")
def from_number(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="RUT body without DV."),
    fmt: Optional[Format] = typer.Option(None, "--format", "-f", help="Output format."),
) -> None:
    """Compute the DV for a number and show the RUT."""

    state = _state(ctx)
    try:
        rut = Rut.from_number(number)
    except RutError as exc:
        _fail(exc)

    if state.verbose:
        _err_console.log(f"number={number} dv={rut.dv}")
    _console.print(build_rut_table(rut, _resolve_format(state, fmt)))


@app.command(name="format")
def format_(
    text: str = typer.Argument(..., help="RUT text in any accepted shape."),
) -> None:
    """Show a RUT in every supported format."""

    try:
        rut = Rut.from_text(text)
    except RutError as exc:
        _fail(exc)

    _console.print(build_formats_table(rut))


@app.command()
def generate(
    ctx: typer.Context,
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, max=10_000, help="How many RUTs."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output."),
    fmt: Optional[Format] = typer.Option(None, "--format", "-f", help="Output format."),
    plain: bool = typer.Option(False, "--plain", help="One RUT per line, no table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the RUTs to a JSON file."),
) -> None:
    """Generate random valid RUTs (test data)."""

    state = _state(ctx)
    fmt = _resolve_format(state, fmt)
    count = count if count is not None else state.settings.generate_count
    source = build_random_source(state.settings, seed=seed)

    ruts = [Rut.randomize(source) for _ in range(count)]

    if plain:
        for rut in ruts:
            typer.echo(rut.render(fmt))
    else:
        _console.print(build_generated_table(ruts, fmt))

    if output is not None:
        path = export_ruts_json(ruts=ruts, output_path=output, fmt=fmt)
        if not plain:
            _console.print(f"[green]Saved JSON to:[/green] {path}")


@app.command()
def check(
    ctx: typer.Context,
    values: Optional[List[str]] = typer.Argument(None, help="RUTs to validate."),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Text file with one RUT per line.",
    ),
    fmt: Optional[Format] = typer.Option(None, "--format", "-f", help="Output format."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the report to a JSON file."),
) -> None:
    """Validate many RUTs; exits with code 1 if any is invalid."""

    state = _state(ctx)
    inputs: list[str] = list(values or [])
    if file is not None:
        inputs.extend(file.read_text(encoding="utf-8").splitlines())
    if not inputs:
        raise typer.BadParameter("pass RUTs as arguments or use --file")

    report = validate_many(inputs)
    _console.print(build_report_table(report, _resolve_format(state, fmt)))

    summary = report.summary()
    _console.print(
        f"total={summary['total']} valid={summary['valid']} invalid={summary['invalid']}"
    )

    if output is not None:
        path = export_report_json(report=report, output_path=output)
        _console.print(f"[green]Saved report to:[/green] {path}")

    if report.invalid:
        raise typer.Exit(code=1)


def run() -> None:
    app()

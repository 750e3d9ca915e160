"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rut_lib.core.domain.models import Format, Rut
from rut_lib.core.services.batch_validation import BatchReport


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite en modos no interactivos (`--quiet`, salida JSON).
    """

    title = Text("rut-lib", style="bold cyan")
    subtitle = Text("RUT chileno • Módulo 11 • Formato", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_rut_table(rut: Rut, fmt: Format) -> Table:
    table = Table(title="RUT", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Number", str(rut.number))
    table.add_row("DV", rut.dv)
    table.add_row("RUT", rut.render(fmt))
    return table


def build_formats_table(rut: Rut) -> Table:
    table = Table(title="Formats")
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Output", style="white")
    for fmt in Format:
        table.add_row(fmt.name.capitalize(), rut.render(fmt))
    return table


def build_generated_table(ruts: Iterable[Rut], fmt: Format) -> Table:
    table = Table(title="Generated RUTs")
    table.add_column("#", style="dim", justify="right")
    table.add_column("RUT", style="green")
    for index, rut in enumerate(ruts, start=1):
        table.add_row(str(index), rut.render(fmt))
    return table


def build_report_table(report: BatchReport, fmt: Format) -> Table:
    """Tabla con el resultado por input de `validate_many`."""

    table = Table(title="Validation")
    table.add_column("Input", style="white", no_wrap=True)
    table.add_column("Valid", style="green")
    table.add_column("RUT", style="cyan")
    table.add_column("Error", style="red")
    for outcome in report.outcomes:
        if outcome.rut is not None:
            table.add_row(escape(outcome.input), "yes", outcome.rut.render(fmt), "")
        else:
            table.add_row(escape(outcome.input), "[red]no[/red]", "", escape(str(outcome.error)))
    return table

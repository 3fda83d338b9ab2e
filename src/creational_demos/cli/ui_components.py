"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la lógica de las demos con detalles visuales.
- Permite reutilizar tablas/paneles en varios comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar (`--no-banner`) para salida limpia en pipelines.
    """

    title = Text("Creational Demos", style="bold cyan")
    subtitle = Text("Abstract Factory • Builder • Factory Method", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_flags_table(flags: Iterable[tuple[str, Iterable[str]]]) -> Table:
    """Tabla con los flags de demo disponibles y sus valores."""

    table = Table(title="Demos")
    table.add_column("Flag", style="cyan", no_wrap=True)
    table.add_column("Values", style="green")
    for name, values in flags:
        table.add_row(f"--{name}", " | ".join(values))
    return table

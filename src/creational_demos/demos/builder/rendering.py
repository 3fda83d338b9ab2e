"""Presentación Rich de los productos del Builder.

Vive junto a la demo (no en `cli`) para que la capa de demos no dependa
de la CLI.
"""

from __future__ import annotations

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from creational_demos.core.domain.models import Car, CarManual


def _unset(value: object) -> str:
    return "-" if value is None else str(value)


def build_car_table(car: Car) -> Table:
    """Tabla Rich con los campos del `Car` construido."""

    table = Table(title="Car")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("seats", _unset(car.seats))
    if car.engine is None:
        table.add_row("engine", "-")
    else:
        table.add_row("engine", f"cylinders={car.engine.cylinders:g}, power={car.engine.power:g}")
    if car.trip_computer is None:
        table.add_row("trip_computer", "-")
    else:
        tc = car.trip_computer
        bluetooth = "-" if tc.bluetooth is None else f"{tc.bluetooth:g}"
        table.add_row("trip_computer", f"inches={tc.inches}, bluetooth={bluetooth}")
    table.add_row("gps", "-" if car.gps is None else car.gps.value)
    return table


def build_manual_panel(manual: CarManual) -> Panel:
    """Panel para presentar el `CarManual`."""

    body = Text()
    rows: Iterable[tuple[str, str | None]] = (
        ("seats", manual.seats),
        ("engine", manual.engine),
        ("trip_computer", manual.trip_computer),
        ("gps", manual.gps),
    )
    for name, value in rows:
        body.append(f"{name}: ", style="bold")
        body.append(f"{_unset(value)}\n")
    body.rstrip()

    return Panel(body, title=Text("Car manual", style="bold yellow"), border_style="yellow")

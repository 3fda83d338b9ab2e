"""Builders concretos.

`CarBuilder` produce el objeto de datos (`Car`); `CarManualBuilder` produce
un resumen legible (`CarManual`) a partir de los mismos pasos.

Reglas de diseño:
- El builder es dueño exclusivo de su producto en construcción.
- `get_result` transfiere el producto al caller y lo reemplaza por uno nuevo.
"""

from __future__ import annotations

from creational_demos.core.domain.models import Car, CarManual, Engine, GPSTier, TripComputer
from creational_demos.core.output import DemoOutput


def _number(value: float) -> str:
    # 5.0 -> "5", 2.6 -> "2.6"
    return f"{value:g}"


class CarBuilder:
    def __init__(self) -> None:
        self._car = Car()

    def reset(self) -> None:
        self._car = Car()

    def get_result(self) -> Car:
        result = self._car
        self.reset()
        return result

    def set_seats(self, seats: int) -> None:
        self._car.seats = seats

    def set_engine(self, engine: Engine) -> None:
        self._car.engine = engine

    def set_trip_computer(self, trip_computer: TripComputer | None) -> None:
        self._car.trip_computer = trip_computer

    def set_gps(self, gps: GPSTier | None) -> None:
        self._car.gps = gps


class CarManualBuilder:
    """Builder del manual: cada paso se traduce a texto en el idioma de `output`."""

    _GPS_LABELS: dict[GPSTier | None, str] = {
        GPSTier.ADVANCED: "manual_gps_advanced",
        GPSTier.BASIC: "manual_gps_basic",
        None: "manual_none",
    }

    def __init__(self, output: DemoOutput | None = None) -> None:
        self._output = output or DemoOutput()
        self._manual = CarManual()

    def reset(self) -> None:
        self._manual = CarManual()

    def get_result(self) -> CarManual:
        result = self._manual
        self.reset()
        return result

    def set_seats(self, seats: int) -> None:
        self._manual.seats = self._output.text("manual_seats", seats=seats)

    def set_engine(self, engine: Engine) -> None:
        self._manual.engine = self._output.text(
            "manual_engine",
            cylinders=_number(engine.cylinders),
            power=_number(engine.power),
        )

    def set_trip_computer(self, trip_computer: TripComputer | None) -> None:
        if trip_computer is None:
            self._manual.trip_computer = self._output.text("manual_none")
            return

        bluetooth = (
            _number(trip_computer.bluetooth)
            if trip_computer.bluetooth is not None
            else self._output.text("manual_none")
        )
        self._manual.trip_computer = self._output.text(
            "manual_trip_computer",
            inches=trip_computer.inches,
            bluetooth=bluetooth,
        )

    def set_gps(self, gps: GPSTier | None) -> None:
        # Exactly one label per tier; anything outside the enum is "not registered".
        key = self._GPS_LABELS.get(gps, "manual_gps_unregistered")
        self._manual.gps = self._output.text(key)

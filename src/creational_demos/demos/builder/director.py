"""Director: recetas fijas de construcción.

Las recetas solo hablan con `CarBuilderProtocol`, así que la misma receta
produce un `Car` o un `CarManual` según el builder recibido.
"""

from __future__ import annotations

from typing import Any

from creational_demos.core.domain.models import Engine, GPSTier, TripComputer
from creational_demos.core.interfaces.builder import CarBuilderProtocol


class Director:
    def construct_sport_car(self, builder: CarBuilderProtocol[Any]) -> None:
        builder.reset()
        builder.set_seats(2)
        builder.set_engine(Engine(cylinders=2.6, power=12))
        builder.set_trip_computer(None)
        builder.set_gps(None)

    def construct_suv(self, builder: CarBuilderProtocol[Any]) -> None:
        builder.reset()
        builder.set_seats(5)
        builder.set_engine(Engine(cylinders=1.6, power=10))
        builder.set_trip_computer(TripComputer(inches=8, bluetooth=5.0))
        builder.set_gps(GPSTier.BASIC)

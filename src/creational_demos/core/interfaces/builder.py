"""Contrato de builder para la demo Builder.

Cualquier builder que lo cumpla puede recibir las recetas del `Director`,
sea cual sea el producto que construya.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from creational_demos.core.domain.models import Engine, GPSTier, TripComputer

ProductT = TypeVar("ProductT", covariant=True)


@runtime_checkable
class CarBuilderProtocol(Protocol[ProductT]):
    """Pasos de construcción de un coche.

    Reglas de diseño:
    - `get_result` entrega el producto y deja el builder con uno nuevo vacío.
    """

    def reset(self) -> None:
        ...

    def set_seats(self, seats: int) -> None:
        ...

    def set_engine(self, engine: Engine) -> None:
        ...

    def set_trip_computer(self, trip_computer: TripComputer | None) -> None:
        ...

    def set_gps(self, gps: GPSTier | None) -> None:
        ...

    def get_result(self) -> ProductT:
        ...

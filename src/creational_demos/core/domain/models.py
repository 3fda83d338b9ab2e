"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) para los
  productos del Builder y sus piezas.
- `Engine` y `TripComputer` son descriptores inmutables (frozen); `Car` y
  `CarManual` son productos mutables que un builder rellena campo a campo.

Nota:
- Estos modelos describen *qué* se construye, no *cómo* se construye.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class GPSTier(str, Enum):
    """Niveles de GPS disponibles."""

    BASIC = "basic"
    ADVANCED = "advanced"


class Engine(BaseModel):
    """Descriptor de motor (solo lectura para los builders)."""

    model_config = ConfigDict(frozen=True)

    cylinders: float = Field(
        ...,
        gt=0,
        description="Cilindrada del motor.",
    )
    power: float = Field(
        ...,
        gt=0,
        description="Potencia del motor.",
    )


class TripComputer(BaseModel):
    """Ordenador de a bordo (solo lectura para los builders)."""

    model_config = ConfigDict(frozen=True)

    inches: int = Field(
        ...,
        gt=0,
        description="Tamaño de la pantalla en pulgadas.",
    )
    bluetooth: float | None = Field(
        default=None,
        description="Versión de bluetooth, si tiene.",
    )


class Car(BaseModel):
    """Producto de datos del Builder.

    Se crea vacío; cada setter del builder asigna un campo.
    """

    seats: int | None = Field(
        default=None,
        ge=0,
        description="Número de asientos.",
    )
    engine: Engine | None = Field(
        default=None,
        description="Motor instalado.",
    )
    trip_computer: TripComputer | None = Field(
        default=None,
        description="Ordenador de a bordo (opcional).",
    )
    gps: GPSTier | None = Field(
        default=None,
        description="Nivel de GPS (opcional).",
    )


class CarManual(BaseModel):
    """Resumen textual del coche (misma receta, otra representación)."""

    seats: str | None = Field(default=None, description="Asientos, en texto.")
    engine: str | None = Field(default=None, description="Motor, en texto.")
    trip_computer: str | None = Field(
        default=None,
        description="Ordenador de a bordo, en texto.",
    )
    gps: str | None = Field(default=None, description="GPS, en texto.")

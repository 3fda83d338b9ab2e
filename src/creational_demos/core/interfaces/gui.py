"""Contratos de la demo Abstract Factory.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El cliente solo conoce estas abstracciones, nunca las clases concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Paintable(Protocol):
    """Componente de UI que sabe pintarse (botón, checkbox)."""

    def paint(self) -> None:
        ...


@runtime_checkable
class GUIFactory(Protocol):
    """Familia de componentes de una misma plataforma."""

    def create_button(self) -> Paintable:
        ...

    def create_checkbox(self) -> Paintable:
        ...

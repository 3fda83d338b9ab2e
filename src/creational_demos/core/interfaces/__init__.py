"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan las variantes de cada demo.
- Permite invertir dependencias: los clientes dependen de abstracciones.
"""

from creational_demos.core.interfaces.builder import CarBuilderProtocol
from creational_demos.core.interfaces.dialog import DialogButton
from creational_demos.core.interfaces.gui import GUIFactory, Paintable

__all__ = [
    "CarBuilderProtocol",
    "DialogButton",
    "GUIFactory",
    "Paintable",
]

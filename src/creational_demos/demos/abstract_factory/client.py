"""Cliente de la demo Abstract Factory."""

from __future__ import annotations

from creational_demos.core.interfaces.gui import GUIFactory, Paintable


class GUIApplication:
    """Construye una UI mínima con la fábrica recibida.

    No inspecciona tipos concretos: el mismo código sirve para cualquier
    plataforma.
    """

    def __init__(self, factory: GUIFactory) -> None:
        self._factory = factory
        self._button: Paintable | None = None
        self._checkbox: Paintable | None = None

    def create_ui(self) -> None:
        self._button = self._factory.create_button()
        self._checkbox = self._factory.create_checkbox()

    def paint(self) -> None:
        if self._button is not None:
            self._button.paint()
        if self._checkbox is not None:
            self._checkbox.paint()

"""Fábricas concretas (una por plataforma).

Cada una implementa `core.interfaces.gui.GUIFactory` y devuelve variantes
de su misma plataforma.
"""

from __future__ import annotations

from creational_demos.core.interfaces.gui import GUIFactory, Paintable
from creational_demos.core.output import DemoOutput
from creational_demos.demos.abstract_factory.components import (
    MacButton,
    MacCheckbox,
    WinButton,
    WinCheckbox,
)


class MacGUIFactory(GUIFactory):
    def __init__(self, output: DemoOutput | None = None) -> None:
        self._output = output or DemoOutput()

    def create_button(self) -> Paintable:
        return MacButton(self._output)

    def create_checkbox(self) -> Paintable:
        return MacCheckbox(self._output)


class WinGUIFactory(GUIFactory):
    def __init__(self, output: DemoOutput | None = None) -> None:
        self._output = output or DemoOutput()

    def create_button(self) -> Paintable:
        return WinButton(self._output)

    def create_checkbox(self) -> Paintable:
        return WinCheckbox(self._output)

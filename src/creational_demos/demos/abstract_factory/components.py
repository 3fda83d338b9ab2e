"""Componentes concretos por plataforma.

Cada variante implementa `Paintable` y solo difiere en el literal que imprime.
"""

from __future__ import annotations

from creational_demos.core.output import DemoOutput


class _PaintableComponent:
    _message_key: str

    def __init__(self, output: DemoOutput | None = None) -> None:
        self._output = output or DemoOutput()

    def paint(self) -> None:
        self._output.emit(self._message_key)


class MacButton(_PaintableComponent):
    _message_key = "mac_button"


class MacCheckbox(_PaintableComponent):
    _message_key = "mac_checkbox"


class WinButton(_PaintableComponent):
    _message_key = "win_button"


class WinCheckbox(_PaintableComponent):
    _message_key = "win_checkbox"

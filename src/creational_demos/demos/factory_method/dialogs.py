"""Diálogos: el método fábrica `create_button` lo decide cada subclase."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from creational_demos.core.interfaces.dialog import DialogButton
from creational_demos.core.output import DemoOutput
from creational_demos.demos.factory_method.buttons import HTMLButton, WindowsButton

logger = logging.getLogger(__name__)


class Dialog(ABC):
    """Diálogo abstracto.

    `render` es el template: pide el botón al hook `create_button`, lo
    renderiza y le engancha `close` como handler de click.
    """

    def __init__(self, output: DemoOutput | None = None) -> None:
        self._output = output or DemoOutput()

    @abstractmethod
    def create_button(self) -> DialogButton:
        ...

    def render(self) -> None:
        ok_button = self.create_button()
        ok_button.render()
        ok_button.on_click(self.close)

    def close(self) -> None:
        logger.debug("%s closed", type(self).__name__)


class WebDialog(Dialog):
    def create_button(self) -> DialogButton:
        return HTMLButton(self._output)


class WindowsDialog(Dialog):
    def create_button(self) -> DialogButton:
        return WindowsButton(self._output)

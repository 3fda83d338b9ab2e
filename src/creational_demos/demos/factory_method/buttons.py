"""Botones concretos de la demo Factory Method."""

from __future__ import annotations

from typing import Callable

from creational_demos.core.output import DemoOutput


class _Button:
    _message_key: str

    def __init__(self, output: DemoOutput | None = None) -> None:
        self._output = output or DemoOutput()
        self._click_handler: Callable[[], None] | None = None

    def render(self) -> None:
        self._output.emit(self._message_key)

    def on_click(self, handler: Callable[[], None]) -> None:
        self._click_handler = handler
        self._output.emit("click_handler")

    def click(self) -> None:
        if self._click_handler is not None:
            self._click_handler()


class HTMLButton(_Button):
    _message_key = "html_button"


class WindowsButton(_Button):
    _message_key = "windows_dialog_button"

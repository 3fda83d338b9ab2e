"""Contrato de botón para la demo Factory Method."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class DialogButton(Protocol):
    """Botón que un diálogo renderiza y al que engancha un handler de click."""

    def render(self) -> None:
        ...

    def on_click(self, handler: Callable[[], None]) -> None:
        ...

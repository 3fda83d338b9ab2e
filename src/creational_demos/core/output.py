"""Salida de consola de las demos.

Por qué un objeto:
- Las variantes imprimen, pero no deben saber a qué consola ni en qué idioma.
- Facilita testeo: se puede inyectar una `Console` que escribe a un buffer.
"""

from __future__ import annotations

from rich.console import Console, RenderableType

from creational_demos.core.domain.language import Language
from creational_demos.core.domain.messages import translate


class DemoOutput:
    """Bundles the Rich console and the language used by every demo."""

    def __init__(self, console: Console | None = None, language: Language | None = None) -> None:
        self.console = console or Console()
        self.language = language or Language.default()

    def text(self, key: str, **params: object) -> str:
        return translate(key, self.language, **params)

    def emit(self, key: str, **params: object) -> None:
        """Print one catalog message as plain text."""

        self.line(self.text(key, **params))

    def line(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def render(self, renderable: RenderableType) -> None:
        self.console.print(renderable)

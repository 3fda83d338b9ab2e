"""Errores del dominio.

Solo existe un tipo de fallo: un valor de selector fuera de su enum cerrado.
Los drivers de cada demo lo capturan y lo imprimen; nada más se captura.
"""

from __future__ import annotations

from typing import Sequence


class InvalidOptionError(ValueError):
    """Unrecognized value for a demo selector flag."""

    def __init__(self, argument: str, value: str | None, options: Sequence[str]) -> None:
        self.argument = argument
        self.value = value
        self.options = tuple(options)
        super().__init__(self._format())

    def _format(self) -> str:
        listing = "\n".join(f"- {option}" for option in self.options)
        return (
            f"Invalid value '{self.value or ''}' for argument '--{self.argument}'"
            f"\n\nAvailable options:\n{listing}"
        )

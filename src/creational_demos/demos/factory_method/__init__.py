"""Demo Factory Method.

`--factory-method <web|windows>` elige el diálogo concreto, que a su vez
decide qué botón crear.
"""

from __future__ import annotations

import logging

from creational_demos.core.domain.options import FactoryMethodOption, parse_option
from creational_demos.core.errors import InvalidOptionError
from creational_demos.core.output import DemoOutput
from creational_demos.demos.factory_method.dialogs import Dialog, WebDialog, WindowsDialog

logger = logging.getLogger(__name__)

_DIALOGS: dict[FactoryMethodOption, type[Dialog]] = {
    FactoryMethodOption.WEB: WebDialog,
    FactoryMethodOption.WINDOWS: WindowsDialog,
}


def get_dialog(argument: str, value: str | None, output: DemoOutput | None = None) -> Dialog:
    """Selector: valor del flag -> diálogo concreto."""

    option = parse_option(FactoryMethodOption, argument, value)
    logger.debug("factory-method: using %s", _DIALOGS[option].__name__)
    return _DIALOGS[option](output)


def run(argument: str, value: str | None, output: DemoOutput | None = None) -> None:
    output = output or DemoOutput()
    try:
        dialog = get_dialog(argument, value, output)
    except InvalidOptionError as exc:
        logger.warning("factory-method: rejected value %r", value)
        output.line(str(exc))
        return

    dialog.render()


__all__ = [
    "Dialog",
    "WebDialog",
    "WindowsDialog",
    "get_dialog",
    "run",
]

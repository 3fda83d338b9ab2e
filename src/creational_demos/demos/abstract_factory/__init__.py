"""Demo Abstract Factory.

`--abstract-factory <mac|windows>` elige la fábrica; el cliente pinta un
botón y un checkbox de esa plataforma.
"""

from __future__ import annotations

import logging

from creational_demos.core.domain.options import AbstractFactoryOption, parse_option
from creational_demos.core.errors import InvalidOptionError
from creational_demos.core.interfaces.gui import GUIFactory
from creational_demos.core.output import DemoOutput
from creational_demos.demos.abstract_factory.client import GUIApplication
from creational_demos.demos.abstract_factory.factories import MacGUIFactory, WinGUIFactory

logger = logging.getLogger(__name__)

_FACTORIES: dict[AbstractFactoryOption, type[MacGUIFactory] | type[WinGUIFactory]] = {
    AbstractFactoryOption.MAC: MacGUIFactory,
    AbstractFactoryOption.WINDOWS: WinGUIFactory,
}


def get_gui_factory(argument: str, value: str | None, output: DemoOutput | None = None) -> GUIFactory:
    """Selector: valor del flag -> fábrica concreta."""

    option = parse_option(AbstractFactoryOption, argument, value)
    logger.debug("abstract-factory: using %s", _FACTORIES[option].__name__)
    return _FACTORIES[option](output)


def run(argument: str, value: str | None, output: DemoOutput | None = None) -> None:
    output = output or DemoOutput()
    try:
        factory = get_gui_factory(argument, value, output)
    except InvalidOptionError as exc:
        logger.warning("abstract-factory: rejected value %r", value)
        output.line(str(exc))
        return

    app = GUIApplication(factory)
    app.create_ui()
    app.paint()


__all__ = [
    "GUIApplication",
    "MacGUIFactory",
    "WinGUIFactory",
    "get_gui_factory",
    "run",
]

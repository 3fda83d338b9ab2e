"""Demo Builder.

`--builder <sport|suv>` elige la receta del `Director`; la receta se
aplica a dos builders y se muestran ambos productos.
"""

from __future__ import annotations

import logging

from creational_demos.core.domain.models import Car, CarManual
from creational_demos.core.domain.options import BuilderOption, parse_option
from creational_demos.core.errors import InvalidOptionError
from creational_demos.core.output import DemoOutput
from creational_demos.demos.builder.builders import CarBuilder, CarManualBuilder
from creational_demos.demos.builder.director import Director
from creational_demos.demos.builder.rendering import build_car_table, build_manual_panel

logger = logging.getLogger(__name__)


def build_car_and_manual(
    argument: str,
    value: str | None,
    output: DemoOutput | None = None,
) -> tuple[Car, CarManual]:
    """Selector: valor del flag -> receta aplicada a ambos builders."""

    option = parse_option(BuilderOption, argument, value)

    director = Director()
    car_builder = CarBuilder()
    manual_builder = CarManualBuilder(output)

    recipe = {
        BuilderOption.SPORT: director.construct_sport_car,
        BuilderOption.SUV: director.construct_suv,
    }[option]
    logger.debug("builder: running recipe %s", recipe.__name__)
    recipe(car_builder)
    recipe(manual_builder)

    return car_builder.get_result(), manual_builder.get_result()


def run(argument: str, value: str | None, output: DemoOutput | None = None) -> None:
    output = output or DemoOutput()
    try:
        car, manual = build_car_and_manual(argument, value, output)
    except InvalidOptionError as exc:
        logger.warning("builder: rejected value %r", value)
        output.line(str(exc))
        return

    output.render(build_car_table(car))
    output.render(build_manual_panel(manual))


__all__ = [
    "CarBuilder",
    "CarManualBuilder",
    "Director",
    "build_car_and_manual",
    "run",
]

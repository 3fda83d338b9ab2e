from __future__ import annotations

import pytest
from pydantic import ValidationError

from creational_demos.core.domain.models import Car, CarManual, Engine, GPSTier, TripComputer
from creational_demos.core.errors import InvalidOptionError
from creational_demos.core.interfaces.builder import CarBuilderProtocol
from creational_demos.demos import builder
from creational_demos.demos.builder import (
    CarBuilder,
    CarManualBuilder,
    Director,
    build_car_and_manual,
)


def test_builders_satisfy_protocol(output):
    assert isinstance(CarBuilder(), CarBuilderProtocol)
    assert isinstance(CarManualBuilder(output), CarBuilderProtocol)


def test_sport_recipe_builds_sport_car():
    car_builder = CarBuilder()
    Director().construct_sport_car(car_builder)
    car = car_builder.get_result()

    assert car.seats == 2
    assert car.engine == Engine(cylinders=2.6, power=12)
    assert car.trip_computer is None
    assert car.gps is None


def test_suv_recipe_builds_suv():
    car_builder = CarBuilder()
    Director().construct_suv(car_builder)
    car = car_builder.get_result()

    assert car.seats == 5
    assert car.engine.cylinders == 1.6
    assert car.engine.power == 10
    assert car.trip_computer == TripComputer(inches=8, bluetooth=5.0)
    assert car.gps is GPSTier.BASIC


def test_get_result_resets_builder():
    car_builder = CarBuilder()
    Director().construct_suv(car_builder)

    first = car_builder.get_result()
    second = car_builder.get_result()

    assert first is not second
    assert second == Car()
    assert first.seats == 5


def test_yielded_product_is_not_aliased_by_later_builds():
    car_builder = CarBuilder()
    director = Director()

    director.construct_suv(car_builder)
    suv = car_builder.get_result()
    director.construct_sport_car(car_builder)
    sport = car_builder.get_result()

    assert suv.seats == 5
    assert sport.seats == 2


def test_manual_for_sport_car(output):
    manual_builder = CarManualBuilder(output)
    Director().construct_sport_car(manual_builder)

    assert manual_builder.get_result() == CarManual(
        seats="2 seat(s)",
        engine="Engine v2.6, power: 12",
        trip_computer="none",
        gps="none",
    )


def test_manual_for_suv(output):
    manual_builder = CarManualBuilder(output)
    Director().construct_suv(manual_builder)

    assert manual_builder.get_result() == CarManual(
        seats="5 seat(s)",
        engine="Engine v1.6, power: 10",
        trip_computer="8 inches, bluetooth: 5",
        gps="Basic",
    )


def test_manual_trip_computer_without_bluetooth(output):
    manual_builder = CarManualBuilder(output)
    manual_builder.set_trip_computer(TripComputer(inches=7))
    assert manual_builder.get_result().trip_computer == "7 inches, bluetooth: none"


@pytest.mark.parametrize(
    ("gps", "label"),
    [
        (GPSTier.ADVANCED, "Advanced"),
        (GPSTier.BASIC, "Basic"),
        (None, "none"),
        ("satellite", "GPS not registered"),
    ],
)
def test_manual_gps_label_is_exclusive(gps, label, output):
    """Each GPS tier maps to exactly one label.

    A switch without early exits lets every case fall through to the next
    one, so the manual would always read "GPS not registered". These cases
    pin the exclusive mapping.
    """

    manual_builder = CarManualBuilder(output)
    manual_builder.set_gps(gps)
    assert manual_builder.get_result().gps == label


def test_manual_in_portuguese(output_pt):
    manual_builder = CarManualBuilder(output_pt)
    Director().construct_suv(manual_builder)
    manual = manual_builder.get_result()

    assert manual.seats == "5 assento(s)"
    assert manual.engine == "Motor v1.6, potência: 10"
    assert manual.trip_computer == "8 polegadas, bluetooth: 5"
    assert manual.gps == "Básico"


def test_engine_is_immutable():
    engine = Engine(cylinders=2.6, power=12)
    with pytest.raises(ValidationError):
        engine.power = 20


def test_selector_runs_recipe_on_both_builders(output):
    car, manual = build_car_and_manual("builder", "sport", output)
    assert car.seats == 2
    assert manual.seats == "2 seat(s)"


def test_selector_rejects_unknown_value(output):
    with pytest.raises(InvalidOptionError) as info:
        build_car_and_manual("builder", "truck", output)
    assert info.value.options == ("sport", "suv")


def test_run_renders_car_and_manual(output):
    builder.run("builder", "suv", output)
    text = "\n".join(output.lines)

    assert "Car manual" in text
    assert "5 seat(s)" in text
    assert "8 inches, bluetooth: 5" in text
    assert "inches=8, bluetooth=5" in text


def test_run_prints_error_instead_of_raising(output):
    builder.run("builder", None, output)
    assert "- sport" in output.lines
    assert "- suv" in output.lines


def test_builder_demo_does_not_depend_on_cli(output):
    from creational_demos.demos.builder.rendering import build_car_table, build_manual_panel

    car, manual = build_car_and_manual("builder", "sport", output)
    output.render(build_car_table(car))
    output.render(build_manual_panel(manual))

    text = "\n".join(output.lines)
    assert "cylinders=2.6, power=12" in text
    assert "2 seat(s)" in text
    assert not [
        name
        for name, value in vars(builder).items()
        if getattr(value, "__module__", "").startswith("creational_demos.cli")
    ]

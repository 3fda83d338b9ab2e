"""Selector enums (closed sets of valid CLI values).

The declaration order of each enum is the order used when listing the
available options in an error message.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from creational_demos.core.errors import InvalidOptionError


class FactoryMethodOption(str, Enum):
    WEB = "web"
    WINDOWS = "windows"


class AbstractFactoryOption(str, Enum):
    MAC = "mac"
    WINDOWS = "windows"


class BuilderOption(str, Enum):
    SPORT = "sport"
    SUV = "suv"


OptionT = TypeVar("OptionT", bound=Enum)


def option_values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


def parse_option(enum_cls: type[OptionT], argument: str, value: str | None) -> OptionT:
    """Map a raw CLI value to a member of `enum_cls`.

    Raises `InvalidOptionError` listing every valid value when `value` is
    missing or not part of the enum. Matching is exact (case-sensitive).
    """

    if value is not None:
        for member in enum_cls:
            if member.value == value:
                return member
    raise InvalidOptionError(argument, value, option_values(enum_cls))

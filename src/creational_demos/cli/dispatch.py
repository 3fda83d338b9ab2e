"""Argument scan and dispatch table.

Each demo flag is looked up independently in the raw argument list and,
when present, its demo runs with the token that follows it. A missing or
unknown value is the demo's problem (it prints the usage error); it never
stops the other demos.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from creational_demos.core.domain.options import (
    AbstractFactoryOption,
    BuilderOption,
    FactoryMethodOption,
    option_values,
)
from creational_demos.core.output import DemoOutput
from creational_demos.demos import abstract_factory, builder, factory_method

logger = logging.getLogger(__name__)

DemoCallback = Callable[[str, str | None, DemoOutput], None]


@dataclass(frozen=True)
class Tag:
    """A demo flag and the driver it triggers."""

    argument: str
    callback: DemoCallback
    options: type[Enum]


@dataclass(frozen=True)
class ParsedArgument:
    argument: str
    value: str | None = None


AVAILABLE_TAGS: tuple[Tag, ...] = (
    Tag("factory-method", factory_method.run, FactoryMethodOption),
    Tag("abstract-factory", abstract_factory.run, AbstractFactoryOption),
    Tag("builder", builder.run, BuilderOption),
)


def check_argument(argv: Sequence[str], argument: str) -> ParsedArgument | None:
    """Find `--<argument>` in `argv` and return it with its value.

    Accepts `--flag value` and `--flag=value`. A flag with nothing after it
    yields `value=None`.
    """

    flag = f"--{argument}"
    for index, token in enumerate(argv):
        if token == flag:
            value = argv[index + 1] if index + 1 < len(argv) else None
            return ParsedArgument(argument, value)
        if token.startswith(flag + "="):
            return ParsedArgument(argument, token[len(flag) + 1 :])
    return None


def available_flags() -> list[tuple[str, list[str]]]:
    return [(tag.argument, option_values(tag.options)) for tag in AVAILABLE_TAGS]


def dispatch(argv: Sequence[str], output: DemoOutput) -> int:
    """Run every demo whose flag appears in `argv`; return how many ran."""

    triggered = 0
    for tag in AVAILABLE_TAGS:
        parsed = check_argument(argv, tag.argument)
        if parsed is None:
            continue
        logger.debug("dispatch: --%s %r", parsed.argument, parsed.value)
        tag.callback(parsed.argument, parsed.value, output)
        triggered += 1
    return triggered

"""CLI de las demos (Typer).

Por qué Typer solo para las opciones globales:
- Los flags de demo (`--factory-method`, `--abstract-factory`, `--builder`)
  se escanean a mano en `cli.dispatch`: un flag sin valor o con un valor
  desconocido debe imprimir el error de esa demo y dejar correr las demás,
  cosa que el parser de Click rechazaría con exit code 2.
- El exit code es siempre 0.
"""

from __future__ import annotations

import logging

import click
import typer
from rich.console import Console
from typer.core import TyperCommand

from creational_demos.cli.dispatch import available_flags, dispatch
from creational_demos.cli.ui_components import build_flags_table, print_banner
from creational_demos.core.config import load_settings
from creational_demos.core.domain.language import Language
from creational_demos.core.log import configure_logging
from creational_demos.core.output import DemoOutput

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Creational design pattern demos: Abstract Factory, Builder, Factory Method.",
)


class RawArgsCommand(TyperCommand):
    """Keeps the unparsed argument list in `ctx.meta["raw_args"]`.

    A demo value such as `-v` would otherwise be consumed as a global option
    before the dispatcher sees it.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


@app.command(
    cls=RawArgsCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    ctx: typer.Context,
    lang: Language | None = typer.Option(
        None,
        "--lang",
        "-l",
        help="Output language (en/pt). Defaults to CREATIONAL_DEMOS_DEFAULT_LANGUAGE.",
    ),
    banner: bool | None = typer.Option(
        None,
        "--banner/--no-banner",
        help="Show the welcome banner.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Run one or more demos.

    \b
    --factory-method <web|windows>
    --abstract-factory <mac|windows>
    --builder <sport|suv>
    """

    settings, invalid_fields = load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    if invalid_fields:
        logger.warning("invalid settings (%s); using defaults", ", ".join(invalid_fields))

    language = lang or settings.default_language
    logger.debug("language: %s", language.label())

    console = Console()
    output = DemoOutput(console=console, language=language)

    show_banner = settings.show_banner if banner is None else banner
    if show_banner:
        print_banner(console)

    if dispatch(ctx.meta.get("raw_args", ctx.args), output) == 0:
        output.emit("no_demo_selected")
        console.print(build_flags_table(available_flags()))


def run() -> None:
    app()

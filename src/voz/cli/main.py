"""Grupo principal de comandos CLI do Voz."""

from __future__ import annotations

import click

import voz
from voz.logging import LOG_FORMATS, configure_logging


@click.group()
@click.version_option(version=voz.__version__, prog_name="voz")
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS),
    default=None,
    help="Formato de log (default: VOZ_LOG_FORMAT ou console).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default=None,
    help="Nivel de log (default: VOZ_LOG_LEVEL ou WARNING).",
)
def cli(log_format: str | None, log_level: str | None) -> None:
    """Voz - opcoes e URLs de requests de sintese de fala."""
    configure_logging(log_format=log_format, level=log_level, force=True)

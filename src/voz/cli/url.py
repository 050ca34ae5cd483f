"""Comandos `voz url` e `voz encode`."""

from __future__ import annotations

import sys

import click

from voz.cli._common import build_options, load_settings, parse_params, request_options
from voz.cli.main import cli
from voz.exceptions import PathEncodingError
from voz.history import RequestHistory
from voz.logging import get_logger
from voz.request import build_url

logger = get_logger("cli.url")


@cli.command()
@click.argument("text")
@request_options
@click.option("--base-url", default=None, help="Host da API (sobrescreve a configuracao).")
@click.option(
    "--param",
    "-p",
    "raw_params",
    multiple=True,
    help="Query parameter extra no formato key=value (repetivel).",
)
@click.option(
    "--history",
    "history_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Registra a request neste arquivo de historico.",
)
def url(
    text: str,
    voice: str | None,
    text_type: str | None,
    output_format: str | None,
    config_path: str | None,
    base_url: str | None,
    raw_params: tuple[str, ...],
    history_path: str | None,
) -> None:
    """Imprime a URL da request de sintese para TEXT."""
    settings = load_settings(config_path, base_url)
    options = build_options(settings, text, voice, text_type, output_format)
    extra_params = parse_params(raw_params)

    try:
        request_url = build_url(options, settings.base_url, extra_params)
    except PathEncodingError as e:
        click.echo(f"Erro: {e}", err=True)
        sys.exit(1)

    if history_path is not None:
        RequestHistory(history_path).append(options)
        logger.info("history_appended", path=history_path)

    click.echo(str(request_url))


@cli.command()
@click.argument("text")
@request_options
def encode(
    text: str,
    voice: str | None,
    text_type: str | None,
    output_format: str | None,
    config_path: str | None,
) -> None:
    """Imprime a forma persistida (JSON) das opcoes para TEXT."""
    settings = load_settings(config_path)
    options = build_options(settings, text, voice, text_type, output_format)
    click.echo(options.to_json())

"""Comando `voz decode` - valida a forma persistida e mostra path e query."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from voz.cli.main import cli
from voz.exceptions import OptionsDecodeError, PathEncodingError
from voz.options import RequestOptions


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def decode(source: TextIO) -> None:
    """Decodifica opcoes persistidas em JSON (arquivo ou stdin).

    Imprime o path e os query parameters derivados.
    """
    raw = source.read()
    try:
        options = RequestOptions.from_json(raw)
        path = options.path
    except (OptionsDecodeError, PathEncodingError) as e:
        click.echo(f"Erro: {e}", err=True)
        sys.exit(1)

    click.echo(f"path: {path}")
    for name, value in options.query_parameters:
        click.echo(f"{name}: {value}")

"""Comando `voz history` - lista ou limpa o historico de requests."""

from __future__ import annotations

import sys

import click

from voz.cli.main import cli
from voz.exceptions import PathEncodingError
from voz.history import RequestHistory


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--clear", is_flag=True, default=False, help="Remove o historico.")
def history(file: str, clear: bool) -> None:
    """Lista requests registradas em FILE, da mais antiga para a mais recente."""
    store = RequestHistory(file)

    if clear:
        removed = store.clear()
        click.echo(f"{removed} entrada(s) removida(s).")
        return

    entries = store.load()
    if not entries:
        click.echo("Historico vazio.")
        return

    for options in entries:
        try:
            path = options.path
        except PathEncodingError as e:
            click.echo(f"Erro: {e}", err=True)
            sys.exit(1)
        params = "&".join(f"{name}={value}" for name, value in options.query_parameters)
        click.echo(f"{path}?{params}")

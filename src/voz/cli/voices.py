"""Comando `voz voices` - lista vozes suportadas."""

from __future__ import annotations

import click

from voz._types import VoiceId
from voz.cli.main import cli


@cli.command()
@click.option("--locale", "-l", default=None, help="Filtra por locale (ex: en-US ou en).")
def voices(locale: str | None) -> None:
    """Lista vozes suportadas e seus locales."""
    selected = list(VoiceId) if locale is None else VoiceId.for_locale(locale)
    if not selected:
        click.echo(f"Nenhuma voz para o locale '{locale}'.")
        return

    name_w = max(len(v.name) for v in selected)
    name_w = max(name_w, 4)
    token_w = max(len(v.value) for v in selected)
    token_w = max(token_w, 5)
    click.echo(f"{'NAME':<{name_w}}  {'TOKEN':<{token_w}}  {'LOCALE'}")

    for v in selected:
        click.echo(f"{v.name:<{name_w}}  {v.value:<{token_w}}  {v.locale}")

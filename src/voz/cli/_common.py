"""Opcoes compartilhadas entre comandos que montam requests."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TypeVar

import click

from voz._types import AudioFormat, TextType, VoiceId
from voz.config.settings import ClientSettings
from voz.exceptions import ConfigError
from voz.options import RequestOptions

F = TypeVar("F", bound=Callable[..., Any])


def request_options(func: F) -> F:
    """Adiciona --voice, --text-type, --output-format e --config ao comando."""
    decorators = [
        click.option(
            "--config",
            "config_path",
            type=click.Path(dir_okay=False),
            default=None,
            help="Arquivo YAML de configuracao (default: variaveis VOZ_*).",
        ),
        click.option(
            "--output-format",
            "-f",
            type=click.Choice([f.value for f in AudioFormat]),
            default=None,
            help="Formato do audio de saida.",
        ),
        click.option(
            "--text-type",
            "-t",
            type=click.Choice([t.value for t in TextType]),
            default=None,
            help="Modo do texto (text ou ssml).",
        ),
        click.option(
            "--voice",
            "-v",
            type=click.Choice([v.value for v in VoiceId]),
            default=None,
            help="Voz usada na sintese.",
        ),
    ]
    for decorator in decorators:
        func = decorator(func)
    return func


def load_settings(config_path: str | None, base_url: str | None = None) -> ClientSettings:
    """Settings do arquivo indicado ou do ambiente. Erro encerra com exit 1.

    `base_url`, se dado, sobrescreve o host com a mesma validacao da configuracao.
    """
    try:
        if config_path is not None:
            settings = ClientSettings.from_yaml_path(config_path)
        else:
            settings = ClientSettings.from_env()
        if base_url is not None:
            settings = ClientSettings.from_mapping(
                {**settings.model_dump(), "base_url": base_url}, "--base-url"
            )
        return settings
    except ConfigError as e:
        click.echo(f"Erro: {e}", err=True)
        sys.exit(1)


def build_options(
    settings: ClientSettings,
    text: str,
    voice: str | None,
    text_type: str | None,
    output_format: str | None,
) -> RequestOptions:
    """RequestOptions com defaults da configuracao, sobrescritos pelas flags."""
    options = settings.new_options(text)
    if voice is not None:
        options.voice_id = VoiceId(voice)
    if text_type is not None:
        options.text_type = TextType(text_type)
    if output_format is not None:
        options.output_format = AudioFormat(output_format)
    return options


def parse_params(raw_params: tuple[str, ...]) -> list[tuple[str, str]]:
    """Converte flags `key=value` em pares. Formato invalido encerra com exit 1."""
    params: list[tuple[str, str]] = []
    for raw in raw_params:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            click.echo(f"Erro: parametro invalido '{raw}'. Use key=value.", err=True)
            sys.exit(1)
        params.append((key, value))
    return params

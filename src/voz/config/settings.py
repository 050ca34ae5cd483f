"""Configuracao do cliente Voz (arquivo YAML ou variaveis de ambiente)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from voz._types import AudioFormat, TextType, VoiceId  # noqa: TC001 - Pydantic needs at runtime
from voz.exceptions import ConfigParseError, ConfigValidationError
from voz.logging import get_logger
from voz.options import RequestOptions

logger = get_logger("config")

DEFAULT_BASE_URL = "https://api.mapbox.com/"

ENV_VARS = {
    "base_url": "VOZ_BASE_URL",
    "voice": "VOZ_VOICE",
    "text_type": "VOZ_TEXT_TYPE",
    "output_format": "VOZ_OUTPUT_FORMAT",
}


class ClientSettings(BaseModel, extra="forbid"):
    """Host da API e defaults aplicados a novas requests.

    Enums sao validados pelo token canonico ("joanna", "ogg_vorbis", ...).
    """

    base_url: str = DEFAULT_BASE_URL
    voice: VoiceId = VoiceId.JOANNA
    text_type: TextType = TextType.TEXT
    output_format: AudioFormat = AudioFormat.MP3

    @field_validator("base_url")
    @classmethod
    def base_url_must_be_http(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = f"base_url invalida: '{v}'. Use http:// ou https://."
            raise ValueError(msg)
        return v

    def new_options(self, text: str) -> RequestOptions:
        """RequestOptions para `text` com os defaults configurados."""
        return RequestOptions(
            text=text,
            text_type=self.text_type,
            voice_id=self.voice,
            output_format=self.output_format,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], source: str) -> ClientSettings:
        try:
            settings = cls.model_validate(dict(data))
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            ]
            raise ConfigValidationError(source, errors) from e
        logger.debug("settings_loaded", source=source)
        return settings

    @classmethod
    def from_yaml_path(cls, path: str | Path) -> ClientSettings:
        """Carrega configuracao a partir de arquivo YAML."""
        path = Path(path)
        if not path.exists():
            raise ConfigParseError(str(path), "Arquivo nao encontrado")

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigParseError(str(path), f"Erro ao ler arquivo: {e}") from e

        return cls.from_yaml_string(raw, source_path=str(path))

    @classmethod
    def from_yaml_string(cls, raw: str, source_path: str = "<string>") -> ClientSettings:
        """Carrega configuracao a partir de string YAML. Documento vazio = defaults."""
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigParseError(source_path, f"YAML invalido: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigParseError(source_path, "Conteudo YAML deve ser um mapeamento")

        return cls.from_mapping(data, source_path)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientSettings:
        """Carrega configuracao das variaveis VOZ_*. Variaveis ausentes usam default."""
        env = os.environ if environ is None else environ
        data = {field: env[var] for field, var in ENV_VARS.items() if env.get(var)}
        return cls.from_mapping(data, "<env>")

"""Opcoes de uma request de sintese de fala.

`RequestOptions` guarda o texto e os parametros de sintese, reconstroi-se
a partir da forma persistida (mapa de quatro chaves) e deriva o path e os
query parameters da request HTTP. A validacao de SSML e de texto vazio e
responsabilidade do servico remoto, nao deste modulo.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass

from voz._types import (
    DEFAULT_AUDIO_FORMAT,
    DEFAULT_TEXT_TYPE,
    DEFAULT_VOICE_ID,
    AudioFormat,
    TextType,
    VoiceId,
)
from voz.encoding import speak_path
from voz.exceptions import OptionsDecodeError
from voz.logging import get_logger

logger = get_logger("options")

TEXT_KEY = "text"
TEXT_TYPE_KEY = "textType"
VOICE_ID_KEY = "voiceId"
OUTPUT_FORMAT_KEY = "outputFormat"

PERSISTED_KEYS = (TEXT_KEY, TEXT_TYPE_KEY, VOICE_ID_KEY, OUTPUT_FORMAT_KEY)


def _token(data: Mapping[str, object], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


@dataclass(slots=True)
class RequestOptions:
    """Parametros de uma request de sintese.

    Attributes:
        text: Texto a sintetizar. Se `text_type` for SSML, deve ser SSML valido.
        text_type: Modo de entrada (texto puro ou SSML).
        voice_id: Voz usada para falar o texto. Vozes sao especificas de um locale.
        output_format: Codificacao do audio de saida.

    Os campos sao mutaveis; mutacao concorrente deve ser serializada pelo chamador.
    """

    text: str
    text_type: TextType = DEFAULT_TEXT_TYPE
    voice_id: VoiceId = DEFAULT_VOICE_ID
    output_format: AudioFormat = DEFAULT_AUDIO_FORMAT

    @classmethod
    def create(cls, text: str) -> RequestOptions:
        """Opcoes com `text` e defaults nos demais campos."""
        return cls(text=text)

    @classmethod
    def decode(cls, data: Mapping[str, object]) -> RequestOptions:
        """Reconstroi opcoes a partir da forma persistida.

        `text` ausente ou de tipo errado vira string vazia. Os tres campos enum
        precisam de token canonico valido; qualquer falha invalida o todo.

        Raises:
            OptionsDecodeError: Com `fields` listando os campos rejeitados.
        """
        raw_text = data.get(TEXT_KEY)
        text = raw_text if isinstance(raw_text, str) else ""

        text_type = TextType.from_description(_token(data, TEXT_TYPE_KEY))
        output_format = AudioFormat.from_description(_token(data, OUTPUT_FORMAT_KEY))
        voice_id = VoiceId.from_description(_token(data, VOICE_ID_KEY))

        failed: list[str] = []
        if text_type is None:
            failed.append(TEXT_TYPE_KEY)
        if output_format is None:
            failed.append(OUTPUT_FORMAT_KEY)
        if voice_id is None:
            failed.append(VOICE_ID_KEY)

        if text_type is None or output_format is None or voice_id is None:
            logger.debug("options_decode_failed", fields=failed)
            raise OptionsDecodeError(tuple(failed))

        return cls(
            text=text,
            text_type=text_type,
            voice_id=voice_id,
            output_format=output_format,
        )

    def encode(self) -> dict[str, str]:
        """Forma persistida: texto cru e token canonico de cada enum."""
        return {
            TEXT_KEY: self.text,
            TEXT_TYPE_KEY: self.text_type.description,
            VOICE_ID_KEY: self.voice_id.description,
            OUTPUT_FORMAT_KEY: self.output_format.description,
        }

    @classmethod
    def from_json(cls, raw: str | bytes) -> RequestOptions:
        """Decodifica a forma persistida serializada como objeto JSON."""
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise OptionsDecodeError(reason=f"JSON invalido: {e}") from e

        if not isinstance(data, dict):
            raise OptionsDecodeError(reason="conteudo JSON deve ser um objeto")

        return cls.decode(data)

    def to_json(self) -> str:
        return json.dumps(self.encode())

    @property
    def path(self) -> str:
        """Path da request, sem host nem query string.

        Raises:
            PathEncodingError: Se `text` nao pode ser percent-encoded.
        """
        return speak_path(self.text)

    @property
    def query_parameters(self) -> list[tuple[str, str]]:
        """Query parameters na ordem fixa textType, voiceId, outputFormat."""
        return [
            (TEXT_TYPE_KEY, str(self.text_type)),
            (VOICE_ID_KEY, str(self.voice_id)),
            (OUTPUT_FORMAT_KEY, str(self.output_format)),
        ]

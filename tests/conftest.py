"""Fixtures compartilhadas para todos os testes."""

from __future__ import annotations

from pathlib import Path

import pytest

from voz._types import AudioFormat, TextType, VoiceId
from voz.options import RequestOptions

FIXTURES_DIR = Path(__file__).parent / "fixtures"
CONFIGS_DIR = FIXTURES_DIR / "configs"


@pytest.fixture
def valid_config_path() -> Path:
    """Caminho para configuracao YAML valida."""
    path = CONFIGS_DIR / "valid.yaml"
    assert path.exists(), f"Fixture de configuracao nao encontrada: {path}"
    return path


@pytest.fixture
def invalid_config_path() -> Path:
    """Caminho para configuracao com voz desconhecida."""
    path = CONFIGS_DIR / "invalid_voice.yaml"
    assert path.exists(), f"Fixture de configuracao nao encontrada: {path}"
    return path


@pytest.fixture
def ssml_options() -> RequestOptions:
    """Opcoes SSML com voz e formato fora do default."""
    return RequestOptions(
        text="<speak>Vire a direita</speak>",
        text_type=TextType.SSML,
        voice_id=VoiceId.VITORIA,
        output_format=AudioFormat.OGG_VORBIS,
    )


@pytest.fixture
def persisted_options() -> dict[str, object]:
    """Forma persistida valida."""
    return {
        "text": "Turn left",
        "textType": "text",
        "voiceId": "brian",
        "outputFormat": "pcm",
    }

"""Voz - opcoes de requests de sintese de fala (text-to-speech)."""

from voz._types import AudioFormat, TextType, VoiceId
from voz.exceptions import OptionsDecodeError, PathEncodingError, VozError
from voz.options import RequestOptions

__version__ = "0.1.0"

__all__ = [
    "AudioFormat",
    "OptionsDecodeError",
    "PathEncodingError",
    "RequestOptions",
    "TextType",
    "VoiceId",
    "VozError",
    "__version__",
]

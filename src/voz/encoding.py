"""Percent-encoding do texto no path da request de fala."""

from __future__ import annotations

from voz.exceptions import PathEncodingError

SPEAK_PATH_PREFIX = "voice/v1/speak/"

# Caracteres escapados onde ocorrerem. Todo o resto (inclusive nao-ASCII) passa intacto.
RESERVED_CHARACTERS = frozenset("\\!*'();:@&=+$,/<>?%#[]\" ")


def percent_encode_path_segment(text: str) -> str:
    """Escapa os caracteres reservados de `text` como %XX (hex maiusculo).

    Raises:
        PathEncodingError: Se `text` contem surrogate isolado (nao representavel em UTF-8).
    """
    parts: list[str] = []
    for position, char in enumerate(text):
        if char in RESERVED_CHARACTERS:
            parts.append(f"%{ord(char):02X}")
        elif 0xD800 <= ord(char) <= 0xDFFF:
            raise PathEncodingError(text, position)
        else:
            parts.append(char)
    return "".join(parts)


def speak_path(text: str) -> str:
    """Path da request de fala, sem host nem query string."""
    return SPEAK_PATH_PREFIX + percent_encode_path_segment(text)

"""Exceptions tipadas do Voz.

Hierarquia:
    VozError (base)
    +-- ConfigError
    |   +-- ConfigParseError
    |   +-- ConfigValidationError
    +-- OptionsError
        +-- OptionsDecodeError
        +-- PathEncodingError
"""

from __future__ import annotations


class VozError(Exception):
    """Base para todas as exceptions do Voz."""


# --- Configuracao ---


class ConfigError(VozError):
    """Erro de configuracao do cliente."""


class ConfigParseError(ConfigError):
    """Falha ao parsear arquivo de configuracao."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Falha ao parsear configuracao '{path}': {reason}")


class ConfigValidationError(ConfigError):
    """Configuracao invalida (campos com valor ou tipo errado)."""

    def __init__(self, path: str, errors: list[str]) -> None:
        self.path = path
        self.errors = errors
        detail = "; ".join(errors)
        super().__init__(f"Configuracao '{path}' invalida: {detail}")


# --- Opcoes de request ---


class OptionsError(VozError):
    """Erro relacionado a opcoes de request de sintese."""


class OptionsDecodeError(OptionsError):
    """Forma persistida nao reconstroi um RequestOptions.

    Nao e retentavel: o estado persistido deve ser descartado.
    """

    def __init__(self, fields: tuple[str, ...] = (), reason: str | None = None) -> None:
        self.fields = fields
        self.reason = reason
        if reason is None:
            reason = "token desconhecido em " + ", ".join(f"'{f}'" for f in fields)
        super().__init__(f"Falha ao decodificar opcoes: {reason}")


class PathEncodingError(OptionsError):
    """Texto nao pode ser percent-encoded para o path da request."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(
            f"Texto nao pode ser codificado no path: caractere invalido na posicao {position}"
        )

"""CLI do Voz.

Registra todos os comandos no grupo principal.
"""

from voz.cli.main import cli
from voz.cli.decode import decode
from voz.cli.history import history
from voz.cli.url import encode, url
from voz.cli.voices import voices

__all__ = [
    "cli",
    "decode",
    "encode",
    "history",
    "url",
    "voices",
]
